"""Analysis service for portfolio dashboards."""

import logging
import math
from typing import Optional

from tickerfolio.domain.models import PortfolioGoal, PortfolioSnapshot
from tickerfolio.domain.views import (
    GoalProgress,
    PortfolioSummary,
    TickerData,
    TransactionView,
    TreemapItem,
    TreemapRect,
)
from tickerfolio.services.goal_planner import GoalPlanner
from tickerfolio.services.portfolio_aggregator import (
    DEFAULT_CATEGORY,
    PortfolioAggregator,
)
from tickerfolio.services.price_book import PriceBook
from tickerfolio.services.treemap import squarify

logger = logging.getLogger(__name__)

GRID_COLUMNS = 6
MIN_TILE_SPAN = 2


def tile_span(weight_percent: float, ticker_count: int, all_zero: bool = False) -> int:
    """
    Number of grid columns (2..6) a ticker card should span.

    When every holding is worth zero, each ticker gets an equal 1/n share.
    """
    if all_zero:
        weight = 1 / ticker_count if ticker_count > 0 else 0.0
    else:
        weight = 0.0 if math.isnan(weight_percent) else weight_percent / 100
    # Halves round up
    columns = math.floor(weight * GRID_COLUMNS + 0.5)
    return max(MIN_TILE_SPAN, min(GRID_COLUMNS, columns))


class AnalysisService:
    """
    Runs the aggregation pipeline over a portfolio snapshot.

    Holds no portfolio state: every call takes the snapshot it works on.
    """

    def __init__(
        self,
        default_currency: str = "USD",
        default_category: str = DEFAULT_CATEGORY,
        goal_planner: Optional[GoalPlanner] = None,
    ):
        self._default_currency = default_currency
        self._default_category = default_category
        self._goals = goal_planner or GoalPlanner()

    def aggregator(self, snapshot: PortfolioSnapshot) -> PortfolioAggregator:
        """Aggregator configured with the snapshot's exchange rate."""
        return PortfolioAggregator(
            exchange_rate=snapshot.exchange_rate,
            default_currency=self._default_currency,
            default_category=self._default_category,
        )

    def summary(self, snapshot: PortfolioSnapshot) -> PortfolioSummary:
        """Tickers, totals, pie slices and weights for the snapshot."""
        summary = self.aggregator(snapshot).summarize(snapshot.transactions, snapshot.prices)
        logger.info(
            "Summarized %d transactions into %d tickers",
            len(snapshot.transactions),
            len(summary.tickers),
        )
        return summary

    def tickers_with_spans(
        self,
        snapshot: PortfolioSnapshot,
    ) -> list[tuple[TickerData, float, int]]:
        """Each ticker with its portfolio weight (percent) and grid tile span."""
        summary = self.summary(snapshot)
        count = len(summary.tickers)
        all_zero = not any(w > 0 for w in summary.weights.values())
        return [
            (
                ticker,
                summary.weights.get(ticker.symbol, 0.0),
                tile_span(summary.weights.get(ticker.symbol, 0.0), count, all_zero),
            )
            for ticker in summary.tickers
        ]

    def transactions(self, snapshot: PortfolioSnapshot) -> list[TransactionView]:
        """Transactions with their standalone market value and P&L."""
        return self.aggregator(snapshot).enrich_transactions(
            snapshot.transactions, snapshot.prices
        )

    def treemap(
        self,
        snapshot: PortfolioSnapshot,
        width: float,
        height: float,
    ) -> list[TreemapRect]:
        """Treemap of holdings, each tile sized by abs(BRL value)."""
        summary = self.summary(snapshot)
        items = [TreemapItem(id=s.name, value=s.value) for s in summary.asset_slices]
        return squarify(items, width, height)

    def goal_progress(
        self,
        snapshot: PortfolioSnapshot,
        goal: PortfolioGoal,
    ) -> GoalProgress:
        """Validate the goal, then measure the snapshot against it."""
        validated = self._goals.validate(goal)
        return self._goals.progress(validated, self.summary(snapshot))

    @staticmethod
    def categories(snapshot: PortfolioSnapshot) -> list[str]:
        """Categories available for goal allocation, from the price table."""
        return PriceBook(snapshot.prices).categories()
