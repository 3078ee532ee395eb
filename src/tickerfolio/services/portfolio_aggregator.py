"""Portfolio aggregator: per-symbol holdings and currency-normalized totals."""

import logging
import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional

from tickerfolio.core.numbers import is_number, safe_ratio
from tickerfolio.domain.models import (
    Currency,
    StockPriceInfo,
    Transaction,
)
from tickerfolio.domain.views import (
    PieSlice,
    PortfolioSummary,
    PortfolioTotals,
    TickerData,
    TransactionView,
)
from tickerfolio.services.price_book import PriceBook

logger = logging.getLogger(__name__)

DEFAULT_EXCHANGE_RATE = 5.2
DEFAULT_CATEGORY = "Other"


@dataclass
class _SymbolAccumulator:
    """Running sums for one symbol while scanning the transaction log."""

    buy_quantity: float = 0.0
    sell_quantity: float = 0.0
    total_buy_cost: float = 0.0
    total_fees: float = 0.0
    price_hint: Optional[float] = None
    currency: Optional[str] = None


def _descending_key(value: float) -> float:
    """Sort key that pushes NaN to the end of a descending sort."""
    return -math.inf if math.isnan(value) else value


class PortfolioAggregator:
    """
    Reduces a transaction log and a price table into per-symbol summaries.

    Stateless apart from its configuration: every method is a pure function of
    its arguments. Average-cost model: SELLs reduce quantity but never change
    the average buy price. No method raises for numeric input; NaN propagates
    and every division by a possible zero falls back to 0.
    """

    def __init__(
        self,
        exchange_rate: float = DEFAULT_EXCHANGE_RATE,
        default_currency: str = Currency.USD.value,
        default_category: str = DEFAULT_CATEGORY,
    ):
        self._rate = exchange_rate
        self._default_currency = default_currency
        self._default_category = default_category

    @property
    def exchange_rate(self) -> float:
        return self._rate

    def to_base(self, value: float, currency: str) -> float:
        """Convert an amount into BRL (the reporting currency)."""
        if currency == Currency.BRL.value:
            return value
        return value * self._rate

    # ------------------------------------------------------------------
    # Per-symbol aggregation
    # ------------------------------------------------------------------

    def ticker_data(
        self,
        transactions: Iterable[Transaction],
        prices: Iterable[StockPriceInfo] = (),
    ) -> list[TickerData]:
        """
        Group transactions by symbol and compute holding figures.

        Returns one TickerData per symbol, sorted by BRL value descending
        (ties keep first-appearance order).
        """
        book = prices if isinstance(prices, PriceBook) else PriceBook(prices)
        groups = self._group(transactions)

        tickers = [
            self._build_ticker(symbol, acc, book) for symbol, acc in groups.items()
        ]
        tickers.sort(
            key=lambda t: _descending_key(self.to_base(t.total_value, t.currency)),
            reverse=True,
        )
        logger.debug("Aggregated %d symbols", len(tickers))
        return tickers

    def _group(self, transactions: Iterable[Transaction]) -> dict[str, _SymbolAccumulator]:
        groups: dict[str, _SymbolAccumulator] = defaultdict(_SymbolAccumulator)

        for txn in transactions:
            acc = groups[txn.symbol]
            quantity = txn.quantity or 0.0

            if txn.is_buy:
                acc.buy_quantity += quantity
                acc.total_buy_cost += txn.gross_amount
            else:
                acc.sell_quantity += quantity

            acc.total_fees += txn.fee or 0.0

            # Last usable hint wins
            if txn.current_price and is_number(txn.current_price):
                acc.price_hint = txn.current_price

            if acc.currency is None and txn.currency and txn.currency.strip():
                acc.currency = txn.currency.strip().upper()

        return groups

    def _build_ticker(
        self,
        symbol: str,
        acc: _SymbolAccumulator,
        book: PriceBook,
    ) -> TickerData:
        current_price = self._resolve_price(symbol, acc.price_hint, book)

        net_quantity = acc.buy_quantity - acc.sell_quantity
        avg_buy_price = (
            acc.total_buy_cost / acc.buy_quantity if acc.buy_quantity > 0 else 0.0
        )
        total_value = net_quantity * current_price
        cost_basis = net_quantity * avg_buy_price
        pnl = total_value - cost_basis - acc.total_fees
        pnl_percent = safe_ratio(pnl, cost_basis) * 100

        return TickerData(
            symbol=symbol,
            net_quantity=net_quantity,
            avg_buy_price=avg_buy_price,
            current_price=current_price,
            total_value=total_value,
            cost_basis=cost_basis,
            total_fees=acc.total_fees,
            pnl=pnl,
            pnl_percent=pnl_percent,
            tags=book.tags(symbol),
            category=book.category(symbol) or self._default_category,
            currency=book.currency(symbol) or acc.currency or self._default_currency,
        )

    @staticmethod
    def _resolve_price(symbol: str, hint: Optional[float], book: PriceBook) -> float:
        """Price table first; the transaction hint only when the table has no entry."""
        table_price = book.price(symbol)
        if table_price is not None:
            return table_price
        if hint is not None:
            return hint
        return 0.0

    # ------------------------------------------------------------------
    # Portfolio-level figures
    # ------------------------------------------------------------------

    def totals(self, tickers: Iterable[TickerData]) -> PortfolioTotals:
        """Sum values and P&L per currency; BRL grand totals use the exchange rate."""
        totals = PortfolioTotals(exchange_rate=self._rate)
        for ticker in tickers:
            if ticker.currency == Currency.BRL.value:
                totals.total_brl += ticker.total_value
                totals.pnl_brl += ticker.pnl
            else:
                totals.total_usd += ticker.total_value
                totals.pnl_usd += ticker.pnl
        return totals

    def asset_slices(self, tickers: Iterable[TickerData]) -> list[PieSlice]:
        """One slice per symbol, valued at abs(BRL value)."""
        return [
            PieSlice(name=t.symbol, value=abs(self.to_base(t.total_value, t.currency)))
            for t in tickers
        ]

    def category_slices(self, tickers: Iterable[TickerData]) -> list[PieSlice]:
        """abs(BRL value) summed per category, largest first."""
        by_category: dict[str, float] = defaultdict(float)
        for t in tickers:
            category = t.category or self._default_category
            by_category[category] += abs(self.to_base(t.total_value, t.currency))

        slices = [PieSlice(name=name, value=value) for name, value in by_category.items()]
        slices.sort(key=lambda s: _descending_key(s.value), reverse=True)
        return slices

    def weights(self, tickers: Iterable[TickerData]) -> dict[str, float]:
        """
        Portfolio weight of each symbol in percent.

        weight = |BRL value| / sum(|BRL value|) x 100, or 0 when the sum is 0.
        """
        values = {
            t.symbol: abs(self.to_base(t.total_value, t.currency)) for t in tickers
        }
        total = sum(values.values())
        if not total > 0:
            return {symbol: 0.0 for symbol in values}
        return {symbol: value / total * 100 for symbol, value in values.items()}

    def summarize(
        self,
        transactions: Iterable[Transaction],
        prices: Iterable[StockPriceInfo] = (),
    ) -> PortfolioSummary:
        """Run the full aggregation pass used by the dashboard."""
        tickers = self.ticker_data(transactions, prices)
        return PortfolioSummary(
            tickers=tickers,
            totals=self.totals(tickers),
            asset_slices=self.asset_slices(tickers),
            category_slices=self.category_slices(tickers),
            weights=self.weights(tickers),
        )

    # ------------------------------------------------------------------
    # Per-transaction view
    # ------------------------------------------------------------------

    def enrich_transactions(
        self,
        transactions: Iterable[Transaction],
        prices: Iterable[StockPriceInfo] = (),
    ) -> list[TransactionView]:
        """
        Attach market value and P&L to each transaction on its own.

        Figures are only computed when a positive current price is known;
        otherwise they stay 0.
        """
        book = prices if isinstance(prices, PriceBook) else PriceBook(prices)
        views: list[TransactionView] = []

        for txn in transactions:
            hint = txn.current_price if txn.current_price and is_number(txn.current_price) else None
            current_price = self._resolve_price(txn.symbol, hint, book)
            view = TransactionView(transaction=txn, current_price=current_price)

            if current_price > 0:
                quantity = txn.quantity or 0.0
                view.market_value = current_price * quantity
                cost = txn.gross_amount
                view.pnl = view.market_value - cost - (txn.fee or 0.0)
                if cost > 0:
                    view.pnl_percent = view.pnl / cost * 100

            views.append(view)

        return views
