"""View models for portfolio and analysis outputs."""

from dataclasses import dataclass, field
from typing import Optional

from tickerfolio.domain.models import Transaction


@dataclass
class TickerData:
    """
    Per-symbol holding summary.

    Transient projection: rebuilt on every aggregation call, never stored.
    Amounts are in the ticker's own currency.
    """

    symbol: str
    net_quantity: float
    avg_buy_price: float
    current_price: float
    total_value: float
    cost_basis: float
    total_fees: float
    pnl: float
    pnl_percent: float
    tags: list[str] = field(default_factory=list)
    category: str = ""
    currency: str = "USD"


@dataclass
class PieSlice:
    """Single pie-chart slice (value in BRL)."""

    name: str
    value: float


@dataclass
class PortfolioTotals:
    """Currency-split totals plus the BRL grand total."""

    total_usd: float = 0.0
    total_brl: float = 0.0
    pnl_usd: float = 0.0
    pnl_brl: float = 0.0
    exchange_rate: float = 0.0

    @property
    def grand_total(self) -> float:
        """All holdings expressed in BRL."""
        return self.total_brl + self.total_usd * self.exchange_rate

    @property
    def grand_pnl(self) -> float:
        """All P&L expressed in BRL."""
        return self.pnl_brl + self.pnl_usd * self.exchange_rate


@dataclass
class PortfolioSummary:
    """Everything the dashboard needs from one aggregation pass."""

    tickers: list[TickerData] = field(default_factory=list)
    totals: PortfolioTotals = field(default_factory=PortfolioTotals)
    asset_slices: list[PieSlice] = field(default_factory=list)
    category_slices: list[PieSlice] = field(default_factory=list)
    weights: dict[str, float] = field(default_factory=dict)


@dataclass
class TransactionView:
    """A transaction enriched with its standalone market value and P&L."""

    transaction: Transaction
    current_price: float = 0.0
    market_value: float = 0.0
    pnl: float = 0.0
    pnl_percent: float = 0.0


@dataclass
class CategoryProgress:
    """Goal vs. actual for one category."""

    category: str
    target_percent: float
    target_value: float
    current_value: float
    current_percent: float
    remaining: float
    progress_percent: float


@dataclass
class GoalProgress:
    """Goal vs. actual for the whole portfolio."""

    goal_total: float
    current_total: float
    progress_percent: float
    categories: list[CategoryProgress] = field(default_factory=list)


@dataclass
class ImportRowError:
    """A spreadsheet row that could not be imported (1-based row number)."""

    row: int
    message: str


@dataclass
class ImportSummary:
    """Summary of a spreadsheet import."""

    symbol: str
    currency: str
    transactions: list[Transaction] = field(default_factory=list)
    errors: list[ImportRowError] = field(default_factory=list)
    import_batch_id: Optional[str] = None

    @property
    def imported_count(self) -> int:
        return len(self.transactions)

    @property
    def error_count(self) -> int:
        return len(self.errors)
