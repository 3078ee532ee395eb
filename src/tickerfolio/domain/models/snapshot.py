"""Immutable input bundle handed to the aggregation functions."""

from dataclasses import dataclass, field

from tickerfolio.domain.models.price import StockPriceInfo
from tickerfolio.domain.models.transaction import Transaction


@dataclass(frozen=True)
class PortfolioSnapshot:
    """
    Everything needed for one aggregation pass.

    Callers own the lifecycle: build a new snapshot whenever transactions,
    prices or the exchange rate change.
    """

    transactions: tuple[Transaction, ...] = field(default_factory=tuple)
    prices: tuple[StockPriceInfo, ...] = field(default_factory=tuple)
    exchange_rate: float = 5.2
