"""Domain models package."""

from tickerfolio.domain.models.enums import TransactionType, Currency
from tickerfolio.domain.models.transaction import Transaction
from tickerfolio.domain.models.price import StockPriceInfo, parse_tags
from tickerfolio.domain.models.goal import PortfolioGoal, GoalAllocation
from tickerfolio.domain.models.snapshot import PortfolioSnapshot

__all__ = [
    "TransactionType",
    "Currency",
    "Transaction",
    "StockPriceInfo",
    "parse_tags",
    "PortfolioGoal",
    "GoalAllocation",
    "PortfolioSnapshot",
]
