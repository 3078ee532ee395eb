"""View models for service outputs."""

from tickerfolio.domain.views.portfolio import (
    TickerData,
    PieSlice,
    PortfolioTotals,
    PortfolioSummary,
    TransactionView,
    CategoryProgress,
    GoalProgress,
    ImportRowError,
    ImportSummary,
)
from tickerfolio.domain.views.treemap import TreemapItem, TreemapRect

__all__ = [
    "TickerData",
    "PieSlice",
    "PortfolioTotals",
    "PortfolioSummary",
    "TransactionView",
    "CategoryProgress",
    "GoalProgress",
    "ImportRowError",
    "ImportSummary",
    "TreemapItem",
    "TreemapRect",
]
