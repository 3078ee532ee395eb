"""API routers package."""

from tickerfolio.api.routers.portfolio import router as portfolio_router
from tickerfolio.api.routers.treemap import router as treemap_router
from tickerfolio.api.routers.goals import router as goals_router
from tickerfolio.api.routers.transactions import router as transactions_router

__all__ = [
    "portfolio_router",
    "treemap_router",
    "goals_router",
    "transactions_router",
]
