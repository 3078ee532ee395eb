"""Pydantic schemas for API request/response."""

from tickerfolio.api.schemas.snapshot import (
    TransactionIn,
    StockPriceIn,
    SnapshotRequest,
)
from tickerfolio.api.schemas.portfolio import (
    TickerResponse,
    TickersResponse,
    TotalsResponse,
    PieSliceResponse,
    SummaryResponse,
    TransactionViewResponse,
    TransactionViewListResponse,
)
from tickerfolio.api.schemas.treemap import (
    TreemapItemIn,
    TreemapRequest,
    PortfolioTreemapRequest,
    TreemapRectResponse,
    TreemapResponse,
)
from tickerfolio.api.schemas.goal import (
    GoalAllocationIn,
    GoalProgressRequest,
    CategoryProgressResponse,
    GoalProgressResponse,
    CategoriesResponse,
)
from tickerfolio.api.schemas.transaction import (
    ImportedTransaction,
    ImportRowErrorResponse,
    ImportSummaryResponse,
)

__all__ = [
    "TransactionIn",
    "StockPriceIn",
    "SnapshotRequest",
    "TickerResponse",
    "TickersResponse",
    "TotalsResponse",
    "PieSliceResponse",
    "SummaryResponse",
    "TransactionViewResponse",
    "TransactionViewListResponse",
    "TreemapItemIn",
    "TreemapRequest",
    "PortfolioTreemapRequest",
    "TreemapRectResponse",
    "TreemapResponse",
    "GoalAllocationIn",
    "GoalProgressRequest",
    "CategoryProgressResponse",
    "GoalProgressResponse",
    "CategoriesResponse",
    "ImportedTransaction",
    "ImportRowErrorResponse",
    "ImportSummaryResponse",
]
