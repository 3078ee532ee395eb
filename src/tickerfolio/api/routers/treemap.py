"""Treemap layout endpoints."""

from fastapi import APIRouter, Depends

from tickerfolio.api.deps import get_analysis_service
from tickerfolio.api.schemas import (
    PortfolioTreemapRequest,
    TreemapRectResponse,
    TreemapRequest,
    TreemapResponse,
)
from tickerfolio.config.settings import Settings, get_settings
from tickerfolio.domain.views import TreemapItem
from tickerfolio.services import AnalysisService, squarify

router = APIRouter(prefix="/treemap", tags=["treemap"])


@router.post("", response_model=TreemapResponse)
def layout_items(
    request: TreemapRequest,
    settings: Settings = Depends(get_settings),
) -> TreemapResponse:
    """Squarified layout for arbitrary (id, value) items."""
    width = settings.treemap_width if request.width is None else request.width
    height = settings.treemap_height if request.height is None else request.height
    items = [TreemapItem(id=i.id, value=i.value) for i in request.items]

    rects = squarify(items, width, height)
    return TreemapResponse(
        width=width,
        height=height,
        rects=[TreemapRectResponse.model_validate(r) for r in rects],
    )


@router.post("/portfolio", response_model=TreemapResponse)
def layout_portfolio(
    request: PortfolioTreemapRequest,
    analysis: AnalysisService = Depends(get_analysis_service),
    settings: Settings = Depends(get_settings),
) -> TreemapResponse:
    """Treemap of the snapshot's holdings sized by BRL value."""
    width = settings.treemap_width if request.width is None else request.width
    height = settings.treemap_height if request.height is None else request.height
    snapshot = request.to_snapshot(settings.default_exchange_rate)

    rects = analysis.treemap(snapshot, width, height)
    return TreemapResponse(
        width=width,
        height=height,
        rects=[TreemapRectResponse.model_validate(r) for r in rects],
    )
