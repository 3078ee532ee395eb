"""Portfolio goal endpoints."""

from fastapi import APIRouter, Depends

from tickerfolio.api.deps import get_analysis_service
from tickerfolio.api.schemas import (
    CategoriesResponse,
    GoalProgressRequest,
    GoalProgressResponse,
    SnapshotRequest,
)
from tickerfolio.config.settings import Settings, get_settings
from tickerfolio.services import AnalysisService

router = APIRouter(prefix="/goals", tags=["goals"])


@router.post("/progress", response_model=GoalProgressResponse)
def get_goal_progress(
    request: GoalProgressRequest,
    analysis: AnalysisService = Depends(get_analysis_service),
    settings: Settings = Depends(get_settings),
) -> GoalProgressResponse:
    """Validate a goal and measure the snapshot against it (400 on invalid goal)."""
    snapshot = request.to_snapshot(settings.default_exchange_rate)
    progress = analysis.goal_progress(snapshot, request.to_goal())
    return GoalProgressResponse.model_validate(progress)


@router.post("/categories", response_model=CategoriesResponse)
def get_categories(
    request: SnapshotRequest,
    analysis: AnalysisService = Depends(get_analysis_service),
    settings: Settings = Depends(get_settings),
) -> CategoriesResponse:
    """Categories a goal can allocate to, taken from the price table."""
    snapshot = request.to_snapshot(settings.default_exchange_rate)
    return CategoriesResponse(categories=analysis.categories(snapshot))
