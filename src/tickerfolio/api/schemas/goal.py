"""Pydantic schemas for goal endpoints."""

from pydantic import BaseModel, Field

from tickerfolio.api.schemas.snapshot import SnapshotRequest
from tickerfolio.domain.models import GoalAllocation, PortfolioGoal


class GoalAllocationIn(BaseModel):
    category: str
    percentage: float


class GoalProgressRequest(SnapshotRequest):
    """Snapshot plus the goal to measure it against."""

    goal_total: float = Field(..., description="Target portfolio value in BRL")
    allocations: list[GoalAllocationIn] = Field(default_factory=list)

    def to_goal(self) -> PortfolioGoal:
        return PortfolioGoal(
            goal_total=self.goal_total,
            allocations=tuple(
                GoalAllocation(category=a.category, percentage=a.percentage)
                for a in self.allocations
            ),
        )


class CategoryProgressResponse(BaseModel):
    model_config = {"from_attributes": True}

    category: str
    target_percent: float
    target_value: float
    current_value: float
    current_percent: float
    remaining: float
    progress_percent: float


class GoalProgressResponse(BaseModel):
    model_config = {"from_attributes": True}

    goal_total: float
    current_total: float
    progress_percent: float
    categories: list[CategoryProgressResponse]


class CategoriesResponse(BaseModel):
    categories: list[str]
