"""Goal planner: compare the portfolio against a target allocation."""

import logging
from typing import Iterable

from tickerfolio.core.exceptions import ValidationError
from tickerfolio.core.numbers import safe_ratio
from tickerfolio.domain.models import GoalAllocation, PortfolioGoal
from tickerfolio.domain.views import (
    CategoryProgress,
    GoalProgress,
    PieSlice,
    PortfolioSummary,
)

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_PERCENT = 0.01


class GoalPlanner:
    """
    Validates portfolio goals and measures progress towards them.

    A goal is a BRL target total split by category percentages.
    """

    def __init__(self, tolerance_percent: float = DEFAULT_TOLERANCE_PERCENT):
        self._tolerance = tolerance_percent

    def validate(self, goal: PortfolioGoal) -> PortfolioGoal:
        """
        Normalize and validate a goal.

        Drops allocations with a non-positive percentage, trims category
        names and requires the rest to sum to 100%.

        Raises:
            ValidationError: goal_total is not positive, a category is blank
                or repeated, or the percentages do not add up to 100.
        """
        if not goal.goal_total > 0:
            raise ValidationError("goal_total must be positive")

        allocations: list[GoalAllocation] = []
        seen: set[str] = set()
        for alloc in goal.allocations:
            if not alloc.percentage > 0:
                continue
            category = (alloc.category or "").strip()
            if not category:
                raise ValidationError("Allocation category is required")
            if category in seen:
                raise ValidationError(f"Duplicate allocation for category: {category}")
            seen.add(category)
            allocations.append(GoalAllocation(category=category, percentage=alloc.percentage))

        total_percent = sum(a.percentage for a in allocations)
        if abs(total_percent - 100) >= self._tolerance:
            raise ValidationError(
                f"Allocations must add up to 100%, got {total_percent:.2f}%"
            )

        return PortfolioGoal(goal_total=goal.goal_total, allocations=tuple(allocations))

    def progress(self, goal: PortfolioGoal, summary: PortfolioSummary) -> GoalProgress:
        """
        Measure the portfolio against a (validated) goal.

        Categories are the union of goal categories and held categories;
        goal categories come first in goal order, then held-only ones by value.
        """
        current_total = summary.totals.grand_total
        actual = _slice_map(summary.category_slices)
        actual_total = sum(actual.values())

        categories: list[CategoryProgress] = []
        targets = {a.category: a.percentage for a in goal.allocations}
        names = list(targets) + [name for name in actual if name not in targets]

        for name in names:
            target_percent = targets.get(name, 0.0)
            target_value = goal.goal_total * target_percent / 100
            current_value = actual.get(name, 0.0)
            categories.append(
                CategoryProgress(
                    category=name,
                    target_percent=target_percent,
                    target_value=target_value,
                    current_value=current_value,
                    current_percent=safe_ratio(current_value, actual_total) * 100,
                    remaining=target_value - current_value,
                    progress_percent=safe_ratio(current_value, target_value) * 100,
                )
            )

        logger.debug("Goal progress computed for %d categories", len(categories))
        return GoalProgress(
            goal_total=goal.goal_total,
            current_total=current_total,
            progress_percent=safe_ratio(current_total, goal.goal_total) * 100,
            categories=categories,
        )


def _slice_map(slices: Iterable[PieSlice]) -> dict[str, float]:
    return {s.name: s.value for s in slices}
