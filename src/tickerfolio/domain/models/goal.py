"""Portfolio goal: a target total in BRL split by category."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GoalAllocation:
    """Target share of the goal for one category, in percent."""

    category: str
    percentage: float


@dataclass(frozen=True)
class PortfolioGoal:
    """Target portfolio value (BRL) with category allocations."""

    goal_total: float
    allocations: tuple[GoalAllocation, ...] = field(default_factory=tuple)

    @property
    def total_percentage(self) -> float:
        return sum(a.percentage for a in self.allocations)
