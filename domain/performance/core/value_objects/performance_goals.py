"""PerformanceGoals value object - what a feed recommendation optimises."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional

from domain.livestock.core.exceptions import ValidationError


class FocusArea(str, Enum):
    """Criterion a caller wants a feed recommendation to favour."""

    GROWTH = "growth"
    EFFICIENCY = "efficiency"
    COST = "cost"
    HEALTH = "health"


@dataclass(frozen=True)
class PerformanceGoals:
    """Caller goals for feed selection.

    Attributes:
        focus_areas: Criteria to optimise, at least one
        target_weight: Optional target weight in lb
        target_date_days: Optional days until target
        budget_per_day: Optional daily feed budget
    """

    focus_areas: FrozenSet[FocusArea] = field(
        default_factory=lambda: frozenset({FocusArea.GROWTH, FocusArea.EFFICIENCY})
    )
    target_weight: Optional[float] = None
    target_date_days: Optional[int] = None
    budget_per_day: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "focus_areas", frozenset(self.focus_areas))
        if not self.focus_areas:
            raise ValidationError("At least one focus area is required")
        if self.target_weight is not None and self.target_weight <= 0:
            raise ValidationError(
                f"target_weight must be positive, got {self.target_weight}"
            )
