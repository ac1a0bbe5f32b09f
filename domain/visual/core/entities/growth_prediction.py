"""GrowthPrediction entity - photo-based growth projection."""

from dataclasses import dataclass, field
from typing import Tuple

from domain.livestock.core.value_objects import (
    FrameSize,
    clamp_body_condition,
    clamp_percent,
)


@dataclass(frozen=True)
class GrowthEstimate:
    weight: float
    body_condition: float
    frame_size: FrameSize


@dataclass(frozen=True)
class ProjectionPoint:
    """Projected state `days_ahead` days after the latest photo."""

    days_ahead: int
    weight: float
    body_condition: float
    confidence: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", max(0.0, self.weight))
        object.__setattr__(self, "body_condition", clamp_body_condition(self.body_condition))
        object.__setattr__(self, "confidence", clamp_percent(self.confidence))


@dataclass(frozen=True)
class GrowthPrediction:
    """Linear growth projection from a photo series.

    `projections` holds the 30, 60 and 90 day points in that order, with
    strictly decreasing confidence.
    """

    animal_id: str
    current_estimate: GrowthEstimate
    projections: Tuple[ProjectionPoint, ...]
    growth_rate_per_day: float
    condition_rate_per_day: float
    factors_considered: Tuple[str, ...] = field(default_factory=tuple)
    recommended_feeds: Tuple[str, ...] = field(default_factory=tuple)

    def projection_at(self, days_ahead: int) -> ProjectionPoint:
        for point in self.projections:
            if point.days_ahead == days_ahead:
                return point
        raise KeyError(days_ahead)
