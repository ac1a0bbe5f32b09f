"""VisualCorrelationResult entity."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from domain.livestock.core.value_objects import GrowthTrend, TrendDirection, clamp_percent


@dataclass(frozen=True)
class VisualTrends:
    body_condition: TrendDirection
    health: TrendDirection
    growth: GrowthTrend


@dataclass(frozen=True)
class FeedEffectiveness:
    """Visual effect of the ration, each score clamped to 0-100."""

    visual_impact: float
    health_impact: float
    growth_impact: float
    overall: float

    def __post_init__(self) -> None:
        for name in ("visual_impact", "health_impact", "growth_impact", "overall"):
            object.__setattr__(self, name, clamp_percent(getattr(self, name)))


@dataclass(frozen=True)
class VisualCorrelationResult:
    """How visual progress tracks feeding.

    Attributes:
        animal_id: Animal analysed
        correlation_strength: |Pearson r| scaled to 0-100
        correlation_coefficient: Signed r, None when not computable
        paired_intervals: Photo intervals used for the correlation
        trends: Body condition, health and growth classifications
        feed_effectiveness: Feed impact composite
        insights: Observations
        recommendations: Advice
    """

    animal_id: str
    correlation_strength: float
    correlation_coefficient: Optional[float]
    paired_intervals: int
    trends: VisualTrends
    feed_effectiveness: FeedEffectiveness
    insights: Tuple[str, ...] = field(default_factory=tuple)
    recommendations: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "correlation_strength", clamp_percent(self.correlation_strength)
        )
