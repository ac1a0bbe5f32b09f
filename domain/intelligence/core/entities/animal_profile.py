"""ComprehensiveAnimalProfile - per-animal read-model."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple

from domain.livestock.core.entities import AnimalRef
from domain.livestock.core.value_objects import PerformanceRanking, TrendDirection, clamp_percent
from domain.performance.core.entities import FCRResult, FeedAnalysis
from domain.visual.core.entities import BodyConditionScore, GrowthPrediction


@dataclass(frozen=True)
class PerformanceSnapshot:
    """Performance metrics from recorded history.

    Attributes:
        current_fcr: Latest defined FCR, None before the first calculation
        average_daily_gain: ADG of the latest FCR window
        performance_ranking: Ranking of the latest FCR result
        total_feed_cost: Sum of recorded feed costs
        total_weight_gained: Last minus first recorded weight
        current_weight: Latest recorded weight
        weigh_ins: Number of weight observations
        body_condition_trend: First vs latest photo body condition
        health_status: "good", "monitor", "poor" or "unknown"
    """

    current_fcr: Optional[float]
    average_daily_gain: Optional[float]
    performance_ranking: Optional[PerformanceRanking]
    total_feed_cost: float
    total_weight_gained: float
    current_weight: Optional[float]
    weigh_ins: int
    body_condition_trend: TrendDirection
    health_status: str


@dataclass(frozen=True)
class FeedIntelligence:
    current_feed: Optional[str]
    latest_fcr: Optional[FCRResult] = None
    analysis: Optional[FeedAnalysis] = None
    cost_optimization: float = 0.0


@dataclass(frozen=True)
class VisualSummary:
    """Photo-derived state; body_condition scores the latest photo."""

    photo_count: int
    body_condition_score: Optional[float] = None
    body_condition: Optional[BodyConditionScore] = None
    growth_prediction: Optional[GrowthPrediction] = None
    health_concerns: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class EducationalInsights:
    """Learning progress derived from recorded sessions.

    competency_level is a percentage; learning_progression is
    "beginner", "intermediate" or "advanced".
    """

    skills_learned: Tuple[str, ...]
    competency_level: float
    learning_progression: str
    next_milestones: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "competency_level", clamp_percent(self.competency_level))


@dataclass(frozen=True)
class ComprehensiveAnimalProfile:
    """Everything known about one animal of one user.

    Stored per user and keyed by animal id; a newer profile for the same
    animal replaces the older one.
    """

    user_id: str
    animal: AnimalRef
    performance: PerformanceSnapshot
    feed: FeedIntelligence
    visual: VisualSummary
    education: EducationalInsights
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def animal_id(self) -> str:
        return self.animal.animal_id
