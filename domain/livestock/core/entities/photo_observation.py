"""PhotoObservation - vision-derived assessment of an animal photo."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple
from uuid import uuid4

from ..exceptions import ValidationError
from .observations import check_aware_timestamp
from ..value_objects import (
    FrameSize,
    GrowthStage,
    Severity,
    clamp_body_condition,
    clamp_indicator,
    clamp_percent,
)


@dataclass(frozen=True)
class HealthIndicator:
    """Single health observation extracted from a photo.

    Attributes:
        type: Indicator name (e.g. "coat_condition", "eye_clarity")
        score: Rating clamped to 1-10, higher is healthier
        severity: Severity of any finding
        notes: Free-text observation
    """

    type: str
    score: float
    severity: Severity = Severity.NORMAL
    notes: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "score", clamp_indicator(self.score))


@dataclass(frozen=True)
class GrowthAssessment:
    """Frame and composition assessment, muscle and fat clamped to 1-10."""

    frame_size: FrameSize = FrameSize.MEDIUM
    muscle_score: float = 5.0
    fat_score: float = 5.0
    conformation: str = ""
    growth_stage: GrowthStage = GrowthStage.GROWING

    def __post_init__(self) -> None:
        object.__setattr__(self, "muscle_score", clamp_indicator(self.muscle_score))
        object.__setattr__(self, "fat_score", clamp_indicator(self.fat_score))


@dataclass(frozen=True)
class FeedImpactScore:
    """How the current ration shows up visually, each score 0-100."""

    nutrition_adequacy: float = 50.0
    feed_efficiency_visual: float = 50.0
    health_impact: float = 50.0
    growth_progression: float = 50.0
    overall_score: float = 50.0

    def __post_init__(self) -> None:
        for name in (
            "nutrition_adequacy",
            "feed_efficiency_visual",
            "health_impact",
            "growth_progression",
            "overall_score",
        ):
            object.__setattr__(self, name, clamp_percent(getattr(self, name)))


@dataclass(frozen=True)
class PhotoObservation:
    """Photo analysis result for one capture.

    Produced by the vision inference collaborator; the analytics engines
    only read it. Scores are clamped to their ranges on construction.
    """

    animal_id: str
    captured_at: datetime
    body_condition_score: float
    estimated_weight: float
    health_indicators: Tuple[HealthIndicator, ...] = field(default_factory=tuple)
    growth_assessment: GrowthAssessment = field(default_factory=GrowthAssessment)
    feed_impact: FeedImpactScore = field(default_factory=FeedImpactScore)
    confidence: float = 80.0
    photo_uri: Optional[str] = None
    photo_id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self) -> None:
        if not self.animal_id:
            raise ValidationError("animal_id cannot be empty")
        check_aware_timestamp("captured_at", self.captured_at)
        if self.estimated_weight < 0:
            raise ValidationError(
                f"estimated_weight must be non-negative, got {self.estimated_weight}"
            )
        object.__setattr__(
            self, "body_condition_score", clamp_body_condition(self.body_condition_score)
        )
        object.__setattr__(self, "confidence", clamp_percent(self.confidence))
        object.__setattr__(self, "health_indicators", tuple(self.health_indicators))

    def mean_health_score(self) -> Optional[float]:
        """Mean indicator score, or None when no indicators were extracted."""
        if not self.health_indicators:
            return None
        return sum(i.score for i in self.health_indicators) / len(self.health_indicators)

    def health_concerns(self) -> Tuple[HealthIndicator, ...]:
        return tuple(i for i in self.health_indicators if i.severity.is_concern)
