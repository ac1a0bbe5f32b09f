"""Guidance request and response records."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Tuple
from uuid import uuid4

from domain.livestock.core.value_objects import clamp_percent


@dataclass(frozen=True)
class GuidanceContext:
    """What the mentor is asked about.

    Attributes:
        user_id: Student asking
        topic: Subject of the request (e.g. "fcr_calculation")
        animal_id: Optional animal in focus
        species: Optional species
        data: Supporting values (metrics, trigger fields)
        recent_activities: Latest session activities, newest last
    """

    user_id: str
    topic: str
    animal_id: Optional[str] = None
    species: Optional[str] = None
    data: Mapping[str, Any] = field(default_factory=dict)
    recent_activities: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MentorResponse:
    """Guidance returned by the provider.

    confidence and personalization_level are percentages (0-100).
    """

    guidance: str
    recommendations: Tuple[str, ...] = field(default_factory=tuple)
    next_steps: Tuple[str, ...] = field(default_factory=tuple)
    resources: Tuple[str, ...] = field(default_factory=tuple)
    confidence: float = 0.0
    personalization_level: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "confidence", clamp_percent(self.confidence))
        object.__setattr__(
            self, "personalization_level", clamp_percent(self.personalization_level)
        )


@dataclass(frozen=True)
class LearningSession:
    """One recorded learning activity of a student.

    Attributes:
        user_id: Student
        animal_id: Animal worked with
        activity: Activity name (e.g. "weighing", "feeding")
        duration_minutes: Estimated time spent
        outcomes: What the activity produced
        skills_applied: Skills exercised
        challenges: Difficulties observed
        insights: Learning points
        timestamp: When the activity happened
        session_id: Unique identifier
    """

    user_id: str
    animal_id: str
    activity: str
    duration_minutes: int
    outcomes: Tuple[str, ...] = field(default_factory=tuple)
    skills_applied: Tuple[str, ...] = field(default_factory=tuple)
    challenges: Tuple[str, ...] = field(default_factory=tuple)
    insights: Tuple[str, ...] = field(default_factory=tuple)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: str = field(default_factory=lambda: str(uuid4()))
