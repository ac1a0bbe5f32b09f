"""EducationalProgressReport - student progress over a timeframe."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Tuple

from domain.livestock.core.exceptions import ValidationError
from domain.livestock.core.value_objects import clamp_percent


@dataclass(frozen=True)
class ReportTimeframe:
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValidationError("Timeframe end must not precede its start")

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


@dataclass(frozen=True)
class AnimalManagementMetrics:
    animals_managed: int
    total_hours: float
    activities_completed: int
    skills_demonstrated: Tuple[str, ...]


@dataclass(frozen=True)
class PracticalSkills:
    """Skill proficiency percentages earned through logged activities."""

    feed_management: float
    health_monitoring: float
    record_keeping: float
    problem_solving: float

    def __post_init__(self) -> None:
        for name in ("feed_management", "health_monitoring", "record_keeping", "problem_solving"):
            object.__setattr__(self, name, clamp_percent(getattr(self, name)))

    def as_dict(self) -> dict:
        return {
            "feed_management": self.feed_management,
            "health_monitoring": self.health_monitoring,
            "record_keeping": self.record_keeping,
            "problem_solving": self.problem_solving,
        }


@dataclass(frozen=True)
class ResearchParticipation:
    data_contributed: bool
    contributions: int
    data_points: int
    studies_supported: int


@dataclass(frozen=True)
class EducationalRecommendations:
    strength_areas: Tuple[str, ...] = field(default_factory=tuple)
    improvement_opportunities: Tuple[str, ...] = field(default_factory=tuple)
    next_steps: Tuple[str, ...] = field(default_factory=tuple)
    career_pathways: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class EducationalProgressReport:
    student_id: str
    timeframe: ReportTimeframe
    animal_management: AnimalManagementMetrics
    practical_skills: PracticalSkills
    research_participation: ResearchParticipation
    recommendations: EducationalRecommendations
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
