"""PersonalizedDashboard - per-user read-model."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from domain.guidance.core.entities import MentorResponse

from .animal_profile import ComprehensiveAnimalProfile


@dataclass(frozen=True)
class OverallPerformance:
    """Aggregates over a user's animals.

    Attributes:
        average_fcr: Mean of defined current FCRs, None when none exist
        total_investment: Total feed cost
        projected_roi: Percent return of gained weight at market price
            over feed cost
        performance_ranking: "excellent", "good", "average",
            "insufficient_data" or "new_user"
    """

    average_fcr: Optional[float]
    total_investment: float
    projected_roi: float
    performance_ranking: str


@dataclass(frozen=True)
class DashboardRecommendations:
    immediate: MentorResponse
    feed_optimization: Tuple[str, ...] = field(default_factory=tuple)
    educational_next: Tuple[str, ...] = field(default_factory=tuple)
    cost_savings: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DashboardAlerts:
    performance_alerts: Tuple[str, ...] = field(default_factory=tuple)
    health_concerns: Tuple[str, ...] = field(default_factory=tuple)
    educational_milestones: Tuple[str, ...] = field(default_factory=tuple)
    market_opportunities: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_warnings(self) -> bool:
        return bool(self.performance_alerts or self.health_concerns)


@dataclass(frozen=True)
class ResearchContributionSummary:
    data_points_contributed: int = 0
    studies_supported: int = 0
    anonymized_value: float = 0.0
    impact_score: float = 0.0


@dataclass(frozen=True)
class PersonalizedDashboard:
    user_id: str
    animals: Tuple[ComprehensiveAnimalProfile, ...]
    overall_performance: OverallPerformance
    recommendations: DashboardRecommendations
    alerts: DashboardAlerts
    research_contributions: ResearchContributionSummary

    @property
    def animal_count(self) -> int:
        return len(self.animals)
