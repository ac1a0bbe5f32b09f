"""Read-models built by the intelligence orchestrator."""

from .animal_insights import AnimalInsights
from .animal_profile import (
    ComprehensiveAnimalProfile,
    EducationalInsights,
    FeedIntelligence,
    PerformanceSnapshot,
    VisualSummary,
)
from .dashboard import (
    DashboardAlerts,
    DashboardRecommendations,
    OverallPerformance,
    PersonalizedDashboard,
    ResearchContributionSummary,
)
from .progress_report import (
    AnimalManagementMetrics,
    EducationalProgressReport,
    EducationalRecommendations,
    PracticalSkills,
    ReportTimeframe,
    ResearchParticipation,
)
from .research_contribution import ResearchDataContribution

__all__ = [
    "AnimalInsights",
    "ComprehensiveAnimalProfile",
    "EducationalInsights",
    "FeedIntelligence",
    "PerformanceSnapshot",
    "VisualSummary",
    "DashboardAlerts",
    "DashboardRecommendations",
    "OverallPerformance",
    "PersonalizedDashboard",
    "ResearchContributionSummary",
    "AnimalManagementMetrics",
    "EducationalProgressReport",
    "EducationalRecommendations",
    "PracticalSkills",
    "ReportTimeframe",
    "ResearchParticipation",
    "ResearchDataContribution",
]
