"""AnimalInsights - on-demand analysis for one animal."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from domain.guidance.core.entities import MentorResponse
from domain.performance.core.entities import FeedAnalysis
from domain.visual.core.entities import VisualCorrelationResult

from .animal_profile import ComprehensiveAnimalProfile


@dataclass(frozen=True)
class AnimalInsights:
    profile: ComprehensiveAnimalProfile
    guidance: MentorResponse
    feed_analysis: Optional[FeedAnalysis] = None
    visual_correlation: Optional[VisualCorrelationResult] = None
    recommendations: Tuple[str, ...] = field(default_factory=tuple)
    insights: Tuple[str, ...] = field(default_factory=tuple)
