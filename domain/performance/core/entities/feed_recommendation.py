"""FeedRecommendation entity - suggested optimal feed for an animal."""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from domain.livestock.core.entities import FeedProductProfile


@dataclass(frozen=True)
class ExpectedImprovement:
    """Projected change versus the catalog average, in percent."""

    fcr_improvement: float
    cost_savings: float
    growth_rate_increase: float


@dataclass(frozen=True)
class ImplementationPlan:
    steps: Tuple[str, ...]
    timeline: str
    monitoring: Tuple[str, ...]


@dataclass(frozen=True)
class FeedRecommendation:
    """Top-scoring feed product with rollout guidance."""

    animal_id: str
    recommended_feed: FeedProductProfile
    score: float
    reasoning: str
    expected_improvement: ExpectedImprovement
    implementation: ImplementationPlan
    confidence: float
    candidate_scores: Dict[str, float] = field(default_factory=dict)
