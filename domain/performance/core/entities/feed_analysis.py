"""FeedAnalysis entity - performance of one feed for one animal."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class FeedEfficiency:
    """Efficiency block of a feed analysis.

    `fcr` is None until an FCR has been computed for the animal/feed pair.
    """

    fcr: Optional[float]
    cost_efficiency: float
    growth_rate: Optional[float]
    health_impact: float


@dataclass(frozen=True)
class FeedComparison:
    """How the animal's results compare with the catalog reference."""

    industry_benchmark: float
    user_average: Optional[float]
    improvement_opportunity: float


@dataclass(frozen=True)
class FeedAnalysis:
    """Feed performance analysis.

    Attributes:
        animal_id: Animal analysed
        feed_product_id: Feed analysed
        performance_score: Overall score, 0-100
        efficiency: Efficiency block
        comparison: Benchmark comparison
        total_amount: lb fed over recorded history
        average_cost_per_pound: Actual cost per lb paid
        recommendations: Advice strings
    """

    animal_id: str
    feed_product_id: str
    performance_score: float
    efficiency: FeedEfficiency
    comparison: FeedComparison
    total_amount: float
    average_cost_per_pound: float
    recommendations: Tuple[str, ...] = field(default_factory=tuple)
