"""FCRResult entity - outcome of one feed conversion analysis."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple
from uuid import uuid4

from domain.livestock.core.value_objects import PerformanceRanking


@dataclass(frozen=True)
class ObservationWindow:
    """Time span covered by an analysis."""

    start: datetime
    end: datetime
    elapsed_days: int


@dataclass(frozen=True)
class FCRMetrics:
    """Computed feed conversion metrics.

    Ratio metrics are None when weight gain is not positive; they are
    never infinite or negative.

    Attributes:
        feed_conversion_ratio: lb feed per lb gained
        average_daily_gain: lb gained per day
        feed_efficiency: lb gained per lb feed (1 / FCR)
        cost_per_pound_gain: Cost per lb gained
        total_feed_consumed: lb of feed over the window
        total_weight_gained: lb gained (may be <= 0)
        total_cost: Feed cost over the window
    """

    feed_conversion_ratio: Optional[float]
    average_daily_gain: float
    feed_efficiency: Optional[float]
    cost_per_pound_gain: Optional[float]
    total_feed_consumed: float
    total_weight_gained: float
    total_cost: float

    @property
    def is_defined(self) -> bool:
        return self.feed_conversion_ratio is not None


@dataclass(frozen=True)
class BenchmarkComparison:
    """FCR compared with industry, species and breed references."""

    industry_average: float
    species_average: float
    breed_average: float
    performance_ranking: Optional[PerformanceRanking]

    def ratio_to(self, fcr: float) -> float:
        """Actual FCR divided by the industry benchmark."""
        return fcr / self.industry_average


@dataclass(frozen=True)
class FCRResult:
    """Feed conversion analysis for one animal over one window.

    Created once per analysis and kept in the per-animal history.
    """

    animal_id: str
    feed_product_id: str
    window: ObservationWindow
    metrics: FCRMetrics
    benchmark: BenchmarkComparison
    recommendations: Tuple[str, ...] = field(default_factory=tuple)
    result_id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def fcr(self) -> Optional[float]:
        return self.metrics.feed_conversion_ratio

    @property
    def performance_ranking(self) -> Optional[PerformanceRanking]:
        return self.benchmark.performance_ranking
