"""VisualFeedReport entity - time-windowed visual feeding report."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

from domain.livestock.core.value_objects import TrendDirection


@dataclass(frozen=True)
class ReportPeriod:
    start: datetime
    end: datetime


@dataclass(frozen=True)
class PhotoProgression:
    photo_count: int
    average_body_condition: float
    body_condition_trend: TrendDirection
    health_trend: TrendDirection


@dataclass(frozen=True)
class FeedProgression:
    feed_entries: int
    product_changes: int
    distinct_products: Tuple[str, ...]
    average_feed_cost: float
    feed_effectiveness: float


@dataclass(frozen=True)
class CorrelationAnalysis:
    overall_correlation: float
    body_condition_improvement: float
    feed_effectiveness_score: float
    health_trend_score: float
    growth_consistency: float


@dataclass(frozen=True)
class VisualFeedReport:
    """Visual feeding report over the photo history of one animal."""

    animal_id: str
    animal_name: str
    period: ReportPeriod
    photo_progression: PhotoProgression
    feed_progression: FeedProgression
    correlation_analysis: CorrelationAnalysis
    insights: Tuple[str, ...] = field(default_factory=tuple)
    recommendations: Tuple[str, ...] = field(default_factory=tuple)
    next_steps: Tuple[str, ...] = field(default_factory=tuple)
