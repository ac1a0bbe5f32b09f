"""Entities produced by the feed conversion and growth engine."""

from .fcr_result import BenchmarkComparison, FCRMetrics, FCRResult, ObservationWindow
from .feed_analysis import FeedAnalysis, FeedComparison, FeedEfficiency
from .feed_recommendation import (
    ExpectedImprovement,
    FeedRecommendation,
    ImplementationPlan,
)

__all__ = [
    "BenchmarkComparison",
    "FCRMetrics",
    "FCRResult",
    "ObservationWindow",
    "FeedAnalysis",
    "FeedComparison",
    "FeedEfficiency",
    "ExpectedImprovement",
    "FeedRecommendation",
    "ImplementationPlan",
]
