"""Entities produced by the visual correlation engine."""

from .body_condition import BodyConditionScore, CoverageIndicators
from .growth_prediction import GrowthEstimate, GrowthPrediction, ProjectionPoint
from .visual_correlation import FeedEffectiveness, VisualCorrelationResult, VisualTrends
from .visual_feed_report import (
    CorrelationAnalysis,
    FeedProgression,
    PhotoProgression,
    ReportPeriod,
    VisualFeedReport,
)

__all__ = [
    "BodyConditionScore",
    "CoverageIndicators",
    "GrowthEstimate",
    "GrowthPrediction",
    "ProjectionPoint",
    "FeedEffectiveness",
    "VisualCorrelationResult",
    "VisualTrends",
    "CorrelationAnalysis",
    "FeedProgression",
    "PhotoProgression",
    "ReportPeriod",
    "VisualFeedReport",
]
