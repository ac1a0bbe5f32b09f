"""Value objects for the livestock domain."""

from .measurement import FeedingMethod, MeasurementMethod
from .scores import (
    BODY_CONDITION_RANGE,
    INDICATOR_RANGE,
    PALATABILITY_RANGE,
    PERCENT_RANGE,
    clamp,
    clamp_body_condition,
    clamp_indicator,
    clamp_percent,
)
from .trends import GrowthTrend, PerformanceRanking, TrendDirection
from .visual import FrameSize, GrowthStage, Severity

__all__ = [
    "MeasurementMethod",
    "FeedingMethod",
    "BODY_CONDITION_RANGE",
    "INDICATOR_RANGE",
    "PALATABILITY_RANGE",
    "PERCENT_RANGE",
    "clamp",
    "clamp_body_condition",
    "clamp_indicator",
    "clamp_percent",
    "PerformanceRanking",
    "TrendDirection",
    "GrowthTrend",
    "Severity",
    "FrameSize",
    "GrowthStage",
]
