"""Visual analysis services."""

from .body_condition_service import BodyConditionService
from .correlation_service import VisualCorrelationService
from .growth_prediction_service import GrowthPredictionService
from .visual_report_service import VisualReportService

__all__ = [
    "BodyConditionService",
    "VisualCorrelationService",
    "GrowthPredictionService",
    "VisualReportService",
]
