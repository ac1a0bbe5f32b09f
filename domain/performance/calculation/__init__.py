"""Feed conversion calculation services."""

from .efficiency import efficiency_score, efficiency_trend
from .fcr_service import FCRService
from .feed_analysis_service import FeedAnalysisService
from .feed_recommendation_service import FeedRecommendationService

__all__ = [
    "efficiency_score",
    "efficiency_trend",
    "FCRService",
    "FeedAnalysisService",
    "FeedRecommendationService",
]
