"""Builds ComprehensiveAnimalProfile read-models from recorded history."""

from collections import Counter
from datetime import datetime
from typing import Callable, List, Optional, Sequence

import structlog

from domain.guidance.core.entities import LearningSession
from domain.intelligence.core.entities import (
    ComprehensiveAnimalProfile,
    EducationalInsights,
    FeedIntelligence,
    PerformanceSnapshot,
    VisualSummary,
)
from domain.livestock.core.entities import AnimalRef, FeedObservation, PhotoObservation
from domain.livestock.core.ports import IFeedCatalog, IObservationHistory
from domain.livestock.core.value_objects import Severity, TrendDirection
from domain.performance.calculation import FeedAnalysisService
from domain.performance.core.entities import FeedAnalysis
from domain.performance.core.ports import IFCRHistory
from domain.visual.analysis import BodyConditionService, GrowthPredictionService
from domain.visual.core.entities import BodyConditionScore, GrowthPrediction

from . import learning

logger = structlog.get_logger(__name__)

BODY_CONDITION_TREND_THRESHOLD = 0.3


def primary_feed_id(feeds: Sequence[FeedObservation]) -> Optional[str]:
    """Most frequently fed product; ties go to the earliest fed."""
    if not feeds:
        return None
    return Counter(f.feed_product_id for f in feeds).most_common(1)[0][0]


def photos_span_time(photos: Sequence[PhotoObservation]) -> bool:
    return len(photos) >= 2 and photos[-1].captured_at > photos[0].captured_at


class ProfileBuilder:
    """Recomputes an animal profile from the observation and FCR history.

    Profiles hold no state of their own: building twice from the same
    history gives the same metrics.
    """

    def __init__(
        self,
        catalog: IFeedCatalog,
        observations: IObservationHistory,
        fcr_history: IFCRHistory,
        feed_analysis: FeedAnalysisService,
        growth_prediction: GrowthPredictionService,
        clock: Callable[[], datetime],
        body_condition: Optional[BodyConditionService] = None,
    ) -> None:
        self._catalog = catalog
        self._observations = observations
        self._fcr_history = fcr_history
        self._feed_analysis = feed_analysis
        self._growth_prediction = growth_prediction
        self._clock = clock
        self._body_condition = body_condition

    def build(
        self,
        user_id: str,
        animal: AnimalRef,
        sessions: Sequence[LearningSession],
    ) -> ComprehensiveAnimalProfile:
        animal_id = animal.animal_id
        weights = self._observations.weights_for(animal_id)
        feeds = self._observations.feeds_for(animal_id)
        photos = self._observations.photos_for(animal_id)
        latest_fcr = self._fcr_history.latest(animal_id)

        total_gain = weights[-1].weight - weights[0].weight if len(weights) >= 2 else 0.0
        current_weight = weights[-1].weight if weights else animal.current_weight

        performance = PerformanceSnapshot(
            current_fcr=latest_fcr.fcr if latest_fcr else None,
            average_daily_gain=latest_fcr.metrics.average_daily_gain if latest_fcr else None,
            performance_ranking=latest_fcr.performance_ranking if latest_fcr else None,
            total_feed_cost=sum(f.cost for f in feeds),
            total_weight_gained=total_gain,
            current_weight=current_weight,
            weigh_ins=len(weights),
            body_condition_trend=self._body_condition_trend(photos),
            health_status=self._health_status(photos),
        )

        current_feed = primary_feed_id(feeds)
        analysis = self._feed_analysis_for(animal_id, current_feed)
        feed = FeedIntelligence(
            current_feed=current_feed,
            latest_fcr=latest_fcr,
            analysis=analysis,
            cost_optimization=analysis.comparison.improvement_opportunity if analysis else 0.0,
        )

        body_condition = self._body_condition_for(photos)
        visual = VisualSummary(
            photo_count=len(photos),
            body_condition_score=(
                body_condition.score
                if body_condition
                else (photos[-1].body_condition_score if photos else None)
            ),
            body_condition=body_condition,
            growth_prediction=self._growth_prediction_for(photos),
            health_concerns=tuple(
                f"{indicator.type}: {indicator.severity.value}"
                for indicator in (photos[-1].health_concerns() if photos else ())
            ),
        )

        competency = learning.competency_level(sessions)
        education = EducationalInsights(
            skills_learned=learning.skills_learned(sessions),
            competency_level=competency,
            learning_progression=learning.learning_progression(competency),
            next_milestones=learning.next_milestones(sessions),
        )

        return ComprehensiveAnimalProfile(
            user_id=user_id,
            animal=animal,
            performance=performance,
            feed=feed,
            visual=visual,
            education=education,
            updated_at=self._clock(),
        )

    def _feed_analysis_for(
        self, animal_id: str, feed_product_id: Optional[str]
    ) -> Optional[FeedAnalysis]:
        if feed_product_id is None or self._catalog.get(feed_product_id) is None:
            return None
        return self._feed_analysis.analyze_feed_performance(animal_id, feed_product_id)

    def _body_condition_for(
        self, photos: Sequence[PhotoObservation]
    ) -> Optional[BodyConditionScore]:
        if not photos or self._body_condition is None:
            return None
        return self._body_condition.analyze_body_condition(photos[-1])

    def _growth_prediction_for(
        self, photos: List[PhotoObservation]
    ) -> Optional[GrowthPrediction]:
        if not photos_span_time(photos):
            return None
        return self._growth_prediction.predict_growth_from_photos(photos)

    @staticmethod
    def _body_condition_trend(photos: Sequence[PhotoObservation]) -> TrendDirection:
        if len(photos) < 2:
            return TrendDirection.STABLE
        delta = photos[-1].body_condition_score - photos[0].body_condition_score
        return TrendDirection.from_delta(delta, BODY_CONDITION_TREND_THRESHOLD)

    @staticmethod
    def _health_status(photos: Sequence[PhotoObservation]) -> str:
        if not photos:
            return "unknown"
        concerns = photos[-1].health_concerns()
        if any(c.severity is Severity.SEVERE for c in concerns):
            return "poor"
        if concerns:
            return "monitor"
        return "good"
