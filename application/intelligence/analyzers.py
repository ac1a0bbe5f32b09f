"""Named analyzers for `analyze` workflow rules.

Each analyzer reads the trigger's animal history and returns a plain
mapping that the execution record stores as the rule payload.
"""

from typing import Any, Dict

from domain.livestock.core.exceptions import ValidationError
from domain.livestock.core.ports import IObservationHistory
from domain.performance.calculation import FeedAnalysisService
from domain.performance.ml import GrowthTrajectoryService
from domain.visual.analysis import VisualCorrelationService
from domain.workflow.core.entities import WorkflowTrigger
from domain.workflow.engine import Analyzer


def _animal_id(trigger: WorkflowTrigger) -> str:
    if not trigger.animal_id:
        raise ValidationError(f"Trigger {trigger.trigger_id} has no animal_id")
    return trigger.animal_id


class FeedPerformanceAnalyzer:
    def __init__(self, feed_analysis: FeedAnalysisService) -> None:
        self._feed_analysis = feed_analysis

    def __call__(self, trigger: WorkflowTrigger) -> Dict[str, Any]:
        feed_product_id = trigger.payload.as_fields().get("feed_product_id")
        if not feed_product_id:
            raise ValidationError("feed_performance analysis needs feed_product_id")

        analysis = self._feed_analysis.analyze_feed_performance(
            _animal_id(trigger), feed_product_id
        )
        return {
            "feed_product_id": feed_product_id,
            "performance_score": analysis.performance_score,
            "fcr": analysis.efficiency.fcr,
            "improvement_opportunity": analysis.comparison.improvement_opportunity,
            "recommendations": list(analysis.recommendations),
        }


class GrowthTrajectoryAnalyzer:
    FORECAST_DAYS = 30

    def __init__(
        self, observations: IObservationHistory, trajectory: GrowthTrajectoryService
    ) -> None:
        self._observations = observations
        self._trajectory = trajectory

    def __call__(self, trigger: WorkflowTrigger) -> Dict[str, Any]:
        weights = self._observations.weights_for(_animal_id(trigger))
        forecast = self._trajectory.forecast(weights, days_ahead=self.FORECAST_DAYS)
        return {
            "model_used": forecast.model_used,
            "trend_direction": forecast.trend_direction,
            "daily_gain": forecast.daily_gain,
            "projected_weight": forecast.predictions[-1],
            "horizon_days": self.FORECAST_DAYS,
        }


class VisualCorrelationAnalyzer:
    def __init__(
        self, observations: IObservationHistory, correlation: VisualCorrelationService
    ) -> None:
        self._observations = observations
        self._correlation = correlation

    def __call__(self, trigger: WorkflowTrigger) -> Dict[str, Any]:
        animal_id = _animal_id(trigger)
        result = self._correlation.correlate_feed_to_visual_progress(
            self._observations.photos_for(animal_id),
            self._observations.feeds_for(animal_id),
        )
        return {
            "correlation_strength": result.correlation_strength,
            "correlation_coefficient": result.correlation_coefficient,
            "body_condition_trend": result.trends.body_condition.value,
            "growth_trend": result.trends.growth.value,
            "overall_effectiveness": result.feed_effectiveness.overall,
        }


def build_analyzers(
    observations: IObservationHistory,
    feed_analysis: FeedAnalysisService,
    trajectory: GrowthTrajectoryService,
    correlation: VisualCorrelationService,
) -> Dict[str, Analyzer]:
    """Analyzers keyed by the names used in workflow definitions."""
    return {
        "feed_performance": FeedPerformanceAnalyzer(feed_analysis),
        "growth_trajectory": GrowthTrajectoryAnalyzer(observations, trajectory),
        "visual_correlation": VisualCorrelationAnalyzer(observations, correlation),
    }
