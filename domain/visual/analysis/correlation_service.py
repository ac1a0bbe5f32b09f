"""Correlation of feeding with visual progress across photos.

Visual progress per photo interval is the sum of the z-scored body
condition change and the z-scored estimated weight change. Feeding per
interval is the lb fed between the two photos. Correlation strength is
|Pearson r| x 100 over the intervals.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np
import structlog
from scipy import stats

from domain.livestock.core.entities import FeedObservation, PhotoObservation
from domain.livestock.core.exceptions import InsufficientDataError
from domain.livestock.core.value_objects import GrowthTrend, TrendDirection

from ..core.entities import FeedEffectiveness, VisualCorrelationResult, VisualTrends

logger = structlog.get_logger(__name__)

BODY_CONDITION_TREND_THRESHOLD = 0.3
HEALTH_TREND_THRESHOLD = 0.5
GROWTH_ABOVE_AVERAGE_LB = 5.0
GROWTH_BELOW_AVERAGE_LB = -2.0

MIN_CORRELATION_INTERVALS = 3
STRONG_CORRELATION = 60.0
MODERATE_CORRELATION = 30.0
LOW_EFFECTIVENESS = 60.0
HIGH_BODY_CONDITION = 7.0


def _zscore(values: np.ndarray) -> np.ndarray:
    std = float(np.std(values))
    if std == 0.0:
        return np.zeros_like(values)
    return (values - values.mean()) / std


class VisualCorrelationService:
    """Relates a photo series to the feed series over the same period."""

    def correlate_feed_to_visual_progress(
        self,
        photo_series: Sequence[PhotoObservation],
        feed_series: Sequence[FeedObservation],
    ) -> VisualCorrelationResult:
        """Correlate feeding with visual progress.

        Args:
            photo_series: Photo observations, any order, at least one
            feed_series: Feed observations, any order

        Returns:
            VisualCorrelationResult

        Raises:
            InsufficientDataError: No photos
        """
        if not photo_series:
            raise InsufficientDataError("correlate_feed_to_visual_progress", "no photos")

        photos = sorted(photo_series, key=lambda p: p.captured_at)
        feeds = sorted(feed_series, key=lambda f: f.timestamp)
        first, last = photos[0], photos[-1]

        trends = VisualTrends(
            body_condition=TrendDirection.from_delta(
                last.body_condition_score - first.body_condition_score,
                BODY_CONDITION_TREND_THRESHOLD,
            ),
            health=self._health_trend(first, last),
            growth=self._growth_trend(last.estimated_weight - first.estimated_weight),
        )
        effectiveness = self._feed_effectiveness(photos)
        coefficient, intervals = self._correlation(photos, feeds)
        strength = abs(coefficient) * 100.0 if coefficient is not None else 0.0

        result = VisualCorrelationResult(
            animal_id=first.animal_id,
            correlation_strength=strength,
            correlation_coefficient=coefficient,
            paired_intervals=intervals,
            trends=trends,
            feed_effectiveness=effectiveness,
            insights=tuple(self._insights(photos, trends, strength, intervals)),
            recommendations=tuple(self._recommendations(last, trends, effectiveness)),
        )
        logger.info(
            "Visual correlation computed",
            animal_id=first.animal_id,
            photos=len(photos),
            feeds=len(feeds),
            correlation_strength=round(result.correlation_strength, 1),
        )
        return result

    @staticmethod
    def _health_trend(first: PhotoObservation, last: PhotoObservation) -> TrendDirection:
        before, after = first.mean_health_score(), last.mean_health_score()
        if before is None or after is None:
            return TrendDirection.STABLE
        return TrendDirection.from_delta(after - before, HEALTH_TREND_THRESHOLD)

    @staticmethod
    def _growth_trend(weight_delta: float) -> GrowthTrend:
        if weight_delta > GROWTH_ABOVE_AVERAGE_LB:
            return GrowthTrend.ABOVE_AVERAGE
        if weight_delta < GROWTH_BELOW_AVERAGE_LB:
            return GrowthTrend.BELOW_AVERAGE
        return GrowthTrend.AVERAGE

    @staticmethod
    def _feed_effectiveness(photos: Sequence[PhotoObservation]) -> FeedEffectiveness:
        n = len(photos)
        return FeedEffectiveness(
            visual_impact=sum(p.feed_impact.feed_efficiency_visual for p in photos) / n,
            health_impact=sum(p.feed_impact.health_impact for p in photos) / n,
            growth_impact=sum(p.feed_impact.growth_progression for p in photos) / n,
            overall=sum(p.feed_impact.overall_score for p in photos) / n,
        )

    @staticmethod
    def _correlation(
        photos: Sequence[PhotoObservation], feeds: Sequence[FeedObservation]
    ) -> Tuple[Optional[float], int]:
        """Signed Pearson r over photo intervals and the interval count."""
        intervals = len(photos) - 1
        if intervals < MIN_CORRELATION_INTERVALS:
            return None, max(intervals, 0)

        bcs_deltas = np.diff([p.body_condition_score for p in photos])
        weight_deltas = np.diff([p.estimated_weight for p in photos])
        visual = _zscore(bcs_deltas) + _zscore(weight_deltas)

        fed = np.array(
            [
                sum(
                    f.amount
                    for f in feeds
                    if photos[k].captured_at < f.timestamp <= photos[k + 1].captured_at
                )
                for k in range(intervals)
            ]
        )

        if float(np.std(visual)) == 0.0 or float(np.std(fed)) == 0.0:
            return None, intervals

        r, _p_value = stats.pearsonr(fed, visual)
        r = float(r)
        if not np.isfinite(r):
            return None, intervals
        return max(-1.0, min(1.0, r)), intervals

    @staticmethod
    def _insights(
        photos: Sequence[PhotoObservation],
        trends: VisualTrends,
        strength: float,
        intervals: int,
    ) -> List[str]:
        first, last = photos[0], photos[-1]
        insights = [
            f"Body condition {trends.body_condition.value} across {len(photos)} photos "
            f"({first.body_condition_score:.1f} to {last.body_condition_score:.1f})",
            f"Estimated weight changed by {last.estimated_weight - first.estimated_weight:+.1f} lb",
        ]
        if intervals < MIN_CORRELATION_INTERVALS:
            insights.append(
                "Not enough photo intervals yet to correlate feeding with visual progress"
            )
        elif strength >= STRONG_CORRELATION:
            insights.append("Feeding and visual progress move together strongly")
        elif strength >= MODERATE_CORRELATION:
            insights.append("Feeding and visual progress are moderately related")
        else:
            insights.append("Visual progress shows little relation to feed amounts")
        return insights

    @staticmethod
    def _recommendations(
        last: PhotoObservation, trends: VisualTrends, effectiveness: FeedEffectiveness
    ) -> List[str]:
        recommendations: List[str] = []
        if trends.body_condition is TrendDirection.DECLINING:
            recommendations.append(
                "Body condition is falling; increase ration amount or energy density"
            )
        elif last.body_condition_score > HIGH_BODY_CONDITION:
            recommendations.append(
                "Body condition is high; consider moving to a maintenance ration"
            )
        if trends.health is TrendDirection.DECLINING:
            recommendations.append(
                "Visual health indicators are declining; schedule a health check"
            )
        if effectiveness.overall < LOW_EFFECTIVENESS:
            recommendations.append(
                "Current feed shows limited visual impact; review the feed choice"
            )
        if not recommendations:
            recommendations.append("Continue the current feeding program and photo monitoring")
        return recommendations
