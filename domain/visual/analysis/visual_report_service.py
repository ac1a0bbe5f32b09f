"""Visual feeding report over an animal's photo history."""

from typing import List, Sequence, Tuple

import numpy as np
import structlog

from domain.livestock.core.entities import AnimalRef, FeedObservation, PhotoObservation
from domain.livestock.core.exceptions import NotFoundError
from domain.livestock.core.ports import IObservationHistory
from domain.livestock.core.value_objects import clamp_percent

from ..core.entities import (
    CorrelationAnalysis,
    FeedProgression,
    PhotoProgression,
    ReportPeriod,
    VisualFeedReport,
)
from .correlation_service import MIN_CORRELATION_INTERVALS, VisualCorrelationService

logger = structlog.get_logger(__name__)

NEXT_STEPS = (
    "Take weekly photos from consistent angles and lighting",
    "Record every feeding with amount and cost",
    "Review this report again in 30 days",
)


class VisualReportService:
    """Builds a VisualFeedReport from recorded photos and feedings."""

    def __init__(
        self,
        observations: IObservationHistory,
        correlation_service: VisualCorrelationService,
    ) -> None:
        self._observations = observations
        self._correlation = correlation_service

    def generate_visual_feed_report(self, animal: AnimalRef) -> VisualFeedReport:
        """Generate the report for the animal's photo history window.

        Raises:
            NotFoundError: No photos recorded for the animal
        """
        photos = self._observations.photos_for(animal.animal_id)
        if not photos:
            raise NotFoundError("Photo history", animal.animal_id)

        photos = sorted(photos, key=lambda p: p.captured_at)
        start, end = photos[0].captured_at, photos[-1].captured_at
        feeds = [
            f
            for f in self._observations.feeds_for(animal.animal_id)
            if start <= f.timestamp <= end
        ]
        feeds.sort(key=lambda f: f.timestamp)

        correlation = self._correlation.correlate_feed_to_visual_progress(photos, feeds)

        first, last = photos[0], photos[-1]
        latest_health = last.mean_health_score()
        report = VisualFeedReport(
            animal_id=animal.animal_id,
            animal_name=animal.display_name(),
            period=ReportPeriod(start=start, end=end),
            photo_progression=PhotoProgression(
                photo_count=len(photos),
                average_body_condition=sum(p.body_condition_score for p in photos)
                / len(photos),
                body_condition_trend=correlation.trends.body_condition,
                health_trend=correlation.trends.health,
            ),
            feed_progression=self._feed_progression(
                feeds, correlation.feed_effectiveness.overall
            ),
            correlation_analysis=CorrelationAnalysis(
                overall_correlation=correlation.correlation_strength,
                body_condition_improvement=(
                    (last.body_condition_score - first.body_condition_score)
                    / first.body_condition_score
                    * 100.0
                ),
                feed_effectiveness_score=correlation.feed_effectiveness.overall,
                health_trend_score=(
                    clamp_percent(latest_health * 10.0) if latest_health is not None else 0.0
                ),
                growth_consistency=self._growth_consistency(photos),
            ),
            insights=correlation.insights,
            recommendations=correlation.recommendations,
            next_steps=self._next_steps(photos),
        )
        logger.info(
            "Visual feed report generated",
            animal_id=animal.animal_id,
            photos=len(photos),
            feeds=len(feeds),
        )
        return report

    @staticmethod
    def _feed_progression(
        feeds: Sequence[FeedObservation], effectiveness: float
    ) -> FeedProgression:
        products: List[str] = []
        changes = 0
        for previous, current in zip(feeds, feeds[1:]):
            if previous.feed_product_id != current.feed_product_id:
                changes += 1
        for f in feeds:
            if f.feed_product_id not in products:
                products.append(f.feed_product_id)

        return FeedProgression(
            feed_entries=len(feeds),
            product_changes=changes,
            distinct_products=tuple(products),
            average_feed_cost=sum(f.cost for f in feeds) / max(len(feeds), 1),
            feed_effectiveness=effectiveness,
        )

    @staticmethod
    def _growth_consistency(photos: Sequence[PhotoObservation]) -> float:
        """100 minus the coefficient of variation of daily gain, in percent."""
        rates = []
        for previous, current in zip(photos, photos[1:]):
            days = (current.captured_at - previous.captured_at).total_seconds() / 86400.0
            if days > 0:
                rates.append((current.estimated_weight - previous.estimated_weight) / days)
        if len(rates) < 2:
            return 100.0

        values = np.array(rates)
        mean = float(np.mean(values))
        std = float(np.std(values))
        if mean == 0.0:
            return 100.0 if std == 0.0 else 0.0
        return clamp_percent(100.0 * (1.0 - std / abs(mean)))

    @staticmethod
    def _next_steps(photos: Sequence[PhotoObservation]) -> Tuple[str, ...]:
        if len(photos) - 1 < MIN_CORRELATION_INTERVALS:
            return NEXT_STEPS + (
                "Add more photos to strengthen the feed correlation analysis",
            )
        return NEXT_STEPS
