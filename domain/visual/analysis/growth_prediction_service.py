"""Growth projection from a photo series."""

import math
from typing import Sequence, Tuple

import structlog

from domain.livestock.core.entities import PhotoObservation
from domain.livestock.core.exceptions import InsufficientDataError

from ..core.entities import GrowthEstimate, GrowthPrediction, ProjectionPoint

logger = structlog.get_logger(__name__)


class GrowthPredictionService:
    """Extrapolates weight and body condition linearly from photos.

    Daily rates come from the first and last photo over ceil(days between
    them). Confidence drops by a fixed step for each horizon.
    """

    HORIZON_CONFIDENCE: Tuple[Tuple[int, float], ...] = ((30, 85.0), (60, 75.0), (90, 65.0))
    THIN_CONDITION = 5.0
    HEAVY_CONDITION = 6.5
    FACTORS = (
        "body_condition_trend",
        "estimated_weight_trend",
        "frame_size",
        "growth_stage",
    )

    def predict_growth_from_photos(
        self, photo_series: Sequence[PhotoObservation]
    ) -> GrowthPrediction:
        """Project growth 30, 60 and 90 days past the latest photo.

        Args:
            photo_series: At least 2 photo observations, any order

        Returns:
            GrowthPrediction

        Raises:
            InsufficientDataError: Fewer than 2 photos or zero time span
        """
        if len(photo_series) < 2:
            raise InsufficientDataError(
                "predict_growth_from_photos",
                f"need at least 2 photos, got {len(photo_series)}",
            )

        photos = sorted(photo_series, key=lambda p: p.captured_at)
        first, last = photos[0], photos[-1]
        span_seconds = (last.captured_at - first.captured_at).total_seconds()
        if span_seconds <= 0:
            raise InsufficientDataError(
                "predict_growth_from_photos", "photos must span a positive time delta"
            )

        days_between = math.ceil(span_seconds / 86400.0)
        growth_rate = (last.estimated_weight - first.estimated_weight) / days_between
        condition_rate = (
            last.body_condition_score - first.body_condition_score
        ) / days_between

        projections = tuple(
            ProjectionPoint(
                days_ahead=days,
                weight=last.estimated_weight + growth_rate * days,
                body_condition=last.body_condition_score + condition_rate * days,
                confidence=confidence,
            )
            for days, confidence in self.HORIZON_CONFIDENCE
        )

        prediction = GrowthPrediction(
            animal_id=last.animal_id,
            current_estimate=GrowthEstimate(
                weight=last.estimated_weight,
                body_condition=last.body_condition_score,
                frame_size=last.growth_assessment.frame_size,
            ),
            projections=projections,
            growth_rate_per_day=growth_rate,
            condition_rate_per_day=condition_rate,
            factors_considered=self.FACTORS,
            recommended_feeds=self._recommended_feeds(last.body_condition_score),
        )
        logger.info(
            "Growth predicted from photos",
            animal_id=last.animal_id,
            photos=len(photos),
            growth_rate_per_day=round(growth_rate, 3),
        )
        return prediction

    def _recommended_feeds(self, body_condition: float) -> Tuple[str, ...]:
        if body_condition < self.THIN_CONDITION:
            return ("high_energy_grower", "protein_supplement")
        if body_condition > self.HEAVY_CONDITION:
            return ("maintenance_feed", "hay_based_diet")
        return ("balanced_grower",)
