"""Body condition scoring for photo observations."""

import dataclasses
from typing import Optional, Tuple

import structlog

from domain.livestock.core.entities import PhotoObservation

from ..core.entities import BodyConditionScore, CoverageIndicators
from ..core.ports import IBodyConditionInference

logger = structlog.get_logger(__name__)

THIN_THRESHOLD = 4.0
FAT_THRESHOLD = 7.0


class BodyConditionService:
    """Scores body condition on the 1-9 scale.

    A vision inference adapter can be plugged in. Without one, regional
    coverage is derived from the stored photo analysis: the photo's BCS
    shifted by its fat and muscle assessments.
    """

    def __init__(self, inference: Optional[IBodyConditionInference] = None) -> None:
        self._inference = inference

    def analyze_body_condition(self, photo: PhotoObservation) -> BodyConditionScore:
        if self._inference is not None:
            scored = self._inference.infer(photo)
        else:
            scored = self._derive(photo)

        scored = dataclasses.replace(
            scored, recommendations=self.recommendations_for(scored.score)
        )
        logger.debug(
            "Body condition analysed",
            animal_id=photo.animal_id,
            photo_id=photo.photo_id,
            score=round(scored.score, 2),
            confidence=round(scored.confidence, 1),
        )
        return scored

    @staticmethod
    def _derive(photo: PhotoObservation) -> BodyConditionScore:
        base = photo.body_condition_score
        # fat and muscle scores are 1-10; map 5.5 to 0 and the ends to +/-1
        fat = (photo.growth_assessment.fat_score - 5.5) / 4.5
        muscle = (photo.growth_assessment.muscle_score - 5.5) / 4.5

        rib = base + 0.5 * fat
        spinal = base + 0.5 * muscle
        shoulder = base + 0.25 * (fat + muscle)
        rump = base + 0.5 * fat - 0.25 * muscle
        indicators = CoverageIndicators(
            rib_coverage=rib,
            spinal_prominence=spinal,
            shoulder_coverage=shoulder,
            rump_coverage=rump,
            overall=(rib + spinal + shoulder + rump) / 4.0,
        )

        # disagreement between regions lowers confidence
        regions = indicators.as_tuple()
        spread = max(regions) - min(regions)
        confidence = photo.confidence * (1.0 - spread / 16.0)

        return BodyConditionScore(
            animal_id=photo.animal_id,
            photo_id=photo.photo_id,
            score=base,
            confidence=confidence,
            indicators=indicators,
        )

    @staticmethod
    def recommendations_for(score: float) -> Tuple[str, ...]:
        if score < THIN_THRESHOLD:
            return (
                "Increase feed quantity gradually",
                "Consider a higher energy feed",
                "Check for parasites or health issues",
            )
        if score > FAT_THRESHOLD:
            return (
                "Reduce feed quantity",
                "Increase exercise opportunities",
                "Consider switching to a maintenance feed",
            )
        return (
            "Maintain current feeding program",
            "Continue regular body condition monitoring",
        )
