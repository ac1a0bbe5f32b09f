"""BodyConditionScore entity - scored body condition for one photo."""

from dataclasses import dataclass, field
from typing import Tuple

from domain.livestock.core.value_objects import clamp_body_condition, clamp_percent


@dataclass(frozen=True)
class CoverageIndicators:
    """Fat and muscle coverage by region, each on the 1-9 scale."""

    rib_coverage: float
    spinal_prominence: float
    shoulder_coverage: float
    rump_coverage: float
    overall: float

    def __post_init__(self) -> None:
        for name in (
            "rib_coverage",
            "spinal_prominence",
            "shoulder_coverage",
            "rump_coverage",
            "overall",
        ):
            object.__setattr__(self, name, clamp_body_condition(getattr(self, name)))

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (
            self.rib_coverage,
            self.spinal_prominence,
            self.shoulder_coverage,
            self.rump_coverage,
        )


@dataclass(frozen=True)
class BodyConditionScore:
    """Body condition on the 1-9 scale with confidence 0-100."""

    animal_id: str
    photo_id: str
    score: float
    confidence: float
    indicators: CoverageIndicators
    recommendations: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "score", clamp_body_condition(self.score))
        object.__setattr__(self, "confidence", clamp_percent(self.confidence))
