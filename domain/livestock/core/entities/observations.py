"""Weight and feed observations captured for an animal."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from ..exceptions import ValidationError
from ..value_objects import (
    FeedingMethod,
    MeasurementMethod,
    clamp_body_condition,
    clamp_percent,
)


def _new_id() -> str:
    return str(uuid4())


def check_aware_timestamp(name: str, value: object) -> None:
    """Observation times must be timezone-aware so histories sort safely."""
    if not isinstance(value, datetime):
        raise ValidationError(f"{name} must be a datetime")
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValidationError(f"{name} must be timezone-aware, got {value.isoformat()}")


@dataclass(frozen=True)
class WeightObservation:
    """Single body weight measurement.

    Attributes:
        animal_id: Animal the measurement belongs to
        weight: Body weight in lb (positive)
        timestamp: When the measurement was taken
        method: How the weight was obtained
        body_condition_score: Optional BCS, clamped to 1-9
        confidence: Optional confidence, clamped to 0-100
        observation_id: Unique identifier
    """

    animal_id: str
    weight: float
    timestamp: datetime
    method: MeasurementMethod = MeasurementMethod.SCALE
    body_condition_score: Optional[float] = None
    confidence: Optional[float] = None
    observation_id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        """Validate weight and clamp optional scores.

        Raises:
            ValidationError: If weight is not a positive finite number or
                the timestamp is naive
        """
        if not math.isfinite(self.weight) or self.weight <= 0:
            raise ValidationError(f"Weight must be positive, got {self.weight}")
        check_aware_timestamp("timestamp", self.timestamp)

        if self.body_condition_score is not None:
            object.__setattr__(
                self,
                "body_condition_score",
                clamp_body_condition(self.body_condition_score),
            )
        if self.confidence is not None:
            object.__setattr__(self, "confidence", clamp_percent(self.confidence))

    @property
    def effective_confidence(self) -> float:
        """Stated confidence, or the method default when none was given."""
        if self.confidence is not None:
            return self.confidence
        return self.method.default_confidence()


@dataclass(frozen=True)
class FeedObservation:
    """Feed consumed by an animal in one feeding.

    Attributes:
        animal_id: Animal that consumed the feed
        feed_product_id: Catalog product identifier
        amount: Mass consumed in lb (positive)
        cost: Cost of the ration (non-negative)
        timestamp: When the ration was fed
        feeding_method: How the ration was offered
        notes: Optional free text
        observation_id: Unique identifier
    """

    animal_id: str
    feed_product_id: str
    amount: float
    cost: float
    timestamp: datetime
    feeding_method: FeedingMethod = FeedingMethod.MEASURED
    notes: Optional[str] = None
    observation_id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        if not self.feed_product_id:
            raise ValidationError("feed_product_id cannot be empty")
        if not math.isfinite(self.amount) or self.amount <= 0:
            raise ValidationError(f"Feed amount must be positive, got {self.amount}")
        if not math.isfinite(self.cost) or self.cost < 0:
            raise ValidationError(f"Feed cost must be non-negative, got {self.cost}")
        check_aware_timestamp("timestamp", self.timestamp)

    @property
    def unit_cost(self) -> float:
        """Cost per lb of this ration."""
        return self.cost / self.amount
