"""Typed trigger payloads.

One payload class per trigger kind. Known fields are typed; anything
else a producer sends lands in `extras` and is still visible to rule
conditions.
"""

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional, Type

from domain.livestock.core.exceptions import ValidationError

from ..value_objects import TriggerType


def _check_number(payload: str, name: str, value: Any, optional: bool = False) -> None:
    if value is None and optional:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{payload}.{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"{payload}.{name} must be finite, got {value!r}")


def _check_text(payload: str, name: str, value: Any, optional: bool = False) -> None:
    if value is None and optional:
        return
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{payload}.{name} must be a non-empty string")


class TriggerPayload:
    """Base for payload variants.

    Subclasses are frozen dataclasses declaring `kind` and an `extras`
    mapping as their last field.
    """

    kind: ClassVar[TriggerType]
    extras: Mapping[str, Any]

    def as_fields(self) -> Dict[str, Any]:
        """Flatten the payload for condition lookup; typed fields win."""
        values: Dict[str, Any] = dict(self.extras)
        for f in dataclasses.fields(self):  # type: ignore[arg-type]
            if f.name != "extras":
                values[f.name] = getattr(self, f.name)
        return values


@dataclass(frozen=True)
class FeedEntryPayload(TriggerPayload):
    kind: ClassVar[TriggerType] = TriggerType.FEED_ENTRY

    feed_product_id: str
    amount: float
    cost: float = 0.0
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_text("feed_entry", "feed_product_id", self.feed_product_id)
        _check_number("feed_entry", "amount", self.amount)
        _check_number("feed_entry", "cost", self.cost)


@dataclass(frozen=True)
class WeightChangePayload(TriggerPayload):
    """Weight update; `change` is derived when a previous weight is known."""

    kind: ClassVar[TriggerType] = TriggerType.WEIGHT_CHANGE

    current_weight: float
    previous_weight: Optional[float] = None
    change: Optional[float] = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_number("weight_change", "current_weight", self.current_weight)
        _check_number("weight_change", "previous_weight", self.previous_weight, optional=True)
        _check_number("weight_change", "change", self.change, optional=True)
        if self.change is None and self.previous_weight is not None:
            object.__setattr__(self, "change", self.current_weight - self.previous_weight)


@dataclass(frozen=True)
class PhotoAnalysisPayload(TriggerPayload):
    kind: ClassVar[TriggerType] = TriggerType.PHOTO_ANALYSIS

    body_condition_score: float
    estimated_weight: Optional[float] = None
    health_score: Optional[float] = None
    photo_id: Optional[str] = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_number("photo_analysis", "body_condition_score", self.body_condition_score)
        _check_number("photo_analysis", "estimated_weight", self.estimated_weight, optional=True)
        _check_number("photo_analysis", "health_score", self.health_score, optional=True)


@dataclass(frozen=True)
class FCRCalculationPayload(TriggerPayload):
    kind: ClassVar[TriggerType] = TriggerType.FCR_CALCULATION

    fcr: float
    average_daily_gain: Optional[float] = None
    cost_per_pound_gain: Optional[float] = None
    performance_ranking: Optional[str] = None
    feed_product_id: Optional[str] = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_number("fcr_calculation", "fcr", self.fcr)
        _check_number(
            "fcr_calculation", "average_daily_gain", self.average_daily_gain, optional=True
        )
        _check_number(
            "fcr_calculation", "cost_per_pound_gain", self.cost_per_pound_gain, optional=True
        )


@dataclass(frozen=True)
class EducationalMilestonePayload(TriggerPayload):
    kind: ClassVar[TriggerType] = TriggerType.EDUCATIONAL_MILESTONE

    milestone: str
    competency: Optional[str] = None
    level: Optional[str] = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_text("educational_milestone", "milestone", self.milestone)


@dataclass(frozen=True)
class PerformanceAlertPayload(TriggerPayload):
    kind: ClassVar[TriggerType] = TriggerType.PERFORMANCE_ALERT

    metric: str
    value: Optional[float] = None
    threshold: Optional[float] = None
    message: str = ""
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_text("performance_alert", "metric", self.metric)
        _check_number("performance_alert", "value", self.value, optional=True)
        _check_number("performance_alert", "threshold", self.threshold, optional=True)


PAYLOAD_TYPES: Dict[TriggerType, Type[TriggerPayload]] = {
    TriggerType.FEED_ENTRY: FeedEntryPayload,
    TriggerType.WEIGHT_CHANGE: WeightChangePayload,
    TriggerType.PHOTO_ANALYSIS: PhotoAnalysisPayload,
    TriggerType.FCR_CALCULATION: FCRCalculationPayload,
    TriggerType.EDUCATIONAL_MILESTONE: EducationalMilestonePayload,
    TriggerType.PERFORMANCE_ALERT: PerformanceAlertPayload,
}


def payload_from_mapping(kind: TriggerType, data: Mapping[str, Any]) -> TriggerPayload:
    """Build the typed payload for `kind` from an untyped mapping.

    Unknown keys go to `extras`.

    Raises:
        ValidationError: Required fields missing or of the wrong type

    Example:
        >>> payload_from_mapping(TriggerType.FCR_CALCULATION, {"fcr": 8.5})
        FCRCalculationPayload(fcr=8.5, ...)
    """
    payload_cls = PAYLOAD_TYPES[kind]
    known = {f.name for f in dataclasses.fields(payload_cls)} - {"extras"}  # type: ignore[arg-type]
    typed = {k: v for k, v in data.items() if k in known}
    extras = {k: v for k, v in data.items() if k not in known}
    try:
        return payload_cls(**typed, extras=extras)  # type: ignore[call-arg]
    except TypeError as e:
        raise ValidationError(f"Malformed {kind.value} payload: {e}") from e
