"""Data quality scoring for research record sets.

All four scores are percentages computed only from the records:

- completeness: share of required field slots holding a value
- accuracy: share of numeric values that are finite and plausible
- consistency: share of records matching the most common schema
- timeliness: share of records timestamped within the age limit
"""

import math
from collections import Counter
from datetime import datetime, timedelta
from typing import Any, Dict, FrozenSet, Mapping, Optional, Sequence, Tuple

from ..core.entities import DataQualityScores
from .timestamps import coerce_timestamp

TIMESTAMP_FIELD = "timestamp"

PLAUSIBLE_RANGES: Dict[str, Tuple[float, float]] = {
    "weight": (0.0, 5000.0),
    "estimated_weight": (0.0, 5000.0),
    "amount": (0.0, 2000.0),
    "cost": (0.0, 100000.0),
    "body_condition_score": (1.0, 9.0),
    "fcr": (0.0, 50.0),
    "average_daily_gain": (-20.0, 20.0),
    "confidence": (0.0, 100.0),
    "health_score": (0.0, 100.0),
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _has_value(value: Any) -> bool:
    return value is not None and value != ""


def _kind(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "text"
    return type(value).__name__


def _schema(record: Mapping[str, Any]) -> FrozenSet[Tuple[str, str]]:
    return frozenset((k, _kind(v)) for k, v in record.items() if _has_value(v))


def completeness(records: Sequence[Mapping[str, Any]], required: Sequence[str]) -> float:
    if not records or not required:
        return 0.0
    filled = sum(1 for r in records for f in required if _has_value(r.get(f)))
    return 100.0 * filled / (len(records) * len(required))


def accuracy(records: Sequence[Mapping[str, Any]]) -> float:
    if not records:
        return 0.0
    total = valid = 0
    for record in records:
        for key, value in record.items():
            if not _is_number(value):
                continue
            total += 1
            if not math.isfinite(value):
                continue
            low, high = PLAUSIBLE_RANGES.get(key, (-math.inf, math.inf))
            if low <= value <= high:
                valid += 1
    if total == 0:
        return 100.0
    return 100.0 * valid / total


def consistency(records: Sequence[Mapping[str, Any]]) -> float:
    if not records:
        return 0.0
    schemas = Counter(_schema(r) for r in records)
    _modal, count = schemas.most_common(1)[0]
    return 100.0 * count / len(records)


def reference_time(
    records: Sequence[Mapping[str, Any]], configured: Optional[datetime]
) -> Optional[datetime]:
    """Configured time, else the latest record timestamp."""
    if configured is not None:
        return coerce_timestamp(configured)
    stamps = [coerce_timestamp(r.get(TIMESTAMP_FIELD)) for r in records]
    known = [s for s in stamps if s is not None]
    return max(known) if known else None


def timeliness(
    records: Sequence[Mapping[str, Any]], reference: Optional[datetime], max_age_days: int
) -> float:
    if not records or reference is None:
        return 0.0
    limit = timedelta(days=max_age_days)
    timely = 0
    for record in records:
        stamp = coerce_timestamp(record.get(TIMESTAMP_FIELD))
        if stamp is not None and timedelta(0) <= reference - stamp <= limit:
            timely += 1
    return 100.0 * timely / len(records)


def assess_quality(
    records: Sequence[Mapping[str, Any]],
    required_fields: Sequence[str],
    reference: Optional[datetime],
    max_age_days: int,
) -> DataQualityScores:
    """Score a record set; an empty set scores zero everywhere.

    Args:
        records: Raw records
        required_fields: Fields for completeness; every observed field
            when empty
        reference: Time ages are measured from
        max_age_days: Age limit for timeliness
    """
    if not required_fields:
        required_fields = sorted({k for r in records for k in r})
    return DataQualityScores(
        completeness=completeness(records, required_fields),
        accuracy=accuracy(records),
        consistency=consistency(records),
        timeliness=timeliness(records, reference, max_age_days),
    )
