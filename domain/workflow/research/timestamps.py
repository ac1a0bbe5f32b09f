"""Timestamp coercion for loosely typed research records."""

from datetime import datetime, timezone
from typing import Any, Optional


def coerce_timestamp(value: Any) -> Optional[datetime]:
    """Return an aware UTC datetime, or None if value is not a timestamp.

    Naive datetimes are taken to be UTC. ISO 8601 strings are parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
