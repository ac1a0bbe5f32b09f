"""Score ranges and clamping helpers.

Every score carried by a domain record lives in a closed range. Values
outside the range are clamped at construction, never rejected.
"""

from typing import Tuple

BODY_CONDITION_RANGE: Tuple[float, float] = (1.0, 9.0)
INDICATOR_RANGE: Tuple[float, float] = (1.0, 10.0)
PERCENT_RANGE: Tuple[float, float] = (0.0, 100.0)
PALATABILITY_RANGE: Tuple[float, float] = (1.0, 10.0)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high].

    Example:
        >>> clamp(12.0, 1.0, 9.0)
        9.0
    """
    return max(low, min(high, float(value)))


def clamp_body_condition(value: float) -> float:
    return clamp(value, *BODY_CONDITION_RANGE)


def clamp_indicator(value: float) -> float:
    return clamp(value, *INDICATOR_RANGE)


def clamp_percent(value: float) -> float:
    return clamp(value, *PERCENT_RANGE)
