"""Efficiency scoring over FCR results."""

from typing import Sequence

from domain.livestock.core.value_objects import TrendDirection, clamp_percent

from ..core.entities import FCRResult

# Relative FCR change (%) between consecutive results treated as noise
TREND_THRESHOLD_PCT = 5.0


def efficiency_score(fcr: float, cost_per_pound_gain: float) -> int:
    """Combine conversion and cost into a single 0-100 score.

    An FCR of 2 and a cost of $1 per lb gained both score 100; every
    additional FCR point costs 10 and every additional dollar costs 20.

    Example:
        >>> efficiency_score(6.0, 1.5)
        75
    """
    fcr_score = max(0.0, 100.0 - (fcr - 2.0) * 10.0)
    cost_score = max(0.0, 100.0 - (cost_per_pound_gain - 1.0) * 20.0)
    return round(clamp_percent((fcr_score + cost_score) / 2.0))


def efficiency_trend(results: Sequence[FCRResult]) -> TrendDirection:
    """Classify the change between the two most recent defined FCRs.

    A falling FCR is an improvement.
    """
    defined = [r.fcr for r in results if r.fcr is not None]
    if len(defined) < 2:
        return TrendDirection.STABLE

    previous, current = defined[-2], defined[-1]
    change_pct = (previous - current) / previous * 100.0
    return TrendDirection.from_delta(change_pct, TREND_THRESHOLD_PCT)
