"""Trend and ranking value objects."""

from enum import Enum


class PerformanceRanking(str, Enum):
    """Feed conversion performance relative to a benchmark.

    Derived from ratio = actual FCR / benchmark FCR. Lower FCR is better,
    so a ratio under 1.0 beats the benchmark.
    """

    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    BELOW_AVERAGE = "below_average"
    POOR = "poor"

    @classmethod
    def from_ratio(cls, ratio: float) -> "PerformanceRanking":
        """Rank an FCR-to-benchmark ratio.

        Example:
            >>> PerformanceRanking.from_ratio(0.95)
            <PerformanceRanking.GOOD: 'good'>
        """
        if ratio <= 0.9:
            return cls.EXCELLENT
        if ratio <= 1.0:
            return cls.GOOD
        if ratio <= 1.1:
            return cls.AVERAGE
        if ratio <= 1.2:
            return cls.BELOW_AVERAGE
        return cls.POOR

    @property
    def needs_attention(self) -> bool:
        return self in (PerformanceRanking.BELOW_AVERAGE, PerformanceRanking.POOR)


class TrendDirection(str, Enum):
    """Direction of a score over an observation window."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"

    @classmethod
    def from_delta(cls, delta: float, threshold: float) -> "TrendDirection":
        """Classify a change; |delta| <= threshold is stable."""
        if delta > threshold:
            return cls.IMPROVING
        if delta < -threshold:
            return cls.DECLINING
        return cls.STABLE


class GrowthTrend(str, Enum):
    """Weight progression relative to expectation."""

    ABOVE_AVERAGE = "above_average"
    AVERAGE = "average"
    BELOW_AVERAGE = "below_average"
