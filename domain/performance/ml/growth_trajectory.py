"""Growth trajectory forecasting from weight history.

Projects an animal's weight forward from its recorded weights. The
model depends on how much history is available:

- 14+ points: Holt exponential smoothing (additive trend)
- 3-13 points: Linear regression over elapsed days
- 2 points: Straight line through first and last weight

Each model falls back to the next simpler one if fitting fails.
Prediction intervals widen with the horizon.

Usage:
    service = GrowthTrajectoryService()
    trajectory = service.forecast(weights, days_ahead=30)
    trajectory.predictions[-1]  # projected weight in 30 days
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Sequence, Tuple

import numpy as np
import structlog
from scipy import stats

from domain.livestock.core.entities import WeightObservation
from domain.livestock.core.exceptions import InsufficientDataError, ValidationError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GrowthTrajectory:
    """Projected weights with prediction bounds.

    Attributes:
        dates: Projected dates, one per day ahead
        predictions: Projected weights (lb)
        lower_bound: Lower bound (lb, never negative)
        upper_bound: Upper bound (lb)
        model_used: Model that produced the projection
        confidence_level: Interval confidence (0-1)
        trend_direction: "increasing", "decreasing" or "stable"
        trend_magnitude: lb change from first to last projection
        daily_gain: Fitted lb/day
    """

    dates: List[datetime]
    predictions: List[float]
    lower_bound: List[float]
    upper_bound: List[float]
    model_used: str
    confidence_level: float
    trend_direction: str = "stable"
    trend_magnitude: float = 0.0
    daily_gain: float = 0.0

    def __post_init__(self) -> None:
        n = len(self.dates)
        if not (
            len(self.predictions) == n
            and len(self.lower_bound) == n
            and len(self.upper_bound) == n
        ):
            raise ValueError("All trajectory arrays must have the same length")


class GrowthTrajectoryService:
    """Chooses a growth model by history length and projects weight."""

    MIN_POINTS_SMOOTHING = 14
    MIN_POINTS_LINEAR = 3

    DEFAULT_CONFIDENCE_LEVEL = 0.95
    DEFAULT_FORECAST_DAYS = 30

    # lb change over the horizon treated as flat
    STABLE_THRESHOLD = 1.0

    @classmethod
    def _calculate_trend(cls, predictions: Sequence[float]) -> Tuple[str, float]:
        if len(predictions) < 2:
            return ("stable", 0.0)

        magnitude = float(predictions[-1] - predictions[0])
        if abs(magnitude) < cls.STABLE_THRESHOLD:
            return ("stable", magnitude)
        if magnitude < 0:
            return ("decreasing", magnitude)
        return ("increasing", magnitude)

    def forecast(
        self,
        weights: Sequence[WeightObservation],
        days_ahead: int = DEFAULT_FORECAST_DAYS,
        confidence_level: float = DEFAULT_CONFIDENCE_LEVEL,
    ) -> GrowthTrajectory:
        """Project weight `days_ahead` days past the latest observation.

        Args:
            weights: Weight observations for one animal, any order
            days_ahead: Horizon in days
            confidence_level: Interval confidence (0-1)

        Returns:
            GrowthTrajectory

        Raises:
            InsufficientDataError: Fewer than 2 observations or zero span
            ValidationError: Invalid horizon or confidence level
        """
        if len(weights) < 2:
            raise InsufficientDataError(
                "growth_trajectory", f"need at least 2 weights, got {len(weights)}"
            )
        if days_ahead < 1:
            raise ValidationError("days_ahead must be positive")
        if not 0 < confidence_level < 1:
            raise ValidationError("confidence_level must be between 0 and 1")

        ordered = sorted(weights, key=lambda w: w.timestamp)
        origin = ordered[0].timestamp
        days = np.array(
            [(w.timestamp - origin).total_seconds() / 86400.0 for w in ordered]
        )
        y = np.array([w.weight for w in ordered])
        if days[-1] <= 0:
            raise InsufficientDataError(
                "growth_trajectory", "weights must span a positive time delta"
            )

        n_points = len(ordered)
        if n_points >= self.MIN_POINTS_SMOOTHING:
            return self._forecast_smoothing(ordered, days, y, days_ahead, confidence_level)
        if n_points >= self.MIN_POINTS_LINEAR:
            return self._forecast_linear(ordered, days, y, days_ahead, confidence_level)
        return self._forecast_simple(ordered, days, y, days_ahead, confidence_level)

    def _forecast_smoothing(
        self,
        ordered: Sequence[WeightObservation],
        days: np.ndarray,
        y: np.ndarray,
        days_ahead: int,
        confidence_level: float,
    ) -> GrowthTrajectory:
        """Holt smoothing, treating each observation as one step.

        Steps are converted back to days using the mean sampling interval.
        """
        from statsmodels.tsa.holtwinters import ExponentialSmoothing

        step_days = float(days[-1] / (len(days) - 1))
        steps = max(1, int(np.ceil(days_ahead / step_days)))

        try:
            fitted = ExponentialSmoothing(y, trend="add", seasonal=None).fit()
            step_forecast = np.asarray(fitted.forecast(steps))
            residual_std = float(np.std(y - np.asarray(fitted.fittedvalues)))
        except Exception as e:
            logger.warning("Smoothing fit failed, falling back", error=str(e))
            return self._forecast_linear(ordered, days, y, days_ahead, confidence_level)

        # Interpolate per-step forecast onto a daily grid
        step_grid = days[-1] + step_days * np.arange(1, steps + 1)
        future_days = days[-1] + np.arange(1, days_ahead + 1)
        predictions = np.interp(
            future_days,
            np.concatenate(([days[-1]], step_grid)),
            np.concatenate(([y[-1]], step_forecast)),
        )
        margin = self._z(confidence_level) * residual_std * np.sqrt(
            np.arange(1, days_ahead + 1) / step_days
        )
        daily_gain = float((predictions[-1] - predictions[0]) / max(days_ahead - 1, 1))
        return self._build(
            ordered, predictions, margin, "ExponentialSmoothing", confidence_level, daily_gain
        )

    def _forecast_linear(
        self,
        ordered: Sequence[WeightObservation],
        days: np.ndarray,
        y: np.ndarray,
        days_ahead: int,
        confidence_level: float,
    ) -> GrowthTrajectory:
        """Least-squares line over elapsed days."""
        slope, intercept, _r, _p, _stderr = stats.linregress(days, y)
        future_days = days[-1] + np.arange(1, days_ahead + 1)
        predictions = slope * future_days + intercept

        residual_std = float(np.std(y - (slope * days + intercept)))
        margin = self._z(confidence_level) * residual_std * (
            1 + 0.1 * np.arange(days_ahead)
        )
        return self._build(
            ordered, predictions, margin, "LinearRegression", confidence_level, float(slope)
        )

    def _forecast_simple(
        self,
        ordered: Sequence[WeightObservation],
        days: np.ndarray,
        y: np.ndarray,
        days_ahead: int,
        confidence_level: float,
    ) -> GrowthTrajectory:
        """Line through first and last point with wide bounds."""
        slope = float((y[-1] - y[0]) / days[-1])
        horizon = np.arange(1, days_ahead + 1)
        predictions = y[-1] + slope * horizon

        # 5% of current weight, growing with the horizon
        base_margin = 0.05 * float(y[-1])
        margin = base_margin * np.sqrt(horizon / 7.0)
        return self._build(
            ordered, predictions, margin, "SimpleTrend", confidence_level, slope
        )

    @staticmethod
    def _z(confidence_level: float) -> float:
        return float(stats.norm.ppf((1 + confidence_level) / 2))

    def _build(
        self,
        ordered: Sequence[WeightObservation],
        predictions: np.ndarray,
        margin: np.ndarray,
        model_used: str,
        confidence_level: float,
        daily_gain: float,
    ) -> GrowthTrajectory:
        last = ordered[-1].timestamp
        dates = [last + timedelta(days=i + 1) for i in range(len(predictions))]
        lower = np.maximum(predictions - margin, 0.0)
        upper = predictions + margin
        direction, magnitude = self._calculate_trend(predictions.tolist())

        logger.debug(
            "Growth trajectory computed",
            animal_id=ordered[-1].animal_id,
            model=model_used,
            points=len(ordered),
        )
        return GrowthTrajectory(
            dates=dates,
            predictions=[float(p) for p in predictions],
            lower_bound=[float(v) for v in lower],
            upper_bound=[float(v) for v in upper],
            model_used=model_used,
            confidence_level=confidence_level,
            trend_direction=direction,
            trend_magnitude=magnitude,
            daily_gain=daily_gain,
        )
