"""Tests for GrowthTrajectoryService."""

import pytest

from domain.livestock.core.exceptions import InsufficientDataError, ValidationError
from domain.performance.ml import GrowthTrajectoryService


@pytest.fixture
def service() -> GrowthTrajectoryService:
    return GrowthTrajectoryService()


class TestForecast:
    def test_two_points_use_simple_trend(self, service, make_weights) -> None:
        trajectory = service.forecast(make_weights([(0, 60.0), (10, 65.0)]), days_ahead=10)

        assert trajectory.model_used == "SimpleTrend"
        assert trajectory.daily_gain == pytest.approx(0.5)
        assert trajectory.predictions[-1] == pytest.approx(70.0)
        assert len(trajectory.dates) == 10
        assert trajectory.trend_direction == "increasing"

    def test_few_points_use_linear_regression(self, service, make_weights) -> None:
        points = [(d, 60.0 + 0.4 * d) for d in (0, 7, 14, 21, 28)]

        trajectory = service.forecast(make_weights(points), days_ahead=30)

        assert trajectory.model_used == "LinearRegression"
        assert trajectory.daily_gain == pytest.approx(0.4)
        assert trajectory.predictions[-1] == pytest.approx(60.0 + 0.4 * 58)

    def test_long_history_uses_smoothing(self, service, make_weights) -> None:
        points = [(d, 60.0 + 0.5 * d + (0.3 if d % 2 else -0.3)) for d in range(0, 40, 2)]

        trajectory = service.forecast(make_weights(points), days_ahead=14)

        assert trajectory.model_used in ("ExponentialSmoothing", "LinearRegression")
        assert len(trajectory.predictions) == 14
        assert trajectory.trend_direction == "increasing"

    def test_bounds_bracket_predictions(self, service, make_weights) -> None:
        points = [(0, 60.0), (7, 63.5), (14, 66.0), (21, 70.5)]

        trajectory = service.forecast(make_weights(points), days_ahead=20)

        for low, mid, high in zip(
            trajectory.lower_bound, trajectory.predictions, trajectory.upper_bound
        ):
            assert 0.0 <= low <= mid <= high

    def test_needs_two_weights(self, service, make_weights) -> None:
        with pytest.raises(InsufficientDataError):
            service.forecast(make_weights([(0, 60.0)]))

    def test_rejects_bad_horizon(self, service, make_weights) -> None:
        with pytest.raises(ValidationError):
            service.forecast(make_weights([(0, 60.0), (7, 62.0)]), days_ahead=0)

    def test_flat_weights_are_stable(self, service, make_weights) -> None:
        trajectory = service.forecast(make_weights([(0, 60.0), (7, 60.0), (14, 60.0)]))

        assert trajectory.trend_direction == "stable"
