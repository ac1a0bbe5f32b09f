"""Tests for the named workflow analyzers."""

import pytest

from application.intelligence.analyzers import build_analyzers
from domain.livestock.core.exceptions import ValidationError
from domain.performance.calculation import FeedAnalysisService
from domain.performance.ml import GrowthTrajectoryService
from domain.visual.analysis import VisualCorrelationService
from domain.workflow.core.entities import WorkflowTrigger


@pytest.fixture
def analyzers(catalog, observations, fcr_history) -> dict:
    return build_analyzers(
        observations,
        FeedAnalysisService(catalog, observations, fcr_history),
        GrowthTrajectoryService(),
        VisualCorrelationService(),
    )


def test_registered_names(analyzers) -> None:
    assert set(analyzers) == {"feed_performance", "growth_trajectory", "visual_correlation"}


class TestFeedPerformanceAnalyzer:
    def test_without_fcr_history(self, analyzers, observations, make_feed) -> None:
        observations.add_feeds([make_feed(0, 50.0, 20.0), make_feed(1, 50.0, 20.0)])
        trigger = WorkflowTrigger.create(
            "feed_entry",
            "user_1",
            {"feed_product_id": "feed_001", "amount": 50.0, "cost": 20.0},
            animal_id="goat_1",
        )

        result = analyzers["feed_performance"](trigger)

        assert result["feed_product_id"] == "feed_001"
        assert result["fcr"] is None
        assert result["improvement_opportunity"] == 0.0
        assert 0 <= result["performance_score"] <= 100
        assert "Continue monitoring for optimal results" in result["recommendations"]

    def test_needs_animal(self, analyzers) -> None:
        trigger = WorkflowTrigger.create(
            "feed_entry", "user_1", {"feed_product_id": "feed_001", "amount": 5.0}
        )

        with pytest.raises(ValidationError):
            analyzers["feed_performance"](trigger)


class TestGrowthTrajectoryAnalyzer:
    def test_thirty_day_projection(self, analyzers, observations, make_weights) -> None:
        observations.add_weights(make_weights([(0, 60.0), (10, 65.0)]))
        trigger = WorkflowTrigger.create(
            "weight_change",
            "user_1",
            {"current_weight": 65.0, "previous_weight": 60.0},
            animal_id="goat_1",
        )

        result = analyzers["growth_trajectory"](trigger)

        assert result["model_used"] == "SimpleTrend"
        assert result["daily_gain"] == pytest.approx(0.5)
        assert result["projected_weight"] == pytest.approx(80.0)
        assert result["horizon_days"] == 30
        assert result["trend_direction"] == "increasing"


class TestVisualCorrelationAnalyzer:
    def test_summary(self, analyzers, observations, make_photo) -> None:
        observations.add_photo(make_photo(0, body_condition=4.0, estimated_weight=60.0))
        observations.add_photo(make_photo(14, body_condition=5.0, estimated_weight=66.0))
        trigger = WorkflowTrigger.create(
            "photo_analysis", "user_1", {"body_condition_score": 5.0}, animal_id="goat_1"
        )

        result = analyzers["visual_correlation"](trigger)

        assert result["correlation_coefficient"] is None
        assert result["correlation_strength"] == 0.0
        assert result["body_condition_trend"] == "improving"
        assert 0.0 <= result["overall_effectiveness"] <= 100.0
