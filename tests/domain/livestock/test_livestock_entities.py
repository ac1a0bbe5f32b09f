"""Tests for livestock observation entities and value objects."""

from datetime import datetime, timezone

import pytest

from domain.livestock.core.entities import (
    AnimalRef,
    FeedObservation,
    HealthIndicator,
    PerformanceBenchmarks,
    PhotoObservation,
    WeightObservation,
)
from domain.livestock.core.exceptions import (
    DivisionUndefinedError,
    LivestockDomainError,
    ValidationError,
)
from domain.livestock.core.value_objects import (
    MeasurementMethod,
    PerformanceRanking,
    Severity,
    TrendDirection,
    clamp,
)

NOW = datetime(2025, 3, 1, tzinfo=timezone.utc)


class TestWeightObservation:
    def test_rejects_non_positive_weight(self) -> None:
        with pytest.raises(ValidationError):
            WeightObservation(animal_id="a1", weight=0.0, timestamp=NOW)

    def test_rejects_nan_weight(self) -> None:
        with pytest.raises(ValidationError):
            WeightObservation(animal_id="a1", weight=float("nan"), timestamp=NOW)

    def test_clamps_optional_scores(self) -> None:
        obs = WeightObservation(
            animal_id="a1",
            weight=60.0,
            timestamp=NOW,
            body_condition_score=12.0,
            confidence=140.0,
        )

        assert obs.body_condition_score == 9.0
        assert obs.confidence == 100.0

    def test_effective_confidence_falls_back_to_method(self) -> None:
        obs = WeightObservation(
            animal_id="a1", weight=60.0, timestamp=NOW, method=MeasurementMethod.TAPE
        )

        assert obs.effective_confidence == 85.0

    def test_rejects_naive_timestamp(self) -> None:
        with pytest.raises(ValidationError, match="timezone-aware"):
            WeightObservation(animal_id="a1", weight=60.0, timestamp=datetime(2025, 3, 1))


class TestFeedObservation:
    def test_rejects_negative_cost(self) -> None:
        with pytest.raises(ValidationError):
            FeedObservation("a1", "feed_001", amount=10.0, cost=-1.0, timestamp=NOW)

    def test_rejects_empty_product(self) -> None:
        with pytest.raises(ValidationError):
            FeedObservation("a1", "", amount=10.0, cost=1.0, timestamp=NOW)

    def test_unit_cost(self) -> None:
        obs = FeedObservation("a1", "feed_001", amount=180.0, cost=45.0, timestamp=NOW)

        assert obs.unit_cost == pytest.approx(0.25)

    def test_rejects_naive_timestamp(self) -> None:
        with pytest.raises(ValidationError, match="timezone-aware"):
            FeedObservation("a1", "feed_001", 10.0, 2.5, timestamp=datetime(2025, 3, 1, 8))


class TestPhotoObservation:
    def test_rejects_naive_capture_time(self) -> None:
        with pytest.raises(ValidationError, match="captured_at"):
            PhotoObservation(
                "a1", datetime(2025, 3, 1), body_condition_score=5.0, estimated_weight=55.0
            )

    def test_scores_clamped_on_construction(self) -> None:
        photo = PhotoObservation(
            animal_id="a1",
            captured_at=NOW,
            body_condition_score=0.2,
            estimated_weight=55.0,
            health_indicators=(HealthIndicator(type="coat", score=14.0),),
            confidence=-5.0,
        )

        assert photo.body_condition_score == 1.0
        assert photo.health_indicators[0].score == 10.0
        assert photo.confidence == 0.0

    def test_mean_health_score_none_without_indicators(self) -> None:
        photo = PhotoObservation("a1", NOW, body_condition_score=5.0, estimated_weight=55.0)

        assert photo.mean_health_score() is None

    def test_health_concerns_exclude_normal(self) -> None:
        photo = PhotoObservation(
            "a1",
            NOW,
            body_condition_score=5.0,
            estimated_weight=55.0,
            health_indicators=(
                HealthIndicator(type="coat", score=8.0),
                HealthIndicator(type="eyes", score=4.0, severity=Severity.MODERATE),
            ),
        )

        assert [c.type for c in photo.health_concerns()] == ["eyes"]


class TestAnimalRef:
    def test_accepts_own_species_case_insensitively(self) -> None:
        animal = AnimalRef(animal_id="a1", species="Goat")

        assert animal.accepts_species("goat")
        assert animal.accepts_species("Multi-Species")
        assert not animal.accepts_species("Cattle")

    def test_display_name_falls_back_to_id(self) -> None:
        assert AnimalRef(animal_id="a1", species="Goat").display_name() == "a1"

    def test_rejects_non_positive_current_weight(self) -> None:
        with pytest.raises(ValidationError):
            AnimalRef(animal_id="a1", species="Goat", current_weight=0.0)


class TestValueObjects:
    @pytest.mark.parametrize(
        "ratio,expected",
        [
            (0.85, PerformanceRanking.EXCELLENT),
            (1.0, PerformanceRanking.GOOD),
            (1.05, PerformanceRanking.AVERAGE),
            (1.15, PerformanceRanking.BELOW_AVERAGE),
            (1.5, PerformanceRanking.POOR),
        ],
    )
    def test_ranking_from_ratio(self, ratio: float, expected: PerformanceRanking) -> None:
        assert PerformanceRanking.from_ratio(ratio) is expected

    def test_trend_threshold_is_inclusive_for_stable(self) -> None:
        assert TrendDirection.from_delta(0.3, 0.3) is TrendDirection.STABLE
        assert TrendDirection.from_delta(0.31, 0.3) is TrendDirection.IMPROVING
        assert TrendDirection.from_delta(-0.31, 0.3) is TrendDirection.DECLINING

    def test_clamp(self) -> None:
        assert clamp(12.0, 1.0, 9.0) == 9.0
        assert clamp(-3.0, 1.0, 9.0) == 1.0

    def test_benchmarks_clamp_scores(self) -> None:
        benchmarks = PerformanceBenchmarks(
            reference_fcr=6.0,
            reference_daily_gain=0.3,
            cost_per_pound=0.4,
            efficiency_score=130,
            palatability=0,
        )

        assert benchmarks.efficiency_score == 100.0
        assert benchmarks.palatability == 1.0


class TestExceptions:
    def test_validation_error_is_value_error(self) -> None:
        assert issubclass(ValidationError, ValueError)
        assert issubclass(ValidationError, LivestockDomainError)

    def test_division_undefined_carries_result(self) -> None:
        error = DivisionUndefinedError("fcr", -2.0, result="partial")

        assert error.result == "partial"
        assert "undefined" in str(error)
