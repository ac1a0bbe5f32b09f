"""Tests for VisualCorrelationService."""

import numpy as np
import pytest

from domain.livestock.core.exceptions import InsufficientDataError
from domain.livestock.core.value_objects import GrowthTrend, TrendDirection
from domain.visual.analysis import VisualCorrelationService


@pytest.fixture
def service() -> VisualCorrelationService:
    return VisualCorrelationService()


class TestCorrelateFeedToVisualProgress:
    def test_requires_photos(self, service) -> None:
        with pytest.raises(InsufficientDataError):
            service.correlate_feed_to_visual_progress([], [])

    def test_too_few_intervals_gives_no_coefficient(self, service, make_photo) -> None:
        photos = [make_photo(0), make_photo(10, body_condition=5.2)]

        result = service.correlate_feed_to_visual_progress(photos, [])

        assert result.correlation_coefficient is None
        assert result.correlation_strength == 0.0
        assert result.paired_intervals == 1
        assert any("Not enough photo intervals" in i for i in result.insights)

    def test_trends(self, service, make_photo) -> None:
        photos = [
            make_photo(10, body_condition=6.0, estimated_weight=70.0, health_scores=(6.0,)),
            make_photo(0, body_condition=5.0, estimated_weight=60.0, health_scores=(8.0,)),
        ]

        result = service.correlate_feed_to_visual_progress(photos, [])

        assert result.trends.body_condition is TrendDirection.IMPROVING
        assert result.trends.health is TrendDirection.DECLINING
        assert result.trends.growth is GrowthTrend.ABOVE_AVERAGE
        assert any("health check" in r for r in result.recommendations)

    def test_feeding_tracks_visual_progress(self, service, make_photo, make_feed) -> None:
        photos = [
            make_photo(0, body_condition=5.0, estimated_weight=60.0),
            make_photo(10, body_condition=5.1, estimated_weight=61.0),
            make_photo(20, body_condition=5.3, estimated_weight=63.0),
            make_photo(30, body_condition=5.6, estimated_weight=66.0),
        ]
        feeds = [make_feed(5, 10.0, 2.0), make_feed(15, 20.0, 4.0), make_feed(25, 30.0, 6.0)]

        result = service.correlate_feed_to_visual_progress(photos, feeds)

        assert result.paired_intervals == 3
        assert result.correlation_coefficient == pytest.approx(1.0)
        assert result.correlation_strength == pytest.approx(100.0)

    def test_constant_feeding_has_no_coefficient(self, service, make_photo, make_feed) -> None:
        photos = [make_photo(d, estimated_weight=60.0 + d) for d in (0, 10, 20, 30)]
        feeds = [make_feed(d, 10.0, 2.0) for d in (5, 15, 25)]

        result = service.correlate_feed_to_visual_progress(photos, feeds)

        assert result.correlation_coefficient is None
        assert result.correlation_strength == 0.0

    def test_low_effectiveness_recommendation(self, service, make_photo) -> None:
        photos = [make_photo(0, overall_impact=40.0), make_photo(7, overall_impact=50.0)]

        result = service.correlate_feed_to_visual_progress(photos, [])

        assert result.feed_effectiveness.overall == pytest.approx(45.0)
        assert any("limited visual impact" in r for r in result.recommendations)

    def test_random_series_stay_in_range(self, service, make_photo, make_feed) -> None:
        rng = np.random.default_rng(42)
        for _ in range(25):
            n = int(rng.integers(2, 9))
            photos = [
                make_photo(
                    7 * k,
                    body_condition=float(rng.uniform(0, 10)),
                    estimated_weight=float(rng.uniform(20, 120)),
                    health_scores=tuple(float(s) for s in rng.uniform(0, 11, size=2)),
                    overall_impact=float(rng.uniform(-10, 110)),
                )
                for k in range(n)
            ]
            feeds = [
                make_feed(float(rng.uniform(0, 7 * n)), float(rng.uniform(1, 50)), 1.0)
                for _ in range(int(rng.integers(0, 12)))
            ]

            result = service.correlate_feed_to_visual_progress(photos, feeds)

            assert 0.0 <= result.correlation_strength <= 100.0
            if result.correlation_coefficient is not None:
                assert -1.0 <= result.correlation_coefficient <= 1.0
            assert 0.0 <= result.feed_effectiveness.overall <= 100.0
