"""Tests for FeedAnalysisService."""

import pytest

from domain.livestock.core.exceptions import NotFoundError
from domain.performance.calculation import FCRService, FeedAnalysisService


@pytest.fixture
def service(catalog, observations, fcr_history) -> FeedAnalysisService:
    return FeedAnalysisService(catalog, observations, fcr_history)


class TestAnalyzeFeedPerformance:
    def test_scales_score_by_actual_fcr(
        self, service, catalog, observations, fcr_history, make_weights, make_feed
    ) -> None:
        weights = make_weights([(0, 60.0), (30, 90.0)])
        feeds = [make_feed(15, 180.0, 45.0)]
        observations.add_weights(weights)
        observations.add_feeds(feeds)
        FCRService(catalog, fcr_history).calculate_fcr(weights, feeds)

        analysis = service.analyze_feed_performance("goat_1", "feed_001")

        # 78 x (6.2 / 6.0) + 5 for paying under the catalog price
        assert analysis.performance_score == 86
        assert analysis.efficiency.fcr == pytest.approx(6.0)
        assert analysis.efficiency.growth_rate == pytest.approx(1.0)
        assert analysis.comparison.improvement_opportunity == 0.0
        assert analysis.comparison.user_average == pytest.approx(6.0)
        assert analysis.average_cost_per_pound == pytest.approx(0.25)
        assert analysis.efficiency.cost_efficiency == 100.0

    def test_without_fcr_uses_reference_score(self, service, observations, make_feed) -> None:
        # $1/lb is above the catalog's $0.38/lb, so no price bonus
        observations.add_feeds([make_feed(1, 10.0, 10.0)])

        analysis = service.analyze_feed_performance("goat_1", "feed_001")

        assert analysis.performance_score == 78
        assert analysis.efficiency.fcr is None
        assert analysis.comparison.user_average is None

    def test_high_fcr_flags_improvement(
        self, service, catalog, observations, fcr_history, make_weights, make_feed
    ) -> None:
        weights = make_weights([(0, 60.0), (30, 90.0)])
        feeds = [make_feed(15, 300.0, 75.0)]
        observations.add_weights(weights)
        observations.add_feeds(feeds)
        FCRService(catalog, fcr_history).calculate_fcr(weights, feeds)

        analysis = service.analyze_feed_performance("goat_1", "feed_001")

        assert analysis.comparison.improvement_opportunity == pytest.approx(38.0)
        assert "Consider reducing feed amounts or improving feed quality" in (
            analysis.recommendations
        )

    def test_low_palatability_warning(self, service, observations, make_feed) -> None:
        observations.add_feeds([make_feed(1, 10.0, 3.0, feed_product_id="feed_002")])

        analysis = service.analyze_feed_performance("goat_1", "feed_002")

        assert any("palatability" in r for r in analysis.recommendations)

    def test_unknown_feed(self, service) -> None:
        with pytest.raises(NotFoundError):
            service.analyze_feed_performance("goat_1", "feed_999")

    def test_no_history_for_pair(self, service, observations, make_feed) -> None:
        observations.add_feeds([make_feed(1, 10.0, 3.0, feed_product_id="feed_003")])

        with pytest.raises(NotFoundError):
            service.analyze_feed_performance("goat_1", "feed_001")
