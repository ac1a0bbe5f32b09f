"""Tests for ProfileBuilder."""

from datetime import datetime, timezone

import pytest

from application.intelligence import learning
from application.intelligence.profile_builder import ProfileBuilder, primary_feed_id
from domain.intelligence.core.value_objects import UpdateType
from domain.livestock.core.value_objects import PerformanceRanking, Severity, TrendDirection
from domain.performance.calculation import FCRService, FeedAnalysisService
from domain.visual.analysis import BodyConditionService, GrowthPredictionService

BUILT_AT = datetime(2025, 4, 1, tzinfo=timezone.utc)


@pytest.fixture
def builder(catalog, observations, fcr_history) -> ProfileBuilder:
    return ProfileBuilder(
        catalog,
        observations,
        fcr_history,
        FeedAnalysisService(catalog, observations, fcr_history),
        GrowthPredictionService(),
        clock=lambda: BUILT_AT,
    )


class TestProfileBuilder:
    def test_empty_history(self, builder, goat) -> None:
        profile = builder.build("user_1", goat, [])

        assert profile.performance.current_fcr is None
        assert profile.performance.weigh_ins == 0
        assert profile.performance.total_weight_gained == 0.0
        assert profile.performance.body_condition_trend is TrendDirection.STABLE
        assert profile.performance.health_status == "unknown"
        assert profile.feed.current_feed is None
        assert profile.feed.analysis is None
        assert profile.visual.photo_count == 0
        assert profile.visual.growth_prediction is None
        assert profile.education.competency_level == 0.0
        assert profile.education.learning_progression == "beginner"
        assert profile.updated_at == BUILT_AT

    def test_full_history(
        self,
        builder,
        goat,
        catalog,
        observations,
        fcr_history,
        make_weights,
        make_feed,
        make_photo,
    ) -> None:
        weights = make_weights([(0, 60.0), (30, 90.0)])
        feeds = [make_feed(10, 90.0, 22.5), make_feed(20, 90.0, 22.5)]
        observations.add_weights(weights)
        observations.add_feeds(feeds)
        observations.add_photo(make_photo(0, body_condition=4.5, estimated_weight=60.0))
        observations.add_photo(
            make_photo(28, body_condition=5.5, estimated_weight=88.0, severity=Severity.MILD)
        )
        FCRService(catalog, fcr_history).calculate_fcr(weights, feeds)
        sessions = [
            learning.build_session("user_1", "goat_1", UpdateType.WEIGHT, BUILT_AT),
            learning.build_session("user_1", "goat_1", UpdateType.FEED, BUILT_AT),
        ]

        profile = builder.build("user_1", goat, sessions)

        performance = profile.performance
        assert performance.current_fcr == pytest.approx(6.0)
        assert performance.average_daily_gain == pytest.approx(1.0)
        assert performance.performance_ranking is PerformanceRanking.GOOD
        assert performance.total_feed_cost == pytest.approx(45.0)
        assert performance.total_weight_gained == pytest.approx(30.0)
        assert performance.current_weight == 90.0
        assert performance.weigh_ins == 2
        assert performance.body_condition_trend is TrendDirection.IMPROVING
        assert performance.health_status == "monitor"

        assert profile.feed.current_feed == "feed_001"
        assert profile.feed.analysis is not None
        assert profile.feed.cost_optimization == 0.0

        assert profile.visual.photo_count == 2
        assert profile.visual.body_condition_score == 5.5
        assert profile.visual.growth_prediction is not None
        assert profile.visual.health_concerns == ("indicator_0: mild", "indicator_1: mild")

        assert profile.education.competency_level == 60.0
        assert profile.education.learning_progression == "intermediate"

    def test_severe_concern_is_poor_health(self, builder, goat, observations, make_photo) -> None:
        observations.add_photo(make_photo(0, severity=Severity.SEVERE))

        profile = builder.build("user_1", goat, [])

        assert profile.performance.health_status == "poor"
        assert profile.visual.growth_prediction is None
        assert profile.visual.body_condition is None

    def test_body_condition_scores_latest_photo(
        self, catalog, observations, fcr_history, goat, make_photo
    ) -> None:
        builder = ProfileBuilder(
            catalog,
            observations,
            fcr_history,
            FeedAnalysisService(catalog, observations, fcr_history),
            GrowthPredictionService(),
            clock=lambda: BUILT_AT,
            body_condition=BodyConditionService(),
        )
        observations.add_photo(make_photo(0, body_condition=4.5))
        latest = make_photo(14, body_condition=3.5, fat_score=1.0, muscle_score=1.0)
        observations.add_photo(latest)

        profile = builder.build("user_1", goat, [])

        scored = profile.visual.body_condition
        assert scored.photo_id == latest.photo_id
        assert scored.score == 3.5
        assert scored.indicators.rib_coverage == pytest.approx(3.0)
        assert scored.recommendations
        assert profile.visual.body_condition_score == 3.5

    def test_rebuild_is_stable(self, builder, goat, observations, make_weights) -> None:
        observations.add_weights(make_weights([(0, 60.0), (7, 63.0)]))

        first = builder.build("user_1", goat, [])
        second = builder.build("user_1", goat, [])

        assert first.performance == second.performance

    def test_unknown_feed_has_no_analysis(self, builder, goat, observations, make_feed) -> None:
        observations.add_feeds([make_feed(0, 10.0, 5.0, feed_product_id="homemade_mix")])

        profile = builder.build("user_1", goat, [])

        assert profile.feed.current_feed == "homemade_mix"
        assert profile.feed.analysis is None


class TestPrimaryFeed:
    def test_most_frequent(self, make_feed) -> None:
        feeds = [
            make_feed(0, 1.0, 1.0, feed_product_id="feed_002"),
            make_feed(1, 1.0, 1.0, feed_product_id="feed_001"),
            make_feed(2, 1.0, 1.0, feed_product_id="feed_001"),
        ]

        assert primary_feed_id(feeds) == "feed_001"

    def test_tie_goes_to_earliest(self, make_feed) -> None:
        feeds = [
            make_feed(0, 1.0, 1.0, feed_product_id="feed_002"),
            make_feed(1, 1.0, 1.0, feed_product_id="feed_001"),
        ]

        assert primary_feed_id(feeds) == "feed_002"

    def test_no_feeds(self) -> None:
        assert primary_feed_id([]) is None
