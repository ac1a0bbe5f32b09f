"""Tests for the in-memory persistence adapters."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from application.intelligence.profile_builder import ProfileBuilder
from domain.guidance.core.entities import LearningSession
from domain.performance.calculation import FCRService, FeedAnalysisService
from domain.visual.analysis import GrowthPredictionService
from domain.workflow.core.entities import WorkflowExecutionRecord, WorkflowTrigger
from domain.workflow.core.value_objects import ExecutionState
from infrastructure.catalog import InMemoryFeedCatalog
from infrastructure.persistence.factory import Repositories, create_repositories
from infrastructure.persistence.in_memory import (
    InMemoryExecutionHistoryRepository,
    InMemoryLearningSessionRepository,
)

T0 = datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def repositories(monkeypatch) -> Repositories:
    monkeypatch.delenv("REPOSITORY_BACKEND", raising=False)
    return create_repositories()


def _profile(repositories: Repositories, goat):
    catalog = InMemoryFeedCatalog()
    builder = ProfileBuilder(
        catalog,
        repositories.observations,
        repositories.fcr_history,
        FeedAnalysisService(catalog, repositories.observations, repositories.fcr_history),
        GrowthPredictionService(),
        clock=lambda: T0,
    )
    return builder.build("user_1", goat, [])


class TestObservationHistory:
    def test_weights_are_sorted_per_animal(self, observations, make_weights) -> None:
        observations.add_weights(make_weights([(10, 65.0), (0, 60.0)]))
        observations.add_weights(make_weights([(5, 40.0)], animal_id="goat_2"))

        assert [w.weight for w in observations.weights_for("goat_1")] == [60.0, 65.0]
        assert [w.weight for w in observations.weights_for("goat_2")] == [40.0]
        assert observations.weights_for("missing") == []

    def test_equal_timestamps_keep_insertion_order(self, observations, make_feed) -> None:
        observations.add_feeds([make_feed(1, 5.0, 2.0), make_feed(1, 6.0, 2.0)])

        assert [f.amount for f in observations.feeds_for("goat_1")] == [5.0, 6.0]

    def test_photos_are_sorted(self, observations, make_photo) -> None:
        observations.add_photo(make_photo(7, body_condition=6.0))
        observations.add_photo(make_photo(0, body_condition=5.0))

        assert [p.body_condition_score for p in observations.photos_for("goat_1")] == [5.0, 6.0]

    def test_returned_lists_are_copies(self, observations, make_weights) -> None:
        observations.add_weights(make_weights([(0, 60.0)]))

        observations.weights_for("goat_1").clear()

        assert len(observations.weights_for("goat_1")) == 1


class TestFCRHistory:
    def test_latest(self, catalog, fcr_history, make_weights, make_feed) -> None:
        service = FCRService(catalog, fcr_history)
        weights = make_weights([(0, 60.0), (30, 90.0)])
        first = service.calculate_fcr(weights, [make_feed(10, 180.0, 45.0)])
        second = service.calculate_fcr(
            weights, [make_feed(10, 150.0, 40.0, feed_product_id="feed_003")]
        )

        assert fcr_history.results_for("goat_1") == [first, second]
        assert fcr_history.latest("goat_1") is second
        assert fcr_history.latest("goat_1", "feed_001") is first
        assert fcr_history.latest("goat_1", "feed_006") is None
        assert fcr_history.latest("goat_2") is None


class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_upsert_replaces_in_place(self, repositories, goat) -> None:
        profiles = repositories.profiles
        first = _profile(repositories, goat)
        other = replace(first, animal_id="goat_2")

        await profiles.upsert(first)
        await profiles.upsert(other)
        updated = replace(first, updated_at=T0 + timedelta(days=1))
        await profiles.upsert(updated)

        listed = await profiles.list_for_user("user_1")
        assert [p.animal_id for p in listed] == ["goat_1", "goat_2"]
        assert await profiles.get("user_1", "goat_1") == updated
        assert await profiles.get("user_2", "goat_1") is None

    @pytest.mark.asyncio
    async def test_clear(self, repositories, goat) -> None:
        await repositories.profiles.upsert(_profile(repositories, goat))

        repositories.profiles.clear()

        assert await repositories.profiles.list_for_user("user_1") == []


class TestLearningSessionRepository:
    @pytest.mark.asyncio
    async def test_sorted_and_filtered(self) -> None:
        repository = InMemoryLearningSessionRepository()
        late = LearningSession("user_1", "goat_1", "feeding", 30, timestamp=T0 + timedelta(hours=2))
        early = LearningSession("user_1", "goat_2", "weighing", 15, timestamp=T0)

        await repository.add(late)
        await repository.add(early)

        assert await repository.list_for_user("user_1") == [early, late]
        assert await repository.list_for_user("user_1", animal_id="goat_1") == [late]
        assert await repository.list_for_user("user_2") == []


class TestExecutionHistory:
    @pytest.mark.asyncio
    async def test_append_and_count(self) -> None:
        history = InMemoryExecutionHistoryRepository()
        record = WorkflowExecutionRecord(
            workflow_id="feed_performance_alert",
            trigger=WorkflowTrigger.create("fcr_calculation", "user_1", {"fcr": 8.5}),
            results=(),
            state_transitions=(ExecutionState.RECEIVED, ExecutionState.RECORDED),
            started_at=T0,
            completed_at=T0,
        )

        await history.append(record)

        assert await history.list_for_workflow("feed_performance_alert") == [record]
        assert await history.list_for_workflow("other") == []
        assert history.count() == 1

