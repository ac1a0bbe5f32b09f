"""Tests for the follow-up schedulers.

The APScheduler instance is never started, so jobs stay pending and
nothing runs during the tests.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from domain.workflow.core.entities import DeliveryPlan, EducationalIntervention
from infrastructure.scheduler import (
    APSchedulerFollowUpScheduler,
    InMemoryFollowUpScheduler,
    follow_up_job_id,
)


@pytest.fixture
def intervention() -> EducationalIntervention:
    return EducationalIntervention(
        student_id="user_1",
        trigger_name="high_fcr",
        title="Feed efficiency review",
        description="FCR of 8.5 is above the benchmark.",
        action_items=("Weigh feed refusals",),
        resources=("FCR basics",),
        timeline="1 week",
        delivery=DeliveryPlan(method="push", timing="within_24_hours", frequency="daily"),
        created_at=datetime(2025, 3, 1, tzinfo=timezone.utc),
        follow_up_at=datetime(2025, 3, 8, tzinfo=timezone.utc),
        intervention_id="int_1",
    )


@pytest.fixture
def scheduler() -> APSchedulerFollowUpScheduler:
    return APSchedulerFollowUpScheduler()


def test_job_id(intervention) -> None:
    assert follow_up_job_id(intervention) == "follow_up_int_1"


class TestAPSchedulerFollowUpScheduler:
    @pytest.mark.asyncio
    async def test_schedule_adds_date_job(self, scheduler, intervention) -> None:
        job_id = await scheduler.schedule_follow_up(intervention)

        jobs = scheduler.get_jobs()
        assert job_id == "follow_up_int_1"
        assert [job["id"] for job in jobs] == ["follow_up_int_1"]
        assert jobs[0]["name"] == "Follow-up: Feed efficiency review"
        assert "date" in jobs[0]["trigger"]

    @pytest.mark.asyncio
    async def test_follow_up_calls_handler(self, intervention) -> None:
        handler = AsyncMock()
        scheduler = APSchedulerFollowUpScheduler(handler=handler)

        await scheduler._run_follow_up(intervention)

        handler.assert_awaited_once_with(intervention)

    @pytest.mark.asyncio
    async def test_follow_up_without_handler(self, scheduler, intervention) -> None:
        await scheduler._run_follow_up(intervention)

    def test_shutdown_when_not_running(self, scheduler) -> None:
        scheduler.shutdown()

        assert not scheduler.scheduler.running


class TestInMemoryFollowUpScheduler:
    @pytest.mark.asyncio
    async def test_records_interventions(self, intervention) -> None:
        scheduler = InMemoryFollowUpScheduler()

        job_id = await scheduler.schedule_follow_up(intervention)

        assert job_id == "follow_up_int_1"
        assert scheduler.scheduled == [intervention]
