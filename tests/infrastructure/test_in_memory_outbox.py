"""Tests for InMemoryOutbox."""

from datetime import datetime, timezone

import pytest

from domain.workflow.core.entities import (
    DeliveryPlan,
    EducationalIntervention,
    Notification,
    WorkflowReport,
)
from domain.workflow.core.value_objects import OutputDestination, OutputFormat
from infrastructure.delivery import InMemoryOutbox

NOW = datetime(2025, 3, 1, tzinfo=timezone.utc)


@pytest.fixture
def items():
    notification = Notification(
        user_id="user_1",
        destination=OutputDestination.STUDENT,
        format=OutputFormat.PUSH,
        template_id="fcr_alert",
        title="High FCR",
        message="FCR of 8.5 is high",
    )
    report = WorkflowReport(
        user_id="user_1",
        destination=OutputDestination.DASHBOARD,
        format=OutputFormat.JSON,
        template_id="fcr_report",
        title="FCR report",
        body="{}",
    )
    intervention = EducationalIntervention(
        student_id="user_1",
        trigger_name="high_fcr",
        title="Feed efficiency review",
        description="FCR of 8.5 is above the benchmark.",
        action_items=(),
        resources=(),
        timeline="1 week",
        delivery=DeliveryPlan(method="push", timing="within_24_hours", frequency="daily"),
        created_at=NOW,
        follow_up_at=NOW,
    )
    return notification, report, intervention


@pytest.mark.asyncio
async def test_items_are_grouped_by_kind(items) -> None:
    outbox = InMemoryOutbox()
    notification, report, intervention = items

    for item in items:
        await outbox.deliver(item)

    assert outbox.items == [notification, report, intervention]
    assert outbox.notifications == [notification]
    assert outbox.reports == [report]
    assert outbox.interventions == [intervention]


@pytest.mark.asyncio
async def test_drain_empties_outbox(items) -> None:
    outbox = InMemoryOutbox()
    await outbox.deliver(items[0])

    drained = outbox.drain()

    assert drained == [items[0]]
    assert outbox.items == []
