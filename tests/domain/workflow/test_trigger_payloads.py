"""Tests for WorkflowTrigger and typed payloads."""

from datetime import datetime, timezone

import pytest

from domain.livestock.core.exceptions import ValidationError
from domain.workflow.core.entities import (
    FCRCalculationPayload,
    FeedEntryPayload,
    PerformanceAlertPayload,
    WeightChangePayload,
    WorkflowTrigger,
    payload_from_mapping,
)
from domain.workflow.core.value_objects import TriggerPriority, TriggerType


class TestPayloadFromMapping:
    def test_fcr_payload_typed_fields(self) -> None:
        payload = payload_from_mapping(
            TriggerType.FCR_CALCULATION, {"fcr": 8.5, "average_daily_gain": 0.3}
        )

        assert isinstance(payload, FCRCalculationPayload)
        assert payload.fcr == 8.5
        assert payload.average_daily_gain == 0.3
        assert payload.extras == {}

    def test_unknown_keys_land_in_extras(self) -> None:
        payload = payload_from_mapping(
            TriggerType.FEED_ENTRY,
            {"feed_product_id": "feed_001", "amount": 5.0, "barn": "north"},
        )

        assert isinstance(payload, FeedEntryPayload)
        assert payload.extras == {"barn": "north"}
        assert payload.as_fields()["barn"] == "north"

    def test_weight_change_derived(self) -> None:
        payload = payload_from_mapping(
            TriggerType.WEIGHT_CHANGE, {"current_weight": 88.0, "previous_weight": 90.0}
        )

        assert isinstance(payload, WeightChangePayload)
        assert payload.change == pytest.approx(-2.0)

    def test_weight_change_without_previous(self) -> None:
        payload = payload_from_mapping(TriggerType.WEIGHT_CHANGE, {"current_weight": 88.0})

        assert payload.change is None

    def test_missing_required_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            payload_from_mapping(TriggerType.FCR_CALCULATION, {"average_daily_gain": 0.3})

    @pytest.mark.parametrize("bad", ["8.5", True, float("nan"), None])
    def test_non_numeric_fcr_rejected(self, bad) -> None:
        with pytest.raises(ValidationError):
            payload_from_mapping(TriggerType.FCR_CALCULATION, {"fcr": bad})

    def test_empty_metric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PerformanceAlertPayload(metric="")

    def test_typed_fields_win_over_extras(self) -> None:
        payload = FCRCalculationPayload(fcr=6.0, extras={"fcr": 99.0, "note": "x"})

        fields = payload.as_fields()

        assert fields["fcr"] == 6.0
        assert fields["note"] == "x"


class TestWorkflowTrigger:
    def test_create_from_strings(self) -> None:
        trigger = WorkflowTrigger.create(
            "fcr_calculation", "user_1", {"fcr": 8.5}, animal_id="goat_1", priority="high"
        )

        assert trigger.type is TriggerType.FCR_CALCULATION
        assert trigger.priority is TriggerPriority.HIGH
        assert trigger.timestamp.tzinfo is not None
        assert trigger.trigger_id

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorkflowTrigger.create("weather_change", "user_1", {})

    def test_unknown_priority_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorkflowTrigger.create("fcr_calculation", "user_1", {"fcr": 6.0}, priority="asap")

    def test_payload_kind_mismatch_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorkflowTrigger(
                type=TriggerType.WEIGHT_CHANGE,
                user_id="user_1",
                payload=FCRCalculationPayload(fcr=6.0),
            )

    def test_empty_user_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorkflowTrigger.create("fcr_calculation", "", {"fcr": 6.0})

    def test_context_layout(self) -> None:
        stamp = datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc)
        trigger = WorkflowTrigger.create(
            "fcr_calculation",
            "user_1",
            {"fcr": 8.5, "pen": 4},
            animal_id="goat_1",
            timestamp=stamp,
        )

        context = trigger.context()

        assert context["fcr"] == 8.5
        assert context["pen"] == 4
        assert context["payload"]["fcr"] == 8.5
        assert context["type"] == "fcr_calculation"
        assert context["priority"] == "medium"
        assert context["animal_id"] == "goat_1"
        assert context["timestamp"] == stamp.isoformat()
        assert context["trigger_id"] == trigger.trigger_id
