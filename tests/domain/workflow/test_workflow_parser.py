"""Tests for the YAML workflow definition parser."""

import pytest

from domain.livestock.core.exceptions import ValidationError
from domain.workflow.core.value_objects import (
    ActionType,
    ConditionOperator,
    LogicalOperator,
    OutputDestination,
    OutputFormat,
)
from domain.workflow.definitions import (
    DEFAULT_WORKFLOWS_PATH,
    load_default_workflows,
    load_workflows_from_file,
    load_workflows_from_yaml_text,
)
from domain.workflow.engine import DEFAULT_TRIGGER_ROUTES

SINGLE_WORKFLOW = """
id: custom_fcr
name: Custom FCR
rules:
  - id: very_high
    action: notify
    conditions:
      - field: fcr
        operator: greater_than
        value: 9
      - field: ranking
        operator: exists
        logical_operator: or
    outputs:
      - destination: parent
        format: email
        template_id: parent_alert
        payload:
          channel: weekly
"""


class TestDefaultWorkflows:
    def test_bundle_loads(self) -> None:
        workflows = load_default_workflows()

        ids = {w.workflow_id for w in workflows}
        assert set(DEFAULT_TRIGGER_ROUTES.values()) <= ids

    def test_path_points_at_package_data(self) -> None:
        assert DEFAULT_WORKFLOWS_PATH.name == "default_workflows.yaml"
        assert DEFAULT_WORKFLOWS_PATH.exists()

    def test_feed_performance_alert_rules(self) -> None:
        workflow = next(
            w for w in load_default_workflows() if w.workflow_id == "feed_performance_alert"
        )

        assert [r.rule_id for r in workflow.rules] == [
            "high_fcr_alert",
            "high_fcr_intervention",
            "efficient_feeding_recognition",
            "fcr_dashboard_report",
        ]
        alert = workflow.rules[0]
        assert alert.action is ActionType.NOTIFY
        assert alert.conditions[0].value == 7.0


class TestParsing:
    def test_single_workflow_mapping(self) -> None:
        (workflow,) = load_workflows_from_yaml_text(SINGLE_WORKFLOW)

        rule = workflow.rules[0]
        assert workflow.workflow_id == "custom_fcr"
        assert rule.conditions[0].operator is ConditionOperator.GREATER_THAN
        assert rule.outputs[0].destination is OutputDestination.PARENT
        assert rule.outputs[0].format is OutputFormat.EMAIL
        assert rule.outputs[0].payload == {"channel": "weekly"}

    def test_exists_defaults_to_true(self) -> None:
        (workflow,) = load_workflows_from_yaml_text(SINGLE_WORKFLOW)

        condition = workflow.rules[0].conditions[1]
        assert condition.operator is ConditionOperator.EXISTS
        assert condition.value is True
        assert condition.logical_operator is LogicalOperator.OR

    def test_file_loader(self, tmp_path) -> None:
        path = tmp_path / "workflows.yaml"
        path.write_text(SINGLE_WORKFLOW, encoding="utf-8")

        assert load_workflows_from_file(path)[0].workflow_id == "custom_fcr"


class TestInvalidDocuments:
    @pytest.mark.parametrize(
        "text",
        [
            "workflows: [unclosed",
            "- just\n- a list\n",
            "workflows: {id: x}",
            "workflows:\n  - id: a\n    rules: [{id: r, action: analyze, config: {analysis: x}}]\n"
            "  - id: a\n    rules: [{id: r, action: analyze, config: {analysis: x}}]\n",
        ],
        ids=["bad_yaml", "list_root", "workflows_not_list", "duplicate_workflow"],
    )
    def test_document_errors(self, text) -> None:
        with pytest.raises(ValidationError):
            load_workflows_from_yaml_text(text)

    @pytest.mark.parametrize(
        "rule",
        [
            "{id: r, action: teleport}",
            "{id: r, action: notify}",
            "{id: r, action: analyze}",
            "{id: r, action: intervene, config: {}}",
            "{id: r, action: call_api}",
            "{action: analyze, config: {analysis: x}}",
            "{id: r, action: analyze, config: {analysis: x},"
            " conditions: [{field: fcr, operator: greater_than, value: high}]}",
            "{id: r, action: analyze, config: {analysis: x},"
            " conditions: [{field: fcr, operator: roughly, value: 1}]}",
            "{id: r, action: report, outputs: [{destination: moon, format: json,"
            " template_id: t}]}",
        ],
        ids=[
            "unknown_action",
            "notify_without_outputs",
            "analyze_without_analysis",
            "intervene_without_name",
            "call_api_without_endpoint",
            "missing_rule_id",
            "non_numeric_threshold",
            "unknown_operator",
            "unknown_destination",
        ],
    )
    def test_rule_errors(self, rule) -> None:
        with pytest.raises(ValidationError):
            load_workflows_from_yaml_text(f"id: w\nrules: [{rule}]\n")

    def test_duplicate_rule_ids(self) -> None:
        text = (
            "id: w\nrules:\n"
            "  - {id: r, action: analyze, config: {analysis: x}}\n"
            "  - {id: r, action: analyze, config: {analysis: y}}\n"
        )
        with pytest.raises(ValidationError):
            load_workflows_from_yaml_text(text)

    def test_empty_rules(self) -> None:
        with pytest.raises(ValidationError):
            load_workflows_from_yaml_text("id: w\nrules: []\n")
