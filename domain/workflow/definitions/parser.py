"""Workflow definition parser.

Parses YAML documents with a root `workflows: [...]` list (or a single
workflow mapping) into validated Workflow entities.

Checks performed:
- workflow ids unique across the document
- rule ids unique within a workflow, rules non-empty
- action, operator, destination and format values recognised
- ordering operators compare against numbers, `exists` against booleans
- per-action configuration present (see WorkflowRule)
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Type, TypeVar, Union

import yaml

from domain.livestock.core.exceptions import ValidationError

from ..core.entities import Condition, RuleOutput, Workflow, WorkflowRule
from ..core.value_objects import (
    ActionType,
    ConditionOperator,
    LogicalOperator,
    OutputDestination,
    OutputFormat,
)

DEFAULT_WORKFLOWS_PATH = Path(__file__).with_name("default_workflows.yaml")

E = TypeVar("E")


def _enum(enum_cls: Type[E], raw: Any, where: str) -> E:
    try:
        return enum_cls(raw)  # type: ignore[call-arg]
    except ValueError:
        raise ValidationError(f"{where}: unknown {enum_cls.__name__} {raw!r}") from None


def _require(raw: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in raw or raw[key] in (None, ""):
        raise ValidationError(f"{where}: missing '{key}'")
    return raw[key]


def parse_condition(raw: Mapping[str, Any], where: str = "condition") -> Condition:
    operator = _enum(ConditionOperator, _require(raw, "operator", where), where)
    value = raw.get("value")
    if operator is ConditionOperator.EXISTS and value is None:
        value = True
    return Condition(
        field_name=_require(raw, "field", where),
        operator=operator,
        value=value,
        logical_operator=_enum(LogicalOperator, raw.get("logical_operator", "and"), where),
    )


def parse_output(raw: Mapping[str, Any], where: str = "output") -> RuleOutput:
    return RuleOutput(
        destination=_enum(OutputDestination, _require(raw, "destination", where), where),
        format=_enum(OutputFormat, _require(raw, "format", where), where),
        template_id=_require(raw, "template_id", where),
        payload=dict(raw.get("payload") or {}),
    )


def parse_rule(raw: Mapping[str, Any], where: str = "rule") -> WorkflowRule:
    rule_id = _require(raw, "id", where)
    where = f"{where} {rule_id}"
    return WorkflowRule(
        rule_id=rule_id,
        name=raw.get("name", ""),
        action=_enum(ActionType, _require(raw, "action", where), where),
        conditions=tuple(parse_condition(c, where) for c in raw.get("conditions") or []),
        outputs=tuple(parse_output(o, where) for o in raw.get("outputs") or []),
        config=dict(raw.get("config") or {}),
        enabled=bool(raw.get("enabled", True)),
    )


def parse_workflow(raw: Mapping[str, Any]) -> Workflow:
    workflow_id = _require(raw, "id", "workflow")
    where = f"workflow {workflow_id}"
    rules = raw.get("rules") or []
    if not isinstance(rules, list):
        raise ValidationError(f"{where}: 'rules' must be a list")
    return Workflow(
        workflow_id=workflow_id,
        name=raw.get("name", workflow_id),
        description=raw.get("description", ""),
        rules=tuple(parse_rule(r, where) for r in rules),
        enabled=bool(raw.get("enabled", True)),
    )


def load_workflows_from_yaml_text(text: str) -> List[Workflow]:
    """Parse workflows from YAML text.

    Raises:
        ValidationError: Malformed document or invalid definitions
    """
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid workflow YAML: {e}") from e

    if not isinstance(document, dict):
        raise ValidationError("Workflow document root must be a mapping")

    raw_workflows: List[Dict[str, Any]]
    if "workflows" in document:
        raw_workflows = document["workflows"] or []
        if not isinstance(raw_workflows, list):
            raise ValidationError("'workflows' must be a list")
    else:
        raw_workflows = [document]

    workflows = [parse_workflow(w) for w in raw_workflows]
    seen = set()
    for workflow in workflows:
        if workflow.workflow_id in seen:
            raise ValidationError(f"Duplicate workflow id {workflow.workflow_id}")
        seen.add(workflow.workflow_id)
    return workflows


def load_workflows_from_file(path: Union[str, Path]) -> List[Workflow]:
    return load_workflows_from_yaml_text(Path(path).read_text(encoding="utf-8"))


def load_default_workflows() -> List[Workflow]:
    """Load the bundled default workflows."""
    return load_workflows_from_file(DEFAULT_WORKFLOWS_PATH)
