"""Workflow definition entities: conditions, outputs, rules, workflows."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple

from domain.livestock.core.exceptions import ValidationError

from ..value_objects import (
    ActionType,
    ConditionOperator,
    LogicalOperator,
    OutputDestination,
    OutputFormat,
)


@dataclass(frozen=True)
class Condition:
    """Single test against a trigger context field.

    `field_name` may be a dotted path (e.g. "payload.extras_key").
    `logical_operator` is kept from the definition but conditions are
    always combined with AND.
    """

    field_name: str
    operator: ConditionOperator
    value: Any = None
    logical_operator: LogicalOperator = LogicalOperator.AND

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.field_name:
            raise ValidationError("Condition field cannot be empty")
        if self.operator.is_numeric and (
            isinstance(self.value, bool) or not isinstance(self.value, (int, float))
        ):
            raise ValidationError(
                f"Operator {self.operator.value} on '{self.field_name}' "
                f"requires a numeric value, got {self.value!r}"
            )
        if self.operator is ConditionOperator.CONTAINS and self.value is None:
            raise ValidationError(f"Operator contains on '{self.field_name}' requires a value")
        if self.operator is ConditionOperator.EXISTS and not isinstance(self.value, bool):
            raise ValidationError(
                f"Operator exists on '{self.field_name}' requires a boolean value"
            )


@dataclass(frozen=True)
class RuleOutput:
    destination: OutputDestination
    format: OutputFormat
    template_id: str
    payload: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class WorkflowRule:
    """Conditions plus one typed action and its outputs.

    Required configuration per action:
        notify, report  at least one output
        analyze         config["analysis"]
        intervene       config["intervention"]
        call_api        config["endpoint"]
    """

    rule_id: str
    action: ActionType
    conditions: Tuple[Condition, ...] = field(default_factory=tuple)
    outputs: Tuple[RuleOutput, ...] = field(default_factory=tuple)
    config: Mapping[str, Any] = field(default_factory=dict)
    name: str = ""
    enabled: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditions", tuple(self.conditions))
        object.__setattr__(self, "outputs", tuple(self.outputs))
        self.validate()

    def validate(self) -> None:
        if not self.rule_id:
            raise ValidationError("Rule id cannot be empty")
        if self.action in (ActionType.NOTIFY, ActionType.REPORT) and not self.outputs:
            raise ValidationError(
                f"Rule {self.rule_id}: {self.action.value} requires at least one output"
            )
        required = {
            ActionType.ANALYZE: "analysis",
            ActionType.INTERVENE: "intervention",
            ActionType.CALL_API: "endpoint",
        }.get(self.action)
        if required and not self.config.get(required):
            raise ValidationError(
                f"Rule {self.rule_id}: {self.action.value} requires config '{required}'"
            )


@dataclass(frozen=True)
class Workflow:
    """Named, ordered set of rules run for one trigger kind."""

    workflow_id: str
    name: str
    rules: Tuple[WorkflowRule, ...]
    description: str = ""
    enabled: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))
        if not self.workflow_id:
            raise ValidationError("Workflow id cannot be empty")
        if not self.rules:
            raise ValidationError(f"Workflow {self.workflow_id} has no rules")
        seen = set()
        for rule in self.rules:
            if rule.rule_id in seen:
                raise ValidationError(
                    f"Workflow {self.workflow_id}: duplicate rule id {rule.rule_id}"
                )
            seen.add(rule.rule_id)
