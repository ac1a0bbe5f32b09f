"""Condition operator value objects."""

from enum import Enum


class ConditionOperator(str, Enum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    CONTAINS = "contains"
    EXISTS = "exists"

    @property
    def is_numeric(self) -> bool:
        return self in (ConditionOperator.GREATER_THAN, ConditionOperator.LESS_THAN)


class LogicalOperator(str, Enum):
    """Per-condition joiner kept for definition compatibility.

    Rules always combine their conditions with AND; this value is parsed
    and stored but never changes evaluation.
    """

    AND = "and"
    OR = "or"
