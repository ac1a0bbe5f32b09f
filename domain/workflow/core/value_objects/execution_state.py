"""Execution state value objects."""

from enum import Enum


class ExecutionState(str, Enum):
    """Stages of one workflow execution, in order.

    RECEIVED -> CONDITIONS_EVALUATED -> ACTIONS_EXECUTED | SKIPPED -> RECORDED
    """

    RECEIVED = "received"
    CONDITIONS_EVALUATED = "conditions_evaluated"
    ACTIONS_EXECUTED = "actions_executed"
    SKIPPED = "skipped"
    RECORDED = "recorded"


class RuleStatus(str, Enum):
    EXECUTED = "executed"
    SKIPPED = "skipped"
    FAILED = "failed"


class AnonymizationLevel(str, Enum):
    """How aggressively research records are de-identified."""

    BASIC = "basic"
    ADVANCED = "advanced"
    COMPLETE = "complete"
