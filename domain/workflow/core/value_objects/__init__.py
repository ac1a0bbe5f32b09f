"""Value objects for workflow automation."""

from .action_type import ActionType, OutputDestination, OutputFormat
from .condition_operator import ConditionOperator, LogicalOperator
from .execution_state import AnonymizationLevel, ExecutionState, RuleStatus
from .trigger_type import TriggerPriority, TriggerType

__all__ = [
    "ActionType",
    "OutputDestination",
    "OutputFormat",
    "ConditionOperator",
    "LogicalOperator",
    "AnonymizationLevel",
    "ExecutionState",
    "RuleStatus",
    "TriggerPriority",
    "TriggerType",
]
