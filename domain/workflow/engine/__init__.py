"""Workflow execution engine."""

from .action_executor import ActionExecutor, Analyzer
from .condition_evaluator import ConditionEvaluator
from .workflow_engine import DEFAULT_TRIGGER_ROUTES, WorkflowEngine

__all__ = [
    "ActionExecutor",
    "Analyzer",
    "ConditionEvaluator",
    "DEFAULT_TRIGGER_ROUTES",
    "WorkflowEngine",
]
