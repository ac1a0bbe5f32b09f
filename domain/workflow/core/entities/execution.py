"""Execution record entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional, Tuple
from uuid import uuid4

from ..value_objects import ActionType, ExecutionState, RuleStatus
from .trigger import WorkflowTrigger


@dataclass(frozen=True)
class RuleResult:
    rule_id: str
    action: ActionType
    status: RuleStatus
    payload: Mapping[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status is RuleStatus.EXECUTED


@dataclass(frozen=True)
class WorkflowExecutionRecord:
    """Outcome of running one workflow for one trigger.

    `results` holds one entry per rule in workflow order.
    """

    workflow_id: str
    trigger: WorkflowTrigger
    results: Tuple[RuleResult, ...]
    state_transitions: Tuple[ExecutionState, ...]
    started_at: datetime
    completed_at: datetime
    execution_id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def final_state(self) -> ExecutionState:
        return self.state_transitions[-1]

    @property
    def executed(self) -> Tuple[RuleResult, ...]:
        return tuple(r for r in self.results if r.status is RuleStatus.EXECUTED)

    @property
    def failed(self) -> Tuple[RuleResult, ...]:
        return tuple(r for r in self.results if r.status is RuleStatus.FAILED)

    @property
    def skipped(self) -> Tuple[RuleResult, ...]:
        return tuple(r for r in self.results if r.status is RuleStatus.SKIPPED)

    def result_for(self, rule_id: str) -> Optional[RuleResult]:
        for result in self.results:
            if result.rule_id == rule_id:
                return result
        return None
