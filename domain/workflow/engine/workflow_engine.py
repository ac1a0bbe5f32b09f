"""Workflow engine - routes triggers and runs workflow rules."""

from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Mapping, Optional

import structlog

from ..core.entities import RuleResult, Workflow, WorkflowExecutionRecord, WorkflowTrigger
from ..core.ports import IExecutionHistoryRepository
from ..core.value_objects import ExecutionState, RuleStatus, TriggerType
from .action_executor import ActionExecutor
from .condition_evaluator import ConditionEvaluator

logger = structlog.get_logger(__name__)

DEFAULT_TRIGGER_ROUTES: Mapping[TriggerType, str] = {
    TriggerType.FEED_ENTRY: "feed_entry_processing",
    TriggerType.WEIGHT_CHANGE: "weight_change_monitoring",
    TriggerType.PHOTO_ANALYSIS: "photo_analysis_review",
    TriggerType.FCR_CALCULATION: "feed_performance_alert",
    TriggerType.EDUCATIONAL_MILESTONE: "educational_milestone",
    TriggerType.PERFORMANCE_ALERT: "performance_alert_escalation",
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WorkflowEngine:
    """Runs the workflow routed from each trigger kind.

    Per execution: RECEIVED -> CONDITIONS_EVALUATED -> ACTIONS_EXECUTED
    (or SKIPPED when no rule passed) -> RECORDED. Every rule's conditions
    are evaluated before any action runs; passing rules then execute in
    definition order, each isolated from the others' failures. The
    finished record is appended to the execution history.

    Example:
        >>> engine = WorkflowEngine(load_default_workflows(), executor, history)
        >>> trigger = WorkflowTrigger.create("fcr_calculation", "user_1", {"fcr": 8.5})
        >>> record = await engine.trigger_workflow(trigger)
        >>> [r.rule_id for r in record.executed]
        ['high_fcr_alert', 'high_fcr_intervention', 'fcr_dashboard_report']
    """

    def __init__(
        self,
        workflows: Iterable[Workflow],
        executor: ActionExecutor,
        history: IExecutionHistoryRepository,
        evaluator: Optional[ConditionEvaluator] = None,
        routes: Optional[Mapping[TriggerType, str]] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._workflows: Dict[str, Workflow] = {}
        for workflow in workflows:
            self.register_workflow(workflow)
        self._executor = executor
        self._history = history
        self._evaluator = evaluator or ConditionEvaluator()
        self._routes: Dict[TriggerType, str] = dict(
            DEFAULT_TRIGGER_ROUTES if routes is None else routes
        )
        self._clock = clock

    def register_workflow(self, workflow: Workflow) -> None:
        """Add or replace a workflow by id."""
        self._workflows[workflow.workflow_id] = workflow

    def get_workflow(self, workflow_id: str) -> Optional[Workflow]:
        return self._workflows.get(workflow_id)

    def route_for(self, trigger_type: TriggerType) -> Optional[str]:
        return self._routes.get(trigger_type)

    async def trigger_workflow(
        self, trigger: WorkflowTrigger
    ) -> Optional[WorkflowExecutionRecord]:
        """Run the workflow routed from `trigger.type`.

        Args:
            trigger: Event to process

        Returns:
            WorkflowExecutionRecord, or None when the trigger kind has no
            route or the routed workflow is missing or disabled
        """
        workflow_id = self._routes.get(trigger.type)
        workflow = self._workflows.get(workflow_id) if workflow_id else None
        if workflow is None or not workflow.enabled:
            logger.warning(
                "Trigger dropped, no active workflow",
                trigger_type=trigger.type.value,
                workflow_id=workflow_id,
                trigger_id=trigger.trigger_id,
            )
            return None

        started_at = self._clock()
        transitions: List[ExecutionState] = [ExecutionState.RECEIVED]

        context = trigger.context()
        passing = []
        results: Dict[str, RuleResult] = {}
        for rule in workflow.rules:
            if rule.enabled and self._evaluator.evaluate_all(rule.conditions, context):
                passing.append(rule)
            else:
                results[rule.rule_id] = RuleResult(
                    rule_id=rule.rule_id, action=rule.action, status=RuleStatus.SKIPPED
                )
        transitions.append(ExecutionState.CONDITIONS_EVALUATED)

        for rule in passing:
            results[rule.rule_id] = await self._executor.execute(rule, trigger)
        transitions.append(
            ExecutionState.ACTIONS_EXECUTED if passing else ExecutionState.SKIPPED
        )
        transitions.append(ExecutionState.RECORDED)

        record = WorkflowExecutionRecord(
            workflow_id=workflow.workflow_id,
            trigger=trigger,
            results=tuple(results[rule.rule_id] for rule in workflow.rules),
            state_transitions=tuple(transitions),
            started_at=started_at,
            completed_at=self._clock(),
        )
        await self._history.append(record)

        logger.info(
            "Workflow executed",
            workflow_id=workflow.workflow_id,
            trigger_type=trigger.type.value,
            trigger_id=trigger.trigger_id,
            executed=len(record.executed),
            failed=len(record.failed),
            skipped=len(record.skipped),
        )
        return record

    async def history_for(self, workflow_id: str) -> List[WorkflowExecutionRecord]:
        return await self._history.list_for_workflow(workflow_id)
