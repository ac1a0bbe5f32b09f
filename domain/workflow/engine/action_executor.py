"""Action handlers for workflow rules.

Each ActionType maps to one async handler. Handlers return a payload
mapping on success and raise on failure; the executor turns either
outcome into a RuleResult so one failing rule never stops its siblings.
"""

import json
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

import structlog

from domain.guidance.core.entities import GuidanceContext
from domain.guidance.core.ports import IGuidanceProvider
from domain.livestock.core.exceptions import ActionExecutionError

from ..core.entities import (
    Notification,
    RuleOutput,
    RuleResult,
    WorkflowReport,
    WorkflowRule,
    WorkflowTrigger,
)
from ..core.ports import IDeliveryService, IExternalApiClient
from ..core.templating import render
from ..core.value_objects import ActionType, OutputFormat, RuleStatus
from ..intervention import InterventionService

logger = structlog.get_logger(__name__)

Analyzer = Callable[[WorkflowTrigger], Any]
ActionHandler = Callable[[WorkflowRule, WorkflowTrigger], Awaitable[Dict[str, Any]]]


class ActionExecutor:
    """Runs the action of a rule whose conditions passed.

    Collaborators are optional; a rule whose action needs a missing
    collaborator fails with ActionExecutionError.
    """

    def __init__(
        self,
        delivery: IDeliveryService,
        guidance: Optional[IGuidanceProvider] = None,
        interventions: Optional[InterventionService] = None,
        analyzers: Optional[Mapping[str, Analyzer]] = None,
        external_api: Optional[IExternalApiClient] = None,
    ) -> None:
        self._delivery = delivery
        self._guidance = guidance
        self._interventions = interventions
        self._analyzers: Dict[str, Analyzer] = dict(analyzers or {})
        self._external_api = external_api
        self._handlers: Dict[ActionType, ActionHandler] = {
            ActionType.NOTIFY: self._notify,
            ActionType.RECOMMEND: self._recommend,
            ActionType.ANALYZE: self._analyze,
            ActionType.REPORT: self._report,
            ActionType.INTERVENE: self._intervene,
            ActionType.CALL_API: self._call_api,
        }

    def register_analyzer(self, name: str, analyzer: Analyzer) -> None:
        self._analyzers[name] = analyzer

    async def execute(self, rule: WorkflowRule, trigger: WorkflowTrigger) -> RuleResult:
        handler = self._handlers[rule.action]
        try:
            payload = await handler(rule, trigger)
        except Exception as e:
            # Isolate the failure to this rule
            logger.warning(
                "Workflow action failed",
                rule_id=rule.rule_id,
                action=rule.action.value,
                trigger_id=trigger.trigger_id,
                error=str(e),
                exc_info=True,
            )
            return RuleResult(
                rule_id=rule.rule_id,
                action=rule.action,
                status=RuleStatus.FAILED,
                error=str(e),
            )

        logger.debug(
            "Workflow action executed",
            rule_id=rule.rule_id,
            action=rule.action.value,
            trigger_id=trigger.trigger_id,
        )
        return RuleResult(
            rule_id=rule.rule_id,
            action=rule.action,
            status=RuleStatus.EXECUTED,
            payload=payload,
        )

    async def _notify(self, rule: WorkflowRule, trigger: WorkflowTrigger) -> Dict[str, Any]:
        context = trigger.context()
        title = render(rule.config.get("title", rule.name or rule.rule_id), context)
        message = render(
            rule.config.get("message", "{type} update for animal {animal_id}"), context
        )

        notification_ids = []
        for output in rule.outputs:
            notification = self._notification(rule, trigger, output, title, message)
            await self._delivery.deliver(notification)
            notification_ids.append(notification.notification_id)

        return {"notifications": len(notification_ids), "notification_ids": notification_ids}

    @staticmethod
    def _notification(
        rule: WorkflowRule,
        trigger: WorkflowTrigger,
        output: RuleOutput,
        title: str,
        message: str,
    ) -> Notification:
        return Notification(
            user_id=trigger.user_id,
            destination=output.destination,
            format=output.format,
            template_id=output.template_id,
            title=title,
            message=message,
            animal_id=trigger.animal_id,
            priority=trigger.priority,
            payload={**output.payload, "rule_id": rule.rule_id, "trigger_id": trigger.trigger_id},
        )

    async def _recommend(self, rule: WorkflowRule, trigger: WorkflowTrigger) -> Dict[str, Any]:
        if self._guidance is None:
            raise ActionExecutionError("recommend", "no guidance provider configured")

        response = await self._guidance.get_guidance(
            GuidanceContext(
                user_id=trigger.user_id,
                topic=rule.config.get("topic", trigger.type.value),
                animal_id=trigger.animal_id,
                data=trigger.payload.as_fields(),
            )
        )

        for output in rule.outputs:
            await self._delivery.deliver(
                self._notification(
                    rule, trigger, output, rule.name or "Mentor guidance", response.guidance
                )
            )

        return {
            "guidance": response.guidance,
            "recommendations": list(response.recommendations),
            "confidence": response.confidence,
        }

    async def _analyze(self, rule: WorkflowRule, trigger: WorkflowTrigger) -> Dict[str, Any]:
        name = rule.config["analysis"]
        analyzer = self._analyzers.get(name)
        if analyzer is None:
            raise ActionExecutionError("analyze", f"unknown analysis '{name}'")
        result = analyzer(trigger)
        return {"analysis": name, "result": result}

    async def _report(self, rule: WorkflowRule, trigger: WorkflowTrigger) -> Dict[str, Any]:
        fields = trigger.payload.as_fields()
        title = render(rule.config.get("title", f"{trigger.type.value} report"), trigger.context())

        report_ids = []
        for output in rule.outputs:
            report = WorkflowReport(
                user_id=trigger.user_id,
                destination=output.destination,
                format=output.format,
                template_id=output.template_id,
                title=title,
                body=self._format_body(output.format, title, fields),
                animal_id=trigger.animal_id,
            )
            await self._delivery.deliver(report)
            report_ids.append(report.report_id)

        return {"reports": len(report_ids), "report_ids": report_ids}

    @staticmethod
    def _format_body(fmt: OutputFormat, title: str, fields: Mapping[str, Any]) -> str:
        if fmt is OutputFormat.JSON:
            return json.dumps({"title": title, "data": fields}, sort_keys=True, default=str)
        lines = [title]
        lines.extend(f"{key}: {fields[key]}" for key in sorted(fields) if fields[key] is not None)
        return "\n".join(lines)

    async def _intervene(self, rule: WorkflowRule, trigger: WorkflowTrigger) -> Dict[str, Any]:
        if self._interventions is None:
            raise ActionExecutionError("intervene", "no intervention service configured")

        intervention = await self._interventions.process_educational_intervention(
            student_id=trigger.user_id,
            trigger_name=rule.config["intervention"],
            context=trigger.context(),
        )
        return {
            "intervention_id": intervention.intervention_id,
            "title": intervention.title,
            "follow_up_at": intervention.follow_up_at.isoformat(),
        }

    async def _call_api(self, rule: WorkflowRule, trigger: WorkflowTrigger) -> Dict[str, Any]:
        if self._external_api is None:
            raise ActionExecutionError("call_api", "no external integration configured")

        endpoint = rule.config["endpoint"]
        response = await self._external_api.call(
            endpoint,
            {**rule.config.get("payload", {}), "trigger": trigger.payload.as_fields()},
        )
        return {"endpoint": endpoint, "response": response}
