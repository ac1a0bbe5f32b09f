"""Educational intervention construction and hand-off."""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Mapping

import structlog

from ..core.entities import DeliveryPlan, EducationalIntervention
from ..core.ports import IDeliveryService, IFollowUpScheduler
from ..core.templating import render
from ..core.value_objects import TriggerPriority
from .templates import DEFAULT_TEMPLATE, INTERVENTION_TEMPLATES, InterventionTemplate

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


DELIVERY_PLANS: Dict[TriggerPriority, DeliveryPlan] = {
    TriggerPriority.URGENT: DeliveryPlan("push", "immediate", "once"),
    TriggerPriority.HIGH: DeliveryPlan("push", "within_24_hours", "daily_until_resolved"),
    TriggerPriority.MEDIUM: DeliveryPlan("in_app", "next_session", "weekly"),
    TriggerPriority.LOW: DeliveryPlan("email", "weekly_digest", "weekly"),
}


class InterventionService:
    """Builds interventions from templates and hands them off.

    The record is delivered first, then its follow-up is scheduled. Both
    collaborators are awaited; their failures propagate.
    """

    def __init__(
        self,
        delivery: IDeliveryService,
        scheduler: IFollowUpScheduler,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._delivery = delivery
        self._scheduler = scheduler
        self._clock = clock

    def build_intervention(
        self, student_id: str, trigger_name: str, context: Mapping[str, Any]
    ) -> EducationalIntervention:
        template = self._template_for(trigger_name)
        created_at = self._clock()

        return EducationalIntervention(
            student_id=student_id,
            trigger_name=trigger_name,
            title=template.title,
            description=render(template.description, context),
            action_items=template.action_items,
            resources=template.resources,
            timeline=template.timeline,
            delivery=self._delivery_plan(context.get("priority")),
            created_at=created_at,
            follow_up_at=created_at + timedelta(days=template.follow_up_days),
            context=dict(context),
        )

    async def process_educational_intervention(
        self, student_id: str, trigger_name: str, context: Mapping[str, Any]
    ) -> EducationalIntervention:
        """Build, deliver and schedule follow-up for an intervention.

        Args:
            student_id: Student to reach
            trigger_name: Template key (unknown names use a general template)
            context: Values for the template; "priority" selects delivery

        Returns:
            EducationalIntervention: The delivered record
        """
        intervention = self.build_intervention(student_id, trigger_name, context)

        await self._delivery.deliver(intervention)
        job_id = await self._scheduler.schedule_follow_up(intervention)

        logger.info(
            "Educational intervention processed",
            student_id=student_id,
            trigger_name=trigger_name,
            intervention_id=intervention.intervention_id,
            follow_up_job=job_id,
        )
        return intervention

    @staticmethod
    def _template_for(trigger_name: str) -> InterventionTemplate:
        template = INTERVENTION_TEMPLATES.get(trigger_name)
        if template is None:
            logger.debug("No intervention template, using default", trigger_name=trigger_name)
            return INTERVENTION_TEMPLATES[DEFAULT_TEMPLATE]
        return template

    @staticmethod
    def _delivery_plan(priority: Any) -> DeliveryPlan:
        try:
            level = TriggerPriority(priority)
        except ValueError:
            level = TriggerPriority.MEDIUM
        return DELIVERY_PLANS[level]
