"""
APScheduler-backed intervention follow-up scheduling.

Each intervention gets a one-shot date job at its follow_up_at time.
"""

from typing import Awaitable, Callable, Dict, List, Optional

import structlog
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.date import DateTrigger

from domain.workflow.core.entities import EducationalIntervention
from domain.workflow.core.ports import IFollowUpScheduler

logger = structlog.get_logger(__name__)

FollowUpHandler = Callable[[EducationalIntervention], Awaitable[None]]


def follow_up_job_id(intervention: EducationalIntervention) -> str:
    return f"follow_up_{intervention.intervention_id}"


class APSchedulerFollowUpScheduler(IFollowUpScheduler):
    """
    Schedules follow-up checks on an AsyncIOScheduler.

    Jobs may be added before start(); they run once the scheduler is
    started inside an event loop.
    """

    def __init__(
        self,
        scheduler: Optional[AsyncIOScheduler] = None,
        handler: Optional[FollowUpHandler] = None,
    ) -> None:
        self.scheduler = scheduler or AsyncIOScheduler(
            timezone="UTC",
            job_defaults={
                "coalesce": True,  # Combine missed runs
                "max_instances": 1,
                "misfire_grace_time": 3600,
            },
        )
        self._handler = handler

    async def schedule_follow_up(self, intervention: EducationalIntervention) -> str:
        job = self.scheduler.add_job(
            self._run_follow_up,
            trigger=DateTrigger(run_date=intervention.follow_up_at, timezone="UTC"),
            args=[intervention],
            id=follow_up_job_id(intervention),
            name=f"Follow-up: {intervention.title}",
            replace_existing=True,
        )
        logger.info(
            "Follow-up scheduled",
            job_id=job.id,
            student_id=intervention.student_id,
            run_date=intervention.follow_up_at.isoformat(),
        )
        return job.id

    async def _run_follow_up(self, intervention: EducationalIntervention) -> None:
        logger.info(
            "Follow-up due",
            intervention_id=intervention.intervention_id,
            student_id=intervention.student_id,
            trigger_name=intervention.trigger_name,
        )
        if self._handler is not None:
            await self._handler(intervention)

    def start(self) -> None:
        if self.scheduler.running:
            logger.warning("Scheduler already running")
            return
        self.scheduler.start()
        logger.info("Follow-up scheduler started")

    def shutdown(self, wait: bool = True) -> None:
        if not self.scheduler.running:
            logger.warning("Scheduler not running")
            return
        self.scheduler.shutdown(wait=wait)
        logger.info("Follow-up scheduler shutdown", wait=wait)

    def get_jobs(self) -> List[Dict[str, Optional[str]]]:
        return [
            {
                "id": job.id,
                "name": job.name,
                # Pending jobs (scheduler not started) have no next_run_time yet
                "next_run": str(getattr(job, "next_run_time", None) or ""),
                "trigger": str(job.trigger),
            }
            for job in self.scheduler.get_jobs()
        ]


class InMemoryFollowUpScheduler(IFollowUpScheduler):
    """Records follow-ups without running them (for testing)."""

    def __init__(self) -> None:
        self.scheduled: List[EducationalIntervention] = []

    async def schedule_follow_up(self, intervention: EducationalIntervention) -> str:
        self.scheduled.append(intervention)
        return follow_up_job_id(intervention)
