"""
Scheduler infrastructure for intervention follow-ups.
"""

from .follow_up_scheduler import (
    APSchedulerFollowUpScheduler,
    InMemoryFollowUpScheduler,
    follow_up_job_id,
)

__all__ = ["APSchedulerFollowUpScheduler", "InMemoryFollowUpScheduler", "follow_up_job_id"]
