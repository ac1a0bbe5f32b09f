"""IFollowUpScheduler port - deferred intervention follow-up checks."""

from abc import ABC, abstractmethod

from ..entities.intervention import EducationalIntervention


class IFollowUpScheduler(ABC):
    @abstractmethod
    async def schedule_follow_up(self, intervention: EducationalIntervention) -> str:
        """Schedule a check at `intervention.follow_up_at`.

        Returns:
            str: Scheduler job identifier
        """
        pass
