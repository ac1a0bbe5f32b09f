"""ILearningSessionRepository port - recorded learning activities."""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.guidance.core.entities import LearningSession


class ILearningSessionRepository(ABC):
    @abstractmethod
    async def add(self, session: LearningSession) -> None:
        pass

    @abstractmethod
    async def list_for_user(
        self, user_id: str, animal_id: Optional[str] = None
    ) -> List[LearningSession]:
        """Sessions of a user, oldest first, optionally for one animal."""
        pass
