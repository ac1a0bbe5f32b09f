"""In-memory learning session repository implementation."""

from collections import defaultdict
from typing import DefaultDict, List, Optional

from domain.guidance.core.entities import LearningSession
from domain.intelligence.core.ports import ILearningSessionRepository


class InMemoryLearningSessionRepository(ILearningSessionRepository):
    def __init__(self) -> None:
        self._sessions: DefaultDict[str, List[LearningSession]] = defaultdict(list)

    async def add(self, session: LearningSession) -> None:
        sessions = self._sessions[session.user_id]
        sessions.append(session)
        sessions.sort(key=lambda s: s.timestamp)

    async def list_for_user(
        self, user_id: str, animal_id: Optional[str] = None
    ) -> List[LearningSession]:
        sessions = self._sessions.get(user_id, [])
        if animal_id is not None:
            return [s for s in sessions if s.animal_id == animal_id]
        return list(sessions)
