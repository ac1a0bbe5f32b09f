"""IContributionRepository port - research contributions per user."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.research_contribution import ResearchDataContribution


class IContributionRepository(ABC):
    @abstractmethod
    async def add(self, user_id: str, contribution: ResearchDataContribution) -> None:
        pass

    @abstractmethod
    async def list_for_user(self, user_id: str) -> List[ResearchDataContribution]:
        pass
