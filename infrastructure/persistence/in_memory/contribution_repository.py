"""In-memory research contribution repository implementation."""

from collections import defaultdict
from typing import DefaultDict, List

from domain.intelligence.core.entities import ResearchDataContribution
from domain.intelligence.core.ports import IContributionRepository


class InMemoryContributionRepository(IContributionRepository):
    def __init__(self) -> None:
        self._contributions: DefaultDict[str, List[ResearchDataContribution]] = defaultdict(list)

    async def add(self, user_id: str, contribution: ResearchDataContribution) -> None:
        self._contributions[user_id].append(contribution)

    async def list_for_user(self, user_id: str) -> List[ResearchDataContribution]:
        return list(self._contributions.get(user_id, ()))
