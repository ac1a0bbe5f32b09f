"""IResearchExporter port - hand-off of anonymized research data."""

from abc import ABC, abstractmethod

from ..entities.research import ResearchDataWorkflowResult


class IResearchExporter(ABC):
    @abstractmethod
    async def export(self, result: ResearchDataWorkflowResult) -> None:
        pass
