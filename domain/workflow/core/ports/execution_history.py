"""IExecutionHistoryRepository port - append-only execution log."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.execution import WorkflowExecutionRecord


class IExecutionHistoryRepository(ABC):
    """Port for workflow execution history, keyed by workflow id."""

    @abstractmethod
    async def append(self, record: WorkflowExecutionRecord) -> None:
        pass

    @abstractmethod
    async def list_for_workflow(self, workflow_id: str) -> List[WorkflowExecutionRecord]:
        """Records for a workflow, oldest first."""
        pass
