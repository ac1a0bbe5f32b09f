"""In-memory workflow execution history implementation."""

from collections import defaultdict
from typing import DefaultDict, List

from domain.workflow.core.entities import WorkflowExecutionRecord
from domain.workflow.core.ports import IExecutionHistoryRepository


class InMemoryExecutionHistoryRepository(IExecutionHistoryRepository):
    """Append-only execution records keyed by workflow id."""

    def __init__(self) -> None:
        self._records: DefaultDict[str, List[WorkflowExecutionRecord]] = defaultdict(list)

    async def append(self, record: WorkflowExecutionRecord) -> None:
        self._records[record.workflow_id].append(record)

    async def list_for_workflow(self, workflow_id: str) -> List[WorkflowExecutionRecord]:
        return list(self._records.get(workflow_id, ()))

    def count(self) -> int:
        return sum(len(records) for records in self._records.values())
