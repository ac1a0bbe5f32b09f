"""In-memory delivery outbox - Implements IDeliveryService port."""

from typing import List

import structlog

from domain.workflow.core.entities import EducationalIntervention, Notification, WorkflowReport
from domain.workflow.core.ports import Deliverable, IDeliveryService

logger = structlog.get_logger(__name__)


class InMemoryOutbox(IDeliveryService):
    """
    Collects delivered items instead of sending them.

    The host application drains the outbox into its push, email and
    in-app channels.
    """

    def __init__(self) -> None:
        self._items: List[Deliverable] = []

    async def deliver(self, item: Deliverable) -> None:
        self._items.append(item)
        logger.debug("Item queued for delivery", kind=type(item).__name__, user_id=self._owner(item))

    @staticmethod
    def _owner(item: Deliverable) -> str:
        if isinstance(item, EducationalIntervention):
            return item.student_id
        return item.user_id

    @property
    def items(self) -> List[Deliverable]:
        return list(self._items)

    @property
    def notifications(self) -> List[Notification]:
        return [i for i in self._items if isinstance(i, Notification)]

    @property
    def reports(self) -> List[WorkflowReport]:
        return [i for i in self._items if isinstance(i, WorkflowReport)]

    @property
    def interventions(self) -> List[EducationalIntervention]:
        return [i for i in self._items if isinstance(i, EducationalIntervention)]

    def drain(self) -> List[Deliverable]:
        """Return and remove every queued item."""
        items, self._items = self._items, []
        return items
