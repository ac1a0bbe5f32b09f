"""IDeliveryService port - outbound notification delivery."""

from abc import ABC, abstractmethod
from typing import Union

from ..entities.intervention import EducationalIntervention
from ..entities.messages import Notification, WorkflowReport

Deliverable = Union[Notification, WorkflowReport, EducationalIntervention]


class IDeliveryService(ABC):
    """Port for the notification / messaging collaborator."""

    @abstractmethod
    async def deliver(self, item: Deliverable) -> None:
        """Deliver a notification, report or intervention.

        Raises:
            Exception: Delivery failures propagate to the caller
        """
        pass
