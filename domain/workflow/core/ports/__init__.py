"""Ports for workflow automation."""

from .delivery import Deliverable, IDeliveryService
from .execution_history import IExecutionHistoryRepository
from .external_api import IExternalApiClient
from .follow_up_scheduler import IFollowUpScheduler
from .research_exporter import IResearchExporter

__all__ = [
    "Deliverable",
    "IDeliveryService",
    "IExecutionHistoryRepository",
    "IExternalApiClient",
    "IFollowUpScheduler",
    "IResearchExporter",
]
