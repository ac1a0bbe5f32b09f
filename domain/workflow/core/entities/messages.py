"""Outbound messages handed to the delivery collaborator."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional
from uuid import uuid4

from ..value_objects import OutputDestination, OutputFormat, TriggerPriority


@dataclass(frozen=True)
class Notification:
    user_id: str
    destination: OutputDestination
    format: OutputFormat
    template_id: str
    title: str
    message: str
    animal_id: Optional[str] = None
    priority: TriggerPriority = TriggerPriority.MEDIUM
    payload: Mapping[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    notification_id: str = field(default_factory=lambda: str(uuid4()))


@dataclass(frozen=True)
class WorkflowReport:
    """Formatted report body for one destination."""

    user_id: str
    destination: OutputDestination
    format: OutputFormat
    template_id: str
    title: str
    body: str
    animal_id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    report_id: str = field(default_factory=lambda: str(uuid4()))
