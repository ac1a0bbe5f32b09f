"""WorkflowTrigger entity - a domain event that may start a workflow."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Union
from uuid import uuid4

from domain.livestock.core.exceptions import ValidationError

from ..value_objects import TriggerPriority, TriggerType
from .payloads import TriggerPayload, payload_from_mapping


@dataclass(frozen=True)
class WorkflowTrigger:
    """Typed event routed to a workflow.

    Attributes:
        type: Trigger kind, must match the payload kind
        user_id: User the event belongs to
        payload: Typed payload for the kind
        animal_id: Optional animal concerned
        priority: Urgency
        timestamp: When the event happened
        trigger_id: Unique identifier
    """

    type: TriggerType
    user_id: str
    payload: TriggerPayload
    animal_id: Optional[str] = None
    priority: TriggerPriority = TriggerPriority.MEDIUM
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    trigger_id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValidationError("Trigger user_id cannot be empty")
        if not isinstance(self.payload, TriggerPayload):
            raise ValidationError("Trigger payload must be a TriggerPayload")
        if self.payload.kind is not self.type:
            raise ValidationError(
                f"Payload kind {self.payload.kind.value} does not match "
                f"trigger type {self.type.value}"
            )

    @classmethod
    def create(
        cls,
        trigger_type: Union[TriggerType, str],
        user_id: str,
        data: Mapping[str, Any],
        animal_id: Optional[str] = None,
        priority: Union[TriggerPriority, str] = TriggerPriority.MEDIUM,
        timestamp: Optional[datetime] = None,
    ) -> "WorkflowTrigger":
        """Build a trigger from an untyped payload mapping.

        Raises:
            ValidationError: Unknown kind or priority, or malformed payload

        Example:
            >>> WorkflowTrigger.create("fcr_calculation", "user_1", {"fcr": 8.5})
        """
        try:
            kind = TriggerType(trigger_type)
            level = TriggerPriority(priority)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        return cls(
            type=kind,
            user_id=user_id,
            payload=payload_from_mapping(kind, data),
            animal_id=animal_id,
            priority=level,
            timestamp=timestamp or datetime.now(timezone.utc),
        )

    def context(self) -> Dict[str, Any]:
        """Evaluation context for rule conditions.

        Payload fields sit at the top level next to the trigger fields
        and are also reachable under `payload.`.
        """
        fields = self.payload.as_fields()
        context: Dict[str, Any] = dict(fields)
        context.update(
            {
                "trigger_id": self.trigger_id,
                "type": self.type.value,
                "user_id": self.user_id,
                "animal_id": self.animal_id,
                "priority": self.priority.value,
                "timestamp": self.timestamp.isoformat(),
                "payload": fields,
            }
        )
        return context
