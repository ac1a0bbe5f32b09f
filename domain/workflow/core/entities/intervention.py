"""EducationalIntervention entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Tuple
from uuid import uuid4


@dataclass(frozen=True)
class DeliveryPlan:
    method: str
    timing: str
    frequency: str


@dataclass(frozen=True)
class EducationalIntervention:
    """Structured learning intervention for a student.

    Attributes:
        student_id: Student receiving the intervention
        trigger_name: Situation that caused it (e.g. "high_fcr")
        title: Short title
        description: What happened and why it matters
        action_items: Concrete steps for the student
        resources: Learning material
        timeline: Expected time to act
        delivery: How and when it is delivered
        created_at: Construction time
        follow_up_at: When progress is checked
        context: Values the intervention was built from
        intervention_id: Unique identifier
    """

    student_id: str
    trigger_name: str
    title: str
    description: str
    action_items: Tuple[str, ...]
    resources: Tuple[str, ...]
    timeline: str
    delivery: DeliveryPlan
    created_at: datetime
    follow_up_at: datetime
    context: Mapping[str, Any] = field(default_factory=dict)
    intervention_id: str = field(default_factory=lambda: str(uuid4()))
