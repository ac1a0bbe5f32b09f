"""ResearchDataContribution - a user's anonymized data donation."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from domain.workflow.core.value_objects import AnonymizationLevel


@dataclass(frozen=True)
class ResearchDataContribution:
    """Attributes:
    contributor_id: Pseudonym of the contributing user
    data_type: Kind of data contributed
    anonymization_level: Level the records were anonymized to
    data_points: Number of records
    quality_score: Overall quality, 0-100
    research_value: Estimated value in dollars
    period_start: Earliest record time
    period_end: Latest record time
    studies_enabled: Studies the volume can support
    educational_improvement: Quality on a 0-10 scale
    compliant: All compliance checks passed
    """

    contributor_id: str
    data_type: str
    anonymization_level: AnonymizationLevel
    data_points: int
    quality_score: float
    research_value: float
    period_start: datetime
    period_end: datetime
    studies_enabled: int
    educational_improvement: int
    compliant: bool
    contribution_id: str = field(default_factory=lambda: str(uuid4()))
