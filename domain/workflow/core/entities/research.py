"""Research data workflow configuration and result entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional, Tuple
from uuid import uuid4

from domain.livestock.core.exceptions import ValidationError

from ..value_objects import AnonymizationLevel


@dataclass(frozen=True)
class ResearchWorkflowConfig:
    """Options for one research data run.

    Attributes:
        anonymization_level: De-identification strength
        required_fields: Fields counted for completeness; all observed
            fields when empty
        max_age_days: Records newer than this are timely
        retention_days: Records older than this break retention policy
        reference_time: Time ages are measured from; latest record
            timestamp when None
        salt: Salt for identifier pseudonyms
        export: Hand the result to the exporter when one is configured
    """

    anonymization_level: AnonymizationLevel = AnonymizationLevel.BASIC
    required_fields: Tuple[str, ...] = field(default_factory=tuple)
    max_age_days: int = 365
    retention_days: int = 1825
    reference_time: Optional[datetime] = None
    salt: str = ""
    export: bool = True

    def __post_init__(self) -> None:
        if self.max_age_days < 1:
            raise ValidationError("max_age_days must be >= 1")
        if self.retention_days < 1:
            raise ValidationError("retention_days must be >= 1")


@dataclass(frozen=True)
class DataQualityScores:
    """Quality percentages, each 0-100."""

    completeness: float
    accuracy: float
    consistency: float
    timeliness: float

    @property
    def overall(self) -> float:
        return (self.completeness + self.accuracy + self.consistency + self.timeliness) / 4.0


@dataclass(frozen=True)
class ComplianceFlags:
    pii_removed: bool
    consent_verified: bool
    retention_compliant: bool

    @property
    def compliant(self) -> bool:
        return self.pii_removed and self.consent_verified and self.retention_compliant


@dataclass(frozen=True)
class FieldAggregate:
    count: int
    mean: float
    minimum: float
    maximum: float
    std: float


@dataclass(frozen=True)
class ResearchDataWorkflowResult:
    data_type: str
    record_count: int
    quality: DataQualityScores
    compliance: ComplianceFlags
    records: Tuple[Mapping[str, Any], ...]
    aggregates: Mapping[str, FieldAggregate]
    anonymization_level: AnonymizationLevel
    processed_at: datetime
    exported: bool = False
    run_id: str = field(default_factory=lambda: str(uuid4()))
