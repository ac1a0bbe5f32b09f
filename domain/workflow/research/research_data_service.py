"""Research data workflow - quality, compliance, anonymization, export."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

import numpy as np
import structlog

from ..core.entities import (
    ComplianceFlags,
    FieldAggregate,
    ResearchDataWorkflowResult,
    ResearchWorkflowConfig,
)
from ..core.ports import IResearchExporter
from . import quality
from .anonymizer import RecordAnonymizer
from .timestamps import coerce_timestamp

logger = structlog.get_logger(__name__)

CONSENT_FIELD = "consent"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResearchDataService:
    """Prepares contributed records for research use.

    Steps: score quality on the raw records, anonymize, check
    compliance, aggregate numeric fields, then hand off to the exporter.
    Scores depend only on the records and the config.
    """

    def __init__(
        self,
        exporter: Optional[IResearchExporter] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._exporter = exporter
        self._clock = clock

    async def process_research_data_workflow(
        self,
        data_type: str,
        records: Sequence[Mapping[str, Any]],
        config: Optional[ResearchWorkflowConfig] = None,
    ) -> ResearchDataWorkflowResult:
        """Run the research pipeline over a record set.

        Args:
            data_type: Kind of data (e.g. "weight_records")
            records: Raw records as mappings
            config: Pipeline options

        Returns:
            ResearchDataWorkflowResult
        """
        config = config or ResearchWorkflowConfig()
        reference = quality.reference_time(records, config.reference_time)

        scores = quality.assess_quality(
            records, config.required_fields, reference, config.max_age_days
        )

        anonymizer = RecordAnonymizer(config.anonymization_level, config.salt)
        anonymized = tuple(anonymizer.anonymize(r) for r in records)

        compliance = ComplianceFlags(
            pii_removed=not any(anonymizer.contains_pii(r) for r in anonymized),
            consent_verified=bool(records) and all(r.get(CONSENT_FIELD) is True for r in records),
            retention_compliant=self._retention_compliant(
                records, reference, config.retention_days
            ),
        )

        result = ResearchDataWorkflowResult(
            data_type=data_type,
            record_count=len(records),
            quality=scores,
            compliance=compliance,
            records=anonymized,
            aggregates=self.aggregate(anonymized),
            anonymization_level=config.anonymization_level,
            processed_at=self._clock(),
        )

        if config.export and self._exporter is not None:
            await self._exporter.export(result)
            result = replace(result, exported=True)

        logger.info(
            "Research data processed",
            data_type=data_type,
            records=len(records),
            overall_quality=round(scores.overall, 1),
            compliant=compliance.compliant,
            exported=result.exported,
        )
        return result

    @staticmethod
    def _retention_compliant(
        records: Sequence[Mapping[str, Any]],
        reference: Optional[datetime],
        retention_days: int,
    ) -> bool:
        if reference is None:
            return True
        limit = timedelta(days=retention_days)
        for record in records:
            stamp = coerce_timestamp(record.get(quality.TIMESTAMP_FIELD))
            if stamp is not None and reference - stamp > limit:
                return False
        return True

    @staticmethod
    def aggregate(records: Sequence[Mapping[str, Any]]) -> Dict[str, FieldAggregate]:
        """count / mean / min / max / std for every numeric field."""
        columns: Dict[str, list] = {}
        for record in records:
            for key, value in record.items():
                if isinstance(value, (int, float)) and not isinstance(value, bool):
                    columns.setdefault(key, []).append(float(value))

        aggregates: Dict[str, FieldAggregate] = {}
        for key in sorted(columns):
            values = np.array(columns[key])
            values = values[np.isfinite(values)]
            if values.size == 0:
                continue
            aggregates[key] = FieldAggregate(
                count=int(values.size),
                mean=float(values.mean()),
                minimum=float(values.min()),
                maximum=float(values.max()),
                std=float(values.std()),
            )
        return aggregates
