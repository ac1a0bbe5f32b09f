"""In-memory research exporter - Implements IResearchExporter port."""

from typing import List

import structlog

from domain.workflow.core.entities import ResearchDataWorkflowResult
from domain.workflow.core.ports import IResearchExporter

logger = structlog.get_logger(__name__)


class InMemoryResearchExporter(IResearchExporter):
    def __init__(self) -> None:
        self.exports: List[ResearchDataWorkflowResult] = []

    async def export(self, result: ResearchDataWorkflowResult) -> None:
        self.exports.append(result)
        logger.info(
            "Research dataset exported",
            run_id=result.run_id,
            data_type=result.data_type,
            records=result.record_count,
        )
