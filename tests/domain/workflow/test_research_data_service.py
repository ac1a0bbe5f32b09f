"""Tests for the research data workflow."""

from datetime import datetime, timedelta, timezone

import pytest

from domain.livestock.core.exceptions import ValidationError
from domain.workflow.core.entities import ResearchWorkflowConfig
from domain.workflow.core.value_objects import AnonymizationLevel
from domain.workflow.research import RecordAnonymizer, ResearchDataService, assess_quality
from infrastructure.research import InMemoryResearchExporter

REF = datetime(2025, 6, 1, tzinfo=timezone.utc)


def record(days_ago: float, weight: float = 80.0, **extra) -> dict:
    base = {
        "user_id": "user_1",
        "animal_id": "goat_1",
        "name": "Jamie Rivera",
        "weight": weight,
        "timestamp": (REF - timedelta(days=days_ago)).isoformat(),
        "consent": True,
    }
    base.update(extra)
    return base


@pytest.fixture
def exporter() -> InMemoryResearchExporter:
    return InMemoryResearchExporter()


@pytest.fixture
def service(exporter) -> ResearchDataService:
    return ResearchDataService(exporter=exporter, clock=lambda: REF)


class TestQuality:
    def test_clean_records_score_full(self) -> None:
        records = [record(10), record(5, 82.0)]

        scores = assess_quality(records, ("weight", "timestamp"), REF, 365)

        assert scores.completeness == 100.0
        assert scores.accuracy == 100.0
        assert scores.consistency == 100.0
        assert scores.timeliness == 100.0
        assert scores.overall == 100.0

    def test_completeness_counts_missing_slots(self) -> None:
        records = [record(1), record(2, weight=None)]

        scores = assess_quality(records, ("weight", "timestamp"), REF, 365)

        assert scores.completeness == pytest.approx(75.0)

    def test_implausible_numbers_reduce_accuracy(self) -> None:
        records = [record(1, weight=-5.0), record(2, weight=float("inf"))]

        scores = assess_quality(records, ("weight",), REF, 365)

        assert scores.accuracy == 0.0

    def test_no_numbers_is_fully_accurate(self) -> None:
        scores = assess_quality([{"note": "ok"}], ("note",), None, 365)

        assert scores.accuracy == 100.0
        assert scores.timeliness == 0.0

    def test_consistency_uses_modal_schema(self) -> None:
        records = [record(1), record(2), record(3), record(4, weight="heavy")]

        scores = assess_quality(records, ("weight",), REF, 365)

        assert scores.consistency == pytest.approx(75.0)

    def test_stale_and_future_records_are_untimely(self) -> None:
        records = [record(10), record(400), record(-1)]

        scores = assess_quality(records, ("weight",), REF, 365)

        assert scores.timeliness == pytest.approx(100.0 / 3)

    def test_empty_set_scores_zero(self) -> None:
        scores = assess_quality([], (), None, 365)

        assert scores.overall == 0.0


class TestAnonymizer:
    def test_basic(self) -> None:
        anonymizer = RecordAnonymizer(AnonymizationLevel.BASIC, salt="s")

        result = anonymizer.anonymize(record(1, notes="fed late"))

        assert "name" not in result
        assert result["user_id"].startswith("anon_")
        assert len(result["user_id"]) == len("anon_") + 16
        assert result["notes"] == "fed late"
        assert not RecordAnonymizer.contains_pii(result)

    def test_pseudonyms_are_stable_per_salt(self) -> None:
        first = RecordAnonymizer(AnonymizationLevel.BASIC, salt="a")
        second = RecordAnonymizer(AnonymizationLevel.BASIC, salt="b")

        assert first.pseudonym("user_1") == first.pseudonym("user_1")
        assert first.pseudonym("user_1") != second.pseudonym("user_1")

    def test_advanced(self) -> None:
        anonymizer = RecordAnonymizer(AnonymizationLevel.ADVANCED)

        result = anonymizer.anonymize(record(0, notes="fed late"))

        assert "notes" not in result
        assert result["timestamp"] == "2025-06-01"
        assert result["animal_id"].startswith("anon_")

    def test_complete(self) -> None:
        anonymizer = RecordAnonymizer(AnonymizationLevel.COMPLETE)

        result = anonymizer.anonymize(record(0, weight=80.26))

        assert "user_id" not in result
        assert "animal_id" not in result
        assert result["timestamp"] == "2025-06"
        assert result["weight"] == 80.3

    def test_raw_identifier_is_pii(self) -> None:
        assert RecordAnonymizer.contains_pii({"user_id": "user_1"})
        assert RecordAnonymizer.contains_pii({"email": "a@b.c"})
        assert not RecordAnonymizer.contains_pii({"weight": 80.0})


class TestProcessResearchDataWorkflow:
    @pytest.mark.asyncio
    async def test_compliant_run_is_exported(self, service, exporter) -> None:
        records = [record(30, 78.0), record(0, 82.0)]

        result = await service.process_research_data_workflow(
            "weight_records",
            records,
            ResearchWorkflowConfig(
                anonymization_level=AnonymizationLevel.ADVANCED,
                required_fields=("weight", "timestamp"),
            ),
        )

        assert result.record_count == 2
        assert result.compliance.compliant
        assert result.exported
        assert exporter.exports[0].run_id == result.run_id
        assert result.processed_at == REF
        weight = result.aggregates["weight"]
        assert weight.count == 2
        assert weight.mean == pytest.approx(80.0)
        assert weight.minimum == 78.0
        assert weight.maximum == 82.0
        assert weight.std == pytest.approx(2.0)

    @pytest.mark.asyncio
    async def test_missing_consent(self, service) -> None:
        records = [record(1), record(2, consent=False)]

        result = await service.process_research_data_workflow("weight_records", records)

        assert not result.compliance.consent_verified
        assert not result.compliance.compliant

    @pytest.mark.asyncio
    async def test_retention_breach(self, service) -> None:
        records = [record(0), record(2000)]

        result = await service.process_research_data_workflow(
            "weight_records", records, ResearchWorkflowConfig(retention_days=1825)
        )

        assert not result.compliance.retention_compliant

    @pytest.mark.asyncio
    async def test_export_disabled(self, service, exporter) -> None:
        result = await service.process_research_data_workflow(
            "weight_records", [record(0)], ResearchWorkflowConfig(export=False)
        )

        assert not result.exported
        assert exporter.exports == []

    @pytest.mark.asyncio
    async def test_no_exporter(self) -> None:
        service = ResearchDataService()

        result = await service.process_research_data_workflow("weight_records", [record(0)])

        assert not result.exported

    @pytest.mark.asyncio
    async def test_empty_records(self, service) -> None:
        result = await service.process_research_data_workflow("weight_records", [])

        assert result.record_count == 0
        assert not result.compliance.consent_verified
        assert result.quality.overall == 0.0
        assert result.aggregates == {}

    @pytest.mark.asyncio
    async def test_scores_are_deterministic(self, service) -> None:
        records = [record(3), record(1, weight=None)]
        config = ResearchWorkflowConfig(required_fields=("weight",))

        first = await service.process_research_data_workflow("w", records, config)
        second = await service.process_research_data_workflow("w", records, config)

        assert first.quality == second.quality


class TestResearchWorkflowConfig:
    def test_rejects_non_positive_windows(self) -> None:
        with pytest.raises(ValidationError):
            ResearchWorkflowConfig(max_age_days=0)
        with pytest.raises(ValidationError):
            ResearchWorkflowConfig(retention_days=0)
