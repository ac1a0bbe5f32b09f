"""Shared test fixtures.

Fixtures build a goat with a seeded in-memory catalog and history so
each test only adds the observations it cares about.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, List, Sequence

import pytest

from domain.livestock.core.entities import (
    AnimalRef,
    FeedImpactScore,
    FeedObservation,
    GrowthAssessment,
    HealthIndicator,
    PhotoObservation,
    WeightObservation,
)
from domain.livestock.core.value_objects import Severity
from infrastructure.catalog import InMemoryFeedCatalog
from infrastructure.persistence.in_memory import (
    InMemoryFCRHistory,
    InMemoryObservationHistory,
)

DAY0 = datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def day0() -> datetime:
    """Fixed aware UTC start of the observation window."""
    return DAY0


@pytest.fixture
def goat() -> AnimalRef:
    return AnimalRef(animal_id="goat_1", species="Goat", breed="Boer", name="Daisy")


@pytest.fixture
def catalog() -> InMemoryFeedCatalog:
    return InMemoryFeedCatalog()


@pytest.fixture
def observations() -> InMemoryObservationHistory:
    return InMemoryObservationHistory()


@pytest.fixture
def fcr_history() -> InMemoryFCRHistory:
    return InMemoryFCRHistory()


@pytest.fixture
def make_weights() -> Callable[..., List[WeightObservation]]:
    """Weights for `animal_id` at (day offset, lb) points."""

    def _make(points: Sequence[tuple], animal_id: str = "goat_1") -> List[WeightObservation]:
        return [
            WeightObservation(animal_id=animal_id, weight=w, timestamp=DAY0 + timedelta(days=d))
            for d, w in points
        ]

    return _make


@pytest.fixture
def make_feed() -> Callable[..., FeedObservation]:
    def _make(
        day: float,
        amount: float,
        cost: float,
        feed_product_id: str = "feed_001",
        animal_id: str = "goat_1",
    ) -> FeedObservation:
        return FeedObservation(
            animal_id=animal_id,
            feed_product_id=feed_product_id,
            amount=amount,
            cost=cost,
            timestamp=DAY0 + timedelta(days=day),
        )

    return _make


@pytest.fixture
def make_photo() -> Callable[..., PhotoObservation]:
    def _make(
        day: float,
        body_condition: float = 5.0,
        estimated_weight: float = 60.0,
        health_scores: Sequence[float] = (8.0, 8.0),
        severity: Severity = Severity.NORMAL,
        overall_impact: float = 75.0,
        animal_id: str = "goat_1",
        fat_score: float = 5.5,
        muscle_score: float = 5.5,
    ) -> PhotoObservation:
        indicators = tuple(
            HealthIndicator(type=f"indicator_{i}", score=s, severity=severity)
            for i, s in enumerate(health_scores)
        )
        return PhotoObservation(
            animal_id=animal_id,
            captured_at=DAY0 + timedelta(days=day),
            body_condition_score=body_condition,
            estimated_weight=estimated_weight,
            health_indicators=indicators,
            growth_assessment=GrowthAssessment(fat_score=fat_score, muscle_score=muscle_score),
            feed_impact=FeedImpactScore(
                nutrition_adequacy=overall_impact,
                feed_efficiency_visual=overall_impact,
                health_impact=overall_impact,
                growth_progression=overall_impact,
                overall_score=overall_impact,
            ),
            confidence=80.0,
        )

    return _make
