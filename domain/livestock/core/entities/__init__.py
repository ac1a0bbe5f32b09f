"""Domain entities for the livestock domain."""

from .animal import MULTI_SPECIES, AnimalRef
from .feed_product import FeedProductProfile, NutritionalProfile, PerformanceBenchmarks
from .observations import FeedObservation, WeightObservation
from .photo_observation import (
    FeedImpactScore,
    GrowthAssessment,
    HealthIndicator,
    PhotoObservation,
)

__all__ = [
    "MULTI_SPECIES",
    "AnimalRef",
    "FeedProductProfile",
    "NutritionalProfile",
    "PerformanceBenchmarks",
    "FeedObservation",
    "WeightObservation",
    "FeedImpactScore",
    "GrowthAssessment",
    "HealthIndicator",
    "PhotoObservation",
]
