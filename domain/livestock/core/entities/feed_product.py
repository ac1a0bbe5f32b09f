"""FeedProductProfile - catalog reference data for a feed product."""

from dataclasses import dataclass, field
from typing import Tuple

from ..exceptions import ValidationError
from ..value_objects import clamp, clamp_percent, PALATABILITY_RANGE
from .animal import MULTI_SPECIES


@dataclass(frozen=True)
class NutritionalProfile:
    """Guaranteed analysis of a feed (percentages, energy in kcal/lb)."""

    crude_protein: float
    crude_fat: float
    crude_fiber: float
    moisture: float = 12.0
    ash: float = 8.0
    calcium: float = 0.0
    phosphorus: float = 0.0
    energy_density: float = 0.0


@dataclass(frozen=True)
class PerformanceBenchmarks:
    """Reference performance measured for a feed.

    Attributes:
        reference_fcr: Typical feed conversion ratio
        reference_daily_gain: Typical average daily gain (lb/day)
        cost_per_pound: Typical cost per lb of feed
        efficiency_score: Overall efficiency rating, 0-100
        palatability: Acceptance rating, 1-10
        digestibility: Digestibility percentage, 0-100
    """

    reference_fcr: float
    reference_daily_gain: float
    cost_per_pound: float
    efficiency_score: float
    palatability: float = 8.0
    digestibility: float = 80.0

    def __post_init__(self) -> None:
        if self.reference_fcr <= 0:
            raise ValidationError(
                f"reference_fcr must be positive, got {self.reference_fcr}"
            )
        if self.cost_per_pound < 0:
            raise ValidationError(
                f"cost_per_pound must be non-negative, got {self.cost_per_pound}"
            )
        object.__setattr__(self, "efficiency_score", clamp_percent(self.efficiency_score))
        object.__setattr__(self, "palatability", clamp(self.palatability, *PALATABILITY_RANGE))
        object.__setattr__(self, "digestibility", clamp_percent(self.digestibility))


@dataclass(frozen=True)
class FeedProductProfile:
    """Feed product as listed in the catalog.

    Prices are listed per package; `current_price` converts the package
    price to a per-lb figure comparable with what a user actually paid.
    """

    product_id: str
    brand: str
    product_name: str
    category: str
    species: str
    nutrition: NutritionalProfile
    benchmarks: PerformanceBenchmarks
    package_price: float
    package_weight: float = 50.0
    availability: str = "in_stock"
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.product_id:
            raise ValidationError("product_id cannot be empty")
        if self.package_price < 0:
            raise ValidationError(
                f"package_price must be non-negative, got {self.package_price}"
            )
        if self.package_weight <= 0:
            raise ValidationError(
                f"package_weight must be positive, got {self.package_weight}"
            )

    @property
    def current_price(self) -> float:
        """Catalog price per lb."""
        return self.package_price / self.package_weight

    @property
    def is_multi_species(self) -> bool:
        return self.species == MULTI_SPECIES

    def display_name(self) -> str:
        return f"{self.brand} {self.product_name}"
