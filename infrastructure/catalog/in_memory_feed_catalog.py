"""In-memory feed catalog implementation.

Implements the IFeedCatalog port over a fixed product list. The default
list is a small reference catalog covering goats, cattle, pigs and
sheep plus one multi-species ration.
"""

from typing import Dict, Iterable, List, Optional

from domain.livestock.core.entities import (
    MULTI_SPECIES,
    FeedProductProfile,
    NutritionalProfile,
    PerformanceBenchmarks,
)
from domain.livestock.core.exceptions import ValidationError
from domain.livestock.core.ports import IFeedCatalog


def default_feed_products() -> List[FeedProductProfile]:
    return [
        FeedProductProfile(
            product_id="feed_001",
            brand="Purina",
            product_name="Goat Chow Complete",
            category="grower",
            species="Goat",
            nutrition=NutritionalProfile(
                crude_protein=16.0,
                crude_fat=3.5,
                crude_fiber=15.0,
                moisture=12.0,
                ash=8.0,
                calcium=1.2,
                phosphorus=0.8,
                energy_density=2800,
            ),
            benchmarks=PerformanceBenchmarks(
                reference_fcr=6.2,
                reference_daily_gain=0.35,
                cost_per_pound=0.42,
                efficiency_score=78,
                palatability=8.5,
                digestibility=82,
            ),
            package_price=18.99,
            tags=("non_gmo", "quality_assured"),
        ),
        FeedProductProfile(
            product_id="feed_002",
            brand="Southern States",
            product_name="All Stock Feed",
            category="maintenance",
            species=MULTI_SPECIES,
            nutrition=NutritionalProfile(
                crude_protein=14.0,
                crude_fat=3.0,
                crude_fiber=18.0,
                moisture=11.0,
                ash=7.5,
                calcium=1.0,
                phosphorus=0.7,
                energy_density=2650,
            ),
            benchmarks=PerformanceBenchmarks(
                reference_fcr=7.1,
                reference_daily_gain=0.28,
                cost_per_pound=0.38,
                efficiency_score=72,
                palatability=7.8,
                digestibility=78,
            ),
            package_price=16.49,
        ),
        FeedProductProfile(
            product_id="feed_003",
            brand="Kent",
            product_name="Show Goat Full Bore 20R",
            category="show",
            species="Goat",
            nutrition=NutritionalProfile(
                crude_protein=20.0, crude_fat=4.0, crude_fiber=12.0, energy_density=2900
            ),
            benchmarks=PerformanceBenchmarks(
                reference_fcr=5.8,
                reference_daily_gain=0.42,
                cost_per_pound=0.52,
                efficiency_score=82,
                palatability=8.2,
                digestibility=84,
            ),
            package_price=24.99,
            tags=("medicated",),
        ),
        FeedProductProfile(
            product_id="feed_004",
            brand="Kent",
            product_name="Show Cattle Elevate",
            category="grower",
            species="Cattle",
            nutrition=NutritionalProfile(
                crude_protein=13.0, crude_fat=4.5, crude_fiber=10.0, energy_density=3100
            ),
            benchmarks=PerformanceBenchmarks(
                reference_fcr=6.5,
                reference_daily_gain=2.8,
                cost_per_pound=0.34,
                efficiency_score=76,
                palatability=8.0,
                digestibility=80,
            ),
            package_price=17.49,
        ),
        FeedProductProfile(
            product_id="feed_005",
            brand="Purina",
            product_name="Nature's Match Grower-Finisher",
            category="finisher",
            species="Pig",
            nutrition=NutritionalProfile(
                crude_protein=16.0, crude_fat=3.0, crude_fiber=5.0, energy_density=3300
            ),
            benchmarks=PerformanceBenchmarks(
                reference_fcr=2.9,
                reference_daily_gain=1.8,
                cost_per_pound=0.36,
                efficiency_score=80,
                palatability=8.0,
                digestibility=86,
            ),
            package_price=19.99,
        ),
        FeedProductProfile(
            product_id="feed_006",
            brand="Purina",
            product_name="Lamb Grower",
            category="grower",
            species="Sheep",
            nutrition=NutritionalProfile(
                crude_protein=14.0, crude_fat=3.0, crude_fiber=14.0, energy_density=2750
            ),
            benchmarks=PerformanceBenchmarks(
                reference_fcr=5.5,
                reference_daily_gain=0.55,
                cost_per_pound=0.40,
                efficiency_score=77,
                palatability=8.3,
                digestibility=81,
            ),
            package_price=20.49,
        ),
    ]


class InMemoryFeedCatalog(IFeedCatalog):
    """
    Dictionary-backed feed catalog.

    Listing order is insertion order, which the recommendation service
    uses to break score ties.

    Example:
        >>> catalog = InMemoryFeedCatalog()
        >>> catalog.get("feed_001").product_name
        'Goat Chow Complete'
    """

    def __init__(self, products: Optional[Iterable[FeedProductProfile]] = None) -> None:
        self._products: Dict[str, FeedProductProfile] = {}
        for product in default_feed_products() if products is None else products:
            if product.product_id in self._products:
                raise ValidationError(f"Duplicate feed product id: {product.product_id}")
            self._products[product.product_id] = product

    def get(self, product_id: str) -> Optional[FeedProductProfile]:
        return self._products.get(product_id)

    def list_products(self) -> List[FeedProductProfile]:
        return list(self._products.values())
