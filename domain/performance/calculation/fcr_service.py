"""Feed conversion ratio calculation service.

Computes FCR, average daily gain and cost per pound gained from paired
weight and feed series, and benchmarks the result against the catalog.
"""

import math
from collections import Counter
from typing import Dict, List, Optional, Sequence

import structlog

from domain.livestock.core.entities import (
    AnimalRef,
    FeedObservation,
    FeedProductProfile,
    WeightObservation,
)
from domain.livestock.core.exceptions import (
    DivisionUndefinedError,
    InsufficientDataError,
    ValidationError,
)
from domain.livestock.core.ports import IFeedCatalog
from domain.livestock.core.value_objects import PerformanceRanking

from ..core.entities import BenchmarkComparison, FCRMetrics, FCRResult, ObservationWindow
from ..core.ports import IFCRHistory

logger = structlog.get_logger(__name__)

SECONDS_PER_DAY = 86400.0


class FCRService:
    """Feed conversion ratio calculator.

    Formulas:
        FCR = total feed (lb) / weight gained (lb)
        ADG = weight gained / ceil(elapsed days)
        cost per lb gained = total cost / weight gained
        feed efficiency = weight gained / total feed

    The benchmark is the reference FCR of the primary feed, the product
    fed most often over the window. Successful results are appended to
    the per-animal history; failed calculations leave it untouched.
    """

    DEFAULT_INDUSTRY_FCR = 6.5
    DEFAULT_SPECIES_FCR = 6.3
    DEFAULT_BREED_FCR = 6.2

    BREED_FCR_BENCHMARKS: Dict[str, float] = {
        "boer": 6.0,
        "kiko": 6.1,
        "nubian": 6.6,
        "spanish": 6.4,
        "angus": 6.0,
        "hereford": 6.3,
        "holstein": 6.8,
        "dorper": 5.6,
        "suffolk": 5.5,
        "duroc": 2.8,
        "yorkshire": 2.9,
    }

    HIGH_COST_PER_POUND_GAIN = 2.0
    LOW_GAIN_FACTOR = 0.8

    def __init__(self, catalog: IFeedCatalog, history: IFCRHistory) -> None:
        self._catalog = catalog
        self._history = history

    def calculate_fcr(
        self,
        weight_series: Sequence[WeightObservation],
        feed_series: Sequence[FeedObservation],
        animal: Optional[AnimalRef] = None,
    ) -> FCRResult:
        """Calculate feed conversion metrics for a window.

        Args:
            weight_series: At least 2 weight observations, any order
            feed_series: At least 1 feed observation, any order
            animal: Optional animal reference used for species and breed
                benchmarks

        Returns:
            FCRResult: Metrics, benchmark comparison and recommendations

        Raises:
            InsufficientDataError: Fewer than 2 weights, no feed, or the
                weights do not span a positive time delta
            ValidationError: Observations belong to different animals
            DivisionUndefinedError: Weight gained is zero or negative; the
                error carries the undefined result

        Example:
            >>> result = service.calculate_fcr(
            ...     [WeightObservation("a1", 60.0, day0),
            ...      WeightObservation("a1", 90.0, day30)],
            ...     [FeedObservation("a1", "feed_001", 180.0, 45.0, day15)],
            ... )
            >>> result.fcr
            6.0
        """
        if len(weight_series) < 2:
            raise InsufficientDataError(
                "calculate_fcr",
                f"need at least 2 weight observations, got {len(weight_series)}",
            )
        if not feed_series:
            raise InsufficientDataError("calculate_fcr", "need at least 1 feed observation")

        # Never trust caller order
        weights = sorted(weight_series, key=lambda w: w.timestamp)
        feeds = sorted(feed_series, key=lambda f: f.timestamp)

        animal_id = self._single_animal_id(weights, feeds)

        first, last = weights[0], weights[-1]
        span_seconds = (last.timestamp - first.timestamp).total_seconds()
        if span_seconds <= 0:
            raise InsufficientDataError(
                "calculate_fcr", "weight observations must span a positive time delta"
            )

        elapsed_days = math.ceil(span_seconds / SECONDS_PER_DAY)
        total_weight_gained = last.weight - first.weight
        total_feed = sum(f.amount for f in feeds)
        total_cost = sum(f.cost for f in feeds)

        primary_feed_id = self._primary_feed_id(feeds)
        product = self._catalog.get(primary_feed_id)
        window = ObservationWindow(
            start=first.timestamp, end=last.timestamp, elapsed_days=elapsed_days
        )

        industry_average = (
            product.benchmarks.reference_fcr if product else self.DEFAULT_INDUSTRY_FCR
        )
        species_average = self._species_average(animal, product)
        breed_average = self._breed_average(animal)

        if total_weight_gained <= 0:
            result = FCRResult(
                animal_id=animal_id,
                feed_product_id=primary_feed_id,
                window=window,
                metrics=FCRMetrics(
                    feed_conversion_ratio=None,
                    average_daily_gain=total_weight_gained / elapsed_days,
                    feed_efficiency=None,
                    cost_per_pound_gain=None,
                    total_feed_consumed=total_feed,
                    total_weight_gained=total_weight_gained,
                    total_cost=total_cost,
                ),
                benchmark=BenchmarkComparison(
                    industry_average=industry_average,
                    species_average=species_average,
                    breed_average=breed_average,
                    performance_ranking=None,
                ),
                recommendations=(
                    "No weight was gained over this window; check health and "
                    "intake before judging the feed",
                ),
            )
            logger.warning(
                "FCR undefined for non-positive weight gain",
                animal_id=animal_id,
                weight_gained=total_weight_gained,
                elapsed_days=elapsed_days,
            )
            raise DivisionUndefinedError(
                "feed_conversion_ratio", total_weight_gained, result=result
            )

        fcr = total_feed / total_weight_gained
        average_daily_gain = total_weight_gained / elapsed_days
        cost_per_pound_gain = total_cost / total_weight_gained
        ranking = PerformanceRanking.from_ratio(fcr / industry_average)

        result = FCRResult(
            animal_id=animal_id,
            feed_product_id=primary_feed_id,
            window=window,
            metrics=FCRMetrics(
                feed_conversion_ratio=fcr,
                average_daily_gain=average_daily_gain,
                feed_efficiency=total_weight_gained / total_feed,
                cost_per_pound_gain=cost_per_pound_gain,
                total_feed_consumed=total_feed,
                total_weight_gained=total_weight_gained,
                total_cost=total_cost,
            ),
            benchmark=BenchmarkComparison(
                industry_average=industry_average,
                species_average=species_average,
                breed_average=breed_average,
                performance_ranking=ranking,
            ),
            recommendations=tuple(
                self._recommendations(
                    fcr, industry_average, ranking, cost_per_pound_gain,
                    average_daily_gain, product,
                )
            ),
        )

        self._history.append(result)
        logger.info(
            "FCR calculated",
            animal_id=animal_id,
            feed_product_id=primary_feed_id,
            fcr=round(fcr, 3),
            ranking=ranking.value,
        )
        return result

    @staticmethod
    def _single_animal_id(
        weights: Sequence[WeightObservation], feeds: Sequence[FeedObservation]
    ) -> str:
        ids = {w.animal_id for w in weights} | {f.animal_id for f in feeds}
        if len(ids) != 1:
            raise ValidationError(
                f"FCR series must belong to a single animal, got {sorted(ids)}"
            )
        return ids.pop()

    @staticmethod
    def _primary_feed_id(feeds: Sequence[FeedObservation]) -> str:
        """Most frequent product; ties go to the one fed first."""
        counts = Counter(f.feed_product_id for f in feeds)
        # most_common keeps insertion order among equal counts
        return counts.most_common(1)[0][0]

    def _species_average(
        self, animal: Optional[AnimalRef], product: Optional[FeedProductProfile]
    ) -> float:
        if animal is not None:
            species = animal.species
        elif product is not None and not product.is_multi_species:
            species = product.species
        else:
            return self.DEFAULT_SPECIES_FCR

        references = [
            p.benchmarks.reference_fcr for p in self._catalog.products_for_species(species)
        ]
        if not references:
            return self.DEFAULT_SPECIES_FCR
        return sum(references) / len(references)

    def _breed_average(self, animal: Optional[AnimalRef]) -> float:
        if animal is None or not animal.breed:
            return self.DEFAULT_BREED_FCR
        return self.BREED_FCR_BENCHMARKS.get(animal.breed.lower(), self.DEFAULT_BREED_FCR)

    def _recommendations(
        self,
        fcr: float,
        benchmark: float,
        ranking: PerformanceRanking,
        cost_per_pound_gain: float,
        average_daily_gain: float,
        product: Optional[FeedProductProfile],
    ) -> List[str]:
        recommendations: List[str] = []

        if ranking.needs_attention:
            excess_pct = (fcr / benchmark - 1.0) * 100.0
            recommendations.append(
                f"Feed conversion is {excess_pct:.0f}% above the benchmark; "
                "review ration balance and feeding amounts"
            )
        elif ranking is PerformanceRanking.EXCELLENT:
            recommendations.append(
                "Feed conversion beats the benchmark; keep the current feeding program"
            )

        if cost_per_pound_gain > self.HIGH_COST_PER_POUND_GAIN:
            recommendations.append(
                "Cost per pound gained is high; compare lower-cost feeds "
                "with similar conversion"
            )

        if (
            product is not None
            and average_daily_gain
            < product.benchmarks.reference_daily_gain * self.LOW_GAIN_FACTOR
        ):
            recommendations.append(
                "Daily gain is below the feed's reference; check intake and health"
            )

        if not recommendations:
            recommendations.append("Performance is on track; continue weekly monitoring")

        return recommendations
