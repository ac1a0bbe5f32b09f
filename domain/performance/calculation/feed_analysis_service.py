"""Feed performance analysis for an animal/feed pair."""

from typing import List, Optional

import structlog

from domain.livestock.core.entities import FeedProductProfile
from domain.livestock.core.exceptions import NotFoundError
from domain.livestock.core.ports import IFeedCatalog, IObservationHistory
from domain.livestock.core.value_objects import clamp_percent

from ..core.entities import FeedAnalysis, FeedComparison, FeedEfficiency
from ..core.ports import IFCRHistory

logger = structlog.get_logger(__name__)


class FeedAnalysisService:
    """Scores how well a feed performs for one animal.

    performance_score = efficiency_score x min(reference FCR / actual FCR, 1.5)
    plus a 5 point bonus when the animal's feed cost per lb is under the
    catalog price. Without an FCR for the pair the reference efficiency
    score is used unscaled.
    """

    MAX_FCR_REWARD = 1.5
    BELOW_CATALOG_PRICE_BONUS = 5.0
    FCR_TOLERANCE = 1.1
    MIN_PALATABILITY = 8.0

    def __init__(
        self,
        catalog: IFeedCatalog,
        observations: IObservationHistory,
        fcr_history: IFCRHistory,
    ) -> None:
        self._catalog = catalog
        self._observations = observations
        self._fcr_history = fcr_history

    def analyze_feed_performance(self, animal_id: str, feed_product_id: str) -> FeedAnalysis:
        """Analyse a feed against the animal's recorded history.

        Args:
            animal_id: Animal identifier
            feed_product_id: Catalog product identifier

        Returns:
            FeedAnalysis: Score, efficiency block, comparison, advice

        Raises:
            NotFoundError: Feed not in catalog, or no feed history for
                this animal with this feed
        """
        product = self._catalog.get(feed_product_id)
        if product is None:
            raise NotFoundError("Feed product", feed_product_id)

        feeds = [
            f
            for f in self._observations.feeds_for(animal_id)
            if f.feed_product_id == feed_product_id
        ]
        if not feeds:
            raise NotFoundError("Feed history", f"{animal_id}/{feed_product_id}")

        total_amount = sum(f.amount for f in feeds)
        total_cost = sum(f.cost for f in feeds)
        average_cost = total_cost / total_amount

        latest = self._fcr_history.latest(animal_id, feed_product_id)
        actual_fcr = latest.fcr if latest is not None else None
        benchmarks = product.benchmarks

        score = benchmarks.efficiency_score
        if actual_fcr is not None:
            score *= min(benchmarks.reference_fcr / actual_fcr, self.MAX_FCR_REWARD)
        if average_cost < product.current_price:
            score += self.BELOW_CATALOG_PRICE_BONUS
        performance_score = clamp_percent(round(score))

        improvement = 0.0
        if actual_fcr is not None:
            improvement = max(0.0, (actual_fcr - benchmarks.reference_fcr) / actual_fcr * 100.0)

        analysis = FeedAnalysis(
            animal_id=animal_id,
            feed_product_id=feed_product_id,
            performance_score=performance_score,
            efficiency=FeedEfficiency(
                fcr=actual_fcr,
                cost_efficiency=self._cost_efficiency(average_cost, product),
                growth_rate=latest.metrics.average_daily_gain if latest else None,
                health_impact=clamp_percent(
                    (benchmarks.palatability * 10.0 + benchmarks.digestibility) / 2.0
                ),
            ),
            comparison=FeedComparison(
                industry_benchmark=benchmarks.reference_fcr,
                user_average=self._user_average(animal_id),
                improvement_opportunity=improvement,
            ),
            total_amount=total_amount,
            average_cost_per_pound=average_cost,
            recommendations=tuple(self._recommendations(actual_fcr, product)),
        )

        logger.info(
            "Feed performance analysed",
            animal_id=animal_id,
            feed_product_id=feed_product_id,
            performance_score=performance_score,
        )
        return analysis

    @staticmethod
    def _cost_efficiency(average_cost: float, product: FeedProductProfile) -> float:
        market = product.current_price
        if market <= 0:
            return 100.0 if average_cost <= 0 else 0.0
        return clamp_percent(100.0 - (average_cost - market) / market * 100.0)

    def _user_average(self, animal_id: str) -> Optional[float]:
        fcrs = [r.fcr for r in self._fcr_history.results_for(animal_id) if r.fcr is not None]
        if not fcrs:
            return None
        return sum(fcrs) / len(fcrs)

    def _recommendations(
        self, actual_fcr: Optional[float], product: FeedProductProfile
    ) -> List[str]:
        recommendations: List[str] = []
        benchmarks = product.benchmarks

        if actual_fcr is not None and actual_fcr > benchmarks.reference_fcr * self.FCR_TOLERANCE:
            recommendations.append("Consider reducing feed amounts or improving feed quality")
        if benchmarks.palatability < self.MIN_PALATABILITY:
            recommendations.append(
                "Monitor animal acceptance - this feed has lower palatability"
            )
        recommendations.append("Continue monitoring for optimal results")
        return recommendations
