"""IFCRHistory port - per-animal history of FCR results."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.fcr_result import FCRResult


class IFCRHistory(ABC):
    """Append-only per-animal store of computed FCR results."""

    @abstractmethod
    def append(self, result: FCRResult) -> None:
        pass

    @abstractmethod
    def results_for(self, animal_id: str) -> List[FCRResult]:
        """All results for an animal, oldest first."""
        pass

    def latest(
        self, animal_id: str, feed_product_id: Optional[str] = None
    ) -> Optional[FCRResult]:
        """Most recent result for an animal, optionally for one feed.

        Args:
            animal_id: Animal identifier
            feed_product_id: Restrict to results whose primary feed matches

        Returns:
            Optional[FCRResult]: Latest matching result, None if none
        """
        results = self.results_for(animal_id)
        if feed_product_id is not None:
            results = [r for r in results if r.feed_product_id == feed_product_id]
        return results[-1] if results else None
