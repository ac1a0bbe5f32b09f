"""IFeedCatalog port - read-only feed product reference data."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.animal import MULTI_SPECIES
from ..entities.feed_product import FeedProductProfile


class IFeedCatalog(ABC):
    """Port for the feed product catalog.

    The catalog is reference data owned by a partner integration. Listing
    order is stable and is used for deterministic tie-breaking.
    """

    @abstractmethod
    def get(self, product_id: str) -> Optional[FeedProductProfile]:
        """Get product by identifier.

        Args:
            product_id: Catalog product identifier

        Returns:
            Optional[FeedProductProfile]: Product if listed, None otherwise
        """
        pass

    @abstractmethod
    def list_products(self) -> List[FeedProductProfile]:
        """List every product in catalog order."""
        pass

    def products_for_species(self, species: str) -> List[FeedProductProfile]:
        """List products labelled for `species` or for multiple species.

        Args:
            species: Animal species

        Returns:
            List[FeedProductProfile]: Matching products in catalog order
        """
        wanted = species.lower()
        return [
            p
            for p in self.list_products()
            if p.species == MULTI_SPECIES or p.species.lower() == wanted
        ]
