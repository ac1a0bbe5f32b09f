"""IObservationHistory port - per-animal observation history."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..entities.observations import FeedObservation, WeightObservation
from ..entities.photo_observation import PhotoObservation


class IObservationHistory(ABC):
    """Port for the in-process history the analytics engines read.

    Unlike persistence repositories this store is synchronous: the
    engines are pure computations over in-memory history. Getters
    return observations in chronological order.
    """

    @abstractmethod
    def add_weights(self, observations: Sequence[WeightObservation]) -> None:
        pass

    @abstractmethod
    def add_feeds(self, observations: Sequence[FeedObservation]) -> None:
        pass

    @abstractmethod
    def add_photo(self, photo: PhotoObservation) -> None:
        pass

    @abstractmethod
    def weights_for(self, animal_id: str) -> List[WeightObservation]:
        pass

    @abstractmethod
    def feeds_for(self, animal_id: str) -> List[FeedObservation]:
        pass

    @abstractmethod
    def photos_for(self, animal_id: str) -> List[PhotoObservation]:
        pass
