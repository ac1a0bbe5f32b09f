"""In-memory observation history implementation."""

from collections import defaultdict
from typing import DefaultDict, List, Sequence

from domain.livestock.core.entities import FeedObservation, PhotoObservation, WeightObservation
from domain.livestock.core.ports import IObservationHistory


class InMemoryObservationHistory(IObservationHistory):
    """
    Per-animal observation lists kept sorted by timestamp.

    Observations are immutable, so they are stored as given. Observations
    with equal timestamps keep their insertion order.

    Thread safety: NOT thread-safe
    Persistence: Data lost on process restart (in-memory only)
    """

    def __init__(self) -> None:
        self._weights: DefaultDict[str, List[WeightObservation]] = defaultdict(list)
        self._feeds: DefaultDict[str, List[FeedObservation]] = defaultdict(list)
        self._photos: DefaultDict[str, List[PhotoObservation]] = defaultdict(list)

    def add_weights(self, observations: Sequence[WeightObservation]) -> None:
        for observation in observations:
            self._weights[observation.animal_id].append(observation)
        for animal_id in {o.animal_id for o in observations}:
            self._weights[animal_id].sort(key=lambda w: w.timestamp)

    def add_feeds(self, observations: Sequence[FeedObservation]) -> None:
        for observation in observations:
            self._feeds[observation.animal_id].append(observation)
        for animal_id in {o.animal_id for o in observations}:
            self._feeds[animal_id].sort(key=lambda f: f.timestamp)

    def add_photo(self, photo: PhotoObservation) -> None:
        photos = self._photos[photo.animal_id]
        photos.append(photo)
        photos.sort(key=lambda p: p.captured_at)

    def weights_for(self, animal_id: str) -> List[WeightObservation]:
        return list(self._weights.get(animal_id, ()))

    def feeds_for(self, animal_id: str) -> List[FeedObservation]:
        return list(self._feeds.get(animal_id, ()))

    def photos_for(self, animal_id: str) -> List[PhotoObservation]:
        return list(self._photos.get(animal_id, ()))
