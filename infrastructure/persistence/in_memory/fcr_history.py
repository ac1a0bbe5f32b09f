"""In-memory FCR result history implementation."""

from collections import defaultdict
from typing import DefaultDict, List

from domain.performance.core.entities import FCRResult
from domain.performance.core.ports import IFCRHistory


class InMemoryFCRHistory(IFCRHistory):
    """Append-only FCR results per animal, in calculation order."""

    def __init__(self) -> None:
        self._results: DefaultDict[str, List[FCRResult]] = defaultdict(list)

    def append(self, result: FCRResult) -> None:
        self._results[result.animal_id].append(result)

    def results_for(self, animal_id: str) -> List[FCRResult]:
        return list(self._results.get(animal_id, ()))
