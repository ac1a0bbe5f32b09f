"""IBodyConditionInference port - pluggable vision inference."""

from abc import ABC, abstractmethod

from domain.livestock.core.entities import PhotoObservation

from ..entities.body_condition import BodyConditionScore


class IBodyConditionInference(ABC):
    """Port for a vision model that scores body condition.

    Implementations return raw scores; the entity clamps them into range
    and the service attaches feeding advice.
    """

    @abstractmethod
    def infer(self, photo: PhotoObservation) -> BodyConditionScore:
        pass
