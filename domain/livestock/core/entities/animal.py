"""AnimalRef - read-only reference to a managed animal."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..exceptions import ValidationError

MULTI_SPECIES = "Multi-Species"


@dataclass(frozen=True)
class AnimalRef:
    """Animal identity as supplied by the animal-management collaborator.

    Attributes:
        animal_id: Unique animal identifier
        species: Species name (e.g. "Goat", "Cattle")
        breed: Breed name, free text
        birth_date: Optional birth date
        current_weight: Optional latest weight in lb
        name: Optional display name
    """

    animal_id: str
    species: str
    breed: str = ""
    birth_date: Optional[date] = None
    current_weight: Optional[float] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.animal_id:
            raise ValidationError("animal_id cannot be empty")
        if not self.species:
            raise ValidationError("species cannot be empty")
        if self.current_weight is not None and self.current_weight <= 0:
            raise ValidationError(
                f"current_weight must be positive, got {self.current_weight}"
            )

    def accepts_species(self, species: str) -> bool:
        """Check whether a feed labelled for `species` suits this animal."""
        return species == MULTI_SPECIES or species.lower() == self.species.lower()

    def display_name(self) -> str:
        return self.name or self.animal_id
