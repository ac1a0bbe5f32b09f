"""In-memory animal profile repository implementation."""

from typing import Dict, List, Optional

from domain.intelligence.core.entities import ComprehensiveAnimalProfile
from domain.intelligence.core.ports import IProfileRepository


class InMemoryProfileRepository(IProfileRepository):
    """
    Per-user profile maps keyed by animal id.

    Profiles are frozen dataclasses, so no copies are needed. Upserting
    an existing animal keeps its position in the user's listing.

    Example:
        >>> repository = InMemoryProfileRepository()
        >>> await repository.upsert(profile)
        >>> await repository.get(profile.user_id, profile.animal_id)
    """

    def __init__(self) -> None:
        self._storage: Dict[str, Dict[str, ComprehensiveAnimalProfile]] = {}

    async def get(self, user_id: str, animal_id: str) -> Optional[ComprehensiveAnimalProfile]:
        return self._storage.get(user_id, {}).get(animal_id)

    async def list_for_user(self, user_id: str) -> List[ComprehensiveAnimalProfile]:
        return list(self._storage.get(user_id, {}).values())

    async def upsert(self, profile: ComprehensiveAnimalProfile) -> None:
        self._storage.setdefault(profile.user_id, {})[profile.animal_id] = profile

    def clear(self) -> None:
        """Clear all profiles (for testing)."""
        self._storage.clear()
