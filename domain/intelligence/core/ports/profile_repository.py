"""IProfileRepository port - per-user animal profile store."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.animal_profile import ComprehensiveAnimalProfile


class IProfileRepository(ABC):
    """Port for cached animal profiles, keyed by (user id, animal id).

    upsert replaces an existing profile for the same key; the last
    write wins.
    """

    @abstractmethod
    async def get(self, user_id: str, animal_id: str) -> Optional[ComprehensiveAnimalProfile]:
        pass

    @abstractmethod
    async def list_for_user(self, user_id: str) -> List[ComprehensiveAnimalProfile]:
        """Profiles of a user in first-insertion order."""
        pass

    @abstractmethod
    async def upsert(self, profile: ComprehensiveAnimalProfile) -> None:
        pass
