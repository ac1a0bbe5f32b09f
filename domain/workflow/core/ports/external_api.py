"""IExternalApiClient port - third-party integrations for call_api rules."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping


class IExternalApiClient(ABC):
    @abstractmethod
    async def call(self, endpoint: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Invoke an integration endpoint and return its JSON response."""
        pass
