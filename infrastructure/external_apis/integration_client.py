"""HTTP integration client - Implements IExternalApiClient port.

Used by `call_api` workflow rules. Endpoints are paths relative to the
configured base URL.
"""

# mypy: warn-unused-ignores=False

import asyncio
from typing import Any, Dict, Mapping, Optional

import httpx
import structlog
from circuitbreaker import circuit
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from domain.workflow.core.ports import IExternalApiClient

logger = structlog.get_logger(__name__)


class HttpIntegrationClient(IExternalApiClient):
    """
    POSTs rule payloads as JSON and returns the JSON response.

    Only network failures are retried; error statuses raise
    httpx.HTTPStatusError straight away.

    Example:
        >>> async with HttpIntegrationClient("https://hooks.example.org") as client:
        ...     await client.call("/fcr-alerts", {"fcr": 8.5})
    """

    TIMEOUT_S = 8.0

    def __init__(self, base_url: str, api_key: Optional[str] = None) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "HttpIntegrationClient":
        self._client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    def _client(self) -> httpx.AsyncClient:
        if self._session is None:
            headers = {"Authorization": f"Bearer {self._api_key}"} if self._api_key else {}
            self._session = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                timeout=httpx.Timeout(self.TIMEOUT_S),
            )
        return self._session

    async def aclose(self) -> None:
        if self._session is not None:
            await self._session.aclose()
            self._session = None

    @circuit(failure_threshold=5, recovery_timeout=60, name="integration_call")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((asyncio.TimeoutError, ConnectionError, httpx.TransportError)),
    )
    async def call(self, endpoint: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Raises:
            httpx.HTTPStatusError: Error status from the integration
            httpx.TransportError: Network failure (after retries)
        """
        response = await self._client().post(endpoint, json=dict(payload))
        response.raise_for_status()

        logger.info("Integration called", endpoint=endpoint, status=response.status_code)
        if not response.content:
            return {}
        data = response.json()
        return data if isinstance(data, dict) else {"data": data}
