"""HTTP mentor service client - Implements IGuidanceProvider port.

Key Features:
- JSON API for guidance requests and learning session uploads
- Circuit breaker (5 failures -> 60s timeout)
- Retry logic (exponential backoff)
"""

# mypy: warn-unused-ignores=False

import asyncio
import dataclasses
from typing import Any, Dict, Optional

import httpx
import structlog
from circuitbreaker import circuit
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from domain.guidance.core.entities import GuidanceContext, LearningSession, MentorResponse
from domain.guidance.core.ports import IGuidanceProvider

logger = structlog.get_logger(__name__)


class GuidanceServiceError(Exception):
    """Mentor API answered with an error status."""

    def __init__(self, endpoint: str, status_code: int):
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(f"Mentor API {endpoint} returned {status_code}")


def _is_transient(error: BaseException) -> bool:
    if isinstance(error, GuidanceServiceError):
        return error.status_code >= 500
    return isinstance(error, (asyncio.TimeoutError, ConnectionError, httpx.TransportError))


class HttpGuidanceClient(IGuidanceProvider):
    """
    Mentor API client implementing IGuidanceProvider port.

    The underlying httpx client is created on first use and released by
    aclose() or by leaving the async context.

    Example:
        >>> async with HttpGuidanceClient("https://mentor.example.org/api") as client:
        ...     response = await client.get_guidance(context)
    """

    DEFAULT_TIMEOUT_S = 10.0

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
    ) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout_s = timeout_s
        self._session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "HttpGuidanceClient":
        self._client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    def _client(self) -> httpx.AsyncClient:
        if self._session is None:
            headers = {"Accept": "application/json"}
            if self._api_key:
                headers["Authorization"] = f"Bearer {self._api_key}"
            self._session = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                timeout=httpx.Timeout(self._timeout_s),
            )
        return self._session

    async def aclose(self) -> None:
        if self._session is not None:
            await self._session.aclose()
            self._session = None

    @circuit(failure_threshold=5, recovery_timeout=60, name="guidance_get")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception(_is_transient),
    )
    async def get_guidance(self, context: GuidanceContext) -> MentorResponse:
        """
        Request guidance for a context.

        Raises:
            GuidanceServiceError: Error status (5xx after retries)
            httpx.TransportError: Network failure (after retries)
        """
        logger.debug("Requesting guidance", user_id=context.user_id, topic=context.topic)

        response = await self._client().post("/guidance", json=self._context_body(context))
        self._raise_for_status(response, "guidance")

        data = response.json()
        return MentorResponse(
            guidance=str(data.get("guidance", "")),
            recommendations=tuple(data.get("recommendations", ())),
            next_steps=tuple(data.get("next_steps", ())),
            resources=tuple(data.get("resources", ())),
            confidence=float(data.get("confidence", 0.0)),
            personalization_level=float(data.get("personalization_level", 0.0)),
        )

    @circuit(failure_threshold=5, recovery_timeout=60, name="guidance_sessions")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception(_is_transient),
    )
    async def record_session(self, session: LearningSession) -> None:
        body = dataclasses.asdict(session)
        body["timestamp"] = session.timestamp.isoformat()

        response = await self._client().post("/sessions", json=body)
        self._raise_for_status(response, "sessions")
        logger.debug("Learning session uploaded", session_id=session.session_id)

    @staticmethod
    def _context_body(context: GuidanceContext) -> Dict[str, Any]:
        return {
            "user_id": context.user_id,
            "topic": context.topic,
            "animal_id": context.animal_id,
            "species": context.species,
            "data": dict(context.data),
            "recent_activities": list(context.recent_activities),
        }

    @staticmethod
    def _raise_for_status(response: httpx.Response, endpoint: str) -> None:
        if response.status_code >= 400:
            logger.warning(
                "Mentor API error",
                endpoint=endpoint,
                status=response.status_code,
            )
            raise GuidanceServiceError(endpoint, response.status_code)
