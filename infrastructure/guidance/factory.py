"""Guidance provider factory.

GUIDANCE_PROVIDER selects the adapter:
- "stub" (default): deterministic canned guidance
- "http": HttpGuidanceClient, requires GUIDANCE_API_URL
"""

import structlog

from domain.guidance.core.ports import IGuidanceProvider
from infrastructure.config import (
    get_guidance_api_key,
    get_guidance_api_url,
    get_guidance_provider,
    get_guidance_timeout_s,
)

from .http_client import HttpGuidanceClient
from .stub_provider import StubGuidanceProvider

logger = structlog.get_logger(__name__)


def create_guidance_provider() -> IGuidanceProvider:
    """
    Create the configured guidance provider.

    Raises:
        ValueError: http selected without GUIDANCE_API_URL, or unknown
            provider name
    """
    mode = get_guidance_provider()

    if mode == "http":
        url = get_guidance_api_url()
        if not url:
            raise ValueError(
                "GUIDANCE_PROVIDER=http but GUIDANCE_API_URL not set. "
                "Set GUIDANCE_API_URL in .env or use GUIDANCE_PROVIDER=stub"
            )
        logger.info("Using HTTP guidance provider", url=url)
        return HttpGuidanceClient(
            base_url=url,
            api_key=get_guidance_api_key(),
            timeout_s=get_guidance_timeout_s(),
        )

    if mode == "stub":
        return StubGuidanceProvider()

    raise ValueError(f"Unknown GUIDANCE_PROVIDER={mode!r}; use 'stub' or 'http'")
