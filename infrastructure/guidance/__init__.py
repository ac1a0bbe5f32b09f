from .factory import create_guidance_provider
from .http_client import GuidanceServiceError, HttpGuidanceClient
from .stub_provider import StubGuidanceProvider

__all__ = [
    "create_guidance_provider",
    "GuidanceServiceError",
    "HttpGuidanceClient",
    "StubGuidanceProvider",
]
