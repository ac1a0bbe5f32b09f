from .guidance_provider import IGuidanceProvider

__all__ = ["IGuidanceProvider"]
