"""Configuration utilities for infrastructure layer.

Values come from the environment. `load_environment()` reads a `.env`
file first (existing variables win), so local development and tests can
keep settings out of the shell:

Example .env:
    REPOSITORY_BACKEND=inmemory
    GUIDANCE_PROVIDER=http
    GUIDANCE_API_URL=https://mentor.example.org/api
    GUIDANCE_API_KEY=...
    MARKET_PRICE_PER_LB=1.65
"""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv


def load_environment(env_file: Optional[Union[str, Path]] = None) -> bool:
    """Load variables from a .env file without overriding the environment.

    Returns:
        True if a file was found and loaded
    """
    return load_dotenv(dotenv_path=env_file, override=False)


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def get_repository_backend() -> str:
    """Persistence backend, "inmemory" unless configured."""
    return os.getenv("REPOSITORY_BACKEND", "inmemory").lower()


def get_guidance_provider() -> str:
    """Guidance provider: "stub" (default) or "http"."""
    return os.getenv("GUIDANCE_PROVIDER", "stub").lower()


def get_guidance_api_url() -> Optional[str]:
    return os.getenv("GUIDANCE_API_URL")


def get_guidance_api_key() -> Optional[str]:
    return os.getenv("GUIDANCE_API_KEY")


def get_guidance_timeout_s() -> float:
    return _get_float("GUIDANCE_TIMEOUT_S", 10.0)


def get_market_price_per_lb() -> float:
    """Live-weight market price used for projected ROI."""
    return _get_float("MARKET_PRICE_PER_LB", 1.50)


def get_research_salt() -> str:
    """Salt for research pseudonyms. Set a private value in production."""
    return os.getenv("RESEARCH_ANONYMIZATION_SALT", "")


def get_workflow_definitions_path() -> Optional[str]:
    """Custom workflow YAML; the bundled defaults are used when unset."""
    return os.getenv("WORKFLOW_DEFINITIONS_PATH") or None


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """Log renderer: "console" (default) or "json"."""
    return os.getenv("LOG_FORMAT", "console").lower()


def get_integration_api_url() -> Optional[str]:
    """Base URL for `call_api` workflow rules; unset disables them."""
    return os.getenv("INTEGRATION_API_URL") or None


def get_integration_api_key() -> Optional[str]:
    return os.getenv("INTEGRATION_API_KEY")
