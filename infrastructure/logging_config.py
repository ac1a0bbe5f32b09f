"""structlog configuration."""

import logging
from typing import Optional

import structlog

from infrastructure.config import get_log_format, get_log_level


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure structlog processors and the stdlib root level.

    Args:
        level: Log level name, LOG_LEVEL when None
        fmt: "console" or "json", LOG_FORMAT when None
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    renderer = (
        structlog.processors.JSONRenderer()
        if (fmt or get_log_format()) == "json"
        else structlog.dev.ConsoleRenderer()
    )

    logging.basicConfig(level=numeric_level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )
