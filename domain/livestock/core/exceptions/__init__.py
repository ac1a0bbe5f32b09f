"""Domain exceptions for livestock analytics."""

from .domain_errors import (
    ActionExecutionError,
    DivisionUndefinedError,
    InsufficientDataError,
    LivestockDomainError,
    NotFoundError,
    NotInitializedError,
    ValidationError,
)

__all__ = [
    "LivestockDomainError",
    "ValidationError",
    "InsufficientDataError",
    "NotFoundError",
    "DivisionUndefinedError",
    "NotInitializedError",
    "ActionExecutionError",
]
