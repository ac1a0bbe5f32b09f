"""Domain exceptions shared by the analytics and workflow engines."""

from typing import Any, Optional


class LivestockDomainError(Exception):
    """Base exception for livestock analytics domain errors."""

    pass


class ValidationError(LivestockDomainError, ValueError):
    """Raised when an observation, trigger or condition is malformed."""

    pass


class InsufficientDataError(LivestockDomainError):
    """Raised when a calculation lacks the minimum observations it needs."""

    def __init__(self, operation: str, reason: str):
        super().__init__(f"Insufficient data for {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class NotFoundError(LivestockDomainError):
    """Raised when a referenced feed, animal or history is unknown."""

    def __init__(self, entity: str, identifier: str):
        super().__init__(f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier


class DivisionUndefinedError(LivestockDomainError):
    """Raised when a ratio metric has a non-positive denominator.

    The undefined result (ratio fields set to None) travels with the error
    so callers can still show totals for the window.
    """

    def __init__(
        self,
        metric: str,
        denominator: float,
        result: Optional[Any] = None,
    ):
        super().__init__(
            f"{metric} is undefined: denominator {denominator:.2f} is not positive"
        )
        self.metric = metric
        self.denominator = denominator
        self.result = result


class NotInitializedError(LivestockDomainError):
    """Raised when a service is used without its collaborators."""

    def __init__(self, service: str):
        super().__init__(f"{service} is not initialized")
        self.service = service


class ActionExecutionError(LivestockDomainError):
    """Raised by a workflow action handler that cannot complete."""

    def __init__(self, action: str, reason: str):
        super().__init__(f"Action '{action}' failed: {reason}")
        self.action = action
        self.reason = reason
