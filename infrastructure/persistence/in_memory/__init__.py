"""In-memory adapters for the persistence ports."""

from .contribution_repository import InMemoryContributionRepository
from .execution_history import InMemoryExecutionHistoryRepository
from .fcr_history import InMemoryFCRHistory
from .observation_history import InMemoryObservationHistory
from .profile_repository import InMemoryProfileRepository
from .session_repository import InMemoryLearningSessionRepository

__all__ = [
    "InMemoryContributionRepository",
    "InMemoryExecutionHistoryRepository",
    "InMemoryFCRHistory",
    "InMemoryObservationHistory",
    "InMemoryProfileRepository",
    "InMemoryLearningSessionRepository",
]
