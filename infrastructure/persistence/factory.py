"""Repository Factory for Persistence Layer.

Environment-based repository selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND selects the backend
- Default: inmemory (safe fallback if env vars not set)

Only the in-memory backend ships with this package; real persistence is
owned by the host application, which injects its own repositories into
the orchestrator.

Usage:
    from infrastructure.persistence.factory import get_repositories

    repos = get_repositories()  # Singleton bundle
    await repos.profiles.upsert(profile)
"""

from dataclasses import dataclass
from typing import Optional

from domain.intelligence.core.ports import (
    IContributionRepository,
    ILearningSessionRepository,
    IProfileRepository,
)
from domain.livestock.core.ports import IObservationHistory
from domain.performance.core.ports import IFCRHistory
from domain.workflow.core.ports import IExecutionHistoryRepository
from infrastructure.config import get_repository_backend
from infrastructure.persistence.in_memory import (
    InMemoryContributionRepository,
    InMemoryExecutionHistoryRepository,
    InMemoryFCRHistory,
    InMemoryLearningSessionRepository,
    InMemoryObservationHistory,
    InMemoryProfileRepository,
)


@dataclass(frozen=True)
class Repositories:
    """Every store the engines and orchestrator need."""

    observations: IObservationHistory
    fcr_history: IFCRHistory
    profiles: IProfileRepository
    sessions: ILearningSessionRepository
    contributions: IContributionRepository
    executions: IExecutionHistoryRepository


def create_repositories() -> Repositories:
    """Create repositories based on REPOSITORY_BACKEND env var.

    Environment variable: REPOSITORY_BACKEND
    Values:
        - "inmemory": In-memory repositories (default, fast, transient)

    Returns:
        Repositories: A fresh bundle

    Raises:
        ValueError: Unknown backend
    """
    mode = get_repository_backend()

    if mode != "inmemory":
        raise ValueError(
            f"Unsupported REPOSITORY_BACKEND={mode!r}. "
            "Use REPOSITORY_BACKEND=inmemory or inject custom repositories."
        )

    return Repositories(
        observations=InMemoryObservationHistory(),
        fcr_history=InMemoryFCRHistory(),
        profiles=InMemoryProfileRepository(),
        sessions=InMemoryLearningSessionRepository(),
        contributions=InMemoryContributionRepository(),
        executions=InMemoryExecutionHistoryRepository(),
    )


# Singleton instance (lazy initialization)
_repositories: Optional[Repositories] = None


def get_repositories() -> Repositories:
    """Get singleton repository bundle."""
    global _repositories
    if _repositories is None:
        _repositories = create_repositories()
    return _repositories


def reset_repositories() -> None:
    """Reset singleton repositories.

    Useful for testing to force re-creation with different env vars.
    """
    global _repositories
    _repositories = None
