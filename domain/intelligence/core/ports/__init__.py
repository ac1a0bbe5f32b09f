"""Ports for the intelligence read-models."""

from .contribution_repository import IContributionRepository
from .learning_session_repository import ILearningSessionRepository
from .profile_repository import IProfileRepository

__all__ = ["IContributionRepository", "ILearningSessionRepository", "IProfileRepository"]
