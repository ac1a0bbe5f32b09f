"""IGuidanceProvider port - mentor / memory integration."""

from abc import ABC, abstractmethod

from ..entities.guidance import GuidanceContext, LearningSession, MentorResponse


class IGuidanceProvider(ABC):
    """Port for the external mentoring service.

    Calls are slow and may fail; callers await them and let errors
    propagate unless they isolate failures themselves.
    """

    @abstractmethod
    async def get_guidance(self, context: GuidanceContext) -> MentorResponse:
        """Get contextual guidance.

        Args:
            context: What the student is working on

        Returns:
            MentorResponse: Guidance, recommendations and resources
        """
        pass

    @abstractmethod
    async def record_session(self, session: LearningSession) -> None:
        """Add a learning session to the student's memory."""
        pass

    async def aclose(self) -> None:
        """Release provider resources. No-op unless the adapter holds any."""
        pass
