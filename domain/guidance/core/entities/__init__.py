from .guidance import GuidanceContext, LearningSession, MentorResponse

__all__ = ["GuidanceContext", "LearningSession", "MentorResponse"]
