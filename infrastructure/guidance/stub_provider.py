"""Deterministic guidance provider for tests and offline use."""

from typing import Any, Dict, List, Mapping, Tuple

import structlog

from domain.guidance.core.entities import GuidanceContext, LearningSession, MentorResponse
from domain.guidance.core.ports import IGuidanceProvider

logger = structlog.get_logger(__name__)

TOPIC_GUIDANCE: Dict[str, Tuple[str, Tuple[str, ...]]] = {
    "dashboard_review": (
        "Review this week's weights and feed records before changing any ration.",
        ("Compare each animal's FCR with its feed benchmark", "Log feed at every feeding"),
    ),
    "animal_analysis": (
        "Look at feed conversion, body condition and health together for this animal.",
        ("Take a photo at each weigh-in", "Keep the same feed for at least two weeks"),
    ),
    "fcr_calculation": (
        "Feed conversion shows how many pounds of feed produce one pound of gain.",
        ("Weigh at the same time of day", "Record every ration, including refusals"),
    ),
    "performance_alert": (
        "A performance alert is a prompt to check the ration and the animal's health.",
        ("Check for feed waste", "Look for signs of illness or stress"),
    ),
}
DEFAULT_GUIDANCE = (
    "Keep consistent records; every entry improves the analysis.",
    ("Record weights weekly", "Log feed daily"),
)


class StubGuidanceProvider(IGuidanceProvider):
    """
    Topic-keyed canned guidance with simple data-driven additions.

    Personalization grows with the number of recent activities supplied.
    Recorded sessions are kept in memory for inspection.
    """

    BASE_CONFIDENCE = 75.0
    BASE_PERSONALIZATION = 30.0
    PERSONALIZATION_PER_ACTIVITY = 10.0

    def __init__(self) -> None:
        self.sessions: List[LearningSession] = []
        self.requests: List[GuidanceContext] = []

    async def get_guidance(self, context: GuidanceContext) -> MentorResponse:
        self.requests.append(context)
        guidance, recommendations = TOPIC_GUIDANCE.get(context.topic, DEFAULT_GUIDANCE)

        return MentorResponse(
            guidance=guidance,
            recommendations=recommendations + self._data_recommendations(context.data),
            next_steps=("Review progress on the dashboard",),
            resources=("Record Keeping Fundamentals",),
            confidence=self.BASE_CONFIDENCE,
            personalization_level=self.BASE_PERSONALIZATION
            + self.PERSONALIZATION_PER_ACTIVITY * len(context.recent_activities),
        )

    async def record_session(self, session: LearningSession) -> None:
        self.sessions.append(session)
        logger.debug(
            "Learning session recorded",
            user_id=session.user_id,
            activity=session.activity,
        )

    @staticmethod
    def _data_recommendations(data: Mapping[str, Any]) -> Tuple[str, ...]:
        fcr = data.get("fcr", data.get("current_fcr", data.get("average_fcr")))
        if isinstance(fcr, (int, float)) and fcr > 7.0:
            return ("Ask your advisor about a higher-energy ration",)
        return ()
