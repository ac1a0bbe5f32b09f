"""Learning session construction and competency scoring.

Every animal data update is also a learning activity for the student.
This module turns an update into a LearningSession and scores recorded
sessions into competency, practical skill and milestone values.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from domain.guidance.core.entities import LearningSession
from domain.intelligence.core.value_objects import UpdateType

SESSION_MINUTES: Dict[UpdateType, int] = {
    UpdateType.WEIGHT: 15,
    UpdateType.FEED: 30,
    UpdateType.PHOTO: 10,
    UpdateType.HEALTH: 45,
    UpdateType.JOURNAL: 60,
}
DEFAULT_SESSION_MINUTES = 20

SKILLS_BY_UPDATE: Dict[UpdateType, Tuple[str, ...]] = {
    UpdateType.WEIGHT: ("measurement_accuracy", "record_keeping", "data_analysis"),
    UpdateType.FEED: ("nutrition_planning", "cost_management", "animal_observation"),
    UpdateType.PHOTO: ("visual_assessment", "technology_use", "documentation"),
    UpdateType.HEALTH: ("health_monitoring", "problem_solving", "veterinary_communication"),
    UpdateType.JOURNAL: ("written_communication", "reflection", "analytical_thinking"),
}

# Practical skill -> activities that exercise it
PRACTICAL_SKILL_ACTIVITIES: Dict[str, Tuple[str, ...]] = {
    "feed_management": ("feeding",),
    "health_monitoring": ("health_check", "photo_analysis"),
    "record_keeping": ("weighing", "feeding", "journal_entry"),
    "problem_solving": ("health_check", "journal_entry"),
}
POINTS_PER_ACTIVITY = 20.0
POINTS_PER_SKILL = 10.0

CAREER_PATHWAYS: Dict[str, str] = {
    "feed_management": "Livestock nutrition specialist",
    "health_monitoring": "Animal health technician",
    "record_keeping": "Farm manager",
    "problem_solving": "Agricultural extension agent",
}
SKILL_NEXT_STEPS: Dict[str, str] = {
    "feed_management": "Log every feeding for two weeks and compare feed costs",
    "health_monitoring": "Run a weekly health check and photo review",
    "record_keeping": "Weigh each animal weekly on the same scale",
    "problem_solving": "Write a journal entry after each health check",
}
STRENGTH_THRESHOLD = 60.0

MILESTONES_BY_ACTIVITY: Dict[str, str] = {
    "weighing": "Record a weekly weight",
    "feeding": "Log feed for a full week",
    "photo_analysis": "Take a body condition photo",
    "health_check": "Complete a health check",
    "journal_entry": "Write a reflection journal entry",
}

# Session counts that mark an educational milestone
SESSION_MILESTONES: Dict[int, str] = {
    1: "first_activity_logged",
    10: "ten_activities_logged",
    25: "twenty_five_activities_logged",
    50: "fifty_activities_logged",
    100: "hundred_activities_logged",
}


def build_session(
    user_id: str,
    animal_id: str,
    update_type: UpdateType,
    timestamp: datetime,
    challenges: Sequence[str] = (),
) -> LearningSession:
    """Describe an update as a learning session."""
    return LearningSession(
        user_id=user_id,
        animal_id=animal_id,
        activity=update_type.activity,
        duration_minutes=SESSION_MINUTES.get(update_type, DEFAULT_SESSION_MINUTES),
        outcomes=(f"{update_type.value}_recorded_successfully", "data_quality_validated"),
        skills_applied=SKILLS_BY_UPDATE.get(update_type, ("general_animal_husbandry",)),
        challenges=tuple(challenges),
        insights=(f"{update_type.value}_provides_valuable_performance_data",),
        timestamp=timestamp,
    )


def skills_learned(sessions: Iterable[LearningSession]) -> Tuple[str, ...]:
    """Distinct skills in order of first use."""
    seen: Dict[str, None] = {}
    for session in sessions:
        for skill in session.skills_applied:
            seen.setdefault(skill, None)
    return tuple(seen)


def competency_level(sessions: Sequence[LearningSession]) -> float:
    return min(100.0, POINTS_PER_SKILL * len(skills_learned(sessions)))


def learning_progression(competency: float) -> str:
    if competency >= 80:
        return "advanced"
    if competency >= 60:
        return "intermediate"
    return "beginner"


def next_milestones(sessions: Sequence[LearningSession]) -> Tuple[str, ...]:
    done = {s.activity for s in sessions}
    return tuple(text for activity, text in MILESTONES_BY_ACTIVITY.items() if activity not in done)


def practical_skill_scores(sessions: Sequence[LearningSession]) -> Dict[str, float]:
    """Percentage per practical skill; each matching activity earns points."""
    scores = {}
    for skill, activities in PRACTICAL_SKILL_ACTIVITIES.items():
        count = sum(1 for s in sessions if s.activity in activities)
        scores[skill] = min(100.0, POINTS_PER_ACTIVITY * count)
    return scores


def milestone_for(session_count: int) -> Optional[str]:
    return SESSION_MILESTONES.get(session_count)


def update_challenges(update_type: UpdateType, data: Mapping[str, Any]) -> List[str]:
    """Challenges the caller flagged plus those implied by the data."""
    challenges = [str(c) for c in data.get("challenges", ())]
    if update_type is UpdateType.HEALTH and data.get("symptoms"):
        challenges.append("health_symptoms_reported")
    return challenges
