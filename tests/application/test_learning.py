"""Tests for learning session scoring."""

from datetime import datetime, timezone

import pytest

from application.intelligence import learning
from domain.intelligence.core.value_objects import UpdateType

NOW = datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc)


def session(update_type: UpdateType):
    return learning.build_session("user_1", "goat_1", update_type, NOW)


class TestBuildSession:
    @pytest.mark.parametrize(
        "update_type, activity, minutes",
        [
            (UpdateType.WEIGHT, "weighing", 15),
            (UpdateType.FEED, "feeding", 30),
            (UpdateType.PHOTO, "photo_analysis", 10),
            (UpdateType.HEALTH, "health_check", 45),
            (UpdateType.JOURNAL, "journal_entry", 60),
        ],
    )
    def test_activity_and_duration(self, update_type, activity, minutes) -> None:
        result = session(update_type)

        assert result.activity == activity
        assert result.duration_minutes == minutes
        assert result.skills_applied == learning.SKILLS_BY_UPDATE[update_type]
        assert result.timestamp == NOW

    def test_challenges_kept(self) -> None:
        result = learning.build_session(
            "user_1", "goat_1", UpdateType.HEALTH, NOW, challenges=["limping"]
        )

        assert result.challenges == ("limping",)


class TestScoring:
    def test_competency_counts_distinct_skills(self) -> None:
        sessions = [session(UpdateType.WEIGHT), session(UpdateType.WEIGHT)]

        assert learning.competency_level(sessions) == 30.0

    def test_competency_caps_at_100(self) -> None:
        sessions = [session(t) for t in UpdateType]

        assert learning.competency_level(sessions) == 100.0

    @pytest.mark.parametrize(
        "competency, level",
        [(0.0, "beginner"), (59.9, "beginner"), (60.0, "intermediate"), (80.0, "advanced")],
    )
    def test_progression(self, competency, level) -> None:
        assert learning.learning_progression(competency) == level

    def test_skills_in_first_use_order(self) -> None:
        sessions = [session(UpdateType.FEED), session(UpdateType.WEIGHT)]

        skills = learning.skills_learned(sessions)

        assert skills[:3] == learning.SKILLS_BY_UPDATE[UpdateType.FEED]
        assert len(skills) == 6

    def test_practical_skill_scores(self) -> None:
        sessions = [session(UpdateType.WEIGHT), session(UpdateType.FEED)]

        scores = learning.practical_skill_scores(sessions)

        assert scores == {
            "feed_management": 20.0,
            "health_monitoring": 0.0,
            "record_keeping": 40.0,
            "problem_solving": 0.0,
        }

    def test_practical_skill_caps_at_100(self) -> None:
        sessions = [session(UpdateType.FEED) for _ in range(7)]

        assert learning.practical_skill_scores(sessions)["feed_management"] == 100.0

    def test_next_milestones_exclude_done_activities(self) -> None:
        milestones = learning.next_milestones([session(UpdateType.WEIGHT)])

        assert "Record a weekly weight" not in milestones
        assert "Log feed for a full week" in milestones


class TestMilestones:
    @pytest.mark.parametrize(
        "count, milestone",
        [(1, "first_activity_logged"), (2, None), (10, "ten_activities_logged"), (100, "hundred_activities_logged")],
    )
    def test_milestone_for(self, count, milestone) -> None:
        assert learning.milestone_for(count) == milestone

    def test_health_symptoms_add_challenge(self) -> None:
        challenges = learning.update_challenges(
            UpdateType.HEALTH, {"symptoms": ["cough"], "challenges": ["restraint"]}
        )

        assert challenges == ["restraint", "health_symptoms_reported"]

    def test_symptoms_ignored_outside_health(self) -> None:
        assert learning.update_challenges(UpdateType.FEED, {"symptoms": ["cough"]}) == []
