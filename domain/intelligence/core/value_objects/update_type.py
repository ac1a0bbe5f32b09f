"""Kinds of animal data update accepted by the orchestrator."""

from enum import Enum


class UpdateType(str, Enum):
    WEIGHT = "weight"
    FEED = "feed"
    PHOTO = "photo"
    HEALTH = "health"
    JOURNAL = "journal"

    @property
    def activity(self) -> str:
        """Learning activity recorded for this update."""
        return _ACTIVITIES[self]


_ACTIVITIES = {
    UpdateType.WEIGHT: "weighing",
    UpdateType.FEED: "feeding",
    UpdateType.PHOTO: "photo_analysis",
    UpdateType.HEALTH: "health_check",
    UpdateType.JOURNAL: "journal_entry",
}
