"""Trigger kind and priority value objects."""

from enum import Enum


class TriggerType(str, Enum):
    """Kind of domain event that can start a workflow."""

    FEED_ENTRY = "feed_entry"
    WEIGHT_CHANGE = "weight_change"
    PHOTO_ANALYSIS = "photo_analysis"
    FCR_CALCULATION = "fcr_calculation"
    EDUCATIONAL_MILESTONE = "educational_milestone"
    PERFORMANCE_ALERT = "performance_alert"


class TriggerPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"
