"""Value objects describing photo-derived assessments."""

from enum import Enum


class Severity(str, Enum):
    """Severity attached to a health indicator."""

    NORMAL = "normal"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"

    @property
    def is_concern(self) -> bool:
        return self is not Severity.NORMAL


class FrameSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class GrowthStage(str, Enum):
    YOUNG = "young"
    GROWING = "growing"
    MATURE = "mature"
    OVER_CONDITIONED = "over_conditioned"
