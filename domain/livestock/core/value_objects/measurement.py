"""Measurement and feeding method value objects."""

from enum import Enum


class MeasurementMethod(str, Enum):
    """How a body weight was obtained.

    Scale readings are the reference; tape, visual and photo estimates
    carry progressively more uncertainty.
    """

    SCALE = "scale"
    TAPE = "tape"
    VISUAL_ESTIMATE = "visual_estimate"
    AI_PHOTO = "ai_photo"

    def default_confidence(self) -> float:
        """Get default confidence (0-100) for a reading taken this way.

        Example:
            >>> MeasurementMethod.TAPE.default_confidence()
            85.0
        """
        confidences = {
            MeasurementMethod.SCALE: 98.0,
            MeasurementMethod.TAPE: 85.0,
            MeasurementMethod.VISUAL_ESTIMATE: 60.0,
            MeasurementMethod.AI_PHOTO: 75.0,
        }
        return confidences[self]


class FeedingMethod(str, Enum):
    """How a feed ration was offered."""

    FREE_CHOICE = "free_choice"
    MEASURED = "measured"
    TIMED = "timed"
    RESTRICTED = "restricted"
