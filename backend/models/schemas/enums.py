"""Closed vocabularies used by mentee and mentor profiles."""

from enum import Enum


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self)


_LEVEL_ORDER = list(ExperienceLevel)


class VerificationStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"
    SUSPENDED = "suspended"


class LearningFormat(str, Enum):
    VISUAL = "visual"
    TEXT = "text"
    HANDS_ON = "hands-on"
    MIXED = "mixed"


class LearningPace(str, Enum):
    SLOW = "slow"
    MODERATE = "moderate"
    FAST = "fast"


class TimeOfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    FLEXIBLE = "flexible"


class SessionLength(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class SessionFrequency(str, Enum):
    """Ordered from most to least frequent."""
    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    MONTHLY = "monthly"
    AS_NEEDED = "as-needed"


class ResponseTime(str, Enum):
    IMMEDIATE = "immediate"
    WITHIN_HOURS = "within-hours"
    WITHIN_DAYS = "within-days"


class CommunicationFrequency(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
