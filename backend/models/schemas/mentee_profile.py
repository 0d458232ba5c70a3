"""Mentee profile as assembled by the profile service."""

import math

from pydantic import Field

from models.schemas.base import CamelModel
from models.schemas.enums import (
    CommunicationFrequency,
    ExperienceLevel,
    LearningFormat,
    LearningPace,
    ResponseTime,
    SessionFrequency,
    SessionLength,
    TimeOfDay,
)


class MenteePersonalInfo(CamelModel):
    age: str = ""  # age band, e.g. "25-34"
    location: str = ""
    timezone: str = ""
    bio: str = ""


class MenteeProfessionalInfo(CamelModel):
    current_role: str = ""
    industry: str = ""
    experience_level: ExperienceLevel | None = None
    skills: set[str] = set()
    goals: set[str] = set()
    interests: set[str] = set()


class LearningPreferences(CamelModel):
    pace: LearningPace | None = None
    format: LearningFormat | None = None
    time_of_day: TimeOfDay | None = None
    duration: SessionLength | None = None


class Budget(CamelModel):
    """Hourly budget range. An absent budget is normalized to [0, inf)."""
    min: float = 0.0
    max: float = math.inf
    currency: str = "USD"


class MentoringNeeds(CamelModel):
    areas_of_focus: set[str] = set()
    session_types: set[str] = set()  # video, phone, chat, email, in-person
    frequency: SessionFrequency | None = None
    budget: Budget | None = None
    time_commitment: float | None = None  # hours per week


class CommunicationStyle(CamelModel):
    preferred_methods: set[str] = set()
    response_time: ResponseTime | None = None
    communication_frequency: CommunicationFrequency | None = None


class LearningHistory(CamelModel):
    completed_courses: int = 0
    projects_built: int = 0
    skills_mastered: int = 0
    learning_streak: int = 0  # consecutive days


class MenteeProfile(CamelModel):
    """Structured mentee record consumed by the matching engine.

    Every section is optional on input; ``normalize_mentee`` fills the
    defaults the scorers rely on. Only ``id`` is mandatory.
    """
    id: str = Field(min_length=1)
    user_id: str = ""
    personal_info: MenteePersonalInfo = MenteePersonalInfo()
    professional_info: MenteeProfessionalInfo = MenteeProfessionalInfo()
    learning_preferences: LearningPreferences = LearningPreferences()
    mentoring_needs: MentoringNeeds = MentoringNeeds()
    communication_style: CommunicationStyle = CommunicationStyle()
    personality_traits: set[str] = set()
    learning_history: LearningHistory = LearningHistory()
