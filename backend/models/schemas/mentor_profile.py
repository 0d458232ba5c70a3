"""Mentor profile as stored by the mentor directory."""

from pydantic import Field

from models.schemas.base import CamelModel
from models.schemas.enums import ExperienceLevel, VerificationStatus


class MentorPersonalInfo(CamelModel):
    first_name: str = ""
    last_name: str = ""
    location: str = ""
    timezone: str = ""
    bio: str = ""


class MentorProfessionalInfo(CamelModel):
    current_role: str = ""
    company: str = ""
    industry: str = ""
    years_of_experience: float = 0.0
    skills: set[str] = set()
    specializations: set[str] = set()


class TimeSlot(CamelModel):
    """A recurring weekly slot. Times are "HH:MM" in ``timezone``
    (falls back to the mentor's own timezone when blank)."""
    day: str = ""
    start_time: str = ""
    end_time: str = ""
    timezone: str = ""


class Availability(CamelModel):
    time_slots: list[TimeSlot] = []
    max_sessions_per_week: int = 0
    session_duration: int = 0  # minutes


class Pricing(CamelModel):
    hourly_rate: float = 0.0
    currency: str = "USD"
    free_sessions: int = 0


class MentoringInfo(CamelModel):
    areas_of_expertise: list[str] = []  # most important first
    experience_level: ExperienceLevel | None = None
    availability: Availability = Availability()
    pricing: Pricing = Pricing()
    languages: list[str] = []
    communication_preferences: set[str] = set()


class MentorStats(CamelModel):
    total_sessions: int = 0
    total_hours: float = 0.0
    average_rating: float = 0.0  # 0-5
    total_reviews: int = 0
    completion_rate: float = 0.0  # 0-1
    response_time_hours: float | None = None


class MentorPreferences(CamelModel):
    mentee_types: set[str] = set()
    session_types: set[str] = set()  # video, phone, chat, email, in-person, mixed
    max_mentees: int = 0


class MentorProfile(CamelModel):
    """Structured mentor record.

    Only ``verified`` mentors should be passed to the engine; the caller
    owns that filtering.
    """
    id: str = Field(min_length=1)
    user_id: str = ""
    personal_info: MentorPersonalInfo = MentorPersonalInfo()
    professional_info: MentorProfessionalInfo = MentorProfessionalInfo()
    mentoring_info: MentoringInfo = MentoringInfo()
    verification_status: VerificationStatus = VerificationStatus.PENDING
    stats: MentorStats = MentorStats()
    preferences: MentorPreferences = MentorPreferences()
    personality_traits: set[str] = set()
