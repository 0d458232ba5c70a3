"""Engine output: ranked, explained match results."""

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from models.schemas.base import CamelModel
from models.schemas.compatibility import CompatibilityVector
from models.schemas.enums import Confidence
from models.schemas.mentor_profile import MentorProfile

_FROZEN = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Recommendations(CamelModel):
    model_config = _FROZEN

    session_frequency: str = ""
    session_duration: str = ""
    focus_areas: list[str] = []
    communication_strategy: str = ""


class MatchResult(CamelModel):
    """One ranked candidate. Created fresh per call, never mutated."""
    model_config = _FROZEN

    mentor: MentorProfile
    match_score: int = 0  # 0-100
    compatibility: CompatibilityVector
    confidence: Confidence = Confidence.LOW
    match_reasons: list[str] = []  # strongest factor first
    recommendations: Recommendations = Recommendations()
    potential_challenges: list[str] = []  # weakest factor first


class SkippedMentor(CamelModel):
    """A mentor record dropped from the pool because it failed validation."""
    model_config = _FROZEN

    mentor_id: str = ""
    reason: str = ""


class MatchReport(CamelModel):
    matches: list[MatchResult] = []
    skipped: list[SkippedMentor] = []
    candidates_scored: int = 0
