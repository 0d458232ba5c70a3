"""Pydantic contracts shared by the matching engine and the API layer."""

from models.schemas.compatibility import FACTORS, CompatibilityVector, WeightVector
from models.schemas.enums import Confidence, ExperienceLevel, VerificationStatus
from models.schemas.match_result import MatchReport, MatchResult, Recommendations, SkippedMentor
from models.schemas.mentee_analysis import MenteeAnalysis
from models.schemas.mentee_profile import MenteeProfile
from models.schemas.mentor_profile import MentorProfile

__all__ = [
    "FACTORS",
    "CompatibilityVector",
    "Confidence",
    "ExperienceLevel",
    "MatchReport",
    "MatchResult",
    "MenteeAnalysis",
    "MenteeProfile",
    "MentorProfile",
    "Recommendations",
    "SkippedMentor",
    "VerificationStatus",
    "WeightVector",
]
