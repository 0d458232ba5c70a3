"""Mentor matching engine.

Pure, synchronous and stateless: every call takes complete inputs and
returns fresh results.
"""

from services.matching.errors import MatchingError, ValidationError
from services.matching.mentee_analyzer import analyze_mentee_profile
from services.matching.orchestrator import find_best_matches, rank_mentors

__all__ = [
    "MatchingError",
    "ValidationError",
    "analyze_mentee_profile",
    "find_best_matches",
    "rank_mentors",
]
