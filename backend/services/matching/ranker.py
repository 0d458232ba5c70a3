"""Deterministic ordering of scored candidates."""

from typing import NamedTuple

from models.schemas.compatibility import CompatibilityVector
from models.schemas.mentor_profile import MentorProfile


class ScoredCandidate(NamedTuple):
    """A mentor with its factor vector and aggregate score, before explanation."""
    mentor: MentorProfile
    compatibility: CompatibilityVector
    match_score: int


def rank_key(candidate: ScoredCandidate) -> tuple:
    """Score desc, then rating desc, then sessions desc, then id asc."""
    stats = candidate.mentor.stats
    return (
        -candidate.match_score,
        -stats.average_rating,
        -stats.total_sessions,
        candidate.mentor.id,
    )


def rank(candidates: list[ScoredCandidate], top_n: int | None = None) -> list[ScoredCandidate]:
    """Sort candidates into a total order and keep the first ``top_n``.

    ``top_n`` of None (or larger than the pool) keeps everything; values
    below 1 keep nothing.
    """
    ordered = sorted(candidates, key=rank_key)
    if top_n is None:
        return ordered
    return ordered[:max(top_n, 0)]
