"""Matching orchestrator: wires the engine stages together.

Flow:
    mentee + mentors + weights
      ├─ normalize_mentee(mentee)              → MenteeProfile (raises on bad id)
      ├─ normalize_mentor(m) for each mentor   → MentorProfile | skipped
      ├─ normalize_weights(weights)            → w' (sums to 1)
      │               ↓
      ├─ score_pair(mentee, mentor)            → CompatibilityVector   (per mentor, parallelizable)
      ├─ weighted_score(w', vector)            → match_score
      │               ↓
      ├─ rank(candidates, top_n)               → survivors, total order
      │               ↓
      └─ classify + build_* for each survivor  → MatchResult
"""

import logging
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import numpy as np

from models.schemas.compatibility import WeightVector
from models.schemas.match_result import MatchReport, MatchResult, SkippedMentor
from models.schemas.mentee_profile import MenteeProfile
from models.schemas.mentor_profile import MentorProfile
from services.matching.aggregator import normalize_weights, weighted_score
from services.matching.confidence import classify
from services.matching.errors import ValidationError
from services.matching.explainer import build_challenges, build_match_reasons, build_recommendations
from services.matching.normalizer import normalize_mentee, normalize_mentor
from services.matching.ranker import ScoredCandidate, rank
from services.matching.scorer import score_pair

logger = logging.getLogger(__name__)

RawMentee = Mapping[str, Any] | MenteeProfile
RawMentor = Mapping[str, Any] | MentorProfile


def _as_weights(weights: WeightVector | Mapping[str, float] | None) -> WeightVector:
    if weights is None:
        return WeightVector()
    if isinstance(weights, WeightVector):
        return weights
    return WeightVector.model_validate(dict(weights))


def _normalize_pool(mentors: Iterable[RawMentor]) -> tuple[list[MentorProfile], list[SkippedMentor]]:
    valid: list[MentorProfile] = []
    skipped: list[SkippedMentor] = []
    for raw in mentors:
        try:
            valid.append(normalize_mentor(raw))
        except ValidationError as e:
            logger.warning("Skipping mentor record: %s", e)
            skipped.append(SkippedMentor(mentor_id=e.record_id, reason=str(e)))
    return valid, skipped


def _score(mentee: MenteeProfile, mentor: MentorProfile, weights: np.ndarray) -> ScoredCandidate:
    compatibility = score_pair(mentee, mentor)
    return ScoredCandidate(mentor, compatibility, weighted_score(weights, compatibility))


def _explain(mentee: MenteeProfile, candidate: ScoredCandidate) -> MatchResult:
    mentor, compatibility, match_score = candidate
    return MatchResult(
        mentor=mentor,
        match_score=match_score,
        compatibility=compatibility,
        confidence=classify(match_score, compatibility),
        match_reasons=build_match_reasons(mentee, mentor, compatibility),
        recommendations=build_recommendations(mentee, mentor, compatibility),
        potential_challenges=build_challenges(mentee, mentor, compatibility),
    )


def rank_mentors(
    mentee: RawMentee,
    mentors: Iterable[RawMentor],
    weights: WeightVector | Mapping[str, float] | None = None,
    top_n: int | None = None,
    *,
    min_score: int | None = None,
    max_candidates: int | None = None,
    workers: int = 1,
) -> MatchReport:
    """Score, rank and explain a mentor pool for one mentee.

    Args:
        mentee: raw mapping or ``MenteeProfile``; must carry a non-empty id.
        mentors: raw mappings or ``MentorProfile`` instances. Records that
            fail validation are skipped and reported, not raised.
        weights: factor weights; omitted keys use the defaults, negatives
            are clamped to 0 and an all-zero vector means uniform.
        top_n: keep only the best ``top_n`` after ranking (None keeps all).
        min_score: drop candidates scoring below this before ranking.
        max_candidates: score at most this many records from the pool.
        workers: threads used for per-candidate scoring.

    Raises:
        ValidationError: the mentee record is invalid.
    """
    profile = normalize_mentee(mentee)
    normalized_weights = normalize_weights(_as_weights(weights))

    pool = list(mentors)
    if max_candidates is not None and len(pool) > max_candidates:
        logger.info("Capping candidate pool from %d to %d", len(pool), max_candidates)
        pool = pool[:max(max_candidates, 0)]

    valid, skipped = _normalize_pool(pool)

    if workers > 1 and len(valid) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            candidates = list(executor.map(lambda m: _score(profile, m, normalized_weights), valid))
    else:
        candidates = [_score(profile, m, normalized_weights) for m in valid]

    if min_score is not None:
        candidates = [c for c in candidates if c.match_score >= min_score]

    matches = [_explain(profile, c) for c in rank(candidates, top_n)]

    logger.info(
        "Matched mentee %s: %d scored, %d skipped, %d returned",
        profile.id, len(valid), len(skipped), len(matches),
    )
    return MatchReport(matches=matches, skipped=skipped, candidates_scored=len(valid))


def find_best_matches(
    mentee: RawMentee,
    mentors: Iterable[RawMentor],
    weights: WeightVector | Mapping[str, float] | None = None,
    top_n: int | None = None,
) -> list[MatchResult]:
    """Ranked, explained matches for ``mentee``; see ``rank_mentors``."""
    return rank_mentors(mentee, mentors, weights, top_n).matches
