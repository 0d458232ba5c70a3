"""Confidence banding: aggregate score plus a weak-link check."""

from models.schemas.compatibility import CompatibilityVector
from models.schemas.enums import Confidence

HIGH_SCORE = 80
MEDIUM_SCORE = 60
WEAK_FACTOR = 0.4


def weak_factors(compatibility: CompatibilityVector) -> list[str]:
    return [name for name, value in compatibility.items() if value < WEAK_FACTOR]


def classify(match_score: int, compatibility: CompatibilityVector) -> Confidence:
    """``high`` needs score >= 80 with no factor below 0.4.

    A high score with weak factors, or any score >= 60, is ``medium``; a
    single catastrophic factor can therefore never sit behind a ``high``.
    """
    weak = len(weak_factors(compatibility))
    if match_score >= HIGH_SCORE and weak == 0:
        return Confidence.HIGH
    if match_score >= MEDIUM_SCORE:
        return Confidence.MEDIUM
    return Confidence.LOW
