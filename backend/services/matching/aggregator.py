"""Weight normalization and weighted aggregation of compatibility factors."""

import logging

import numpy as np

from models.schemas.compatibility import FACTORS, CompatibilityVector, WeightVector

logger = logging.getLogger(__name__)

# decimal places kept before the final integer rounding
SCORE_PRECISION = 9


def normalize_weights(weights: WeightVector) -> np.ndarray:
    """Clamp negatives to 0 and scale to sum 1.

    A vector with no positive weight falls back to uniform 1/8 each.
    """
    raw = np.clip(np.array(weights.as_list(), dtype=float), 0.0, None)
    total = float(raw.sum())
    if total <= 0.0 or not np.isfinite(total):
        logger.debug("Degenerate weight vector %s, using uniform weights", weights.as_list())
        return np.full(len(FACTORS), 1.0 / len(FACTORS))
    return raw / total


def weighted_score(normalized: np.ndarray, compatibility: CompatibilityVector) -> int:
    """0-100 match score for pre-normalized weights."""
    value = float(np.dot(normalized, np.array(compatibility.as_list(), dtype=float)))
    # drop float noise from weight normalization before rounding half-even
    percent = round(max(0.0, min(1.0, value)) * 100, SCORE_PRECISION)
    return int(round(percent))


def aggregate(weights: WeightVector, compatibility: CompatibilityVector) -> int:
    """round(100 * sum(w'_i * c_i)) with w' the normalized weights."""
    return weighted_score(normalize_weights(weights), compatibility)
