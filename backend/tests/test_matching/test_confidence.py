"""Tests for confidence banding."""

import pytest

from models.schemas.compatibility import CompatibilityVector
from models.schemas.enums import Confidence
from services.matching.confidence import classify, weak_factors


def vector(low=None, value=0.9):
    values = {name: value for name in ("skills", "availability", "communication", "experience",
                                       "personality", "learning", "budget", "location")}
    if low:
        values[low] = 0.1
    return CompatibilityVector(**values)


class TestClassify:
    def test_high(self):
        assert classify(85, vector()) == Confidence.HIGH

    def test_high_score_with_weak_link_is_medium(self):
        assert classify(85, vector(low="budget")) == Confidence.MEDIUM

    def test_boundary_80(self):
        assert classify(80, vector()) == Confidence.HIGH
        assert classify(79, vector()) == Confidence.MEDIUM

    def test_medium(self):
        assert classify(60, vector(low="skills")) == Confidence.MEDIUM

    @pytest.mark.parametrize("score", [0, 30, 59])
    def test_low(self, score):
        assert classify(score, vector()) == Confidence.LOW

    def test_exactly_point_four_is_not_weak(self):
        assert weak_factors(vector(value=0.4)) == []
        assert weak_factors(vector(low="location")) == ["location"]
