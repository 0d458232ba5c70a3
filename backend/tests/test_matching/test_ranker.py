"""Tests for candidate ordering."""

from models.schemas.compatibility import CompatibilityVector
from models.schemas.mentor_profile import MentorProfile
from services.matching.ranker import ScoredCandidate, rank

_VECTOR = CompatibilityVector(skills=0.5, availability=0.5, communication=0.5, experience=0.5,
                              personality=0.5, learning=0.5, budget=0.5, location=0.5)


def candidate(mentor_id, score, rating=0.0, sessions=0):
    mentor = MentorProfile(id=mentor_id, stats={"average_rating": rating, "total_sessions": sessions})
    return ScoredCandidate(mentor, _VECTOR, score)


def ids(candidates):
    return [c.mentor.id for c in candidates]


class TestRank:
    def test_score_descending(self):
        ranked = rank([candidate("a", 50), candidate("b", 90), candidate("c", 70)])
        assert ids(ranked) == ["b", "c", "a"]

    def test_tie_broken_by_rating_then_sessions_then_id(self):
        ranked = rank([
            candidate("d", 80, rating=4.0, sessions=10),
            candidate("c", 80, rating=4.5, sessions=5),
            candidate("b", 80, rating=4.0, sessions=30),
            candidate("a", 80, rating=4.0, sessions=10),
        ])
        assert ids(ranked) == ["c", "b", "a", "d"]

    def test_order_independent_of_input_order(self):
        pool = [candidate(str(i), i % 3 * 10, rating=i % 2) for i in range(9)]
        assert ids(rank(pool)) == ids(rank(list(reversed(pool))))

    def test_top_n_truncates(self):
        ranked = rank([candidate("a", 50), candidate("b", 90), candidate("c", 70)], top_n=2)
        assert ids(ranked) == ["b", "c"]

    def test_top_n_larger_than_pool_returns_all(self):
        assert len(rank([candidate("a", 50)], top_n=10)) == 1

    def test_empty_pool(self):
        assert rank([], top_n=3) == []
