"""End-to-end tests for the matching engine entry points."""

import copy
import logging
import math

import pytest

from models.schemas.compatibility import WeightVector
from models.schemas.enums import Confidence
from models.schemas.mentee_profile import MenteeProfile
from services.matching import ValidationError, find_best_matches, rank_mentors
from services.matching.confidence import HIGH_SCORE, WEAK_FACTOR


@pytest.fixture
def budget_mentee():
    return {
        "id": "mentee-b",
        "professionalInfo": {"skills": ["React", "Node"]},
        "mentoringNeeds": {"budget": {"min": 0, "max": 50}},
    }


@pytest.fixture
def budget_pool():
    return [
        {
            "id": "mentor-a",
            "professionalInfo": {"skills": ["React", "Node", "GraphQL"]},
            "mentoringInfo": {"pricing": {"hourlyRate": 40}},
        },
        {
            "id": "mentor-b",
            "professionalInfo": {"skills": ["React"]},
            "mentoringInfo": {"pricing": {"hourlyRate": 200}},
        },
    ]


def _pool(mentor_record, count):
    pool = []
    for i in range(count):
        record = copy.deepcopy(mentor_record)
        record["id"] = f"mentor-{i}"
        record["mentoringInfo"]["pricing"]["hourlyRate"] = 40 + 25 * i
        record["professionalInfo"]["skills"] = ["React", "Node.js", "GraphQL"][: 1 + i % 3]
        record["personalInfo"]["timezone"] = ["EST", "PST", "CET", "JST"][i % 4]
        record["stats"]["averageRating"] = 4.0 + (i % 2) * 0.5
        pool.append(record)
    return pool


class TestScenarios:
    def test_cheaper_better_skilled_mentor_wins(self, budget_mentee, budget_pool):
        results = find_best_matches(budget_mentee, budget_pool, WeightVector.uniform())
        assert [r.mentor.id for r in results] == ["mentor-a", "mentor-b"]
        assert results[0].match_score == 69
        assert results[1].match_score == 50
        assert any("budget" in c for c in results[1].potential_challenges)

    def test_no_availability_preference_scores_full(self, budget_mentee, mentor_record):
        bare = {"id": "mentor-bare"}
        results = find_best_matches(budget_mentee, [mentor_record, bare])
        assert all(r.compatibility.availability == 1.0 for r in results)

    def test_empty_pool(self, mentee_record):
        assert find_best_matches(mentee_record, []) == []

    def test_all_zero_weights_rank_like_uniform(self, mentee_record, mentor_record):
        pool = _pool(mentor_record, 6)
        zero = find_best_matches(mentee_record, pool, WeightVector.uniform(0.0))
        equal = find_best_matches(mentee_record, pool, WeightVector.uniform(3.0))
        assert [r.mentor.id for r in zero] == [r.mentor.id for r in equal]
        assert [r.match_score for r in zero] == [r.match_score for r in equal]

    def test_mentor_without_id_is_skipped(self, mentee_record, mentor_record, caplog):
        pool = _pool(mentor_record, 3)
        del pool[1]["id"]
        with caplog.at_level(logging.WARNING, logger="services.matching.orchestrator"):
            results = find_best_matches(mentee_record, pool)
        assert len(results) == 2
        assert "missing a mandatory id" in caplog.text


class TestMenteeValidation:
    def test_missing_id_raises(self, mentee_record, mentor_record):
        del mentee_record["id"]
        with pytest.raises(ValidationError):
            find_best_matches(mentee_record, [mentor_record])

    def test_blank_id_raises(self, mentee_record, mentor_record):
        mentee_record["id"] = "   "
        with pytest.raises(ValidationError):
            find_best_matches(mentee_record, [mentor_record])

    def test_accepts_profile_instance(self, mentee_record, mentor_record):
        profile = MenteeProfile.model_validate(mentee_record)
        assert len(find_best_matches(profile, [mentor_record])) == 1


class TestRankMentors:
    def test_report_lists_skipped_records(self, mentee_record, mentor_record):
        bad = copy.deepcopy(mentor_record)
        bad["id"] = "mentor-bad"
        bad["stats"]["totalSessions"] = "many"
        report = rank_mentors(mentee_record, [mentor_record, bad])
        assert report.candidates_scored == 1
        assert [s.mentor_id for s in report.skipped] == ["mentor-bad"]
        assert "stats.totalSessions" in report.skipped[0].reason

    def test_numeric_mentor_id_kept(self, mentee_record, mentor_record):
        numbered = copy.deepcopy(mentor_record)
        numbered["id"] = 7
        report = rank_mentors(mentee_record, [mentor_record, numbered])
        assert report.skipped == []
        assert sorted(r.mentor.id for r in report.matches) == ["7", "mentor-a"]

    def test_top_n(self, mentee_record, mentor_record):
        report = rank_mentors(mentee_record, _pool(mentor_record, 8), top_n=3)
        assert len(report.matches) == 3
        assert report.candidates_scored == 8

    def test_min_score(self, budget_mentee, budget_pool):
        report = rank_mentors(budget_mentee, budget_pool, WeightVector.uniform(), min_score=60)
        assert [r.mentor.id for r in report.matches] == ["mentor-a"]

    def test_max_candidates_caps_pool(self, mentee_record, mentor_record):
        report = rank_mentors(mentee_record, _pool(mentor_record, 5), max_candidates=2)
        assert report.candidates_scored == 2

    def test_partial_weight_mapping(self, budget_mentee, budget_pool):
        results = rank_mentors(budget_mentee, budget_pool, {"skills": 1.0}).matches
        assert results[0].mentor.id == "mentor-a"

    def test_parallel_scoring_matches_serial(self, mentee_record, mentor_record):
        pool = _pool(mentor_record, 12)
        serial = rank_mentors(mentee_record, pool, workers=1)
        parallel = rank_mentors(mentee_record, pool, workers=4)
        assert parallel.model_dump() == serial.model_dump()

    def test_camel_case_output(self, mentee_record, mentor_record):
        result = find_best_matches(mentee_record, [mentor_record])[0]
        dumped = result.model_dump(by_alias=True)
        assert {"matchScore", "matchReasons", "potentialChallenges"} <= set(dumped)
        assert "sessionFrequency" in dumped["recommendations"]


@pytest.mark.properties
class TestProperties:
    def test_deterministic(self, mentee_record, mentor_record):
        pool = _pool(mentor_record, 8)
        first = find_best_matches(mentee_record, pool)
        second = find_best_matches(mentee_record, copy.deepcopy(pool))
        assert [r.model_dump() for r in first] == [r.model_dump() for r in second]

    def test_input_order_does_not_matter(self, mentee_record, mentor_record):
        pool = _pool(mentor_record, 8)
        forward = find_best_matches(mentee_record, pool)
        backward = find_best_matches(mentee_record, list(reversed(pool)))
        assert [r.mentor.id for r in forward] == [r.mentor.id for r in backward]

    def test_nan_rating_keeps_order_total(self, mentee_record):
        pool = [{"id": f"x{i}"} for i in range(4)]
        pool[1]["stats"] = {"averageRating": math.nan}
        forward = find_best_matches(mentee_record, pool)
        backward = find_best_matches(mentee_record, list(reversed(pool)))
        assert [r.mentor.id for r in forward] == [r.mentor.id for r in backward]
        assert [r.mentor.id for r in forward] == ["x0", "x1", "x2", "x3"]

    def test_sorted_by_score(self, mentee_record, mentor_record):
        scores = [r.match_score for r in find_best_matches(mentee_record, _pool(mentor_record, 10))]
        assert scores == sorted(scores, reverse=True)
        assert all(0 <= s <= 100 for s in scores)

    def test_weight_scale_invariance(self, mentee_record, mentor_record):
        pool = _pool(mentor_record, 6)
        base = WeightVector()
        scaled = WeightVector(**{k: v * 10 for k, v in base.model_dump().items()})
        a = find_best_matches(mentee_record, pool, base)
        b = find_best_matches(mentee_record, pool, scaled)
        assert [(r.mentor.id, r.match_score) for r in a] == [(r.mentor.id, r.match_score) for r in b]

    def test_better_budget_fit_never_scores_lower(self, budget_mentee, budget_pool):
        cheaper = copy.deepcopy(budget_pool[1])
        cheaper["id"] = "mentor-b-cheap"
        cheaper["mentoringInfo"]["pricing"]["hourlyRate"] = 45
        results = {r.mentor.id: r.match_score for r in find_best_matches(budget_mentee, budget_pool + [cheaper])}
        assert results["mentor-b-cheap"] >= results["mentor-b"]

    def test_confidence_consistent_with_factors(self, mentee_record, mentor_record):
        for result in find_best_matches(mentee_record, _pool(mentor_record, 10)):
            values = [v for _, v in result.compatibility.items()]
            if result.confidence == Confidence.HIGH:
                assert result.match_score >= HIGH_SCORE
                assert min(values) >= WEAK_FACTOR
            assert len(result.potential_challenges) == sum(v < WEAK_FACTOR for v in values)
            assert len(result.match_reasons) <= 3

    def test_close_fit_is_high_confidence(self, mentee_record, mentor_record):
        result = find_best_matches(mentee_record, [mentor_record])[0]
        assert result.confidence == Confidence.HIGH
        assert result.potential_challenges == []
