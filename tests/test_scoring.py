"""
Tests for the compatibility scoring engine.
"""

import itertools

import pytest
from pydantic import ValidationError

from speedmatch.data_models import Profile
from speedmatch.exceptions import ConfigError
from speedmatch.matching_models import MatchBreakdown, MatchLevel
from speedmatch.sample_profiles import SAMPLE_PARTICIPANTS
from speedmatch.scoring import (
    DEFAULT_CONFIG,
    MatchConfig,
    aggregate_score,
    build_reasons,
    classify_match_level,
    compute_match,
    interest_overlap,
    score_breakdown,
    score_experience,
    score_location,
    score_role,
    skill_overlap,
)


SAMPLE = [Profile.model_validate(p) for p in SAMPLE_PARTICIPANTS]


class TestOverlap:
    """Skill and interest overlap counting."""

    def test_skill_exact_and_substring(self):
        assert skill_overlap(["React"], ["react"]) == 1
        assert skill_overlap(["React"], ["React Native"]) == 1

    def test_skill_counts_pairs(self):
        assert skill_overlap(["React"], ["React Native", "React"]) == 2
        assert skill_overlap(["React Native", "React"], ["React"]) == 2

    def test_skill_blank_labels_ignored(self):
        assert skill_overlap(["", "  "], ["Python"]) == 0

    def test_skill_empty_lists(self):
        assert skill_overlap([], ["Python"]) == 0
        assert skill_overlap([], []) == 0

    def test_interest_shared_long_word(self):
        assert interest_overlap(["Data Storytelling"], ["Healthcare Data"]) == 1

    def test_interest_short_words_ignored(self):
        assert interest_overlap(["AR Dashboards"], ["AR Glasses"]) == 0

    def test_interest_word_must_exceed_three_chars(self):
        assert interest_overlap(["Tech Talks"], ["Civic Tech"]) == 1
        assert interest_overlap(["Big Art"], ["Pop Art"]) == 0

    def test_interest_case_insensitive(self):
        assert interest_overlap(["SPATIAL audio"], ["spatial UI"]) == 1

    def test_interest_is_order_independent(self):
        a = ["Machine Learning", "Machine Vision", "Gardening"]
        b = ["Machine Learning"]
        assert interest_overlap(a, b) == interest_overlap(b, a) == 1


class TestSubScores:
    """Individual factor calculators."""

    def test_role_same_family(self):
        assert score_role("XR Developer", "developer") == 12
        assert score_role("Chef", "chef") == 12

    @pytest.mark.parametrize(
        "role_a, role_b",
        [
            ("UX Designer", "Full Stack Developer"),
            ("Product Manager", "Software Engineer"),
            ("Data Strategist", "XR Developer"),
            ("AI Researcher", "AI Engineer"),
            ("DevOps Lead", "Backend Engineer"),
        ],
    )
    def test_role_complementary(self, role_a, role_b):
        assert score_role(role_a, role_b) == 20
        assert score_role(role_b, role_a) == 20

    def test_role_baseline(self):
        assert score_role("Chef", "Accountant") == 5

    def test_role_missing_is_baseline(self):
        assert score_role("", "Developer") == 5
        assert score_role(None, None) == 5

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (5, 4, 15),
            (None, None, 15),
            (0, 2, 15),
            (0, 3, 10),
            (0, 4, 10),
            (0, 5, 5),
            (6, 0, 5),
            (0, 7, 2),
            (25, 5, 2),
        ],
    )
    def test_experience_buckets(self, a, b, expected):
        assert score_experience(a, b) == expected

    def test_location_exact(self):
        assert score_location("Denver, CO", "denver, co") == 10
        assert score_location("Berlin", "berlin ") == 10

    def test_location_same_region(self):
        assert score_location("Boulder, CO", "Denver, co") == 7

    def test_location_different(self):
        assert score_location("Austin, TX", "Denver, CO") == 0

    def test_location_missing(self):
        assert score_location("Denver, CO", None) == 0
        assert score_location("", "Denver, CO") == 0


class TestTiers:
    """Tier classification depends on the score only."""

    @pytest.mark.parametrize("score", range(0, 101))
    def test_thresholds(self, score):
        level = classify_match_level(score)
        if score >= 75:
            assert level is MatchLevel.EXCELLENT
        elif score >= 50:
            assert level is MatchLevel.GOOD
        else:
            assert level is MatchLevel.POTENTIAL

    def test_low_alias(self):
        assert MatchLevel.LOW is MatchLevel.POTENTIAL
        assert [lvl.value for lvl in MatchLevel] == ["POTENTIAL", "GOOD", "EXCELLENT"]

    def test_ordering(self):
        assert MatchLevel.POTENTIAL.rank < MatchLevel.GOOD.rank < MatchLevel.EXCELLENT.rank

    def test_labels_and_colors(self):
        assert MatchLevel.EXCELLENT.label == "Excellent Match"
        assert MatchLevel.POTENTIAL.label == "Potential Match"
        assert MatchLevel.GOOD.aura_color == "#eab308"

    def test_custom_thresholds(self):
        config = DEFAULT_CONFIG.with_thresholds(excellent=60, good=40)
        assert classify_match_level(60, config) is MatchLevel.EXCELLENT
        assert classify_match_level(45, config) is MatchLevel.GOOD
        assert classify_match_level(39, config) is MatchLevel.POTENTIAL

    def test_invalid_thresholds(self):
        with pytest.raises(ConfigError):
            MatchConfig(excellent_threshold=50, good_threshold=50)
        with pytest.raises(ConfigError):
            DEFAULT_CONFIG.with_thresholds(excellent=120)

    def test_negative_weight_rejected(self):
        with pytest.raises(ConfigError):
            MatchConfig(skill_points=-1)


class TestReasons:
    """Reason strings and their qualifying thresholds."""

    def test_pluralization(self):
        one = build_reasons(MatchBreakdown(skill_overlap=1, interest_overlap=1))
        two = build_reasons(MatchBreakdown(skill_overlap=2, interest_overlap=3))
        assert one == ("1 shared skill", "1 shared interest")
        assert two == ("2 shared skills", "3 shared interests")

    def test_fixed_order(self):
        breakdown = MatchBreakdown(
            skill_overlap=1,
            interest_overlap=1,
            skill_score=10,
            interest_score=8,
            role_score=20,
            experience_score=15,
            location_score=7,
        )
        assert build_reasons(breakdown) == (
            "1 shared skill",
            "1 shared interest",
            "Complementary roles",
            "Compatible experience levels",
            "Same region",
        )

    def test_below_threshold_no_reason(self):
        breakdown = MatchBreakdown(role_score=12, experience_score=5, location_score=0)
        assert build_reasons(breakdown) == ()

    @pytest.mark.parametrize(
        "field, values",
        [
            ("role_score", [5, 12, 20]),
            ("experience_score", [2, 5, 10, 15]),
            ("location_score", [0, 7, 10]),
            ("skill_overlap", [0, 1, 2, 3]),
            ("interest_overlap", [0, 1, 2]),
        ],
    )
    def test_reason_count_monotonic(self, field, values):
        counts = [len(build_reasons(MatchBreakdown(**{field: v}))) for v in values]
        assert counts == sorted(counts)


class TestComputeMatch:
    """End-to-end scoring scenarios and properties."""

    def test_reference_pair(self, xr_developer, product_designer):
        # 20 skills + 8 interests + 20 roles (developer x designer) + 15 experience
        result = compute_match(xr_developer, product_designer)
        assert result.score == 63
        assert result.match_level is MatchLevel.GOOD
        assert result.reasons == (
            "2 shared skills",
            "1 shared interest",
            "Complementary roles",
            "Compatible experience levels",
        )

    def test_reference_pair_breakdown(self, xr_developer, product_designer):
        breakdown = score_breakdown(xr_developer, product_designer)
        assert breakdown.skill_overlap == 2
        assert breakdown.interest_overlap == 1
        assert breakdown.skill_score == 20
        assert breakdown.interest_score == 8
        assert breakdown.role_score == 20
        assert breakdown.experience_score == 15
        assert breakdown.location_score == 0

    def test_identical_profiles(self, data_engineer):
        twin = data_engineer.model_copy(update={"id": "d2"})
        result = compute_match(data_engineer, twin)
        # 20 skills + 16 interests + 12 same role + 15 experience + 10 location
        assert result.score == 73
        assert result.reasons == (
            "2 shared skills",
            "2 shared interests",
            "Compatible experience levels",
            "Same region",
        )

    def test_unrelated_profiles(self, chef, accountant):
        result = compute_match(chef, accountant)
        assert result.score <= 7
        assert result.match_level is MatchLevel.POTENTIAL
        assert result.reasons == ()

    def test_empty_profile(self, empty_profile):
        for other in SAMPLE:
            result = compute_match(empty_profile, other)
            assert result.score <= 5 + 15
            assert not any("shared" in r for r in result.reasons)
            assert "Same region" not in result.reasons

    def test_empty_vs_empty(self, empty_profile):
        result = compute_match(empty_profile, empty_profile.model_copy(update={"id": "e2"}))
        assert result.score == 20
        assert result.reasons == ("Compatible experience levels",)

    def test_score_capped(self):
        skills = ["python", "python", "python", "python"]
        interests = ["machine learning"] * 5
        a = Profile(id="a", role="Developer", skills=skills, interests=interests, location="X, Y")
        b = Profile(id="b", role="UX Designer", skills=skills, interests=interests, location="X, Y")
        breakdown = score_breakdown(a, b)
        assert breakdown.skill_score == 30
        assert breakdown.interest_score == 25
        result = compute_match(a, b)
        assert result.score == 100
        assert result.match_level is MatchLevel.EXCELLENT

    def test_aggregate_clamps(self):
        assert aggregate_score(MatchBreakdown(skill_score=90, interest_score=90)) == 100
        assert aggregate_score(MatchBreakdown(skill_score=-10)) == 0
        assert aggregate_score(MatchBreakdown(skill_score=10.5)) == 11

    def test_custom_weights(self, xr_developer, product_designer):
        config = MatchConfig(role_complementary=0)
        result = compute_match(xr_developer, product_designer, config)
        assert result.score == 43
        assert "Complementary roles" not in result.reasons

    @pytest.mark.parametrize("a, b", list(itertools.combinations(SAMPLE, 2)))
    def test_symmetric(self, a, b):
        assert compute_match(a, b) == compute_match(b, a)

    @pytest.mark.parametrize("a, b", list(itertools.combinations(SAMPLE, 2)))
    def test_bounds_and_tier(self, a, b):
        result = compute_match(a, b)
        assert isinstance(result.score, int)
        assert 0 <= result.score <= 100
        assert result.match_level is classify_match_level(result.score)

    def test_idempotent(self, xr_developer, product_designer):
        first = compute_match(xr_developer, product_designer)
        second = compute_match(xr_developer, product_designer)
        assert first == second

    def test_result_is_frozen(self, xr_developer, product_designer):
        result = compute_match(xr_developer, product_designer)
        with pytest.raises(ValidationError):
            result.score = 0
