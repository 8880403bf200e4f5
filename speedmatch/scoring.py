"""
Deterministic compatibility scoring between two attendee profiles.

The score is the sum of five capped factors:

- skill overlap (up to 30)
- interest overlap (up to 25)
- role complementarity (up to 20)
- experience compatibility (up to 15)
- location bonus (up to 10)

rounded and clamped to [0, 100], then bucketed into a MatchLevel. Every
number used here lives on ``MatchConfig`` so callers can tune it without
touching the functions.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from .data_models import Profile
from .exceptions import ConfigError
from .matching_models import MatchBreakdown, MatchLevel, MatchResult


logger = logging.getLogger(__name__)

KeywordGroup = Tuple[str, ...]

# Ordered; the first pair that matches wins.
COMPLEMENTARY_ROLE_GROUPS: Tuple[Tuple[KeywordGroup, KeywordGroup], ...] = (
    (("developer", "engineer"), ("designer", "ux")),
    (("developer", "engineer"), ("product", "manager")),
    (("data", "analyst"), ("developer", "engineer")),
    (("ai", "ml"), ("developer", "engineer")),
    (("devops",), ("developer", "engineer")),
    (("project", "manager"), ("developer", "engineer")),
)


@dataclass(frozen=True)
class MatchConfig:
    skill_points: float = 10
    skill_cap: float = 30
    interest_points: float = 8
    interest_cap: float = 25
    # interest words must be strictly longer than this to count
    interest_word_min_length: int = 3
    role_same_family: float = 12
    role_complementary: float = 20
    role_baseline: float = 5
    complementary_roles: Tuple[Tuple[KeywordGroup, KeywordGroup], ...] = COMPLEMENTARY_ROLE_GROUPS
    # (max year gap, points), checked in order
    experience_buckets: Tuple[Tuple[int, float], ...] = ((2, 15), (4, 10), (6, 5))
    experience_floor: float = 2
    location_exact: float = 10
    location_region: float = 7
    role_reason_min: float = 15
    experience_reason_min: float = 10
    location_reason_min: float = 5
    excellent_threshold: int = 75
    good_threshold: int = 50

    def __post_init__(self) -> None:
        if not 0 <= self.good_threshold < self.excellent_threshold <= 100:
            raise ConfigError(
                "Thresholds must satisfy 0 <= good < excellent <= 100",
                field="good_threshold/excellent_threshold",
                value=(self.good_threshold, self.excellent_threshold),
            )
        for name in (
            "skill_points",
            "skill_cap",
            "interest_points",
            "interest_cap",
            "role_same_family",
            "role_complementary",
            "role_baseline",
            "experience_floor",
            "location_exact",
            "location_region",
        ):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be non-negative", field=name, value=getattr(self, name))
        gaps = [gap for gap, _ in self.experience_buckets]
        if gaps != sorted(gaps):
            raise ConfigError(
                "experience_buckets must be ordered by increasing gap",
                field="experience_buckets",
                value=self.experience_buckets,
            )

    def with_thresholds(self, excellent: Optional[int] = None, good: Optional[int] = None) -> "MatchConfig":
        return replace(
            self,
            excellent_threshold=self.excellent_threshold if excellent is None else excellent,
            good_threshold=self.good_threshold if good is None else good,
        )


DEFAULT_CONFIG = MatchConfig()


# ---- normalization / overlap helpers ----
def _normalize_labels(labels: Optional[Iterable[str]]) -> List[str]:
    """Lower-case and trim labels, dropping blanks (a blank label would contain-match everything)."""
    if not labels:
        return []
    out = []
    for label in labels:
        s = str(label or "").strip().lower()
        if s:
            out.append(s)
    return out


def skill_overlap(skills_a: Sequence[str], skills_b: Sequence[str]) -> int:
    """Count (a, b) skill pairs where one label contains the other."""
    a = _normalize_labels(skills_a)
    b = _normalize_labels(skills_b)
    return sum(1 for s1 in a for s2 in b if s1 in s2 or s2 in s1)


def _long_words(phrase: str, min_length: int) -> set:
    return {w for w in phrase.split() if len(w) > min_length}


def _interests_matched(source: List[str], other: List[str], min_length: int) -> int:
    other_words = [_long_words(i, min_length) for i in other]
    count = 0
    for interest in source:
        words = _long_words(interest, min_length)
        if any(words & ow for ow in other_words):
            count += 1
    return count


def interest_overlap(
    interests_a: Sequence[str],
    interests_b: Sequence[str],
    min_word_length: int = DEFAULT_CONFIG.interest_word_min_length,
) -> int:
    """Count interests sharing a long word with an interest on the other side.

    Counted from both sides and the smaller count is kept, so the result
    does not depend on argument order.
    """
    a = _normalize_labels(interests_a)
    b = _normalize_labels(interests_b)
    if not a or not b:
        return 0
    return min(
        _interests_matched(a, b, min_word_length),
        _interests_matched(b, a, min_word_length),
    )


# ---- sub-score calculators ----
def score_skills(overlap: int, config: MatchConfig = DEFAULT_CONFIG) -> float:
    return min(overlap * config.skill_points, config.skill_cap)


def score_interests(overlap: int, config: MatchConfig = DEFAULT_CONFIG) -> float:
    return min(overlap * config.interest_points, config.interest_cap)


def _in_group(role: str, group: KeywordGroup) -> bool:
    return any(keyword in role for keyword in group)


def score_role(role_a: Optional[str], role_b: Optional[str], config: MatchConfig = DEFAULT_CONFIG) -> float:
    r1 = (role_a or "").strip().lower()
    r2 = (role_b or "").strip().lower()
    # a blank role would contain-match any role; treat it as unrelated instead
    if not r1 or not r2:
        return config.role_baseline
    # same family, e.g. "developer" vs "xr developer"
    if r1 in r2 or r2 in r1:
        return config.role_same_family
    for group1, group2 in config.complementary_roles:
        if (_in_group(r1, group1) and _in_group(r2, group2)) or (
            _in_group(r1, group2) and _in_group(r2, group1)
        ):
            return config.role_complementary
    return config.role_baseline


def score_experience(
    years_a: Optional[int], years_b: Optional[int], config: MatchConfig = DEFAULT_CONFIG
) -> float:
    gap = abs((years_a or 0) - (years_b or 0))
    for max_gap, points in config.experience_buckets:
        if gap <= max_gap:
            return points
    return config.experience_floor


def _region(location: str) -> str:
    return location.rsplit(",", 1)[-1].strip().lower()


def score_location(
    location_a: Optional[str], location_b: Optional[str], config: MatchConfig = DEFAULT_CONFIG
) -> float:
    a = (location_a or "").strip()
    b = (location_b or "").strip()
    if not a or not b:
        return 0
    if a.lower() == b.lower():
        return config.location_exact
    region_a, region_b = _region(a), _region(b)
    if region_a and region_a == region_b:
        return config.location_region
    return 0


# ---- aggregate ----
def score_breakdown(a: Profile, b: Profile, config: MatchConfig = DEFAULT_CONFIG) -> MatchBreakdown:
    """Compute every factor for the pair without aggregating."""
    skills = skill_overlap(a.skills, b.skills)
    interests = interest_overlap(a.interests, b.interests, config.interest_word_min_length)
    return MatchBreakdown(
        skill_overlap=skills,
        interest_overlap=interests,
        skill_score=score_skills(skills, config),
        interest_score=score_interests(interests, config),
        role_score=score_role(a.role, b.role, config),
        experience_score=score_experience(a.experience_years, b.experience_years, config),
        location_score=score_location(a.location, b.location, config),
    )


def aggregate_score(breakdown: MatchBreakdown) -> int:
    # half-up rounding, then clamp
    return min(max(int(math.floor(breakdown.total + 0.5)), 0), 100)


def classify_match_level(score: int, config: MatchConfig = DEFAULT_CONFIG) -> MatchLevel:
    if score >= config.excellent_threshold:
        return MatchLevel.EXCELLENT
    if score >= config.good_threshold:
        return MatchLevel.GOOD
    return MatchLevel.POTENTIAL


def _plural(count: int, noun: str) -> str:
    return f"{count} shared {noun}{'s' if count != 1 else ''}"


def build_reasons(breakdown: MatchBreakdown, config: MatchConfig = DEFAULT_CONFIG) -> Tuple[str, ...]:
    reasons: List[str] = []
    if breakdown.skill_overlap > 0:
        reasons.append(_plural(breakdown.skill_overlap, "skill"))
    if breakdown.interest_overlap > 0:
        reasons.append(_plural(breakdown.interest_overlap, "interest"))
    if breakdown.role_score >= config.role_reason_min:
        reasons.append("Complementary roles")
    if breakdown.experience_score >= config.experience_reason_min:
        reasons.append("Compatible experience levels")
    if breakdown.location_score >= config.location_reason_min:
        reasons.append("Same region")
    return tuple(reasons)


def compute_match(a: Profile, b: Profile, config: MatchConfig = DEFAULT_CONFIG) -> MatchResult:
    """Score two profiles.

    Args:
        a: First profile (usually the current user).
        b: Second profile (the scanned or listed attendee).
        config: Weights and thresholds; defaults reproduce the standard formula.

    Returns:
        MatchResult with the clamped integer score, its tier and the reasons.
    """
    breakdown = score_breakdown(a, b, config)
    score = aggregate_score(breakdown)
    result = MatchResult(
        score=score,
        match_level=classify_match_level(score, config),
        reasons=build_reasons(breakdown, config),
    )
    logger.debug("match %s <-> %s: score=%d level=%s", a.id, b.id, score, result.match_level.value)
    return result
