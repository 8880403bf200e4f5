from __future__ import annotations

from typing import Iterable, List, Optional

import pandas as pd

from .data_models import Profile
from .matching_models import MatchLevel
from .scoring import DEFAULT_CONFIG, MatchConfig, aggregate_score, build_reasons, classify_match_level, score_breakdown


RANKING_COLUMNS = [
    "id",
    "name",
    "role",
    "company",
    "location",
    "match_score",
    "match_level",
    "reasons",
    "score_skills",
    "score_interests",
    "score_role",
    "score_experience",
    "score_location",
]

SORT_KEYS = ("match", "name", "company")


def rank_candidates(
    current: Profile,
    candidates: Iterable[Profile],
    config: MatchConfig = DEFAULT_CONFIG,
) -> pd.DataFrame:
    """Score ``current`` against every candidate (excluding itself).

    Returns one row per candidate with the match score, tier, reasons and
    component scores, ordered by descending score (ties keep input order).
    """
    rows: List[dict] = []
    for other in candidates:
        if other.id == current.id:
            continue
        breakdown = score_breakdown(current, other, config)
        score = aggregate_score(breakdown)
        rows.append(
            {
                "id": other.id,
                "name": other.name,
                "role": other.role,
                "company": other.company,
                "location": other.location or "",
                "match_score": score,
                "match_level": classify_match_level(score, config).value,
                "reasons": list(build_reasons(breakdown, config)),
                "score_skills": breakdown.skill_score,
                "score_interests": breakdown.interest_score,
                "score_role": breakdown.role_score,
                "score_experience": breakdown.experience_score,
                "score_location": breakdown.location_score,
            }
        )
    df = pd.DataFrame(rows, columns=RANKING_COLUMNS)
    return sort_matches(df, "match")


def filter_by_level(ranked: pd.DataFrame, level: Optional[MatchLevel]) -> pd.DataFrame:
    """Keep rows of one tier; ``None`` keeps everything."""
    if level is None:
        return ranked
    return ranked[ranked["match_level"] == MatchLevel(level).value].reset_index(drop=True)


def sort_matches(ranked: pd.DataFrame, by: str = "match") -> pd.DataFrame:
    """Sort a ranking by 'match' (score desc), 'name' or 'company' (case-insensitive asc)."""
    if by == "match":
        out = ranked.sort_values("match_score", ascending=False, kind="mergesort")
    elif by in ("name", "company"):
        out = ranked.sort_values(by, key=lambda s: s.str.lower(), kind="mergesort")
    else:
        raise ValueError(f"Unknown sort key {by!r}; expected one of {', '.join(SORT_KEYS)}")
    return out.reset_index(drop=True)
