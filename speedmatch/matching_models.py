# pydantic models for the matching engine output
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class MatchLevel(str, Enum):
    """Discrete match tiers, lowest to highest."""

    POTENTIAL = "POTENTIAL"
    GOOD = "GOOD"
    EXCELLENT = "EXCELLENT"
    LOW = "POTENTIAL"  # alias for the low tier

    @property
    def rank(self) -> int:
        return _RANKS[self.value]

    @property
    def label(self) -> str:
        return _LABELS[self.value]

    @property
    def aura_color(self) -> str:
        return _AURA_COLORS[self.value]


_RANKS = {"POTENTIAL": 0, "GOOD": 1, "EXCELLENT": 2}
_LABELS = {"POTENTIAL": "Potential Match", "GOOD": "Good Match", "EXCELLENT": "Excellent Match"}
_AURA_COLORS = {"POTENTIAL": "#ef4444", "GOOD": "#eab308", "EXCELLENT": "#22c55e"}


class MatchResult(BaseModel):
    """Compatibility verdict for a pair of profiles.

    Fields:
        score: Integer score in [0, 100].
        match_level: Tier derived from ``score`` alone.
        reasons: Short explanations in fixed order (skills, interests, role,
            experience, location); empty when no factor qualified.
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    match_level: MatchLevel
    reasons: Tuple[str, ...] = ()


class MatchBreakdown(BaseModel):
    """Per-factor points behind a MatchResult."""

    model_config = ConfigDict(frozen=True)

    skill_overlap: int = 0
    interest_overlap: int = 0
    skill_score: float = 0.0
    interest_score: float = 0.0
    role_score: float = 0.0
    experience_score: float = 0.0
    location_score: float = 0.0

    @property
    def total(self) -> float:
        return (
            self.skill_score
            + self.interest_score
            + self.role_score
            + self.experience_score
            + self.location_score
        )
