"""Deterministic resume score output."""

from pydantic import BaseModel, ConfigDict, Field


class SubScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword_score: int = Field(default=0, ge=0, le=100)
    requirement_score: int = Field(default=0, ge=0, le=100)
    evidence_score: int = Field(default=0, ge=0, le=100)


class ScoreDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched_keywords: int = Field(default=0, ge=0)
    total_keywords: int = Field(default=0, ge=0)
    met_requirements: int = Field(default=0, ge=0)
    total_requirements: int = Field(default=0, ge=0)
    verified_claims: int = Field(default=0, ge=0)  # active claims
    total_claims: int = Field(default=0, ge=0)


class ScoreBreakdown(BaseModel):
    """Overall 0-100 score with its three weighted sub-scores.

    Immutable once built.
    """
    model_config = ConfigDict(frozen=True)

    score: int = Field(default=0, ge=0, le=100)
    breakdown: SubScores = SubScores()
    details: ScoreDetails = ScoreDetails()


class ScoreTier(BaseModel):
    """Thermometer-style label for an overall score."""
    tier: str  # FREEZING, COLD, LUKEWARM, WARM, HOT, ON_FIRE
    message: str
    next_tier_threshold: int
    points_to_next_tier: int
