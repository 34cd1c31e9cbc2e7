"""Pydantic contracts shared by the scoring services and the API."""

from models.schemas.keyword_set import KeywordSet
from models.schemas.keyword_match import KeywordMatchReport, KeywordMatchResult
from models.schemas.scoring_inputs import EvidenceClaim, JDRequirement, KeywordDecision
from models.schemas.score_breakdown import ScoreBreakdown, ScoreDetails, ScoreTier, SubScores
from models.schemas.quality_score import (
    JobAnalysis,
    QualityKeywords,
    QualityScoreResult,
    SectionQualityInput,
)
from models.schemas.version_comparison import VersionComparison

__all__ = [
    "KeywordSet",
    "KeywordMatchResult",
    "KeywordMatchReport",
    "KeywordDecision",
    "JDRequirement",
    "EvidenceClaim",
    "ScoreBreakdown",
    "SubScores",
    "ScoreDetails",
    "ScoreTier",
    "JobAnalysis",
    "SectionQualityInput",
    "QualityKeywords",
    "QualityScoreResult",
    "VersionComparison",
]
