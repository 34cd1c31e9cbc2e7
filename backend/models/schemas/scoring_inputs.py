"""Caller-supplied records consumed by the deterministic score calculator."""

from typing import Literal

from pydantic import BaseModel

KeywordDecisionValue = Literal["add", "not_true", "ignore", "pending"]

RequirementCategory = Literal[
    "hard_skill",
    "tool",
    "domain",
    "responsibility",
    "outcome",
    "education",
    "title",
    "soft_skill",
]

ConfidenceLevel = Literal["high", "medium", "low"]


class KeywordDecision(BaseModel):
    """A user or AI verdict on one candidate keyword.

    Only ``add`` makes the keyword an approved keyword.
    """
    keyword: str
    decision: KeywordDecisionValue = "pending"


class JDRequirement(BaseModel):
    """One atomic requirement extracted from a job description."""
    text: str
    category: RequirementCategory


class EvidenceClaim(BaseModel):
    """A factual claim backing resume content."""
    claim_text: str
    confidence: ConfidenceLevel
    is_active: bool = True
    id: str | None = None
    source: str = ""
