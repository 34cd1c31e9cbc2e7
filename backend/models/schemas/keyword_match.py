"""Keyword match results between a job description and a resume."""

from pydantic import BaseModel


class KeywordMatchResult(BaseModel):
    """Found/missing JD terms for one category (or overall)."""
    found: list[str] = []
    missing: list[str] = []
    match_percentage: int = 100  # 0-100; 100 when nothing was required


class KeywordMatchReport(BaseModel):
    """Per-category results plus the weighted overall result.

    Job titles and "other" terms are reported by the extractor but are
    not part of the match.
    """
    hard_skills: KeywordMatchResult = KeywordMatchResult()
    soft_skills: KeywordMatchResult = KeywordMatchResult()
    education: KeywordMatchResult = KeywordMatchResult()
    overall: KeywordMatchResult = KeywordMatchResult()
