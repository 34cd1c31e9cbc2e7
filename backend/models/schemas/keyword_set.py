"""Categorized keywords extracted from a single block of text."""

from pydantic import BaseModel


class KeywordSet(BaseModel):
    """Keywords grouped by category.

    Terms keep the spelling they had in the source text; comparisons are
    case-insensitive. Each list is de-duplicated case-insensitively with
    the first spelling winning.
    """
    hard_skills: list[str] = []
    soft_skills: list[str] = []
    job_titles: list[str] = []
    education: list[str] = []
    other: list[str] = []

    def is_empty(self) -> bool:
        return not (
            self.hard_skills or self.soft_skills or self.job_titles
            or self.education or self.other
        )
