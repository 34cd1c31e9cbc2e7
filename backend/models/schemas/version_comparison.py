"""Recommendation between the ideal and the personalized resume variants."""

from typing import Literal

from pydantic import BaseModel

Recommendation = Literal["ideal", "personalized", "blend"]


class VersionComparison(BaseModel):
    recommendation: Recommendation
    reason: str
    score_difference: int
