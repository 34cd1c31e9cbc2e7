"""Section quality scoring: inputs and (possibly AI-augmented) results."""

from pydantic import BaseModel, ConfigDict, Field


class JobAnalysis(BaseModel):
    """Context about the target job passed through to the AI capability."""
    seniority: str = ""
    industry: str = ""
    job_title: str = ""


class SectionQualityInput(BaseModel):
    content: str
    ats_keywords: list[str] = []
    requirements: list[str] = []
    job_analysis: JobAnalysis | None = None


class QualityKeywords(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()


class QualityScoreResult(BaseModel):
    """Quality verdict for one resume section.

    ``evaluated`` is False only for the fallback returned when the AI
    capability failed; in that case every score sits at its floor and
    ``fallback_reason`` says why.

    Collections are tuples so a cached result cannot be changed in place.
    """
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(ge=0, le=100)
    ats_match_percentage: int = Field(ge=0, le=100)
    requirements_coverage: int = Field(ge=0, le=100)
    competitive_strength: int = Field(ge=1, le=5)
    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    keywords: QualityKeywords = QualityKeywords()
    evaluated: bool = True
    fallback_reason: str | None = None
