from pydantic import BaseModel, Field

from config import settings
from models.schemas.quality_score import QualityScoreResult
from models.schemas.scoring_inputs import EvidenceClaim, JDRequirement, KeywordDecision

MAX_CHARS = settings.max_content_chars


class ExtractKeywordsRequest(BaseModel):
    text: str = Field(..., max_length=MAX_CHARS, description="Any resume or job description text")


class MatchKeywordsRequest(BaseModel):
    resume_text: str = Field(..., max_length=MAX_CHARS, description="Plain text resume content")
    job_description: str = Field(..., max_length=MAX_CHARS, description="Job description text")


class ResumeScoreRequest(BaseModel):
    keyword_decisions: list[KeywordDecision] = []
    jd_requirements: list[JDRequirement] = []
    evidence: list[EvidenceClaim] = []
    current_content: str = Field(..., max_length=MAX_CHARS)


class HumanVoiceRequest(BaseModel):
    content: str = Field(..., max_length=MAX_CHARS)


class CompareVersionsRequest(BaseModel):
    ideal_score: QualityScoreResult
    personalized_score: QualityScoreResult
    resume_strength: int = Field(..., ge=0, le=100)
