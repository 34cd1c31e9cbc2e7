from pydantic import BaseModel

from models.schemas.score_breakdown import ScoreBreakdown, ScoreTier


class ResumeScoreResponse(BaseModel):
    result: ScoreBreakdown
    tier: ScoreTier


class HumanVoiceResponse(BaseModel):
    score: int
    ai_patterns: list[str] = []


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False
