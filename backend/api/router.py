from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_section_quality_scorer, get_vocabulary
from config import settings
from models.requests import (
    CompareVersionsRequest,
    ExtractKeywordsRequest,
    HumanVoiceRequest,
    MatchKeywordsRequest,
    ResumeScoreRequest,
)
from models.responses import HealthResponse, HumanVoiceResponse, ResumeScoreResponse
from models.schemas.keyword_match import KeywordMatchReport
from models.schemas.keyword_set import KeywordSet
from models.schemas.quality_score import QualityScoreResult, SectionQualityInput
from models.schemas.version_comparison import VersionComparison
from services.human_voice import calculate_human_voice_score, detect_ai_patterns
from services.keyword_extractor import KeywordVocabulary, extract_keywords
from services.keyword_matcher import match_texts
from services.score_calculator import calculate_resume_score, get_score_tier
from services.section_quality import SectionQualityScorer
from services.version_comparator import compare_versions

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", gemini_configured=bool(settings.gemini_api_key))


@router.post("/keywords/extract", response_model=KeywordSet)
@limiter.limit("60/minute")
async def keywords_extract(
    request: Request,
    body: ExtractKeywordsRequest,
    vocabulary: KeywordVocabulary = Depends(get_vocabulary),
):
    return extract_keywords(body.text, vocabulary)


@router.post("/keywords/match", response_model=KeywordMatchReport)
@limiter.limit("60/minute")
async def keywords_match(
    request: Request,
    body: MatchKeywordsRequest,
    vocabulary: KeywordVocabulary = Depends(get_vocabulary),
):
    return match_texts(body.job_description, body.resume_text, vocabulary)


@router.post("/score/resume", response_model=ResumeScoreResponse)
@limiter.limit("60/minute")
async def score_resume(request: Request, body: ResumeScoreRequest):
    result = calculate_resume_score(
        body.keyword_decisions,
        body.jd_requirements,
        body.evidence,
        body.current_content,
    )
    return ResumeScoreResponse(result=result, tier=get_score_tier(result.score))


@router.post("/score/human-voice", response_model=HumanVoiceResponse)
@limiter.limit("60/minute")
async def score_human_voice(request: Request, body: HumanVoiceRequest):
    return HumanVoiceResponse(
        score=calculate_human_voice_score(body.content),
        ai_patterns=detect_ai_patterns(body.content),
    )


@router.post("/score/section-quality", response_model=QualityScoreResult)
@limiter.limit("10/minute")
async def score_section_quality(
    request: Request,
    body: SectionQualityInput,
    scorer: SectionQualityScorer = Depends(get_section_quality_scorer),
):
    if len(body.content) > settings.max_content_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Section content too long (max {settings.max_content_chars} chars)",
        )
    if not body.content.strip():
        raise HTTPException(status_code=400, detail="Section content is empty")
    return await scorer.calculate(body)


@router.post("/score/compare", response_model=VersionComparison)
@limiter.limit("60/minute")
async def score_compare(request: Request, body: CompareVersionsRequest):
    return compare_versions(body.ideal_score, body.personalized_score, body.resume_strength)
