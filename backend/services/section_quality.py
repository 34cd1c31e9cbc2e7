"""Section quality orchestrator.

Flow:
    SectionQualityInput
      ├─ cache lookup (hash of the input, TTL 30 min, lazy eviction)
      ├─ AI capability(payload)          → raw dict
      │     ↓ validated
      │   QualityScoreResult             → cached, returned
      └─ on any failure                  → zero-confidence fallback (not cached)

The fallback never looks like a real evaluation: every score sits at its
floor, ``evaluated`` is False and the weaknesses say why.
"""

import hashlib
import json
import logging
import re
import time
from dataclasses import dataclass
from typing import Awaitable, Callable

from pydantic import ValidationError

from config import settings
from models.schemas.quality_score import QualityKeywords, QualityScoreResult, SectionQualityInput
from services.score_calculator import contains_phrase

logger = logging.getLogger(__name__)

QualityCapability = Callable[[dict], Awaitable[dict]]

# Classified failure reason -> human-readable weakness
FALLBACK_MESSAGES: dict[str, str] = {
    "timeout": "AI analysis timed out before the section could be evaluated",
    "rate_limited": "AI service is rate limited right now - try again in a moment",
    "payment_required": "AI credits are exhausted - add credits to evaluate this section",
    "unavailable": "AI quality analysis is temporarily unavailable",
}
NOT_EVALUATED_NOTE = "Scores of 0 mean this section was not evaluated, not that it is weak"

_RATE_LIMITED_RE = re.compile(r"\b(?:error|status|code|http)\W{0,3}429\b|rate limit")
_PAYMENT_REQUIRED_RE = re.compile(r"\b(?:error|status|code|http)\W{0,3}402\b|payment")


@dataclass
class _CacheEntry:
    value: QualityScoreResult
    expires_at: float


def cache_key(section_input: SectionQualityInput) -> str:
    """Stable hash of everything the result depends on."""
    data = section_input.model_dump(mode="json")
    encoded = json.dumps(data, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()


def classify_failure(error: BaseException) -> str:
    """Map a capability error to a fallback reason.

    Uses the error's ``status_code`` when it has one, else the message.
    Status codes in a message only count after "error", "status", "code" or
    "http", so offsets such as "(char 402)" are ignored.
    """
    status = getattr(error, "status_code", None)
    message = str(error).lower()
    if isinstance(error, TimeoutError) or "timeout" in message or "timed out" in message:
        return "timeout"
    if status == 429 or _RATE_LIMITED_RE.search(message):
        return "rate_limited"
    if status == 402 or _PAYMENT_REQUIRED_RE.search(message):
        return "payment_required"
    return "unavailable"


def literal_keyword_match(content: str, keywords: list[str]) -> QualityKeywords:
    """Which keywords appear verbatim (word-bounded, symbol-aware) in the content."""
    matched = [kw for kw in keywords if contains_phrase(content, kw)]
    missing = [kw for kw in keywords if kw not in matched]
    return QualityKeywords(matched=matched, missing=missing)


def build_fallback(section_input: SectionQualityInput, reason: str) -> QualityScoreResult:
    return QualityScoreResult(
        overall_score=0,
        ats_match_percentage=0,
        requirements_coverage=0,
        competitive_strength=1,
        strengths=[],
        weaknesses=[FALLBACK_MESSAGES.get(reason, FALLBACK_MESSAGES["unavailable"]), NOT_EVALUATED_NOTE],
        keywords=literal_keyword_match(section_input.content, section_input.ats_keywords),
        evaluated=False,
        fallback_reason=reason,
    )


def _to_payload(section_input: SectionQualityInput) -> dict:
    job = section_input.job_analysis
    return {
        "content": section_input.content,
        "requirements": list(section_input.requirements),
        "ats_keywords": list(section_input.ats_keywords),
        "seniority": job.seniority if job else "",
        "industry": job.industry if job else "",
        "job_title": job.job_title if job else "",
    }


def _to_result(section_input: SectionQualityInput, data: dict) -> QualityScoreResult:
    """Validate the capability's response. Raises ValidationError if unusable."""
    matched = data.get("keywords_matched") or []
    missing = data.get("keywords_missing") or []
    if matched or missing:
        keywords = QualityKeywords(matched=matched, missing=missing)
    else:
        keywords = literal_keyword_match(section_input.content, section_input.ats_keywords)

    return QualityScoreResult.model_validate({
        "overall_score": data.get("overall_score"),
        "ats_match_percentage": data.get("ats_match_percentage"),
        "requirements_coverage": data.get("requirements_coverage"),
        "competitive_strength": data.get("competitive_strength"),
        "strengths": data.get("strengths") or [],
        "weaknesses": data.get("weaknesses") or [],
        "keywords": keywords,
    })


class SectionQualityScorer:
    """Scores resume sections through an AI capability, with a TTL cache.

    Each instance owns its cache. Concurrent misses on the same key are not
    de-duplicated; each one calls the capability.
    """

    def __init__(
        self,
        capability: QualityCapability | None = None,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if capability is None:
            from services.quality_analyzer import analyze_section_quality
            capability = analyze_section_quality
        self._capability = capability
        self._ttl = settings.quality_cache_ttl_seconds if ttl_seconds is None else ttl_seconds
        self._clock = clock
        self._cache: dict[str, _CacheEntry] = {}

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()

    def _lookup(self, key: str) -> QualityScoreResult | None:
        entry = self._cache.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._cache[key]
            return None
        return entry.value

    async def calculate(self, section_input: SectionQualityInput) -> QualityScoreResult:
        """Return the cached result or ask the capability; never raises on capability failure."""
        key = cache_key(section_input)
        cached = self._lookup(key)
        if cached is not None:
            logger.debug("Section quality cache hit: %s", key[:12])
            return cached

        logger.debug("Section quality cache miss: %s", key[:12])
        try:
            data = await self._capability(_to_payload(section_input))
            if not isinstance(data, dict):
                raise TypeError(f"capability returned {type(data).__name__}, expected dict")
            result = _to_result(section_input, data)
        except ValidationError as e:
            logger.warning("AI section quality response rejected: %s", e)
            return build_fallback(section_input, "unavailable")
        except Exception as e:
            reason = classify_failure(e)
            logger.warning("AI section quality failed (%s): %s", reason, e)
            return build_fallback(section_input, reason)

        self._cache[key] = _CacheEntry(value=result, expires_at=self._clock() + self._ttl)
        return result
