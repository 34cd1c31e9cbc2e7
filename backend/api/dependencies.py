"""Shared dependencies for API routes."""

from functools import lru_cache

from config import settings
from services.keyword_extractor import DEFAULT_VOCABULARY, KeywordVocabulary, load_vocabulary
from services.section_quality import SectionQualityScorer


@lru_cache
def get_section_quality_scorer() -> SectionQualityScorer:
    """One scorer (and so one cache) per process."""
    return SectionQualityScorer()


@lru_cache
def get_vocabulary() -> KeywordVocabulary:
    if settings.vocabulary_path:
        return load_vocabulary(settings.vocabulary_path)
    return DEFAULT_VOCABULARY
