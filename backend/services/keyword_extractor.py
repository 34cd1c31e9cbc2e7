"""Keyword extraction: classify free text into keyword categories.

Uses static vocabularies plus regex heuristics (no ML). The vocabularies
live in a ``KeywordVocabulary`` so callers and tests can swap in their
own lists; ``load_vocabulary`` reads overrides from a YAML file.
"""

import logging
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from models.schemas.keyword_set import KeywordSet
from services.text_normalizer import bounded

logger = logging.getLogger(__name__)

# Hard skill output is capped to keep the result bounded
MAX_HARD_SKILLS = 50
# Title spans this short (after trimming) are noise
MIN_TITLE_LENGTH = 4
MIN_TEXT_LENGTH = 2

# ---------------------------------------------------------------------------
# Default vocabularies
# ---------------------------------------------------------------------------
SOFT_SKILLS: tuple[str, ...] = (
    "leadership", "communication", "teamwork", "collaboration",
    "problem solving", "problem-solving", "critical thinking",
    "time management", "adaptability", "creativity", "attention to detail",
    "interpersonal", "organizational", "analytical", "decision making",
    "conflict resolution", "negotiation", "presentation", "mentoring",
    "strategic thinking", "emotional intelligence", "customer service",
    "public speaking", "flexibility", "work ethic",
)

EDUCATION_TERMS: tuple[str, ...] = (
    "bachelor", "bachelor's", "master", "master's", "phd", "ph.d",
    "doctorate", "mba", "bs", "ba", "ms", "ma", "associate degree",
    "degree", "diploma", "certification", "certified", "pmp", "cpa",
    "cfa", "six sigma", "scrum master",
)

TITLE_INDICATORS: tuple[str, ...] = (
    "manager", "engineer", "developer", "director", "analyst", "designer",
    "architect", "consultant", "specialist", "coordinator", "administrator",
    "lead", "officer", "president", "executive", "scientist", "strategist",
    "associate", "supervisor", "technician", "programmer", "accountant",
    "representative", "head", "vp",
)

PROGRAMMING_LANGUAGES: tuple[str, ...] = (
    "python", "java", "javascript", "typescript", "c++", "c#", "ruby",
    "php", "swift", "kotlin", "rust", "scala", "sql", "golang", "perl",
)

FRAMEWORKS: tuple[str, ...] = (
    "react", "angular", "vue", "django", "flask", "spring", "express",
    "node.js", ".net", "rails", "fastapi",
)

TOOLS: tuple[str, ...] = (
    "aws", "azure", "gcp", "docker", "kubernetes", "git", "jenkins",
    "terraform", "jira", "salesforce", "tableau", "linux",
)


@dataclass(frozen=True)
class KeywordVocabulary:
    """Word lists driving ``extract_keywords``."""
    soft_skills: tuple[str, ...] = SOFT_SKILLS
    education: tuple[str, ...] = EDUCATION_TERMS
    title_indicators: tuple[str, ...] = TITLE_INDICATORS
    languages: tuple[str, ...] = PROGRAMMING_LANGUAGES
    frameworks: tuple[str, ...] = FRAMEWORKS
    tools: tuple[str, ...] = TOOLS


DEFAULT_VOCABULARY = KeywordVocabulary()


class VocabularyError(ValueError):
    """Raised when a vocabulary file cannot be used."""


def load_vocabulary(path: str | Path, base: KeywordVocabulary = DEFAULT_VOCABULARY) -> KeywordVocabulary:
    """Load vocabulary overrides from YAML.

    The file is a mapping of category name to a list of strings; categories
    that are not listed keep the values from ``base``.
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise VocabularyError(f"Cannot read vocabulary file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise VocabularyError(f"Invalid YAML in vocabulary file '{path}': {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise VocabularyError(f"Vocabulary file '{path}' must contain a mapping")

    known = {f.name for f in fields(KeywordVocabulary)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise VocabularyError(f"Unknown vocabulary categories: {', '.join(unknown)}")

    overrides: dict[str, tuple[str, ...]] = {}
    for name, terms in raw.items():
        if not isinstance(terms, list) or not all(isinstance(t, str) for t in terms):
            raise VocabularyError(f"Vocabulary category '{name}' must be a list of strings")
        overrides[name] = tuple(t.strip() for t in terms if t.strip())

    logger.info("Loaded vocabulary overrides from %s: %s", path, ", ".join(sorted(overrides)))
    return replace(base, **overrides)


# ---------------------------------------------------------------------------
# Regex helpers
# ---------------------------------------------------------------------------
# Runs of capitalized words, e.g. "Product Manager", "Python"
_CAPITALIZED_RE = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b")


def _term_pattern(term: str) -> str:
    """Escaped term bounded so that 'java' does not match inside 'javascript'."""
    return bounded(re.escape(term))


def _dedupe(terms: list[str]) -> list[str]:
    """Drop case-insensitive duplicates, keeping the first spelling."""
    seen: set[str] = set()
    result: list[str] = []
    for term in terms:
        key = term.lower()
        if key not in seen:
            seen.add(key)
            result.append(term)
    return result


def _find_terms(text: str, vocabulary: tuple[str, ...]) -> list[str]:
    """Vocabulary terms present in ``text`` with the text's own spelling."""
    found: list[str] = []
    for term in vocabulary:
        match = re.search(_term_pattern(term), text, re.IGNORECASE)
        if match:
            found.append(match.group(0))
    return found


# ---------------------------------------------------------------------------
# Category extractors
# ---------------------------------------------------------------------------

def extract_soft_skills(text: str, vocabulary: KeywordVocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """Soft skills by plain case-insensitive substring match."""
    found = []
    for skill in vocabulary.soft_skills:
        match = re.search(re.escape(skill), text, re.IGNORECASE)
        if match:
            found.append(match.group(0))
    return _dedupe(found)


def extract_education(text: str, vocabulary: KeywordVocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """Degrees and certifications by word-boundary match."""
    return _dedupe(_find_terms(text, vocabulary.education))


def extract_job_titles(text: str, vocabulary: KeywordVocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """Title indicators with one optional word on either side."""
    if not vocabulary.title_indicators:
        return []
    indicators = "|".join(re.escape(t) for t in vocabulary.title_indicators)
    pattern = re.compile(rf"\b(?:\w+\s+)?(?:{indicators})\b(?:\s+\w+)?", re.IGNORECASE)

    titles = []
    for match in pattern.finditer(text):
        span = match.group(0).strip()
        if len(span) >= MIN_TITLE_LENGTH:
            titles.append(span)
    return _dedupe(titles)


def extract_hard_skills(
    text: str,
    vocabulary: KeywordVocabulary = DEFAULT_VOCABULARY,
    exclude: set[str] | None = None,
) -> list[str]:
    """Capitalized phrases plus known languages, frameworks and tools.

    Terms in ``exclude`` (lowercased soft skill / education terms) are
    dropped. At most ``MAX_HARD_SKILLS`` terms are returned.
    """
    exclude = exclude or set()
    candidates = _CAPITALIZED_RE.findall(text)
    candidates += _find_terms(text, vocabulary.languages)
    candidates += _find_terms(text, vocabulary.frameworks)
    candidates += _find_terms(text, vocabulary.tools)

    skills = [term for term in _dedupe(candidates) if term.lower() not in exclude]
    return skills[:MAX_HARD_SKILLS]


def extract_keywords(text: str, vocabulary: KeywordVocabulary = DEFAULT_VOCABULARY) -> KeywordSet:
    """Classify ``text`` into a ``KeywordSet``.

    Pure function of its inputs. Empty or very short text yields an empty set.
    """
    if not text or len(text.strip()) < MIN_TEXT_LENGTH:
        return KeywordSet()

    soft_skills = extract_soft_skills(text, vocabulary)
    education = extract_education(text, vocabulary)
    job_titles = extract_job_titles(text, vocabulary)

    exclude = {t.lower() for t in soft_skills + education}
    hard_skills = extract_hard_skills(text, vocabulary, exclude=exclude)

    return KeywordSet(
        hard_skills=hard_skills,
        soft_skills=soft_skills,
        job_titles=job_titles,
        education=education,
    )
