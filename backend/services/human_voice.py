"""Human-voice heuristic: penalize AI-sounding clichés, reward specifics."""

import re

BASE_SCORE = 100
NEUTRAL_SCORE = 50
MIN_CONTENT_LENGTH = 50
CLICHE_PENALTY = 5
SPECIFICITY_BONUS = 3

# Phrases that make generated text sound templated
AI_PATTERNS: list[re.Pattern] = [
    re.compile(r"\bleverag(?:e|ed|es|ing)\b", re.IGNORECASE),
    re.compile(r"\bsynerg(?:y|ies|istic)\b", re.IGNORECASE),
    re.compile(r"\bseamless(?:ly)?\b", re.IGNORECASE),
    re.compile(r"\bspearhead(?:ed|ing|s)?\b", re.IGNORECASE),
    re.compile(r"\bresults[- ]driven\b", re.IGNORECASE),
    re.compile(r"\bcutting[- ]edge\b", re.IGNORECASE),
    re.compile(r"\bbest[- ]in[- ]class\b", re.IGNORECASE),
    re.compile(r"\bproven track record\b", re.IGNORECASE),
    re.compile(r"\bpassionate about\b", re.IGNORECASE),
    re.compile(r"\bdynamic (?:professional|environment|leader)\b", re.IGNORECASE),
]

SPECIFICITY_PATTERNS: list[re.Pattern] = [
    # Dollar amounts: $2M, $150,000
    re.compile(r"\$\d[\d,]*(?:\.\d+)?\s*(?:[kmb]\b|million\b|billion\b)?", re.IGNORECASE),
    # Percentages: 35%, 12.5 percent
    re.compile(r"\b\d+(?:\.\d+)?\s*(?:%|percent\b)", re.IGNORECASE),
    # Team sizes: team of 12, 8-person team
    re.compile(r"\bteam of \d+\b|\b\d+[- ]person team\b", re.IGNORECASE),
    # Quantified outcomes: reduced churn by 20
    re.compile(
        r"\b(?:increased|reduced|improved|grew|saved|cut|generated|decreased)\b[^.\n]{0,40}?\bby \d",
        re.IGNORECASE,
    ),
]


def calculate_human_voice_score(content: str) -> int:
    """Score 0-100; text under 50 characters gets a neutral 50."""
    if not content or len(content) < MIN_CONTENT_LENGTH:
        return NEUTRAL_SCORE

    score = BASE_SCORE
    for pattern in AI_PATTERNS:
        score -= CLICHE_PENALTY * len(pattern.findall(content))
    for pattern in SPECIFICITY_PATTERNS:
        score += SPECIFICITY_BONUS * len(pattern.findall(content))
    return max(0, min(100, score))


def detect_ai_patterns(content: str) -> list[str]:
    """Distinct cliché phrases found in ``content``, lowercased, in pattern order."""
    found: list[str] = []
    for pattern in AI_PATTERNS:
        for match in pattern.finditer(content or ""):
            phrase = match.group(0).lower()
            if phrase not in found:
                found.append(phrase)
    return found
