"""Deterministic resume score.

Combines three independently computed sub-scores into one 0-100 score:

    keyword (30%)      approved keywords literally present in the content
    requirement (50%)  JD requirements met, weighted by category importance
    evidence (20%)     confidence of the active evidence claims

Pure functions only. Inputs are never mutated.
"""

import re

from models.schemas.score_breakdown import ScoreBreakdown, ScoreDetails, ScoreTier, SubScores
from models.schemas.scoring_inputs import EvidenceClaim, JDRequirement, KeywordDecision
from services.rounding import clamp, percent, round_half_up
from services.text_normalizer import bounded, normalize, words

W_KEYWORD = 0.30
W_REQUIREMENT = 0.50
W_EVIDENCE = 0.20

# Importance of a requirement by category
REQUIREMENT_WEIGHTS: dict[str, int] = {
    "hard_skill": 3,
    "responsibility": 3,
    "tool": 2,
    "domain": 2,
    "outcome": 2,
    "education": 2,
    "title": 1,
    "soft_skill": 1,
}

CONFIDENCE_WEIGHTS: dict[str, float] = {
    "high": 1.0,
    "medium": 0.7,
    "low": 0.4,
}

# Absence of evidence is neither proof nor disproof
NEUTRAL_EVIDENCE_SCORE = 50
# Requirement words this short are too generic to count as coverage
MIN_REQUIREMENT_WORD_LENGTH = 4

# Keywords that only match verbatim: "+" or "#" anywhere, or a symbol at an edge
_LITERAL_ONLY_RE = re.compile(r"[+#]|^\W|\W$")
# Punctuation or spaces allowed between the words of other keywords
_SEPARATOR = r"[^\w+#]+"

# (inclusive upper bound, tier, message)
SCORE_TIERS: list[tuple[int, str, str]] = [
    (20, "FREEZING", "Major gaps - needs significant work"),
    (40, "COLD", "Many missing keywords and gaps"),
    (60, "LUKEWARM", "Getting there, but improvements needed"),
    (75, "WARM", "Good match, minor optimizations left"),
    (90, "HOT", "Strong match - ready to apply!"),
    (100, "ON_FIRE", "Exceptional match - top candidate!"),
]


def contains_phrase(content: str, keyword: str) -> bool:
    """Case-insensitive, word-bounded presence of ``keyword`` in ``content``.

    Keywords carrying "+" or "#" or a symbol at either end ("C++", "C#",
    ".NET") must appear literally. Others may have any punctuation between
    their words, so "Node.js" matches "node js".
    """
    keyword = keyword.strip()
    if not normalize(keyword):
        return False
    if _LITERAL_ONLY_RE.search(keyword):
        body = r"\s+".join(re.escape(part) for part in keyword.split())
    else:
        body = _SEPARATOR.join(re.escape(part) for part in re.findall(r"\w+", keyword))
    return re.search(bounded(body), content, re.IGNORECASE) is not None


def keyword_score(decisions: list[KeywordDecision], content: str) -> tuple[int, int, int]:
    """Return (score, matched, total) for the approved keywords."""
    approved = [d.keyword for d in decisions if d.decision == "add"]
    matched = sum(1 for kw in approved if contains_phrase(content, kw))
    return percent(matched, len(approved)), matched, len(approved)


def is_requirement_met(
    requirement: JDRequirement,
    evidence: list[EvidenceClaim],
    normalized_content: str,
) -> bool:
    """A requirement is met by overlapping evidence or by its words in the content.

    Evidence overlap considers inactive claims too.
    """
    req_text = normalize(requirement.text)
    if not req_text:
        return False

    for claim in evidence:
        claim_text = normalize(claim.claim_text)
        if claim_text and (req_text in claim_text or claim_text in req_text):
            return True

    return any(
        word in normalized_content
        for word in words(req_text)
        if len(word) >= MIN_REQUIREMENT_WORD_LENGTH
    )


def requirement_score(
    requirements: list[JDRequirement],
    evidence: list[EvidenceClaim],
    content: str,
) -> tuple[int, int, int]:
    """Return (score, met, total) with category-weighted coverage."""
    normalized_content = normalize(content)
    total_weight = 0
    earned_weight = 0
    met = 0
    for requirement in requirements:
        weight = REQUIREMENT_WEIGHTS[requirement.category]
        total_weight += weight
        if is_requirement_met(requirement, evidence, normalized_content):
            earned_weight += weight
            met += 1
    return percent(earned_weight, total_weight), met, len(requirements)


def evidence_score(evidence: list[EvidenceClaim]) -> tuple[int, int, int]:
    """Return (score, active, total); neutral 50 without active claims."""
    active = [c for c in evidence if c.is_active]
    weight_sum = sum(CONFIDENCE_WEIGHTS[c.confidence] for c in active)
    return percent(weight_sum, len(active), empty=NEUTRAL_EVIDENCE_SCORE), len(active), len(evidence)


def calculate_resume_score(
    keyword_decisions: list[KeywordDecision],
    jd_requirements: list[JDRequirement],
    evidence: list[EvidenceClaim],
    current_content: str,
) -> ScoreBreakdown:
    """Score ``current_content`` against the caller's decisions, requirements and evidence."""
    kw_score, kw_matched, kw_total = keyword_score(keyword_decisions, current_content)
    req_score, req_met, req_total = requirement_score(jd_requirements, evidence, current_content)
    ev_score, ev_active, ev_total = evidence_score(evidence)

    overall = clamp(round_half_up(
        kw_score * W_KEYWORD
        + req_score * W_REQUIREMENT
        + ev_score * W_EVIDENCE
    ))

    return ScoreBreakdown(
        score=overall,
        breakdown=SubScores(
            keyword_score=kw_score,
            requirement_score=req_score,
            evidence_score=ev_score,
        ),
        details=ScoreDetails(
            matched_keywords=kw_matched,
            total_keywords=kw_total,
            met_requirements=req_met,
            total_requirements=req_total,
            verified_claims=ev_active,
            total_claims=ev_total,
        ),
    )


def get_score_tier(score: int) -> ScoreTier:
    """Map an overall score to its tier and the distance to the next one."""
    score = clamp(score)
    for i, (upper, tier, message) in enumerate(SCORE_TIERS):
        if score <= upper:
            is_last = i == len(SCORE_TIERS) - 1
            threshold = 100 if is_last else upper + 1
            return ScoreTier(
                tier=tier,
                message=message,
                next_tier_threshold=threshold,
                points_to_next_tier=0 if is_last else threshold - score,
            )
    raise AssertionError("unreachable: score is clamped to 0-100")
