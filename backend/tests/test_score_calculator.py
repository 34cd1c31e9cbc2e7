import pytest
from pydantic import ValidationError

from models.schemas.score_breakdown import ScoreBreakdown
from models.schemas.scoring_inputs import EvidenceClaim, JDRequirement, KeywordDecision
from services.score_calculator import (
    REQUIREMENT_WEIGHTS,
    calculate_resume_score,
    evidence_score,
    get_score_tier,
    keyword_score,
    requirement_score,
)

CONTENT = (
    "Senior engineer who built Python microservices on AWS, "
    "migrated billing to Kubernetes and mentored six engineers."
)


def _decisions(**kwargs):
    return [KeywordDecision(keyword=k, decision=v) for k, v in kwargs.items()]


# --- Keyword sub-score ---

def test_keyword_score_counts_only_approved():
    decisions = _decisions(Python="add", Kafka="add", Rust="not_true", Go="ignore", Java="pending")
    score, matched, total = keyword_score(decisions, CONTENT)
    assert (score, matched, total) == (50, 1, 2)


def test_keyword_score_without_approved_keywords_is_full():
    assert keyword_score(_decisions(Rust="ignore"), CONTENT) == (100, 0, 0)
    assert keyword_score([], "") == (100, 0, 0)


def test_keyword_score_uses_word_boundaries():
    # "AWS" must not match inside "laws"
    decisions = _decisions(AWS="add")
    assert keyword_score(decisions, "Studied tax laws")[1] == 0
    assert keyword_score(decisions, "Ran it on aws.")[1] == 1


def test_keyword_score_matches_multi_word_and_symbols():
    decisions = _decisions(**{"Node.js": "add", "machine learning": "add"})
    score, matched, _ = keyword_score(decisions, "Node.js services for Machine-Learning teams")
    assert matched == 2
    assert score == 100


@pytest.mark.parametrize("keyword,content", [
    ("C++", "Wrote C scripts"),
    ("C#", "C++ developer"),
    (".NET", "Grew net revenue"),
    ("C", "C++ developer"),
])
def test_keyword_score_does_not_confuse_symbol_skills(keyword, content):
    assert keyword_score(_decisions(**{keyword: "add"}), content) == (0, 0, 1)


@pytest.mark.parametrize("keyword,content", [
    ("C++", "Modern C++ and Rust"),
    ("C#", "Unity games in c#."),
    (".NET", "Migrated to .NET 8"),
    ("CI/CD", "Owned the CI/CD pipeline"),
])
def test_keyword_score_finds_symbol_skills_verbatim(keyword, content):
    assert keyword_score(_decisions(**{keyword: "add"}), content) == (100, 1, 1)


def test_adding_missing_keyword_never_lowers_keyword_score():
    decisions = _decisions(Python="add", Terraform="add", Kafka="add")
    before = calculate_resume_score(decisions, [], [], CONTENT).breakdown.keyword_score
    after = calculate_resume_score(decisions, [], [], CONTENT + " Terraform").breakdown.keyword_score
    assert after >= before
    assert after > before


# --- Requirement sub-score ---

def test_requirement_met_by_content_word():
    reqs = [JDRequirement(text="Kubernetes orchestration", category="tool")]
    assert requirement_score(reqs, [], CONTENT) == (100, 1, 1)


def test_short_words_do_not_count():
    reqs = [JDRequirement(text="Go and C", category="hard_skill")]
    assert requirement_score(reqs, [], "go c and more")[0] == 0


def test_requirement_met_by_evidence_even_if_inactive():
    reqs = [JDRequirement(text="Led pricing redesign", category="outcome")]
    claims = [EvidenceClaim(claim_text="Led pricing redesign for EMEA", confidence="low", is_active=False)]
    assert requirement_score(reqs, claims, "")[1] == 1


def test_requirement_score_is_weighted_by_category():
    reqs = [
        JDRequirement(text="Python services", category="hard_skill"),       # weight 3, met
        JDRequirement(text="Salesforce administration", category="title"),  # weight 1, unmet
    ]
    score, met, total = requirement_score(reqs, [], CONTENT)
    assert (met, total) == (1, 2)
    assert score == 75


def test_all_requirements_met_is_100():
    reqs = [
        JDRequirement(text=f"{cat} python", category=cat) for cat in REQUIREMENT_WEIGHTS
    ]
    assert requirement_score(reqs, [], CONTENT)[0] == 100


def test_no_requirements_is_full():
    assert requirement_score([], [], CONTENT) == (100, 0, 0)


# --- Evidence sub-score ---

def test_evidence_neutral_without_active_claims():
    assert evidence_score([])[0] == 50
    inactive = [EvidenceClaim(claim_text="x", confidence="high", is_active=False)]
    assert evidence_score(inactive) == (50, 0, 1)


def test_evidence_weighted_by_confidence():
    claims = [
        EvidenceClaim(claim_text="a", confidence="high"),
        EvidenceClaim(claim_text="b", confidence="medium"),
        EvidenceClaim(claim_text="c", confidence="low"),
        EvidenceClaim(claim_text="d", confidence="high", is_active=False),
    ]
    # (1.0 + 0.7 + 0.4) / 3 = 0.7
    assert evidence_score(claims) == (70, 3, 4)


# --- Overall ---

def test_overall_weights():
    decisions = _decisions(Python="add", Kafka="add")                         # 50
    reqs = [JDRequirement(text="Kubernetes", category="tool")]                # 100
    claims = [EvidenceClaim(claim_text="Built billing", confidence="low")]    # 40
    result = calculate_resume_score(decisions, reqs, claims, CONTENT)

    assert isinstance(result, ScoreBreakdown)
    assert result.breakdown.keyword_score == 50
    assert result.breakdown.requirement_score == 100
    assert result.breakdown.evidence_score == 40
    # 50*0.3 + 100*0.5 + 40*0.2 = 73
    assert result.score == 73
    assert result.details.matched_keywords == 1
    assert result.details.total_keywords == 2
    assert result.details.met_requirements == 1
    assert result.details.verified_claims == 1
    assert result.details.total_claims == 1


def test_empty_inputs_give_documented_defaults():
    result = calculate_resume_score([], [], [], "")
    assert result.breakdown.keyword_score == 100
    assert result.breakdown.requirement_score == 100
    assert result.breakdown.evidence_score == 50
    assert result.score == 90


def test_inputs_are_not_mutated():
    decisions = _decisions(Python="add")
    reqs = [JDRequirement(text="Python", category="hard_skill")]
    claims = [EvidenceClaim(claim_text="Python", confidence="high")]
    snapshot = [m.model_dump() for m in decisions + reqs + claims]
    calculate_resume_score(decisions, reqs, claims, CONTENT)
    assert [m.model_dump() for m in decisions + reqs + claims] == snapshot


def test_breakdown_is_immutable():
    result = calculate_resume_score([], [], [], "")
    with pytest.raises(ValidationError):
        result.score = 5


def test_invalid_records_fail_fast():
    with pytest.raises(ValidationError):
        KeywordDecision(keyword="Python", decision="maybe")
    with pytest.raises(ValidationError):
        JDRequirement(text="Python", category="vibes")
    with pytest.raises(ValidationError):
        EvidenceClaim(claim_text="x", confidence="certain")


# --- Tiers ---

@pytest.mark.parametrize("score,tier,threshold,points", [
    (0, "FREEZING", 21, 21),
    (20, "FREEZING", 21, 1),
    (21, "COLD", 41, 20),
    (55, "LUKEWARM", 61, 6),
    (75, "WARM", 76, 1),
    (90, "HOT", 91, 1),
    (91, "ON_FIRE", 100, 0),
    (100, "ON_FIRE", 100, 0),
])
def test_score_tiers(score, tier, threshold, points):
    result = get_score_tier(score)
    assert result.tier == tier
    assert result.next_tier_threshold == threshold
    assert result.points_to_next_tier == points
