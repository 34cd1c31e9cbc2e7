import pytest

from models.schemas.quality_score import QualityScoreResult
from services.version_comparator import compare_versions


def _score(overall: int) -> QualityScoreResult:
    return QualityScoreResult(
        overall_score=overall,
        ats_match_percentage=overall,
        requirements_coverage=overall,
        competitive_strength=3,
    )


@pytest.mark.parametrize("strength,ideal,personalized,expected,diff", [
    (30, 50, 80, "ideal", 30),          # weak resume overrides the scores
    (70, 50, 65, "personalized", 15),
    (70, 70, 55, "ideal", -15),
    (70, 60, 65, "blend", 5),
    (70, 60, 70, "blend", 10),          # exactly +10 is still a blend
    (70, 70, 60, "blend", -10),
    (40, 50, 80, "personalized", 30),   # 40 is strong enough
    (39, 50, 80, "ideal", 30),
])
def test_recommendation_thresholds(strength, ideal, personalized, expected, diff):
    result = compare_versions(_score(ideal), _score(personalized), strength)
    assert result.recommendation == expected
    assert result.score_difference == diff
    assert result.reason


def test_low_strength_reason_mentions_strength():
    result = compare_versions(_score(50), _score(80), 30)
    assert "30" in result.reason
