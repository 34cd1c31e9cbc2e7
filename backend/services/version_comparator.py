"""Pick between the ideal and the personalized resume variant."""

from models.schemas.quality_score import QualityScoreResult
from models.schemas.version_comparison import VersionComparison

# Below this resume strength the source data is too thin to trust personalization
MIN_RESUME_STRENGTH = 40
SIGNIFICANT_SCORE_DIFFERENCE = 10


def compare_versions(
    ideal_score: QualityScoreResult,
    personalized_score: QualityScoreResult,
    resume_strength: int,
) -> VersionComparison:
    difference = personalized_score.overall_score - ideal_score.overall_score

    if resume_strength < MIN_RESUME_STRENGTH:
        return VersionComparison(
            recommendation="ideal",
            reason=(
                f"Resume strength is {resume_strength}, below {MIN_RESUME_STRENGTH}; "
                "there is not enough verified material to personalize safely"
            ),
            score_difference=difference,
        )
    if difference > SIGNIFICANT_SCORE_DIFFERENCE:
        return VersionComparison(
            recommendation="personalized",
            reason=f"Personalized version scores {difference} points higher",
            score_difference=difference,
        )
    if difference < -SIGNIFICANT_SCORE_DIFFERENCE:
        return VersionComparison(
            recommendation="ideal",
            reason=f"Ideal version scores {-difference} points higher",
            score_difference=difference,
        )
    return VersionComparison(
        recommendation="blend",
        reason=f"Versions are within {SIGNIFICANT_SCORE_DIFFERENCE} points; combine the best of both",
        score_difference=difference,
    )
