"""Category-by-category comparison of JD keywords against resume keywords."""

from models.schemas.keyword_match import KeywordMatchReport, KeywordMatchResult
from models.schemas.keyword_set import KeywordSet
from services.keyword_extractor import DEFAULT_VOCABULARY, KeywordVocabulary, extract_keywords
from services.rounding import percent

# Categories that make up the overall match. Titles and "other" are left out.
MATCHED_CATEGORIES: tuple[str, ...] = ("hard_skills", "soft_skills", "education")


def terms_overlap(a: str, b: str) -> bool:
    """Loose match: either term contains the other, ignoring case.

    Tolerates "Python" vs "Python 3", at the cost of "Java" matching
    "JavaScript".
    """
    a_lower, b_lower = a.lower(), b.lower()
    if not a_lower or not b_lower:
        return False
    return a_lower in b_lower or b_lower in a_lower


def match_category(jd_terms: list[str], resume_terms: list[str]) -> KeywordMatchResult:
    """Split JD terms into found/missing against one resume category."""
    found: list[str] = []
    missing: list[str] = []
    for term in jd_terms:
        if any(terms_overlap(term, candidate) for candidate in resume_terms):
            found.append(term)
        else:
            missing.append(term)

    return KeywordMatchResult(
        found=found,
        missing=missing,
        match_percentage=percent(len(found), len(found) + len(missing)),
    )


def match_keywords(jd_set: KeywordSet, resume_set: KeywordSet) -> KeywordMatchReport:
    """Compare two keyword sets.

    The overall percentage is weighted by JD term count across the matched
    categories, not an average of the category percentages.
    """
    results = {
        category: match_category(getattr(jd_set, category), getattr(resume_set, category))
        for category in MATCHED_CATEGORIES
    }

    found = [term for r in results.values() for term in r.found]
    missing = [term for r in results.values() for term in r.missing]
    overall = KeywordMatchResult(
        found=found,
        missing=missing,
        match_percentage=percent(len(found), len(found) + len(missing)),
    )
    return KeywordMatchReport(overall=overall, **results)


def match_texts(
    job_description: str,
    resume_text: str,
    vocabulary: KeywordVocabulary = DEFAULT_VOCABULARY,
) -> KeywordMatchReport:
    """Extract keywords from both texts and match them."""
    return match_keywords(
        extract_keywords(job_description, vocabulary),
        extract_keywords(resume_text, vocabulary),
    )
