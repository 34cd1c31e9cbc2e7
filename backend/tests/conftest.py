"""Shared test configuration, markers and fixtures."""

import pytest

from api.dependencies import get_section_quality_scorer
from main import app


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: goes through the FastAPI app with TestClient"
    )


class FakeCapability:
    """Stand-in for the AI section-quality capability.

    Returns ``response`` (or raises ``error``) and records every payload.
    """

    def __init__(self, response: dict | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def __call__(self, payload: dict) -> dict:
        self.calls.append(payload)
        if self.error is not None:
            raise self.error
        return self.response


GOOD_AI_RESPONSE = {
    "overall_score": 82,
    "ats_match_percentage": 75,
    "requirements_coverage": 70,
    "competitive_strength": 4,
    "strengths": ["Quantified revenue impact"],
    "weaknesses": ["No mention of Kubernetes"],
    "keywords_matched": ["Python", "AWS"],
    "keywords_missing": ["Kubernetes"],
}


@pytest.fixture
def good_ai_response() -> dict:
    return dict(GOOD_AI_RESPONSE)


@pytest.fixture
def make_capability():
    """Factory for FakeCapability instances."""
    return FakeCapability


@pytest.fixture
def good_capability(good_ai_response):
    return FakeCapability(response=good_ai_response)


@pytest.fixture
def override_scorer():
    """Install a scorer built from a given capability into the app."""
    from services.section_quality import SectionQualityScorer

    def _install(capability):
        scorer = SectionQualityScorer(capability=capability)
        app.dependency_overrides[get_section_quality_scorer] = lambda: scorer
        return scorer

    yield _install
    app.dependency_overrides.pop(get_section_quality_scorer, None)
