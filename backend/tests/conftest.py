"""Shared fixtures: mock LLM provider, sample records, and HTTP client."""

import json
from collections.abc import AsyncGenerator, Iterator

import pytest
from httpx import ASGITransport, AsyncClient

from careercampus.providers import factory
from careercampus.providers.llm.base import TaskType
from careercampus.providers.llm.mock_adapter import MockLLMProvider
from careercampus.schemas.profile import UserProfile, UserStage, WorkEnvironment

# =============================================================================
# Sample Data
# =============================================================================


def make_career(career_id: str, title: str, match_score: int = 80, **overrides) -> dict:
    """Build a wire-format career option dict."""
    career = {
        "id": career_id,
        "title": title,
        "matchScore": match_score,
        "description": f"{title} suits an analytical profile.",
        "salaryRange": {"min": "₹4,00,000", "max": "₹12,00,000", "currency": "₹"},
        "marketDemand": "High",
        "growthTrend": "+22% growth expected",
        "requiredSkills": ["Python", "Statistics"],
        "roadmap": [
            {"title": "Foundation", "description": "Learn basics", "duration": "6 months"},
            {"title": "Projects", "description": "Build a portfolio", "duration": "6 months"},
            {"title": "Internship", "description": "Apply to internships", "duration": "3 months"},
        ],
        "pros": ["High demand"],
        "cons": ["Competitive"],
    }
    career.update(overrides)
    return career


SAMPLE_RECOMMENDATION: dict = {
    "analysis": "Strong quantitative profile with creative interests.",
    "careers": [
        make_career("c1", "Data Scientist", 92),
        make_career("c2", "Chartered Accountant", 85, marketDemand="Medium"),
        make_career("c3", "UX Designer", 78),
        make_career("c4", "Remote Software Engineer", 88),
    ],
}

SAMPLE_ATS: dict = {
    "score": 72,
    "summary": "Solid structure, thin on quantified impact.",
    "missingKeywords": ["SQL", "Stakeholder management"],
    "formattingIssues": ["Tables may not parse"],
    "suggestions": ["Quantify achievements"],
    "countrySpecificAdvice": "Indian recruiters expect a concise 1-2 page CV.",
}

SAMPLE_RESUME_MARKDOWN = "# Asha Rao\n\n## Summary\nAspiring analyst.\n\n## Skills\n- Python\n"


@pytest.fixture
def sample_profile() -> UserProfile:
    """A submitted profile for a post-12th commerce student."""
    return UserProfile(
        name="Asha Rao",
        stage=UserStage.POST_12TH,
        academic_background="Commerce with Maths",
        grades="91%",
        interests=("Finance", "Data Science"),
        skills=("Mathematics", "Analysis"),
        preferred_work_environment=WorkEnvironment.HYBRID,
    )


# =============================================================================
# Provider Fixtures
# =============================================================================


@pytest.fixture
def mock_llm() -> Iterator[MockLLMProvider]:
    """Fixture that provides mock LLM and resets after test.

    Pre-configured with valid responses for all three tasks and injected
    into the factory singleton.

    Yields:
        MockLLMProvider instance with pre-configured responses.
    """
    mock = MockLLMProvider(
        {
            TaskType.CAREER_RECOMMENDATION: json.dumps(SAMPLE_RECOMMENDATION),
            TaskType.RESUME_DRAFT: SAMPLE_RESUME_MARKDOWN,
            TaskType.ATS_ANALYSIS: json.dumps(SAMPLE_ATS),
        }
    )
    # Inject mock into factory singleton
    factory._llm_provider = mock
    yield mock
    # Reset after test
    factory.reset_providers()


@pytest.fixture(autouse=True)
def disable_rate_limiting() -> Iterator[None]:
    """Disable rate limiting for all tests.

    Rate limiting is tested separately; disable for other tests
    to avoid flaky failures from rate limit triggers.
    """
    from careercampus.core.rate_limiting import limiter

    original_enabled = limiter.enabled
    limiter.enabled = False

    yield

    limiter.enabled = original_enabled


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def app():
    """Create test application instance."""
    from careercampus.main import create_app

    return create_app()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client over the ASGI app."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
