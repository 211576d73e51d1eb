"""Career guidance records and the structured-output schemas sent to Gemini.

The pydantic models validate model output at the boundary. The
``*_GEMINI_SCHEMA`` dicts are the response schemas passed with each request
and must stay field-for-field in line with the models below. Bump
RESPONSE_SCHEMA_VERSION whenever either side changes.
"""

from typing import Any, Literal

from pydantic import Field

from careercampus.schemas.profile import CamelModel

RESPONSE_SCHEMA_VERSION = 1
"""Version of the model output contract (logged with every parse)."""

MarketDemand = Literal["High", "Medium", "Low"]

SALARY_CURRENCY = "₹"
"""Salary ranges are always quoted in INR."""


# =============================================================================
# Records
# =============================================================================


class SalaryRange(CamelModel):
    """Salary band as display strings (e.g., "6 LPA", "12,00,000")."""

    min: str
    max: str
    currency: str


class RoadmapStep(CamelModel):
    """One step of a career execution plan."""

    title: str
    description: str
    duration: str


class CareerOption(CamelModel):
    """A recommended career path."""

    id: str
    title: str
    match_score: int = Field(ge=0, le=100)
    description: str
    salary_range: SalaryRange
    market_demand: MarketDemand
    growth_trend: str
    required_skills: tuple[str, ...]
    roadmap: tuple[RoadmapStep, ...]
    pros: tuple[str, ...]
    cons: tuple[str, ...]


class RecommendationResponse(CamelModel):
    """Model analysis plus ordered career options.

    Four careers are requested but not enforced. At least one is required
    so the dashboard always has a default selection.
    """

    analysis: str
    careers: tuple[CareerOption, ...] = Field(min_length=1)


class AtsAnalysis(CamelModel):
    """ATS audit of a resume for a target country."""

    score: int = Field(ge=0, le=100)
    summary: str
    missing_keywords: tuple[str, ...]
    formatting_issues: tuple[str, ...]
    suggestions: tuple[str, ...]
    country_specific_advice: str


# =============================================================================
# Gemini response schemas
# =============================================================================

_STRING_LIST: dict[str, Any] = {"type": "ARRAY", "items": {"type": "STRING"}}

CAREER_RESPONSE_GEMINI_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "analysis": {
            "type": "STRING",
            "description": (
                "A brief, encouraging analysis of the user's profile "
                "and why these paths were chosen."
            ),
        },
        "careers": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "id": {"type": "STRING"},
                    "title": {
                        "type": "STRING",
                        "description": "Job Title or Career Path Name",
                    },
                    "matchScore": {
                        "type": "INTEGER",
                        "description": "Match percentage 0-100",
                    },
                    "description": {
                        "type": "STRING",
                        "description": "Why this fits the user",
                    },
                    "salaryRange": {
                        "type": "OBJECT",
                        "properties": {
                            "min": {"type": "STRING"},
                            "max": {"type": "STRING"},
                            "currency": {
                                "type": "STRING",
                                "description": (
                                    f"Currency symbol, MUST be '{SALARY_CURRENCY}'"
                                ),
                            },
                        },
                        "required": ["min", "max", "currency"],
                    },
                    "marketDemand": {
                        "type": "STRING",
                        "enum": ["High", "Medium", "Low"],
                    },
                    "growthTrend": {
                        "type": "STRING",
                        "description": "e.g., '+22% growth expected'",
                    },
                    "requiredSkills": _STRING_LIST,
                    "roadmap": {
                        "type": "ARRAY",
                        "items": {
                            "type": "OBJECT",
                            "properties": {
                                "title": {"type": "STRING"},
                                "description": {"type": "STRING"},
                                "duration": {"type": "STRING"},
                            },
                            "required": ["title", "description", "duration"],
                        },
                        "description": "3-5 step execution plan",
                    },
                    "pros": _STRING_LIST,
                    "cons": _STRING_LIST,
                },
                "required": [
                    "id",
                    "title",
                    "matchScore",
                    "description",
                    "salaryRange",
                    "marketDemand",
                    "growthTrend",
                    "requiredSkills",
                    "roadmap",
                    "pros",
                    "cons",
                ],
            },
        },
    },
    "required": ["analysis", "careers"],
}

ATS_ANALYSIS_GEMINI_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "score": {"type": "INTEGER", "description": "ATS Score 0-100"},
        "summary": {
            "type": "STRING",
            "description": "Short summary of the audit",
        },
        "missingKeywords": _STRING_LIST,
        "formattingIssues": _STRING_LIST,
        "suggestions": _STRING_LIST,
        "countrySpecificAdvice": {
            "type": "STRING",
            "description": "Advice specific to the selected country's norms",
        },
    },
    "required": [
        "score",
        "summary",
        "missingKeywords",
        "formattingIssues",
        "suggestions",
        "countrySpecificAdvice",
    ],
}
