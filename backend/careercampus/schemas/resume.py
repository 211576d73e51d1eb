"""Resume tool request/response schemas."""

from pydantic import Field, field_validator

from careercampus.schemas.profile import CamelModel

ATS_COUNTRIES: tuple[str, ...] = (
    "India",
    "USA",
    "New Zealand",
    "Russia",
    "European Countries",
)
"""Target markets offered by the ATS checker."""

DEFAULT_ATS_COUNTRY = "India"

_MAX_RESUME_INPUT_LENGTH = 100_000
"""Hard cap on pasted resume text. Only the head is sent to the model."""


class ResumeDraftResponse(CamelModel):
    """Generated Markdown resume."""

    markdown: str


class AtsAnalysisRequest(CamelModel):
    """Pasted resume text and the market to audit it for."""

    resume_text: str = Field(max_length=_MAX_RESUME_INPUT_LENGTH)
    country: str = DEFAULT_ATS_COUNTRY

    @field_validator("resume_text")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            msg = "resumeText must not be empty"
            raise ValueError(msg)
        return value

    @field_validator("country")
    @classmethod
    def _known_country(cls, value: str) -> str:
        if value not in ATS_COUNTRIES:
            msg = f"country must be one of: {', '.join(ATS_COUNTRIES)}"
            raise ValueError(msg)
        return value


class ResumePdfRequest(CamelModel):
    """Resume draft to render as a downloadable PDF."""

    resume_text: str = Field(min_length=1, max_length=_MAX_RESUME_INPUT_LENGTH)
    name: str = Field(min_length=1, max_length=200)
