"""Career guidance service: the three model-backed operations.

Each operation builds a prompt (and, for structured output, a response
schema), issues exactly one request through an LLMProvider, and parses the
reply into a typed record. There is no retry and no caching.

Public API:
- generate_career_paths: UserProfile → RecommendationResponse
- generate_resume_draft: UserProfile → Markdown string
- analyze_resume_ats: resume text + country → AtsAnalysis
- GuidanceClient: the three operations bound to one provider
"""

import json
from typing import TypeVar

import pydantic
import structlog

from careercampus.core.config import settings
from careercampus.prompts.career import (
    CAREER_COUNSELOR_SYSTEM_PROMPT,
    build_ats_analysis_prompt,
    build_career_paths_prompt,
    build_resume_draft_prompt,
)
from careercampus.providers.errors import MissingAPIKeyError, ProviderError
from careercampus.providers.llm.base import LLMMessage, LLMProvider, TaskType
from careercampus.schemas.career import (
    ATS_ANALYSIS_GEMINI_SCHEMA,
    CAREER_RESPONSE_GEMINI_SCHEMA,
    RESPONSE_SCHEMA_VERSION,
    AtsAnalysis,
    RecommendationResponse,
)
from careercampus.schemas.profile import UserProfile
from careercampus.services.guidance_errors import (
    ConfigurationError,
    EmptyResponseError,
    GuidanceOperation,
    ParseError,
    ServiceError,
    TransportError,
)

logger = structlog.get_logger()

RecordT = TypeVar("RecordT", bound=pydantic.BaseModel)

RESUME_FALLBACK_TEXT = "Could not generate resume."
"""Shown when the model answers the resume request with an empty body."""

_MD_FENCE = "```"
_MD_FENCE_JSON = "```json"

_LOG_EXCERPT_LENGTH = 200
"""Max characters of exception messages logged."""


# =============================================================================
# Helpers
# =============================================================================


def _strip_markdown_fences(content: str) -> str:
    """Remove markdown code fences from LLM response."""
    text = content.strip()
    if text.startswith(_MD_FENCE_JSON):
        text = text[len(_MD_FENCE_JSON) :].strip()
    elif text.startswith(_MD_FENCE):
        text = text[len(_MD_FENCE) :].strip()
    else:
        return text
    if text.endswith(_MD_FENCE):
        text = text[: -len(_MD_FENCE)].strip()
    return text


def _log_failure(error: ServiceError) -> None:
    """Record the failure kind and internal reason for telemetry."""
    logger.warning(
        f"{error.operation.value}_failed",
        error_type=error.kind,
        reason=error.reason[:_LOG_EXCERPT_LENGTH],
    )


async def _request(
    provider: LLMProvider,
    operation: GuidanceOperation,
    messages: list[LLMMessage],
    task: TaskType,
    **kwargs: object,
) -> str | None:
    """Issue one completion and translate provider errors.

    Raises:
        ConfigurationError: If the provider has no API key.
        TransportError: On any other provider failure.
    """
    try:
        response = await provider.complete(messages=messages, task=task, **kwargs)  # type: ignore[arg-type]
    except MissingAPIKeyError as exc:
        error: ServiceError = ConfigurationError(operation, str(exc))
        _log_failure(error)
        raise error from exc
    except ProviderError as exc:
        error = TransportError(operation, f"{type(exc).__name__}: {exc}")
        _log_failure(error)
        raise error from exc
    return response.content


def _parse_record(
    content: str | None,
    record_type: type[RecordT],
    operation: GuidanceOperation,
) -> RecordT:
    """Validate model JSON against the record schema.

    Raises:
        EmptyResponseError: If the model returned no text.
        ParseError: If the text is not JSON or does not match the schema.
    """
    if not content or not content.strip():
        error: ServiceError = EmptyResponseError(operation, "model returned no text")
        _log_failure(error)
        raise error

    text = _strip_markdown_fences(content)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        error = ParseError(operation, f"invalid JSON: {exc}")
        _log_failure(error)
        raise error from exc

    try:
        record = record_type.model_validate(data)
    except pydantic.ValidationError as exc:
        error = ParseError(
            operation,
            f"schema v{RESPONSE_SCHEMA_VERSION} mismatch: "
            f"{exc.error_count()} error(s), first at "
            f"{'.'.join(str(p) for p in exc.errors()[0]['loc'])}",
        )
        _log_failure(error)
        raise error from exc

    return record


# =============================================================================
# Public API
# =============================================================================


async def generate_career_paths(
    profile: UserProfile,
    provider: LLMProvider,
) -> RecommendationResponse:
    """Ask the model for four distinct career paths for a profile.

    Args:
        profile: The submitted user profile.
        provider: LLM provider to call.

    Returns:
        RecommendationResponse with the model's analysis and careers.

    Raises:
        ServiceError: ConfigurationError, TransportError, EmptyResponseError,
            or ParseError. All carry the same user_message.
    """
    operation = GuidanceOperation.CAREER_PATHS
    content = await _request(
        provider,
        operation,
        messages=[
            LLMMessage(role="system", content=CAREER_COUNSELOR_SYSTEM_PROMPT),
            LLMMessage(role="user", content=build_career_paths_prompt(profile)),
        ],
        task=TaskType.CAREER_RECOMMENDATION,
        json_mode=True,
        response_schema=CAREER_RESPONSE_GEMINI_SCHEMA,
        temperature=settings.llm_temperature,
    )
    result = _parse_record(content, RecommendationResponse, operation)

    logger.info(
        "career_paths_generated",
        career_count=len(result.careers),
        schema_version=RESPONSE_SCHEMA_VERSION,
    )
    return result


async def generate_resume_draft(
    profile: UserProfile,
    provider: LLMProvider,
) -> str:
    """Ask the model for an ATS-friendly Markdown resume.

    Args:
        profile: The submitted user profile.
        provider: LLM provider to call.

    Returns:
        Markdown resume text, or RESUME_FALLBACK_TEXT if the model replied
        with an empty body.

    Raises:
        ServiceError: ConfigurationError or TransportError.
    """
    content = await _request(
        provider,
        GuidanceOperation.RESUME_DRAFT,
        messages=[
            LLMMessage(role="user", content=build_resume_draft_prompt(profile)),
        ],
        task=TaskType.RESUME_DRAFT,
    )
    if not content or not content.strip():
        logger.warning("resume_draft_empty")
        return RESUME_FALLBACK_TEXT
    return content


async def analyze_resume_ats(
    resume_text: str,
    country: str,
    provider: LLMProvider,
) -> AtsAnalysis:
    """Audit resume text the way an ATS and recruiter in ``country`` would.

    Only the first ``settings.ats_resume_max_chars`` characters are sent.

    Args:
        resume_text: Pasted resume text.
        country: Target market (e.g., "India").
        provider: LLM provider to call.

    Returns:
        AtsAnalysis with score and suggestions.

    Raises:
        ServiceError: ConfigurationError, TransportError, EmptyResponseError,
            or ParseError. All carry the same user_message.
    """
    operation = GuidanceOperation.ATS_ANALYSIS
    truncated = resume_text[: settings.ats_resume_max_chars]
    content = await _request(
        provider,
        operation,
        messages=[
            LLMMessage(
                role="user",
                content=build_ats_analysis_prompt(truncated, country),
            ),
        ],
        task=TaskType.ATS_ANALYSIS,
        json_mode=True,
        response_schema=ATS_ANALYSIS_GEMINI_SCHEMA,
    )
    result = _parse_record(content, AtsAnalysis, operation)

    logger.info(
        "ats_analysis_complete",
        country=country,
        score=result.score,
        truncated=len(resume_text) > len(truncated),
    )
    return result


class GuidanceClient:
    """The three guidance operations bound to one provider.

    The session depends on this rather than on a provider, so tests can
    substitute a stub with canned results or failures.
    """

    def __init__(self, provider: LLMProvider) -> None:
        self.provider = provider

    async def generate_career_paths(
        self, profile: UserProfile
    ) -> RecommendationResponse:
        """See module-level generate_career_paths."""
        return await generate_career_paths(profile, self.provider)

    async def generate_resume_draft(self, profile: UserProfile) -> str:
        """See module-level generate_resume_draft."""
        return await generate_resume_draft(profile, self.provider)

    async def analyze_resume_ats(self, resume_text: str, country: str) -> AtsAnalysis:
        """See module-level analyze_resume_ats."""
        return await analyze_resume_ats(resume_text, country, self.provider)
