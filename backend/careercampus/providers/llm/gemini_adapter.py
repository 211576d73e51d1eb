"""Google Gemini LLM adapter.

Uses the unified google-genai SDK. Structured output is requested with
``response_mime_type="application/json"`` plus a ``response_schema``; the
schema dicts live next to the records they describe in
``careercampus.schemas.career``.
"""

import time
from typing import TYPE_CHECKING, Any

import structlog
from google import genai
from google.genai import types

from careercampus.providers.errors import (
    AuthenticationError,
    ContentFilterError,
    ContextLengthError,
    MissingAPIKeyError,
    ProviderError,
    RateLimitError,
    TransientError,
)
from careercampus.providers.llm.base import (
    LLMMessage,
    LLMProvider,
    LLMResponse,
    TaskType,
)

if TYPE_CHECKING:
    from careercampus.providers.config import ProviderConfig

logger = structlog.get_logger()

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

_MISSING_KEY_MSG = "API Key is missing. Please set it in the environment."

_JSON_MIME_TYPE = "application/json"

# Checked in order; the first group with a matching marker wins.
_ERROR_MARKERS: tuple[tuple[type[ProviderError], tuple[str, ...]], ...] = (
    (RateLimitError, ("resource_exhausted", "resource exhausted", "429", "quota")),
    (AuthenticationError, ("permission", "unauthenticated", "api key not valid")),
    (ContextLengthError, ("context", "token")),
    (ContentFilterError, ("safety", "blocked")),
    (TransientError, ("unavailable", "503", "timeout", "timed out", "connect")),
)


def _classify_gemini_error(error: Exception) -> ProviderError:
    """Translate an SDK exception into the provider error taxonomy."""
    text = str(error)
    lowered = text.lower()
    for error_cls, markers in _ERROR_MARKERS:
        if any(marker in lowered for marker in markers):
            return error_cls(text)
    return ProviderError(text)


def _split_system_instruction(
    messages: list[LLMMessage],
) -> tuple[str | None, list[types.Content]]:
    """Pull the system message out; the rest become Gemini contents."""
    system_instruction = None
    contents: list[types.Content] = []
    for msg in messages:
        if msg.role == "system":
            system_instruction = msg.content
            continue
        contents.append(
            types.Content(
                role="model" if msg.role == "assistant" else msg.role,
                parts=[types.Part(text=msg.content or "")],
            )
        )
    return system_instruction, contents


def _response_text(response: Any) -> tuple[str | None, str]:
    """Concatenated text of the first candidate and its finish reason.

    Returns (None, "UNKNOWN") when the model produced no candidate, and
    None content when the candidate has no text parts.
    """
    if not response.candidates:
        return None, "UNKNOWN"
    candidate = response.candidates[0]
    finish_reason = candidate.finish_reason.name if candidate.finish_reason else "UNKNOWN"
    parts = candidate.content.parts if candidate.content else None
    texts = [part.text for part in parts or [] if part.text]
    return ("".join(texts) if texts else None), finish_reason


def _token_usage(response: Any) -> tuple[int, int]:
    """(input, output) token counts; zero when usage is not reported."""
    usage = response.usage_metadata
    if not usage:
        return 0, 0
    return usage.prompt_token_count or 0, usage.candidates_token_count or 0


class GeminiAdapter(LLMProvider):
    """Gemini provider over ``client.aio.models.generate_content``.

    The SDK client is only built when an API key is configured. Without a
    key, every ``complete`` call raises MissingAPIKeyError before any
    request is made, so the service still starts and each operation
    reports the problem.
    """

    def __init__(self, config: "ProviderConfig") -> None:
        super().__init__(config)
        self.client = (
            genai.Client(api_key=config.google_api_key)
            if config.google_api_key
            else None
        )
        self.model_routing: dict[str, str] = dict(config.gemini_model_routing or {})

    @property
    def provider_name(self) -> str:
        """Return 'gemini' for logging."""
        return "gemini"

    def get_model_for_task(self, task: TaskType) -> str:
        """Routing override for the task, else the configured model."""
        return self.model_routing.get(
            task.value, self.config.gemini_model or DEFAULT_GEMINI_MODEL
        )

    def _generation_config(
        self,
        system_instruction: str | None,
        max_tokens: int | None,
        temperature: float | None,
        structured: bool,
        response_schema: dict[str, Any] | None,
    ) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=system_instruction,
            max_output_tokens=max_tokens or self.config.default_max_tokens,
            temperature=(
                self.config.default_temperature if temperature is None else temperature
            ),
            response_mime_type=_JSON_MIME_TYPE if structured else None,
            response_schema=response_schema,
        )

    async def complete(
        self,
        messages: list[LLMMessage],
        task: TaskType,
        max_tokens: int | None = None,
        temperature: float | None = None,
        json_mode: bool = False,
        response_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        """Send one generate_content request. There is no retry."""
        if self.client is None:
            logger.error("llm_request_unconfigured", provider="gemini", task=task.value)
            raise MissingAPIKeyError(_MISSING_KEY_MSG)

        model_name = self.get_model_for_task(task)
        structured = json_mode or response_schema is not None
        system_instruction, contents = _split_system_instruction(messages)
        gen_config = self._generation_config(
            system_instruction, max_tokens, temperature, structured, response_schema
        )
        log = logger.bind(provider="gemini", model=model_name, task=task.value)
        log.info("llm_request_start", structured=structured)

        started = time.monotonic()
        try:
            response = await self.client.aio.models.generate_content(
                model=model_name,
                contents=contents,  # type: ignore[arg-type]
                config=gen_config,
            )
        except Exception as e:
            log.error(
                "llm_request_failed",
                error_type=type(e).__name__,
                latency_ms=(time.monotonic() - started) * 1000,
            )
            raise _classify_gemini_error(e) from e
        latency_ms = (time.monotonic() - started) * 1000

        content, finish_reason = _response_text(response)
        input_tokens, output_tokens = _token_usage(response)
        log.info(
            "llm_request_complete",
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            finish_reason=finish_reason,
            latency_ms=latency_ms,
        )

        return LLMResponse(
            content=content,
            model=model_name,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            finish_reason=finish_reason,
            latency_ms=latency_ms,
        )
