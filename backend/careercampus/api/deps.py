"""Shared dependencies for API endpoints."""

from typing import Annotated

from fastapi import Depends

from careercampus.core.errors import APIError, ModelNotConfiguredError, UpstreamModelError
from careercampus.providers import factory
from careercampus.providers.llm.base import LLMProvider
from careercampus.services.guidance_errors import ConfigurationError, ServiceError


def get_provider() -> LLMProvider:
    """Return the process-wide LLM provider (mock-injectable in tests)."""
    return factory.get_llm_provider()


LLMProviderDep = Annotated[LLMProvider, Depends(get_provider)]


def service_error_to_api_error(exc: ServiceError) -> APIError:
    """Map a guidance failure to its HTTP error.

    Only the operation's generic user message is exposed.
    """
    if isinstance(exc, ConfigurationError):
        return ModelNotConfiguredError(exc.user_message)
    return UpstreamModelError(exc.user_message)
