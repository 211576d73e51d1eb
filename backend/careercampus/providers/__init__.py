"""Provider abstraction layer.

Exports:
    Error classes for provider error handling
    ProviderConfig for configuration
    Factory functions for provider instances
"""

from careercampus.providers.config import ProviderConfig
from careercampus.providers.errors import (
    AuthenticationError,
    ContentFilterError,
    ContextLengthError,
    MissingAPIKeyError,
    ProviderError,
    RateLimitError,
    TransientError,
)
from careercampus.providers.factory import get_llm_provider, reset_providers

__all__ = [
    # Config
    "ProviderConfig",
    # Errors
    "ProviderError",
    "MissingAPIKeyError",
    "RateLimitError",
    "AuthenticationError",
    "ContentFilterError",
    "ContextLengthError",
    "TransientError",
    # Factory
    "get_llm_provider",
    "reset_providers",
]
