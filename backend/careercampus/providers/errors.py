"""Provider error taxonomy.

Adapters translate SDK exceptions into these classes so callers can handle
failures without depending on a vendor SDK.
"""


__all__ = [
    "ProviderError",
    "MissingAPIKeyError",
    "RateLimitError",
    "AuthenticationError",
    "ContentFilterError",
    "ContextLengthError",
    "TransientError",
]


class ProviderError(Exception):
    """Base class for all provider errors.

    All provider-specific exceptions should inherit from this class,
    allowing callers to catch all provider errors with a single handler.
    """

    pass


class MissingAPIKeyError(ProviderError):
    """No API key is configured for the provider.

    Raised before any network call is attempted.
    """

    pass


class RateLimitError(ProviderError):
    """Rate limit or quota exceeded."""

    def __init__(self, message: str, retry_after_seconds: float | None = None):
        """Initialize RateLimitError.

        Args:
            message: Error description from the provider.
            retry_after_seconds: Optional hint from provider on when to retry.
        """
        super().__init__(message)
        self.retry_after_seconds = retry_after_seconds


class AuthenticationError(ProviderError):
    """Invalid or expired API key."""

    pass


class ContentFilterError(ProviderError):
    """Content blocked by provider's safety filter."""

    pass


class ContextLengthError(ProviderError):
    """Input exceeded model's context window."""

    pass


class TransientError(ProviderError):
    """Temporary failure (network, server overload).

    Includes: connection errors, timeouts, 5xx responses.
    """

    pass
