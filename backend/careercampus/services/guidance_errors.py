"""Career guidance failure taxonomy.

Every model-backed operation fails with one of four kinds:

    - ConfigurationError: no API key; nothing was sent
    - TransportError: the request failed (network, quota, auth, safety filter)
    - EmptyResponseError: the model answered with no text
    - ParseError: the text was not JSON or did not match the record schema

The kind is logged for telemetry. Users only ever see ``user_message``,
which is the same for every kind of failure within one operation.
"""

from enum import Enum


class GuidanceOperation(Enum):
    """Model-backed operations, each with its own user-facing failure text."""

    CAREER_PATHS = "career_paths"
    RESUME_DRAFT = "resume_draft"
    ATS_ANALYSIS = "ats_analysis"

    @property
    def failure_message(self) -> str:
        """The single message shown to users when this operation fails."""
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES: dict[GuidanceOperation, str] = {
    GuidanceOperation.CAREER_PATHS: (
        "Failed to generate recommendations. "
        "Please check your API key and try again."
    ),
    GuidanceOperation.RESUME_DRAFT: "Failed to generate resume.",
    GuidanceOperation.ATS_ANALYSIS: "Failed to analyze resume.",
}


class ServiceError(Exception):
    """Base class for career guidance failures.

    Attributes:
        operation: Which operation failed.
        user_message: Generic, user-facing text for the operation.
        reason: Internal description (logged, never shown).
    """

    kind = "service"

    def __init__(self, operation: GuidanceOperation, reason: str) -> None:
        self.operation = operation
        self.user_message = operation.failure_message
        self.reason = reason
        super().__init__(self.user_message)


class ConfigurationError(ServiceError):
    """The model API key is not configured."""

    kind = "configuration"


class TransportError(ServiceError):
    """The model request failed before a response was received."""

    kind = "transport"


class EmptyResponseError(ServiceError):
    """The model returned no text."""

    kind = "empty_response"


class ParseError(ServiceError):
    """The model text was not valid JSON for the expected record."""

    kind = "parse"
