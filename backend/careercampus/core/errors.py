"""API error classes.

Each class maps one failure category to an HTTP status and a machine-readable
code. Exception handlers in main.py render them as {"error": {...}}.
"""


class APIError(Exception):
    """Base class for API errors.

    All API errors have a code, message, and HTTP status.
    Subclasses set default status_code.

    Attributes:
        code: Machine-readable error code (e.g., "VALIDATION_ERROR").
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional list of additional error details.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: list[dict] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ValidationError(APIError):
    """Field validation failed (400).

    Use for request body validation errors and profile step rule failures.
    """

    def __init__(
        self,
        message: str,
        details: list[dict] | None = None,
    ) -> None:
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            status_code=400,
            details=details,
        )


class InvalidStateError(APIError):
    """Business rule violation (422).

    Use when a request is syntactically valid but violates a state rule.
    E.g., advancing the profile wizard past a step that does not validate.
    """

    def __init__(self, message: str) -> None:
        super().__init__(
            code="INVALID_STATE_TRANSITION",
            message=message,
            status_code=422,
        )


class UpstreamModelError(APIError):
    """The generative model call failed or returned unusable output (502).

    The message is the single user-facing text for the failed operation.
    The underlying failure kind is logged, never returned.
    """

    def __init__(self, message: str) -> None:
        super().__init__(
            code="UPSTREAM_MODEL_ERROR",
            message=message,
            status_code=502,
        )


class ModelNotConfiguredError(APIError):
    """The generative model API key is missing (503)."""

    def __init__(self, message: str) -> None:
        super().__init__(
            code="MODEL_NOT_CONFIGURED",
            message=message,
            status_code=503,
        )


class InternalError(APIError):
    """Unexpected server error (500).

    Use for unhandled exceptions. Never expose stack traces to clients.
    """

    def __init__(self, message: str = "An unexpected error occurred") -> None:
        super().__init__(
            code="INTERNAL_ERROR",
            message=message,
            status_code=500,
        )
