"""Per-client rate limits for the endpoints that call Gemini.

Every recommendation, resume draft, and ATS check costs one model request,
so these routes share ``settings.rate_limit_llm`` (default "10/minute").
There is no server-side identity; limits are keyed on the client address
and kept in process memory.

Usage in routers:
    from careercampus.core.rate_limiting import limiter

    @router.post("/recommendations")
    @limiter.limit(settings.rate_limit_llm)
    async def recommend_careers(request: Request, ...):
        ...
"""

import re

import structlog
from fastapi import Request, Response
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from careercampus.core.config import settings
from careercampus.core.responses import ErrorDetail, ErrorResponse

logger = structlog.get_logger()

_DEFAULT_RETRY_AFTER_SECONDS = 60

_WINDOW_SECONDS = {"second": 1, "minute": 60, "hour": 3600, "day": 86400}

_LIMIT_WINDOW = re.compile(r"per (\d+) (second|minute|hour|day)")

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)


def _retry_after_seconds(detail: str) -> int:
    """Window length of a limit description such as "10 per 1 minute"."""
    match = _LIMIT_WINDOW.search(detail)
    if match is None:
        return _DEFAULT_RETRY_AFTER_SECONDS
    return int(match.group(1)) * _WINDOW_SECONDS[match.group(2)]


def rate_limit_exceeded_handler(
    request: Request,
    exc: RateLimitExceeded,
) -> Response:
    """Render a 429 RATE_LIMITED error with a Retry-After header.

    Args:
        request: The incoming request.
        exc: The rate limit exception.

    Returns:
        JSONResponse with the standard error envelope.
    """
    detail = str(exc.detail)
    logger.warning("rate_limited", path=request.url.path, limit=detail)

    return JSONResponse(
        status_code=429,
        content=ErrorResponse(
            error=ErrorDetail(
                code="RATE_LIMITED",
                message=f"Rate limit exceeded: {detail}",
            )
        ).model_dump(),
        headers={"Retry-After": str(_retry_after_seconds(detail))},
    )
