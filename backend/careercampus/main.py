"""FastAPI application entry point.

``create_app`` wires together:
- structlog, with a request id bound per request
- security headers on every response
- the error envelope for APIError, request validation, and rate limits
- the /api/v1 routers and /health
"""

import time
import uuid

import structlog
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from careercampus.api.v1.router import router as v1_router
from careercampus.core.config import settings
from careercampus.core.errors import APIError, InternalError
from careercampus.core.logging_config import configure_logging
from careercampus.core.rate_limiting import limiter, rate_limit_exceeded_handler
from careercampus.core.responses import ErrorDetail, ErrorResponse

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

_SECURITY_HEADERS: dict[str, str] = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}

_HSTS_VALUE = "max-age=31536000; includeSubDomains"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses.

    API responses also get ``Cache-Control: no-store`` since profiles and
    resumes are personal data. HSTS is only sent in production, where TLS
    is terminated by a reverse proxy.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)

        response.headers.update(_SECURITY_HEADERS)
        if request.url.path.startswith("/api/"):
            response.headers["Cache-Control"] = "no-store, max-age=0"
        if settings.environment == "production":
            response.headers["Strict-Transport-Security"] = _HSTS_VALUE

        return response


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id into structlog context and log each request.

    A client-supplied X-Request-ID is reused; otherwise one is generated.
    The id is echoed back on the response.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.monotonic()
        response = await call_next(request)

        logger.info(
            "request_complete",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            latency_ms=(time.monotonic() - start_time) * 1000,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _error_response(
    status_code: int,
    code: str,
    message: str,
    details: list[dict] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=ErrorDetail(code=code, message=message, details=details)
        ).model_dump(),
    )


def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError in the error envelope with its own status."""
    logger.warning(
        "api_error",
        code=exc.code,
        status_code=exc.status_code,
        path=request.url.path,
    )
    return _error_response(exc.status_code, exc.code, exc.message, exc.details)


def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors from FastAPI.

    Args:
        request: The incoming request.
        exc: The RequestValidationError from Pydantic.

    Returns:
        400 VALIDATION_ERROR with one ``{loc, msg, type}`` entry per problem.
    """
    return _error_response(
        400,
        "VALIDATION_ERROR",
        "Request validation failed",
        [
            {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
            for e in exc.errors()
        ],
    )


def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions.

    The exception is logged with its traceback; the client only sees a
    generic 500 INTERNAL_ERROR.
    """
    logger.exception("unhandled_exception", exc_info=exc, path=request.url.path)
    error = InternalError()
    return _error_response(error.status_code, error.code, error.message)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    configure_logging(
        settings.log_level,
        json_output=settings.environment == "production",
    )

    app = FastAPI(
        title="CareerCampus API",
        version="1.0.0",
        description="AI career guidance for students and graduates",
    )

    # Starlette runs the last-added middleware first; CORS must see
    # preflight requests before anything else.
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", REQUEST_ID_HEADER],
        expose_headers=["Content-Disposition", REQUEST_ID_HEADER],
    )

    # Specific handlers first, then the catch-all
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    app.state.limiter = limiter

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health")
    def health_check() -> dict:
        """Liveness probe. Does not call the model."""
        return {"status": "healthy"}

    return app


# uvicorn careercampus.main:app
app = create_app()


def run() -> None:
    """Serve the app on the configured host and port."""
    uvicorn.run(
        "careercampus.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )
