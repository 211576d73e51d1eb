"""structlog configuration.

Every module logs through ``structlog.get_logger()`` with event-style names
(``llm_request_start``, ``career_paths_failed``) and keyword context.
``configure_logging`` is called once by ``create_app``.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, WrappedLogger

_SENSITIVE_FIELDS = frozenset({"api_key", "password", "secret", "token"})


def mask_credentials(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Replace values of credential-like keys with a fixed mask.

    Matches exact names and ``_``-delimited prefixes/suffixes, so
    ``google_api_key`` is masked but ``input_tokens`` is not.
    """
    for key in list(event_dict.keys()):
        key_lower = key.lower()
        for sensitive in _SENSITIVE_FIELDS:
            if (
                key_lower == sensitive
                or key_lower.endswith(f"_{sensitive}")
                or key_lower.startswith(f"{sensitive}_")
            ):
                event_dict[key] = "***MASKED***"
                break
    return event_dict


def configure_logging(log_level: str = "INFO", *, json_output: bool = False) -> None:
    """Configure structlog processors and the stdlib root handler.

    Args:
        log_level: Minimum level name (e.g., "INFO").
        json_output: Render JSON lines instead of the console renderer.
    """
    level = getattr(logging, log_level.upper())

    logging.basicConfig(
        format="%(message)s",
        level=level,
        stream=sys.stdout,
    )

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            mask_credentials,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
