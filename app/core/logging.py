"""Logging configuration for the web app service."""

import logging
import sys
import structlog
from typing import Optional

from .config import Settings

# Applied to structlog events and to plain stdlib records (uvicorn) alike
SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def configure_logging(settings: Settings) -> None:
    """Configure structured logging for the app and the server."""

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if settings.log_format == "json":
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer()]

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=SHARED_PROCESSORS,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
        )
    )

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.log_level))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


access_logger = get_logger("access")


def log_request_started(request_id: str, method: str, path: str, client_ip: Optional[str]) -> None:
    """Bind the request to the logging context and log its arrival."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, method=method, path=path)
    access_logger.info("Request received", client_ip=client_ip)


def log_response_sent(status_code: int, duration_ms: float) -> None:
    access_logger.info("Response sent", status_code=status_code, duration_ms=round(duration_ms, 2))


def log_request_failed(error: Exception, duration_ms: float) -> None:
    access_logger.error(
        "Request failed",
        error_type=type(error).__name__,
        error_message=str(error),
        duration_ms=round(duration_ms, 2),
    )
