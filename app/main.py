"""
Main FastAPI application for the Kubernetes Web App
Application factory and process entry point
"""
import socket
import time
import uuid
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .core.config import APP_NAME, APP_VERSION, Settings, load_settings
from .core.logging import (
    configure_logging, get_logger, log_request_failed, log_request_started, log_response_sent,
)
from .models.schemas import ErrorResponse
from .router import register_routes

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application from resolved settings."""
    if settings is None:
        settings = load_settings()

    configure_logging(settings)

    app = FastAPI(
        title=APP_NAME,
        description="Minimal web application with liveness and readiness probes",
        version=APP_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Logging middleware for requests and responses."""
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()

        log_request_started(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            log_request_failed(e, duration_ms=(time.perf_counter() - start_time) * 1000)
            raise

        log_response_sent(
            status_code=response.status_code,
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        request_id = getattr(request.state, "request_id", None)

        logger.error(
            "Unhandled exception",
            request_id=request_id,
            error_type=type(exc).__name__,
            error_message=str(exc),
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error="Internal Server Error",
                message="An unexpected error occurred",
                request_id=request_id,
                timestamp=datetime.now(timezone.utc),
            ).model_dump(mode="json"),
            headers={"X-Request-ID": request_id} if request_id else None,
        )

    register_routes(app, settings)
    return app


def bind_listener(settings: Settings) -> socket.socket:
    """
    Bind the listening TCP socket.

    Raises:
        OSError: If the address cannot be bound (port in use, permission denied)
    """
    family = socket.AF_INET6 if ":" in settings.host else socket.AF_INET
    sock = socket.socket(family=family)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((settings.host, settings.port))
    except OSError:
        sock.close()
        raise
    return sock


def create_server(settings: Settings) -> uvicorn.Server:
    """Build the uvicorn server for the application."""
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.timeout_keep_alive,
        log_config=None,  # Use our logging
    )
    return uvicorn.Server(config)


def serve(settings: Optional[Settings] = None) -> None:
    """Resolve configuration once, then serve until the process is stopped."""
    if settings is None:
        settings = load_settings()

    server = create_server(settings)
    logger.info("Server starting", host=settings.host, port=settings.port)

    try:
        sock = bind_listener(settings)
    except OSError as e:
        logger.critical("Server failed to start", host=settings.host, port=settings.port, error=str(e))
        raise SystemExit(1) from e

    server.run(sockets=[sock])


if __name__ == "__main__":
    serve()
