"""
Route table for the web app service
Exact-match routes are registered in order, then the static mount
"""
import os
from typing import Any, Callable, List, Tuple

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api.health import health, ready
from .api.hello import hello
from .api.pages import home
from .core.config import Settings
from .core.logging import get_logger

logger = get_logger(__name__)

Route = Tuple[str, str, Callable[..., Any]]

ROUTES: List[Route] = [
    ("GET", "/", home),
    ("GET", "/api/hello", hello),
    ("GET", "/health", health),
    ("GET", "/ready", ready),
]

STATIC_PREFIX = "/static"


class StaticAssets(StaticFiles):
    """StaticFiles that answers 404 instead of failing when the directory is absent."""

    async def check_config(self) -> None:
        if self.directory is not None and not os.path.isdir(self.directory):
            logger.warning("Static directory not found", directory=str(self.directory))
            return
        await super().check_config()


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register the route table and static mount on the application."""
    for method, path, handler in ROUTES:
        app.add_api_route(path, handler, methods=[method], name=handler.__name__)

    app.mount(
        STATIC_PREFIX,
        StaticAssets(directory=settings.static_dir, check_dir=False),
        name="static",
    )
    logger.debug(
        "Routes registered",
        routes=[f"{method} {path}" for method, path, _ in ROUTES],
        static_dir=settings.static_dir,
    )
