"""
Health check endpoints
Liveness and readiness probes for Kubernetes
"""
from datetime import datetime, timezone

from ..models.schemas import StatusResponse


async def health() -> StatusResponse:
    """
    Kubernetes liveness probe.

    Reports healthy whenever the process can handle requests at all;
    no dependency checks.
    """
    return StatusResponse(status="healthy", timestamp=datetime.now(timezone.utc))


async def ready() -> StatusResponse:
    """
    Kubernetes readiness probe.

    The service has no downstream dependencies, so it is always ready.
    """
    return StatusResponse(status="ready", timestamp=datetime.now(timezone.utc))
