"""
Greeting endpoint
"""
from datetime import datetime, timezone

from ..core.config import APP_VERSION
from ..models.schemas import GreetingResponse
from ..services.host import get_hostname

GREETING = "Hello from Go Web App running on Kubernetes!"


async def hello() -> GreetingResponse:
    """
    JSON greeting

    Returns:
        Fixed greeting with the current time, app version and serving host
    """
    return GreetingResponse(
        message=GREETING,
        timestamp=datetime.now(timezone.utc),
        version=APP_VERSION,
        host=get_hostname() or "",
    )
