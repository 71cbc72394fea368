"""
Machine hostname lookup
"""
import socket
from typing import Optional

from ..core.logging import get_logger

logger = get_logger(__name__)


def get_hostname() -> Optional[str]:
    """
    Look up the machine hostname.

    Returns:
        The hostname, or None when it cannot be determined
    """
    try:
        hostname = socket.gethostname()
    except OSError as e:
        logger.warning("Hostname lookup failed", error=str(e))
        return None

    return hostname or None
