"""Host platform checks."""

import logging
import sys

from winstrap.core.errors import PlatformMismatchError

logger = logging.getLogger(__name__)


def is_windows(platform: str | None = None) -> bool:
    """Check if the host (or the given platform string) is Windows.

    Args:
        platform: A sys.platform-style string. If None, uses sys.platform.

    Returns:
        True on Windows, False otherwise.
    """
    return (platform or sys.platform) == "win32"


def require_windows(platform: str | None = None) -> None:
    """Abort unless running on Windows.

    Args:
        platform: A sys.platform-style string. If None, uses sys.platform.

    Raises:
        PlatformMismatchError: If the host is not Windows.
    """
    current = platform or sys.platform
    if not is_windows(current):
        logger.debug("Refusing to run on platform %s", current)
        msg = f"winstrap only runs on Windows (detected platform: {current})"
        raise PlatformMismatchError(msg)
