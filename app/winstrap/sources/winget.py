"""winget listing presence source.

Runs `winget list` and treats every output line as a listing entry.
"""

import logging

from winstrap.core.errors import QuerySourceUnavailableError
from winstrap.sources.base import PresenceSource
from winstrap.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

WINGET = "winget"


class WingetListSource(PresenceSource):
    """Presence source backed by `winget list`."""

    _LIST_ARGS = [WINGET, "list", "--accept-source-agreements", "--disable-interactivity"]

    @property
    def name(self) -> str:
        """Return 'winget' as the source name."""
        return "winget"

    def is_available(self) -> bool:
        """Check if winget is on the PATH."""
        return command_exists(WINGET)

    def fetch(self) -> list[str]:
        """Run `winget list` and split its output into lines.

        Returns:
            Non-empty output lines.

        Raises:
            QuerySourceUnavailableError: If winget is missing or fails.
        """
        if not self.is_available():
            msg = "winget is not available on this system"
            raise QuerySourceUnavailableError(msg)

        try:
            result = run_command(self._LIST_ARGS)
        except OSError as e:
            msg = f"winget list could not be run: {e}"
            raise QuerySourceUnavailableError(msg) from e

        if not result.success:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            msg = f"winget list failed: {detail}"
            raise QuerySourceUnavailableError(msg)

        lines = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        logger.debug("winget list returned %d line(s)", len(lines))
        return lines
