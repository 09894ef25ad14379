"""Append-only run log.

This module provides the RunLog class for recording what each bootstrap
run did in a flat text file.
"""

import logging
from pathlib import Path

from winstrap.core.paths import get_log_path
from winstrap.models.log import LogEntry, create_log_entry

logger = logging.getLogger(__name__)


class RunLog:
    """Manages the bootstrap log file.

    Default location: ~/winstrap.log

    Each line holds one LogEntry. The file is only ever appended to; it is
    never rotated or rewritten.

    Attributes:
        path: Location of the log file.
    """

    def __init__(self, path: Path | None = None) -> None:
        """Initialize RunLog.

        Args:
            path: Optional override for the log file location.
        """
        self._path = path if path is not None else get_log_path()

    @property
    def path(self) -> Path:
        """Path to the log file."""
        return self._path

    def write(self, message: str) -> LogEntry:
        """Append a timestamped message to the log.

        Creates the file and parent directories if they don't exist.

        Args:
            message: What happened.

        Returns:
            The entry that was written.

        Raises:
            OSError: If the file cannot be written.
        """
        entry = create_log_entry(message)
        self._path.parent.mkdir(parents=True, exist_ok=True)

        with self._path.open(mode="a", encoding="utf-8") as f:
            f.write(entry.to_line() + "\n")
            f.flush()

        logger.debug("Logged: %s", entry.message)
        return entry

    def read_lines(self, limit: int | None = None) -> list[str]:
        """Read raw log lines, oldest first.

        Args:
            limit: If given, return only the last `limit` lines.

        Bytes that are not valid UTF-8 (e.g. lines written in a legacy
        code page) are replaced rather than raising.

        Returns:
            List of lines without trailing newlines.
            Returns empty list if the file doesn't exist.
        """
        if not self._path.exists():
            return []

        with self._path.open(encoding="utf-8", errors="replace") as f:
            lines = [line.rstrip("\r\n") for line in f if line.strip()]

        if limit is not None:
            return lines[-limit:] if limit > 0 else []
        return lines

    def entries(self) -> list[LogEntry]:
        """Parse every log line, oldest first.

        Lines that don't parse are skipped with a warning.

        Returns:
            List of LogEntry in file order.
        """
        result: list[LogEntry] = []
        for line_num, line in enumerate(self.read_lines(), start=1):
            try:
                result.append(LogEntry.from_line(line))
            except ValueError as e:
                logger.warning("Skipping malformed log line %d: %s", line_num, e)
        return result
