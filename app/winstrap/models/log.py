"""Run log entry model.

Each entry is a single text line: an ISO 8601 timestamp, a separator, and
a free-form message.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

LOG_SEPARATOR = " - "


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One line in the run log.

    Attributes:
        timestamp: When the entry was written (ISO 8601 with timezone).
        message: What happened.
    """

    timestamp: str
    message: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.timestamp:
            msg = "Timestamp cannot be empty"
            raise ValueError(msg)
        if "\n" in self.message or "\r" in self.message:
            msg = "Log message must be a single line"
            raise ValueError(msg)

    def to_line(self) -> str:
        """Serialize to a log line (no trailing newline)."""
        return f"{self.timestamp}{LOG_SEPARATOR}{self.message}"

    @classmethod
    def from_line(cls, line: str) -> "LogEntry":
        """Parse a log line.

        Args:
            line: A single line as written by to_line().

        Returns:
            LogEntry instance.

        Raises:
            ValueError: If the line has no separator or a bad timestamp.
        """
        timestamp, sep, message = line.rstrip("\r\n").partition(LOG_SEPARATOR)
        if not sep:
            msg = f"Not a log line: {line[:80]!r}"
            raise ValueError(msg)
        datetime.fromisoformat(timestamp)
        return cls(timestamp=timestamp, message=message)


def create_log_entry(message: str) -> LogEntry:
    """Create a log entry stamped with the current time.

    Line breaks in the message are collapsed to spaces.

    Args:
        message: What happened.

    Returns:
        New LogEntry.
    """
    flat = " ".join(message.splitlines())
    return LogEntry(
        timestamp=datetime.now(UTC).isoformat(timespec="seconds"),
        message=flat,
    )
