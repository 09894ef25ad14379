"""Abstract base class for presence sources.

A presence source is one independent way of telling whether an
application is installed. Each source produces a listing of installed
software once per run; queries are substring matches against it.
"""

import re
from abc import ABC, abstractmethod

class PresenceSource(ABC):
    """Abstract base class for all presence sources.

    Example:
        >>> source = WingetListSource()
        >>> if source.is_available():
        ...     print(source.query("Neovim"))
    """

    def __init__(self) -> None:
        self._listing: list[str] | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier shown in logs and tables (e.g. 'registry')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this source can be consulted on this system."""

    @abstractmethod
    def fetch(self) -> list[str]:
        """Produce the raw listing of installed software.

        Returns:
            One string per installed entry or output line.

        Raises:
            QuerySourceUnavailableError: If the listing cannot be obtained.
        """

    def listing(self) -> list[str]:
        """Return the listing, fetching it on first use.

        Raises:
            QuerySourceUnavailableError: If the listing cannot be obtained.
        """
        if self._listing is None:
            self._listing = self.fetch()
        return self._listing

    def query(self, app_name: str) -> bool:
        """Check if any listing entry contains the application name.

        Matching is a case-insensitive substring search, so a short name
        can match unrelated entries that happen to contain it.

        Args:
            app_name: Application name to look for.

        Returns:
            True if any entry matches.

        Raises:
            QuerySourceUnavailableError: If the listing cannot be obtained.
        """
        pattern = re.compile(re.escape(app_name), re.IGNORECASE)
        return any(pattern.search(entry) for entry in self.listing())
