"""Exception hierarchy for winstrap."""


class WinstrapError(Exception):
    """Base exception for winstrap errors."""


class PlatformMismatchError(WinstrapError):
    """Raised when winstrap runs on a host other than Windows."""


class QuerySourceUnavailableError(WinstrapError):
    """Raised when a presence source cannot produce its listing."""


class InstallInvocationError(WinstrapError):
    """Raised when the package manager's install cannot be launched."""


class CatalogError(WinstrapError):
    """Base exception for application catalog errors."""


class CatalogNotFoundError(CatalogError):
    """Raised when the catalog file is not found."""


class CatalogParseError(CatalogError):
    """Raised when the catalog file cannot be parsed."""
