"""Application models for install checking.

This module defines the data structures describing which applications
should be present on the machine and what the checker concluded about them.
"""

import unicodedata
from dataclasses import dataclass, field
from enum import Enum

# Control, format and line/paragraph separator characters
_CONTROL_CATEGORIES = frozenset({"Cc", "Cf", "Cs", "Co", "Cn", "Zl", "Zp"})


def has_control_characters(text: str) -> bool:
    """Check if text contains line breaks or other non-printing characters."""
    return any(unicodedata.category(ch) in _CONTROL_CATEGORIES for ch in text)


class InstallStatus(Enum):
    """Derived presence of an application on this machine."""

    PRESENT = "present"
    ABSENT = "absent"


class CheckOutcome(Enum):
    """What the checker did for a single application.

    Attributes:
        PRESENT: At least one presence source matched; nothing to do.
        INSTALL_ATTEMPTED: Absent, operator agreed, install was invoked.
        SKIPPED: Absent and the operator declined the install.
        MISSING: Absent; no install was offered (report-only check).
    """

    PRESENT = "present"
    INSTALL_ATTEMPTED = "install_attempted"
    SKIPPED = "skipped"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class AppDescriptor:
    """An application that should be installed.

    Attributes:
        name: Display-name fragment used to detect the application.
        package_id: winget package identifier used to install it.
    """

    name: str
    package_id: str

    def __post_init__(self) -> None:
        """Validate descriptor data after initialization."""
        if not self.name:
            msg = "Application name cannot be empty"
            raise ValueError(msg)
        if not self.package_id:
            msg = f"Package id for '{self.name}' cannot be empty"
            raise ValueError(msg)
        if has_control_characters(self.name) or has_control_characters(self.package_id):
            msg = f"Application {self.name!r} contains control characters"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class InstallResult:
    """Outcome of invoking the package manager's install operation.

    The exit status is recorded, but a zero status is not treated as proof
    that the application is now installed.

    Attributes:
        package_id: Package identifier passed to the installer.
        returncode: Exit code of the installer, or None if it never ran.
        error: Error text when the installer could not be launched or failed.
    """

    package_id: str
    returncode: int | None
    error: str | None = None

    @property
    def exited_cleanly(self) -> bool:
        """Check if the installer process exited with status 0."""
        return self.returncode == 0


@dataclass(frozen=True, slots=True)
class AppCheckResult:
    """Result of checking (and maybe installing) one application.

    Attributes:
        app: The application that was checked.
        outcome: What the checker did.
        matched_sources: Names of the presence sources that matched.
        install: Install invocation result, set only for INSTALL_ATTEMPTED.
    """

    app: AppDescriptor
    outcome: CheckOutcome
    matched_sources: tuple[str, ...] = field(default=())
    install: InstallResult | None = None

    @property
    def status(self) -> InstallStatus:
        """Presence as determined before any install attempt."""
        return InstallStatus.PRESENT if self.matched_sources else InstallStatus.ABSENT

    @property
    def is_present(self) -> bool:
        """Check if the application was already present."""
        return self.status == InstallStatus.PRESENT
