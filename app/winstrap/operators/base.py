"""Abstract base class for package installers.

This module defines the Installer interface used by the install checker.
"""

from abc import ABC, abstractmethod

from winstrap.models.app import AppDescriptor, InstallResult


class Installer(ABC):
    """Abstract base class for package installers.

    Example:
        >>> installer = WingetInstaller()
        >>> if installer.is_available():
        ...     result = installer.install(AppDescriptor("Git", "Git.Git"))
        ...     print(result.returncode)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier of the package manager."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system."""

    @abstractmethod
    def install(self, app: AppDescriptor) -> InstallResult:
        """Install one application silently.

        The returned exit status is recorded as-is; it is not a confirmation
        that the application is now installed.

        Args:
            app: Application to install.

        Returns:
            InstallResult with the installer's exit status.

        Raises:
            InstallInvocationError: If the installer cannot be launched.
        """
