"""winget installer implementation.

Installs packages by id with `winget install`, accepting package and
source agreements so no prompt interrupts the run.
"""

import logging

from winstrap.core.errors import InstallInvocationError
from winstrap.models.app import AppDescriptor, InstallResult
from winstrap.operators.base import Installer
from winstrap.utils.shell import command_exists, run_interactive

logger = logging.getLogger(__name__)

WINGET = "winget"


class WingetInstaller(Installer):
    """Installer for winget packages.

    The install runs attached to the terminal so winget's own progress
    output stays visible. It blocks until winget exits.
    """

    @property
    def name(self) -> str:
        """Return 'winget' as the installer name."""
        return "winget"

    def is_available(self) -> bool:
        """Check if winget is on the PATH."""
        return command_exists(WINGET)

    def build_args(self, package_id: str) -> list[str]:
        """Build the silent install command line for a package id."""
        return [
            WINGET,
            "install",
            "--id",
            package_id,
            "--exact",
            "--silent",
            "--accept-package-agreements",
            "--accept-source-agreements",
        ]

    def install(self, app: AppDescriptor) -> InstallResult:
        """Install an application with winget.

        Args:
            app: Application to install.

        Returns:
            InstallResult carrying winget's exit status.

        Raises:
            InstallInvocationError: If winget is missing or cannot be started.
        """
        if not self.is_available():
            msg = "winget is not available on this system"
            raise InstallInvocationError(msg)

        args = self.build_args(app.package_id)
        logger.info("Executing winget install for %s (%s)", app.name, app.package_id)

        try:
            returncode = run_interactive(args)
        except OSError as e:
            msg = f"winget install could not be run: {e}"
            raise InstallInvocationError(msg) from e

        if returncode != 0:
            logger.warning("winget install %s exited with status %d", app.package_id, returncode)
            return InstallResult(
                package_id=app.package_id,
                returncode=returncode,
                error=f"winget exited with status {returncode}",
            )

        return InstallResult(package_id=app.package_id, returncode=returncode)
