"""Install checking and installation.

The InstallChecker walks the application catalog, asks every presence
source whether each application is installed, and offers to install the
ones nobody reports. Every outcome is written to the run log.
"""

import logging
from collections.abc import Iterable, Sequence

from winstrap.core.confirm import Confirmer
from winstrap.core.errors import InstallInvocationError, QuerySourceUnavailableError
from winstrap.core.runlog import RunLog
from winstrap.models.app import AppCheckResult, AppDescriptor, CheckOutcome, InstallResult
from winstrap.operators.base import Installer
from winstrap.sources.base import PresenceSource
from winstrap.utils.formatting import print_info, print_warning

logger = logging.getLogger(__name__)


class InstallChecker:
    """Checks applications against presence sources and installs missing ones.

    An application is present if ANY source matches its name. Failures of
    one source, one install, or one log write never stop the run.

    Attributes:
        sources: Presence sources consulted for each application.
        installer: Package manager used for missing applications.
        confirmer: Decides whether to install each missing application.
        run_log: Where outcomes are recorded.
    """

    def __init__(
        self,
        sources: Sequence[PresenceSource],
        installer: Installer,
        confirmer: Confirmer,
        run_log: RunLog,
    ) -> None:
        self._sources = list(sources)
        self._installer = installer
        self._confirmer = confirmer
        self._run_log = run_log
        self._unavailable: set[str] = set()

    @property
    def sources(self) -> list[PresenceSource]:
        """Presence sources in query order."""
        return list(self._sources)

    def detect(self, app: AppDescriptor) -> tuple[str, ...]:
        """Ask every source whether the application is installed.

        A source whose listing can't be obtained counts as "no match"; the
        first failure of each source is reported and logged.

        Args:
            app: Application to look for.

        Returns:
            Names of the sources that matched, in query order.
        """
        matched: list[str] = []
        for source in self._sources:
            if source.name in self._unavailable:
                continue
            try:
                if source.query(app.name):
                    matched.append(source.name)
            except QuerySourceUnavailableError as e:
                self._unavailable.add(source.name)
                logger.warning("Presence source %s unavailable: %s", source.name, e)
                print_warning(f"{source.name} check unavailable: {e}")
                self._log(f"Presence source {source.name} unavailable: {e}")
        return tuple(matched)

    def check(self, app: AppDescriptor) -> AppCheckResult:
        """Determine presence without offering to install.

        Args:
            app: Application to check.

        Returns:
            AppCheckResult with outcome PRESENT or MISSING.
        """
        matched = self.detect(app)
        if matched:
            self._log(f"{app.name} is installed (found by: {', '.join(matched)})")
            return AppCheckResult(app=app, outcome=CheckOutcome.PRESENT, matched_sources=matched)

        self._log(f"{app.name} is not installed")
        return AppCheckResult(app=app, outcome=CheckOutcome.MISSING)

    def process(self, app: AppDescriptor) -> AppCheckResult:
        """Check one application and offer to install it if absent.

        Args:
            app: Application to process.

        Returns:
            AppCheckResult describing what happened.
        """
        result = self.check(app)
        if result.is_present:
            logger.debug("%s already installed", app.name)
            return result

        print_warning(f"{app.name} is not installed.")
        if not self._confirmer(f"Install {app.name} ({app.package_id})?"):
            self._log(f"Skipped installing {app.name} ({app.package_id})")
            print_info(f"Skipped {app.name}.")
            return AppCheckResult(app=app, outcome=CheckOutcome.SKIPPED)

        install = self._install(app)
        return AppCheckResult(app=app, outcome=CheckOutcome.INSTALL_ATTEMPTED, install=install)

    def run(
        self,
        apps: Iterable[AppDescriptor],
        offer_install: bool = True,
    ) -> list[AppCheckResult]:
        """Process every application in order.

        Args:
            apps: Applications to check.
            offer_install: If False, only report presence (no prompts, no installs).

        Returns:
            One AppCheckResult per application, in input order.
        """
        step = self.process if offer_install else self.check
        return [step(app) for app in apps]

    def _install(self, app: AppDescriptor) -> InstallResult:
        """Invoke the installer and log the attempt.

        The log line records the exit status, not a verified success.
        """
        print_info(f"Installing {app.name} ({app.package_id}) with {self._installer.name}...")
        try:
            result = self._installer.install(app)
        except InstallInvocationError as e:
            logger.warning("Install of %s could not be started: %s", app.package_id, e)
            print_warning(f"Could not start install of {app.name}: {e}")
            self._log(f"Attempted install of {app.name} ({app.package_id}): not started: {e}")
            return InstallResult(package_id=app.package_id, returncode=None, error=str(e))

        self._log(
            f"Attempted install of {app.name} ({app.package_id}): "
            f"{self._installer.name} exited with status {result.returncode}"
        )
        if not result.exited_cleanly:
            print_warning(
                f"{self._installer.name} reported status {result.returncode} for {app.name}."
            )
        return result

    def _log(self, message: str) -> None:
        """Write to the run log, reporting instead of raising on failure."""
        try:
            self._run_log.write(message)
        except OSError as e:
            logger.warning("Failed to write run log %s: %s", self._run_log.path, e)
            print_warning(f"Could not write to log {self._run_log.path}: {e}")
