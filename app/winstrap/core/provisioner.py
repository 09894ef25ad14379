"""Directory provisioning for a Linux-like home layout.

The DirectoryProvisioner creates ~/.local, ~/.config, a local bin folder
and two symbolic links back into Windows-native locations. Every step
checks before acting, so re-running on a provisioned home changes nothing.
"""

import logging
from pathlib import Path

from winstrap.core.attributes import is_hidden, set_hidden
from winstrap.core.runlog import RunLog
from winstrap.models.provision import ProvisionPlan, ProvisionStep, StepKind, StepStatus

logger = logging.getLogger(__name__)


def _describe(path: Path) -> str:
    """Describe what currently occupies a path."""
    if path.is_symlink():
        return "symbolic link"
    if path.is_dir():
        return "directory"
    if path.is_file():
        return "file"
    return "special file"


class DirectoryProvisioner:
    """Ensures the fixed set of directories and links exists.

    Existing objects are never replaced. A path occupied by the wrong kind
    of object is reported as a CONFLICT and left alone.

    Attributes:
        plan: The directories and links to ensure.
    """

    def __init__(self, plan: ProvisionPlan, run_log: RunLog | None = None) -> None:
        """Initialize the provisioner.

        Args:
            plan: Filesystem targets to ensure.
            run_log: Optional log for recording changes.
        """
        self._plan = plan
        self._run_log = run_log

    @property
    def plan(self) -> ProvisionPlan:
        """Filesystem targets this provisioner ensures."""
        return self._plan

    def provision(self) -> list[ProvisionStep]:
        """Run every provisioning step in order.

        The local bin directory comes before the ~/.local/bin link so the
        link target exists when the link is made.

        Returns:
            One ProvisionStep per target, in execution order.
        """
        plan = self._plan
        return [
            self.ensure_directory(plan.local_bin),
            self.ensure_hidden_directory(plan.local_dir),
            self.ensure_symlink(plan.local_bin_link, plan.local_bin),
            self.ensure_hidden_directory(plan.config_dir),
            self.ensure_directory(plan.documents_powershell),
            self.ensure_symlink(plan.powershell_link, plan.documents_powershell),
        ]

    def ensure_directory(self, path: Path) -> ProvisionStep:
        """Create a directory if nothing is at the path.

        Args:
            path: Directory to ensure.

        Returns:
            ProvisionStep with status CREATED, EXISTS, CONFLICT or FAILED.
        """
        if path.is_dir():
            return ProvisionStep(path=path, kind=StepKind.DIRECTORY, status=StepStatus.EXISTS)

        if path.exists() or path.is_symlink():
            return self._conflict(path, StepKind.DIRECTORY, f"found {_describe(path)}")

        try:
            path.mkdir(parents=True)
        except OSError as e:
            return self._failed(path, StepKind.DIRECTORY, e)

        self._record(f"Created directory {path}")
        return ProvisionStep(path=path, kind=StepKind.DIRECTORY, status=StepStatus.CREATED)

    def ensure_hidden_directory(self, path: Path) -> ProvisionStep:
        """Create a directory if missing and make sure it is hidden.

        Args:
            path: Directory to ensure.

        Returns:
            ProvisionStep with status CREATED, HIDDEN, EXISTS, CONFLICT or FAILED.
        """
        step = self.ensure_directory(path)
        if step.status not in (StepStatus.CREATED, StepStatus.EXISTS):
            return ProvisionStep(
                path=path,
                kind=StepKind.HIDDEN_DIRECTORY,
                status=step.status,
                detail=step.detail,
            )

        status = step.status
        try:
            if not is_hidden(path):
                set_hidden(path)
                self._record(f"Set hidden attribute on {path}")
                if status == StepStatus.EXISTS:
                    status = StepStatus.HIDDEN
        except OSError as e:
            return self._failed(path, StepKind.HIDDEN_DIRECTORY, e)

        return ProvisionStep(path=path, kind=StepKind.HIDDEN_DIRECTORY, status=status)

    def ensure_symlink(self, link: Path, target: Path) -> ProvisionStep:
        """Create a directory symbolic link if nothing is at the link path.

        An existing symbolic link is kept even if it points elsewhere. Any
        other object at the link path is reported and left untouched.

        Args:
            link: Path of the symbolic link.
            target: Directory the link should point to.

        Returns:
            ProvisionStep with status CREATED, EXISTS, CONFLICT or FAILED.
        """
        if link.is_symlink():
            current = Path(link.readlink())
            detail = None if current == target else f"points to {current}"
            if detail:
                logger.info("Keeping existing link %s (%s)", link, detail)
            return ProvisionStep(
                path=link,
                kind=StepKind.SYMLINK,
                status=StepStatus.EXISTS,
                target=target,
                detail=detail,
            )

        if link.exists():
            return self._conflict(
                link,
                StepKind.SYMLINK,
                f"found {_describe(link)}, not a symbolic link",
                target=target,
            )

        if not target.is_dir():
            return self._conflict(
                link,
                StepKind.SYMLINK,
                f"link target {target} is not a directory",
                target=target,
            )

        try:
            link.parent.mkdir(parents=True, exist_ok=True)
            link.symlink_to(target, target_is_directory=True)
        except OSError as e:
            return self._failed(link, StepKind.SYMLINK, e, target=target)

        self._record(f"Linked {link} -> {target}")
        return ProvisionStep(
            path=link,
            kind=StepKind.SYMLINK,
            status=StepStatus.CREATED,
            target=target,
        )

    def _conflict(
        self,
        path: Path,
        kind: StepKind,
        detail: str,
        target: Path | None = None,
    ) -> ProvisionStep:
        logger.warning("Leaving %s untouched: %s", path, detail)
        self._record(f"Left {path} untouched: {detail}")
        return ProvisionStep(
            path=path,
            kind=kind,
            status=StepStatus.CONFLICT,
            target=target,
            detail=detail,
        )

    def _failed(
        self,
        path: Path,
        kind: StepKind,
        error: OSError,
        target: Path | None = None,
    ) -> ProvisionStep:
        logger.warning("Failed to provision %s: %s", path, error)
        self._record(f"Failed to provision {path}: {error}")
        return ProvisionStep(
            path=path,
            kind=kind,
            status=StepStatus.FAILED,
            target=target,
            detail=str(error),
        )

    def _record(self, message: str) -> None:
        """Write to the run log if one was given."""
        if self._run_log is None:
            return
        try:
            self._run_log.write(message)
        except OSError as e:
            logger.warning("Failed to write run log %s: %s", self._run_log.path, e)
