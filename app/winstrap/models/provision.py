"""Provisioning models for the home directory layout.

This module defines the filesystem targets the provisioner ensures and
the per-step results it reports.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class StepKind(Enum):
    """Kind of filesystem object a provisioning step manages."""

    DIRECTORY = "directory"
    HIDDEN_DIRECTORY = "hidden_directory"
    SYMLINK = "symlink"


class StepStatus(Enum):
    """Outcome of a single provisioning step.

    Attributes:
        CREATED: The target was missing and has been created.
        HIDDEN: The directory existed but the hidden attribute was newly set.
        EXISTS: The desired state already held; nothing changed.
        CONFLICT: Something else occupies the path; it was left untouched.
        FAILED: Creating the target raised an OS error.
    """

    CREATED = "created"
    HIDDEN = "hidden"
    EXISTS = "exists"
    CONFLICT = "conflict"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ProvisionPlan:
    """Fixed set of directories and links derived from the user's home.

    Attributes:
        home: User home directory.
        local_bin: Concrete Windows-side directory for user executables.
        documents_powershell: PowerShell config directory under Documents.
    """

    home: Path
    local_bin: Path
    documents_powershell: Path

    @property
    def local_dir(self) -> Path:
        """Path to ~/.local."""
        return self.home / ".local"

    @property
    def local_bin_link(self) -> Path:
        """Path to the ~/.local/bin symlink."""
        return self.local_dir / "bin"

    @property
    def config_dir(self) -> Path:
        """Path to ~/.config."""
        return self.home / ".config"

    @property
    def powershell_link(self) -> Path:
        """Path to the ~/.config/powershell symlink."""
        return self.config_dir / "powershell"


@dataclass(frozen=True, slots=True)
class ProvisionStep:
    """Result of ensuring one filesystem target.

    Attributes:
        path: The path that was checked.
        kind: What kind of object the step ensures.
        status: What the step did.
        target: Link target for SYMLINK steps.
        detail: Human-readable note, e.g. what was found on a conflict.
    """

    path: Path
    kind: StepKind
    status: StepStatus
    target: Path | None = None
    detail: str | None = None

    @property
    def changed(self) -> bool:
        """Check if this step modified the filesystem."""
        return self.status in (StepStatus.CREATED, StepStatus.HIDDEN)
