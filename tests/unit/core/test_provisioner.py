"""Unit tests for DirectoryProvisioner.

Tests run against a temporary home directory. Creating symbolic links
must be permitted by the host.
"""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from winstrap.core.paths import build_provision_plan
from winstrap.core.provisioner import DirectoryProvisioner
from winstrap.core.runlog import RunLog
from winstrap.models.provision import ProvisionPlan, StepKind, StepStatus


def _snapshot(root: Path) -> dict[str, str]:
    """Describe every path under root: kind plus link target."""
    state: dict[str, str] = {}
    for path in sorted(root.rglob("*")):
        rel = str(path.relative_to(root))
        if path.is_symlink():
            state[rel] = f"link:{path.readlink()}"
        elif path.is_dir():
            state[rel] = "dir"
        else:
            state[rel] = f"file:{path.read_text()}"
    return state


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Empty home directory."""
    path = tmp_path / "profile"
    path.mkdir()
    return path


@pytest.fixture
def plan(home: Path) -> ProvisionPlan:
    """Provision plan rooted at the temporary home."""
    return build_provision_plan(home)


class TestProvision:
    """Tests for a full provisioning run."""

    def test_creates_layout_on_empty_home(self, plan: ProvisionPlan) -> None:
        """All directories and links exist after the first run."""
        steps = DirectoryProvisioner(plan).provision()

        assert all(s.status == StepStatus.CREATED for s in steps)
        assert plan.local_bin.is_dir()
        assert plan.local_dir.is_dir()
        assert plan.config_dir.is_dir()
        assert plan.documents_powershell.is_dir()
        assert plan.local_bin_link.is_symlink()
        assert plan.local_bin_link.readlink() == plan.local_bin
        assert plan.powershell_link.is_symlink()
        assert plan.powershell_link.readlink() == plan.documents_powershell

    def test_step_order(self, plan: ProvisionPlan) -> None:
        """The local bin directory is created before the link to it."""
        steps = DirectoryProvisioner(plan).provision()

        assert [s.path for s in steps] == [
            plan.local_bin,
            plan.local_dir,
            plan.local_bin_link,
            plan.config_dir,
            plan.documents_powershell,
            plan.powershell_link,
        ]
        assert [s.kind for s in steps] == [
            StepKind.DIRECTORY,
            StepKind.HIDDEN_DIRECTORY,
            StepKind.SYMLINK,
            StepKind.HIDDEN_DIRECTORY,
            StepKind.DIRECTORY,
            StepKind.SYMLINK,
        ]

    def test_second_run_is_noop(self, plan: ProvisionPlan, home: Path) -> None:
        """Re-running leaves the filesystem exactly as the first run did."""
        provisioner = DirectoryProvisioner(plan)
        provisioner.provision()
        first = _snapshot(home)

        steps = provisioner.provision()

        assert _snapshot(home) == first
        assert all(s.status == StepStatus.EXISTS for s in steps)
        assert not any(s.changed for s in steps)

    def test_links_into_writable_targets(self, plan: ProvisionPlan) -> None:
        """Files written through a link land in the Windows-side directory."""
        DirectoryProvisioner(plan).provision()

        (plan.powershell_link / "profile.ps1").write_text("Set-PSReadLineOption")

        assert (plan.documents_powershell / "profile.ps1").read_text() == "Set-PSReadLineOption"

    def test_records_changes_to_run_log(self, plan: ProvisionPlan, tmp_path: Path) -> None:
        """Created objects are written to the run log; a no-op run writes nothing."""
        run_log = RunLog(tmp_path / "winstrap.log")
        provisioner = DirectoryProvisioner(plan, run_log=run_log)

        provisioner.provision()
        first_lines = run_log.read_lines()
        provisioner.provision()

        assert any("Linked" in line and str(plan.local_bin_link) in line for line in first_lines)
        assert run_log.read_lines() == first_lines


class TestConflicts:
    """Tests for paths occupied by something unexpected."""

    def test_regular_file_at_local_bin_is_left_alone(
        self, plan: ProvisionPlan, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A file where ~/.local/bin should be is reported, never replaced."""
        plan.local_dir.mkdir()
        plan.local_bin_link.write_text("keep me")

        with caplog.at_level(logging.WARNING, logger="winstrap"):
            steps = DirectoryProvisioner(plan).provision()

        link_step = steps[2]
        assert link_step.status == StepStatus.CONFLICT
        assert "file" in (link_step.detail or "")
        assert not plan.local_bin_link.is_symlink()
        assert plan.local_bin_link.read_text() == "keep me"
        assert any(str(plan.local_bin_link) in r.getMessage() for r in caplog.records)

    def test_conflict_does_not_stop_other_steps(self, plan: ProvisionPlan) -> None:
        """Later steps still run after a conflict."""
        plan.local_dir.mkdir()
        plan.local_bin_link.mkdir()

        steps = DirectoryProvisioner(plan).provision()

        assert steps[2].status == StepStatus.CONFLICT
        assert "directory" in (steps[2].detail or "")
        assert plan.powershell_link.is_symlink()

    def test_existing_link_elsewhere_is_kept(self, plan: ProvisionPlan, tmp_path: Path) -> None:
        """A symlink pointing somewhere else is reported but not changed."""
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        plan.config_dir.mkdir()
        plan.powershell_link.symlink_to(elsewhere, target_is_directory=True)

        steps = DirectoryProvisioner(plan).provision()

        step = steps[5]
        assert step.status == StepStatus.EXISTS
        assert step.detail == f"points to {elsewhere}"
        assert plan.powershell_link.readlink() == elsewhere

    def test_file_where_directory_expected(self, plan: ProvisionPlan) -> None:
        """A file in place of a directory is a conflict."""
        plan.local_bin.parent.mkdir(parents=True)
        plan.local_bin.write_text("not a dir")

        steps = DirectoryProvisioner(plan).provision()

        assert steps[0].status == StepStatus.CONFLICT
        assert plan.local_bin.read_text() == "not a dir"
        # Link target is missing, so the link is not created either
        assert steps[2].status == StepStatus.CONFLICT
        assert not plan.local_bin_link.exists()

    def test_symlink_failure_is_reported(self, plan: ProvisionPlan) -> None:
        """An OS error creating a link becomes a FAILED step."""
        with patch.object(Path, "symlink_to", side_effect=OSError("privilege not held")):
            steps = DirectoryProvisioner(plan).provision()

        assert steps[2].status == StepStatus.FAILED
        assert steps[2].detail == "privilege not held"
        assert steps[5].status == StepStatus.FAILED


class TestHiddenAttribute:
    """Tests for hiding ~/.local and ~/.config."""

    def test_sets_hidden_on_existing_visible_directory(self, plan: ProvisionPlan) -> None:
        """An existing, visible directory gets the hidden attribute once."""
        plan.config_dir.mkdir()
        provisioner = DirectoryProvisioner(plan)

        with (
            patch("winstrap.core.provisioner.is_hidden", return_value=False),
            patch("winstrap.core.provisioner.set_hidden") as mock_set,
        ):
            step = provisioner.ensure_hidden_directory(plan.config_dir)

        assert step.status == StepStatus.HIDDEN
        mock_set.assert_called_once_with(plan.config_dir)

    def test_already_hidden_is_untouched(self, plan: ProvisionPlan) -> None:
        """A hidden directory is left as is."""
        plan.config_dir.mkdir()

        with (
            patch("winstrap.core.provisioner.is_hidden", return_value=True),
            patch("winstrap.core.provisioner.set_hidden") as mock_set,
        ):
            step = DirectoryProvisioner(plan).ensure_hidden_directory(plan.config_dir)

        assert step.status == StepStatus.EXISTS
        mock_set.assert_not_called()

    def test_new_directory_is_created_and_hidden(self, plan: ProvisionPlan) -> None:
        """A new directory reports CREATED and is hidden."""
        with (
            patch("winstrap.core.provisioner.is_hidden", return_value=False),
            patch("winstrap.core.provisioner.set_hidden") as mock_set,
        ):
            step = DirectoryProvisioner(plan).ensure_hidden_directory(plan.local_dir)

        assert step.status == StepStatus.CREATED
        mock_set.assert_called_once_with(plan.local_dir)

    def test_hide_failure_is_reported(self, plan: ProvisionPlan) -> None:
        """A failing attrib call becomes a FAILED step."""
        with (
            patch("winstrap.core.provisioner.is_hidden", return_value=False),
            patch("winstrap.core.provisioner.set_hidden", side_effect=OSError("attrib failed")),
        ):
            step = DirectoryProvisioner(plan).ensure_hidden_directory(plan.local_dir)

        assert step.status == StepStatus.FAILED
        assert step.kind == StepKind.HIDDEN_DIRECTORY
