"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from winstrap.core.errors import InstallInvocationError, QuerySourceUnavailableError
from winstrap.models.app import AppDescriptor, InstallResult
from winstrap.operators.base import Installer
from winstrap.sources.base import PresenceSource


class FakeSource(PresenceSource):
    """Presence source with a fixed listing."""

    def __init__(self, name: str, entries: list[str] | None = None, error: str | None = None):
        super().__init__()
        self._name = name
        self._entries = entries or []
        self._error = error
        self.fetch_count = 0

    @property
    def name(self) -> str:
        return self._name

    def is_available(self) -> bool:
        return self._error is None

    def fetch(self) -> list[str]:
        self.fetch_count += 1
        if self._error is not None:
            raise QuerySourceUnavailableError(self._error)
        return list(self._entries)


class FakeInstaller(Installer):
    """Installer that records calls instead of running winget."""

    def __init__(self, returncode: int = 0, error: str | None = None) -> None:
        self.returncode = returncode
        self.error = error
        self.installed: list[AppDescriptor] = []

    @property
    def name(self) -> str:
        return "fake"

    def is_available(self) -> bool:
        return True

    def install(self, app: AppDescriptor) -> InstallResult:
        self.installed.append(app)
        if self.error is not None:
            raise InstallInvocationError(self.error)
        return InstallResult(package_id=app.package_id, returncode=self.returncode)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every home-derived location at a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("LOCALAPPDATA", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("WINSTRAP_LOG_PATH", raising=False)
    return home


@pytest.fixture
def make_source() -> Callable[..., FakeSource]:
    """Factory for fake presence sources."""
    return FakeSource


@pytest.fixture
def make_installer() -> Callable[..., FakeInstaller]:
    """Factory for fake installers."""
    return FakeInstaller


@pytest.fixture
def fake_installer() -> FakeInstaller:
    """Installer that records install calls and reports success."""
    return FakeInstaller()


@pytest.fixture
def sample_app() -> AppDescriptor:
    """The sample application used across checker tests."""
    return AppDescriptor(name="sample", package_id="Vendor.Sample")


@pytest.fixture
def mock_winget_list_output() -> str:
    """Sample `winget list` output for testing."""
    return """Name                              Id                        Version      Source
----------------------------------------------------------------------------------
Git                               Git.Git                   2.45.1       winget
Microsoft Visual C++ 2015 Redist  Microsoft.VCRedist.2015+  14.38.33135
Neovim                            Neovim.Neovim             0.10.0       winget
Windows Terminal                  Microsoft.WindowsTerminal 1.20.11381.0 winget"""


@pytest.fixture
def sample_catalog_toml() -> str:
    """Valid catalog file content."""
    return """[apps]
sample = "Vendor.Sample"
Git = "Git.Git"
"""
