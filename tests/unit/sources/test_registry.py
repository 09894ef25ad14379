"""Unit tests for the uninstall registry source.

A fake winreg module stands in for the Windows registry.
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest
from winstrap.core.errors import QuerySourceUnavailableError
from winstrap.sources.registry import UNINSTALL_KEY, WOW64_UNINSTALL_KEY, RegistrySource

HKLM = 1
HKCU = 2


class FakeKey:
    """Open registry key handle."""

    def __init__(self, path: tuple) -> None:
        self.path = path

    def __enter__(self) -> "FakeKey":
        return self

    def __exit__(self, *exc: object) -> None:
        return None


def make_winreg(tree: dict[tuple[int, str], dict[str, str | None]]) -> SimpleNamespace:
    """Build a fake winreg module.

    Args:
        tree: (hive, key path) -> {subkey name: DisplayName or None}.
    """

    def open_key(parent, path):
        if isinstance(parent, FakeKey):
            return FakeKey((*parent.path, path))
        if (parent, path) not in tree:
            raise FileNotFoundError(path)
        return FakeKey((parent, path))

    def enum_key(key, index):
        subkeys = list(tree[key.path])
        if index >= len(subkeys):
            raise OSError("No more data is available")
        return subkeys[index]

    def query_value_ex(key, name):
        hive, path, subkey = key.path
        value = tree[(hive, path)][subkey]
        if value is None:
            raise FileNotFoundError(name)
        return value, 1

    return SimpleNamespace(
        HKEY_LOCAL_MACHINE=HKLM,
        HKEY_CURRENT_USER=HKCU,
        OpenKey=open_key,
        EnumKey=enum_key,
        QueryValueEx=query_value_ex,
    )


class TestRegistrySource:
    """Tests for RegistrySource."""

    def test_name(self) -> None:
        """Source is named 'registry'."""
        assert RegistrySource().name == "registry"

    def test_unavailable_without_winreg(self) -> None:
        """Without winreg the source is unavailable."""
        with patch("winstrap.sources.registry._import_winreg", return_value=None):
            source = RegistrySource()
            assert not source.is_available()
            with pytest.raises(QuerySourceUnavailableError):
                source.fetch()

    def test_reads_all_scopes(self) -> None:
        """Display names from machine, 32-bit and user scopes are combined."""
        winreg = make_winreg(
            {
                (HKLM, UNINSTALL_KEY): {"Git_is1": "Git", "{GUID-1}": None},
                (HKLM, WOW64_UNINSTALL_KEY): {"7-Zip": "7-Zip 23.01 (x64)"},
                (HKCU, UNINSTALL_KEY): {"Neovim": "  Neovim  ", "blank": ""},
            }
        )

        with patch("winstrap.sources.registry._import_winreg", return_value=winreg):
            source = RegistrySource()
            assert source.is_available()
            names = source.fetch()

        assert names == ["Git", "7-Zip 23.01 (x64)", "Neovim"]

    def test_missing_scope_is_skipped(self) -> None:
        """A scope whose key doesn't exist contributes nothing."""
        winreg = make_winreg({(HKCU, UNINSTALL_KEY): {"wezterm": "WezTerm"}})

        with patch("winstrap.sources.registry._import_winreg", return_value=winreg):
            source = RegistrySource()
            assert source.fetch() == ["WezTerm"]
            assert source.query("wezterm")
