"""Windows uninstall registry presence source.

Reads the DisplayName of every entry under the "Uninstall" keys for the
machine-wide, 32-bit compatibility, and per-user scopes.
"""

import logging
from types import ModuleType

from winstrap.core.errors import QuerySourceUnavailableError
from winstrap.sources.base import PresenceSource

logger = logging.getLogger(__name__)

UNINSTALL_KEY = r"SOFTWARE\Microsoft\Windows\CurrentVersion\Uninstall"
WOW64_UNINSTALL_KEY = r"SOFTWARE\WOW6432Node\Microsoft\Windows\CurrentVersion\Uninstall"


def _import_winreg() -> ModuleType | None:
    """Import winreg, which only exists on Windows."""
    try:
        import winreg
    except ImportError:
        return None
    return winreg


class RegistrySource(PresenceSource):
    """Presence source backed by the uninstall registry."""

    @property
    def name(self) -> str:
        """Return 'registry' as the source name."""
        return "registry"

    def is_available(self) -> bool:
        """Check if the Windows registry can be read."""
        return _import_winreg() is not None

    def fetch(self) -> list[str]:
        """Collect DisplayName values from all uninstall scopes.

        Scopes that don't exist on this machine are skipped.

        Returns:
            List of display names.

        Raises:
            QuerySourceUnavailableError: If winreg is not available.
        """
        winreg = _import_winreg()
        if winreg is None:
            msg = "Windows registry is not available on this system"
            raise QuerySourceUnavailableError(msg)

        scopes = (
            (winreg.HKEY_LOCAL_MACHINE, UNINSTALL_KEY),
            (winreg.HKEY_LOCAL_MACHINE, WOW64_UNINSTALL_KEY),
            (winreg.HKEY_CURRENT_USER, UNINSTALL_KEY),
        )

        names: list[str] = []
        for hive, path in scopes:
            names.extend(self._read_display_names(winreg, hive, path))

        logger.debug("Registry listed %d installed component(s)", len(names))
        return names

    def _read_display_names(self, winreg: ModuleType, hive: int, path: str) -> list[str]:
        """Read DisplayName from every subkey of one uninstall key.

        Args:
            winreg: The winreg module.
            hive: Registry hive handle constant.
            path: Key path under the hive.

        Returns:
            Display names found; subkeys without one are ignored.
        """
        names: list[str] = []
        try:
            root = winreg.OpenKey(hive, path)
        except OSError:
            logger.debug("Uninstall key not present: %s", path)
            return names

        with root:
            index = 0
            while True:
                try:
                    subkey_name = winreg.EnumKey(root, index)
                except OSError:
                    break
                index += 1

                try:
                    with winreg.OpenKey(root, subkey_name) as subkey:
                        value, _ = winreg.QueryValueEx(subkey, "DisplayName")
                except OSError:
                    continue

                if isinstance(value, str) and value.strip():
                    names.append(value.strip())

        return names
