"""Path management for winstrap.

This module resolves every location winstrap reads or writes:

- Config: ~/.config/winstrap/ (apps.toml, theme.toml)
- Run log: ~/winstrap.log (or WINSTRAP_LOG_PATH)
- Provisioning targets: local bin, ~/.local, ~/.config, Documents/PowerShell
"""

import os
from pathlib import Path

from winstrap.models.provision import ProvisionPlan

# Application identifier for directory naming
APP_NAME = "winstrap"

LOG_PATH_ENV = "WINSTRAP_LOG_PATH"
LOG_FILENAME = "winstrap.log"


def get_home() -> Path:
    """Get the user's home directory.

    Returns:
        Path to the home directory (USERPROFILE on Windows).
    """
    return Path.home()


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Respects XDG_CONFIG_HOME so the same dotfiles layout works everywhere.

    Returns:
        Path to ~/.config/winstrap/ (or XDG_CONFIG_HOME/winstrap/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return get_home() / ".config" / APP_NAME


def get_catalog_path() -> Path:
    """Get the default application catalog path.

    Returns:
        Path to ~/.config/winstrap/apps.toml.
    """
    return get_config_dir() / "apps.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/winstrap/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_log_path() -> Path:
    """Get the default run log path.

    Returns:
        Path from WINSTRAP_LOG_PATH if set, otherwise ~/winstrap.log.
    """
    override = os.environ.get(LOG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return get_home() / LOG_FILENAME


def get_local_bin_dir(home: Path | None = None) -> Path:
    """Get the Windows-side directory for user executables.

    Args:
        home: Home directory to derive the fallback from.

    Returns:
        Path to %LOCALAPPDATA%\\bin, or ~/AppData/Local/bin if unset.
    """
    local_appdata = os.environ.get("LOCALAPPDATA")
    if local_appdata and home is None:
        return Path(local_appdata) / "bin"
    return (home or get_home()) / "AppData" / "Local" / "bin"


def get_documents_powershell_dir(home: Path | None = None) -> Path:
    """Get the PowerShell profile directory under Documents.

    Args:
        home: Home directory to resolve Documents from.

    Returns:
        Path to ~/Documents/PowerShell.
    """
    return (home or get_home()) / "Documents" / "PowerShell"


def build_provision_plan(home: Path | None = None) -> ProvisionPlan:
    """Build the provisioning targets for a home directory.

    When home is given explicitly (tests, alternate profiles), every target
    is derived from it and environment overrides are ignored.

    Args:
        home: Home directory. If None, uses the current user's home.

    Returns:
        ProvisionPlan with all directory and link paths resolved.
    """
    return ProvisionPlan(
        home=home or get_home(),
        local_bin=get_local_bin_dir(home),
        documents_powershell=get_documents_powershell_dir(home),
    )
