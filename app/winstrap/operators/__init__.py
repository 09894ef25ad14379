"""Package installers for executing install actions.

This module provides the abstract installer and its winget implementation.
"""

from winstrap.operators.base import Installer
from winstrap.operators.winget import WingetInstaller

__all__ = ["Installer", "WingetInstaller"]
