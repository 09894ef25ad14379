"""Presence sources for detecting installed applications.

This module exports the source classes consulted by the install checker.
"""

from winstrap.sources.base import PresenceSource
from winstrap.sources.registry import RegistrySource
from winstrap.sources.winget import WingetListSource

__all__ = ["PresenceSource", "RegistrySource", "WingetListSource"]
