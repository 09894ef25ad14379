"""Shared types and helpers for CLI commands.

This module provides the common options, exit codes, and component
factories used across multiple CLI command modules.
"""

from pathlib import Path
from typing import Annotated

import typer

from winstrap.core.confirm import Confirmer, always, prompt_confirmer
from winstrap.core.errors import CatalogError, PlatformMismatchError
from winstrap.core.platform import require_windows
from winstrap.operators.base import Installer
from winstrap.operators.winget import WingetInstaller
from winstrap.sources.base import PresenceSource
from winstrap.sources.registry import RegistrySource
from winstrap.sources.winget import WingetListSource
from winstrap.utils.formatting import print_error

# Exit codes
EXIT_ABORTED = 1
EXIT_WRONG_PLATFORM = 2
EXIT_CATALOG_ERROR = 3

AppsFileOption = Annotated[
    Path | None,
    typer.Option(
        "--apps",
        "-a",
        help="TOML file with an [apps] table of name = package id.",
        dir_okay=False,
    ),
]

LogPathOption = Annotated[
    Path | None,
    typer.Option(
        "--log-path",
        "-l",
        help="Append the run log to this file.",
        dir_okay=False,
    ),
]


def get_sources() -> list[PresenceSource]:
    """Get the presence sources in query order (registry, then winget)."""
    return [RegistrySource(), WingetListSource()]


def get_installer() -> Installer:
    """Get the package installer."""
    return WingetInstaller()


def get_confirmer(assume_yes: bool) -> Confirmer:
    """Get the confirmer for a run.

    Args:
        assume_yes: If True, answer every question yes without prompting.

    Returns:
        Confirmer to inject into the install checker.
    """
    return always(True) if assume_yes else prompt_confirmer


def ensure_windows() -> None:
    """Exit with EXIT_WRONG_PLATFORM unless running on Windows."""
    try:
        require_windows()
    except PlatformMismatchError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_WRONG_PLATFORM) from e


def report_catalog_error(error: CatalogError) -> None:
    """Print a catalog loading error."""
    print_error(f"Failed to load application catalog: {error}")
