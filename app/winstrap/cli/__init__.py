"""CLI package for winstrap.

This package contains the Typer application and all subcommands.
"""

from winstrap.cli.main import app

__all__ = ["app"]
