"""CLI commands for winstrap.

This package contains all subcommand implementations.
"""

from winstrap.cli.commands import apps, bootstrap, check, log, provision

__all__ = ["apps", "bootstrap", "check", "log", "provision"]
