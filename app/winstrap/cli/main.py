"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from winstrap import __version__
from winstrap.cli.commands import apps, bootstrap, check, log, provision
from winstrap.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="winstrap",
    help="Bootstrap a Windows machine for cross-platform dotfiles.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"winstrap version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Route diagnostic logging to stderr through Rich.

    Args:
        verbose: Show DEBUG messages.
        quiet: Show only errors.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    root = logging.getLogger("winstrap")
    root.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=err_console, show_path=verbose))


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """winstrap - Bootstrap a Windows machine for cross-platform dotfiles.

    Creates a Linux-like home layout (~/.local, ~/.config) linked into
    Windows locations, and makes sure your usual applications are installed.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose, quiet)


# Register commands
app.add_typer(bootstrap.app, name="bootstrap")
app.add_typer(provision.app, name="provision")
app.add_typer(check.app, name="check")
app.add_typer(apps.app, name="apps")
app.add_typer(log.app, name="log")


if __name__ == "__main__":
    app()
