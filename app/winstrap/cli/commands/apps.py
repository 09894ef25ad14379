"""Apps command implementation.

Shows the application catalog and writes it out for editing.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from winstrap.cli.types import (
    EXIT_ABORTED,
    EXIT_CATALOG_ERROR,
    AppsFileOption,
    report_catalog_error,
)
from winstrap.core.catalog import default_catalog, resolve_catalog, save_catalog
from winstrap.core.errors import CatalogError
from winstrap.core.paths import get_catalog_path
from winstrap.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="View or export the application catalog.",
    no_args_is_help=True,
)


@app.command("list")
def list_apps(apps_file: AppsFileOption = None) -> None:
    """List the applications that bootstrap will check.

    Examples:
        winstrap apps list
        winstrap apps list --apps my-apps.toml
    """
    try:
        catalog = resolve_catalog(apps_file)
    except CatalogError as e:
        report_catalog_error(e)
        raise typer.Exit(code=EXIT_CATALOG_ERROR) from e

    table = Table(
        title="Application Catalog",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Application", no_wrap=True)
    table.add_column("Package Id", style="muted")

    for name, package_id in catalog.apps.items():
        table.add_row(name, package_id)

    console.print(table)
    console.print(f"\n[dim]{len(catalog)} application(s)[/]")


@app.command("export")
def export_apps(
    path: Annotated[
        Path | None,
        typer.Argument(
            help="Destination file (default: ~/.config/winstrap/apps.toml).",
            dir_okay=False,
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing file.",
        ),
    ] = False,
) -> None:
    """Write the built-in catalog to a TOML file for editing.

    Examples:
        winstrap apps export                  # ~/.config/winstrap/apps.toml
        winstrap apps export my-apps.toml
    """
    target = path or get_catalog_path()

    if target.exists() and not force:
        print_error(f"File already exists: {target}")
        print_info("Use --force to overwrite.")
        raise typer.Exit(code=EXIT_ABORTED)

    try:
        saved = save_catalog(default_catalog(), target)
    except CatalogError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_CATALOG_ERROR) from e

    print_success(f"Catalog written to {saved}")
