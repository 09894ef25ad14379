"""Check command implementation.

Reports which catalog applications are installed, without installing.
"""

import typer

from winstrap.cli.display import create_results_table, print_results_summary
from winstrap.cli.types import (
    EXIT_CATALOG_ERROR,
    AppsFileOption,
    LogPathOption,
    ensure_windows,
    get_installer,
    get_sources,
    report_catalog_error,
)
from winstrap.core.config import build_config
from winstrap.core.confirm import always
from winstrap.core.errors import CatalogError
from winstrap.core.installer import InstallChecker
from winstrap.core.runlog import RunLog
from winstrap.utils.formatting import console

app = typer.Typer(
    help="Show which applications are installed.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def check(
    ctx: typer.Context,
    apps_file: AppsFileOption = None,
    log_path: LogPathOption = None,
) -> None:
    """Check the application catalog against this machine.

    An application counts as installed when either the uninstall registry
    or `winget list` mentions its name. Nothing is installed.

    Examples:
        winstrap check
        winstrap check --apps my-apps.toml
    """
    if ctx.invoked_subcommand is not None:
        return

    ensure_windows()

    try:
        config = build_config(apps_file=apps_file, log_path=log_path)
    except CatalogError as e:
        report_catalog_error(e)
        raise typer.Exit(code=EXIT_CATALOG_ERROR) from e

    checker = InstallChecker(
        sources=get_sources(),
        installer=get_installer(),
        confirmer=always(False),
        run_log=RunLog(config.log_path),
    )
    results = checker.run(config.apps, offer_install=False)

    console.print(create_results_table(results))
    print_results_summary(results)
