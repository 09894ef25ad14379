"""Bootstrap command implementation.

Provisions the home layout, then checks the application catalog and
offers to install whatever is missing.
"""

import logging
from typing import Annotated

import typer

from winstrap.cli.display import (
    create_results_table,
    create_steps_table,
    print_results_summary,
    print_steps_summary,
)
from winstrap.cli.types import (
    EXIT_ABORTED,
    EXIT_CATALOG_ERROR,
    AppsFileOption,
    LogPathOption,
    ensure_windows,
    get_confirmer,
    get_installer,
    get_sources,
    report_catalog_error,
)
from winstrap.core.config import build_config
from winstrap.core.errors import CatalogError
from winstrap.core.installer import InstallChecker
from winstrap.core.provisioner import DirectoryProvisioner
from winstrap.core.runlog import RunLog
from winstrap.utils.formatting import console, print_info, print_success, print_warning

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Provision the home layout and install missing applications.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def bootstrap(
    ctx: typer.Context,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Answer yes to every prompt (non-interactive).",
        ),
    ] = False,
    log_path: LogPathOption = None,
    apps_file: AppsFileOption = None,
    skip_provision: Annotated[
        bool,
        typer.Option(
            "--no-provision",
            help="Skip the home layout step.",
        ),
    ] = False,
) -> None:
    """Bootstrap this machine.

    Steps:
      1. Create ~/.local, ~/.config, the local bin folder and their links
      2. Ask to continue
      3. For every catalog entry, check the registry and winget; offer to
         install anything neither reports

    Install attempts are logged with winget's exit status; installs are
    not verified afterwards.

    Examples:
        winstrap bootstrap                     # Interactive run
        winstrap bootstrap --yes               # Install everything missing
        winstrap bootstrap --apps my-apps.toml # Use another catalog
    """
    if ctx.invoked_subcommand is not None:
        return

    ensure_windows()

    try:
        config = build_config(apps_file=apps_file, log_path=log_path, assume_yes=yes)
    except CatalogError as e:
        report_catalog_error(e)
        raise typer.Exit(code=EXIT_CATALOG_ERROR) from e

    run_log = RunLog(config.log_path)
    confirmer = get_confirmer(config.assume_yes)
    _log(run_log, f"Bootstrap started ({len(config.apps)} application(s))")

    if not skip_provision:
        steps = DirectoryProvisioner(config.plan, run_log=run_log).provision()
        console.print(create_steps_table(steps))
        print_steps_summary(steps)

    if not confirmer("\nContinue with the application check?"):
        _log(run_log, "Bootstrap aborted by user")
        print_info("Aborted.")
        raise typer.Exit(code=EXIT_ABORTED)

    checker = InstallChecker(
        sources=get_sources(),
        installer=get_installer(),
        confirmer=confirmer,
        run_log=run_log,
    )
    results = checker.run(config.apps)

    console.print(create_results_table(results))
    print_results_summary(results)
    _log(run_log, "Bootstrap finished")
    print_success(f"Done. Log written to {run_log.path}")


def _log(run_log: RunLog, message: str) -> None:
    """Write a run-level log line; failures are reported, not raised."""
    try:
        run_log.write(message)
    except OSError as e:
        logger.warning("Failed to write run log %s: %s", run_log.path, e)
        print_warning(f"Could not write to log {run_log.path}: {e}")
