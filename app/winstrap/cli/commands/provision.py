"""Provision command implementation.

Creates the Linux-like home layout without touching applications.
"""

import typer

from winstrap.cli.display import create_steps_table, print_steps_summary
from winstrap.cli.types import LogPathOption, ensure_windows
from winstrap.core.paths import build_provision_plan, get_log_path
from winstrap.core.provisioner import DirectoryProvisioner
from winstrap.core.runlog import RunLog
from winstrap.utils.formatting import console

app = typer.Typer(
    help="Create ~/.local, ~/.config and their links.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def provision(
    ctx: typer.Context,
    log_path: LogPathOption = None,
) -> None:
    """Provision the home layout.

    Safe to run repeatedly: existing directories and links are kept, and
    anything in the way of a link is reported but never replaced.

    Examples:
        winstrap provision
    """
    if ctx.invoked_subcommand is not None:
        return

    ensure_windows()

    run_log = RunLog(log_path or get_log_path())
    steps = DirectoryProvisioner(build_provision_plan(), run_log=run_log).provision()

    console.print(create_steps_table(steps))
    print_steps_summary(steps)
