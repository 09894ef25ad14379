"""Log command for viewing the run log."""

from typing import Annotated

import typer

from winstrap.cli.types import LogPathOption
from winstrap.core.paths import get_log_path
from winstrap.core.runlog import RunLog
from winstrap.utils.formatting import console, print_info

app = typer.Typer(
    name="log",
    help="Show recent run log lines.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_log(
    ctx: typer.Context,
    limit: Annotated[
        int,
        typer.Option(
            "--limit",
            "-n",
            min=1,
            help="Number of lines to show.",
        ),
    ] = 20,
    log_path: LogPathOption = None,
) -> None:
    """Show the last lines of the run log, oldest first.

    Examples:
        winstrap log
        winstrap log -n 100
    """
    if ctx.invoked_subcommand is not None:
        return

    run_log = RunLog(log_path or get_log_path())
    lines = run_log.read_lines(limit=limit)

    if not lines:
        print_info(f"No log entries in {run_log.path}")
        return

    for line in lines:
        console.print(line, markup=False, highlight=False)
