"""Shared Rich display functions for provisioning steps and check results.

Provides table builders and summary printers used by the bootstrap,
provision, and check commands.
"""

from rich.table import Table

from winstrap.models.app import AppCheckResult, CheckOutcome
from winstrap.models.provision import ProvisionStep, StepStatus
from winstrap.utils.formatting import console, print_success, print_warning

_STEP_STYLES: dict[StepStatus, str] = {
    StepStatus.CREATED: "[created]created[/created]",
    StepStatus.HIDDEN: "[created]hidden[/created]",
    StepStatus.EXISTS: "[muted]exists[/muted]",
    StepStatus.CONFLICT: "[warning]conflict[/warning]",
    StepStatus.FAILED: "[error]failed[/error]",
}

_OUTCOME_STYLES: dict[CheckOutcome, str] = {
    CheckOutcome.PRESENT: "[present]present[/present]",
    CheckOutcome.MISSING: "[absent]missing[/absent]",
    CheckOutcome.SKIPPED: "[skipped]skipped[/skipped]",
    CheckOutcome.INSTALL_ATTEMPTED: "[info]install attempted[/info]",
}


def create_steps_table(steps: list[ProvisionStep]) -> Table:
    """Create a Rich table displaying provisioning steps.

    Args:
        steps: Steps returned by the provisioner.

    Returns:
        Rich Table configured for step display.
    """
    table = Table(
        title="Home Layout",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=9, justify="center")
    table.add_column("Kind", width=16)
    table.add_column("Path", no_wrap=True)
    table.add_column("Detail")

    for step in steps:
        if step.target is not None:
            detail = f"-> {step.target}"
            if step.detail:
                detail = f"{detail} ({step.detail})"
        else:
            detail = step.detail or ""

        table.add_row(
            _STEP_STYLES[step.status],
            step.kind.value.replace("_", " "),
            str(step.path),
            f"[muted]{detail}[/muted]",
        )

    return table


def create_results_table(results: list[AppCheckResult]) -> Table:
    """Create a Rich table displaying application check results.

    Args:
        results: Results returned by the install checker.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Applications",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=17, justify="center")
    table.add_column("Application", no_wrap=True)
    table.add_column("Package Id", style="muted")
    table.add_column("Detail")

    for result in results:
        if result.matched_sources:
            detail = f"found by {', '.join(result.matched_sources)}"
        elif result.install is not None and result.install.returncode is None:
            detail = result.install.error or "not started"
        elif result.install is not None:
            detail = f"exit status {result.install.returncode} (not verified)"
        else:
            detail = ""

        table.add_row(
            _OUTCOME_STYLES[result.outcome],
            result.app.name,
            result.app.package_id,
            f"[muted]{detail}[/muted]",
        )

    return table


def print_steps_summary(steps: list[ProvisionStep]) -> None:
    """Print a one-line summary of provisioning steps.

    Conflicts and failures are repeated as warnings so they are not lost
    in the table.

    Args:
        steps: Steps returned by the provisioner.
    """
    for step in steps:
        if step.status == StepStatus.CONFLICT:
            print_warning(f"{step.path} left untouched: {step.detail}")
        elif step.status == StepStatus.FAILED:
            print_warning(f"Could not provision {step.path}: {step.detail}")

    changed = sum(1 for s in steps if s.changed)
    if changed == 0 and all(s.status == StepStatus.EXISTS for s in steps):
        print_success("Home layout already provisioned. Nothing to do.")
    else:
        console.print(f"\n[dim]{changed} change(s) made to the home layout.[/]")


def print_results_summary(results: list[AppCheckResult]) -> None:
    """Print counts of each outcome.

    Args:
        results: Results returned by the install checker.
    """
    counts: dict[CheckOutcome, int] = {}
    for result in results:
        counts[result.outcome] = counts.get(result.outcome, 0) + 1

    parts: list[str] = []
    if counts.get(CheckOutcome.PRESENT):
        parts.append(f"[present]{counts[CheckOutcome.PRESENT]} present[/present]")
    if counts.get(CheckOutcome.MISSING):
        parts.append(f"[absent]{counts[CheckOutcome.MISSING]} missing[/absent]")
    if counts.get(CheckOutcome.INSTALL_ATTEMPTED):
        parts.append(f"[info]{counts[CheckOutcome.INSTALL_ATTEMPTED]} install(s) attempted[/info]")
    if counts.get(CheckOutcome.SKIPPED):
        parts.append(f"[skipped]{counts[CheckOutcome.SKIPPED]} skipped[/skipped]")

    if parts:
        console.print(f"\nSummary: {', '.join(parts)}")
