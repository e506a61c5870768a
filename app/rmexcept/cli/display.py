"""Rich display functions for pruning results.

Provides the results table and the summary line printed after a
pruning pass.
"""

from rich.markup import escape
from rich.table import Table

from rmexcept.pruning.models import PruneOutcome, PruneReport
from rmexcept.utils.formatting import (
    console,
    print_info,
    print_success,
    print_warning,
    printable,
)

_OUTCOME_LABELS: dict[PruneOutcome, str] = {
    PruneOutcome.DELETED: "[deleted]deleted[/]",
    PruneOutcome.WOULD_DELETE: "[info]dry-run[/]",
    PruneOutcome.VANISHED: "[muted]vanished[/]",
    PruneOutcome.UNSUPPORTED: "[skipped]skipped[/]",
    PruneOutcome.FAILED: "[error]failed[/]",
}


def create_results_table(report: PruneReport) -> Table:
    """Create a Rich table displaying the outcome of each entry.

    Kept entries are listed first, followed by one row per entry that
    was scheduled for deletion.

    Args:
        report: Report of the pruning pass.

    Returns:
        Rich Table configured for results display.
    """
    title = "Pruning Results (Dry Run)" if report.dry_run else "Pruning Results"

    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=10, justify="center")
    table.add_column("Type", width=10)
    table.add_column("Entry", no_wrap=True)
    table.add_column("Details", style="muted")

    for path in report.kept:
        table.add_row("[kept]kept[/]", "", escape(printable(path.name)), "")

    for result in report.results:
        if result.outcome == PruneOutcome.WOULD_DELETE:
            detail = "Would delete"
        else:
            detail = result.error or ""
        table.add_row(
            _OUTCOME_LABELS[result.outcome],
            result.entry_type.value,
            escape(printable(result.path.name)),
            escape(printable(detail)),
        )

    return table


def print_report_summary(report: PruneReport) -> None:
    """Print a one-line summary of a pruning pass.

    Args:
        report: Report of the pruning pass.
    """
    removed = len(report.deleted)
    kept = len(report.kept)
    failed = len(report.failed) + len(report.entry_errors)
    skipped = len(report.unsupported)

    if report.dry_run:
        print_info(f"Dry-run: {removed} entry(ies) would be deleted, {kept} kept.")
        return

    if failed:
        print_warning(f"{removed} deleted, {failed} failed, {skipped} skipped, {kept} kept")
    elif skipped:
        print_warning(f"{removed} deleted, {skipped} skipped, {kept} kept")
    else:
        print_success(f"{removed} entry(ies) deleted, {kept} kept.")


def print_results(report: PruneReport) -> None:
    """Print the results table followed by the summary line."""
    console.print(create_results_table(report))
    print_report_summary(report)
