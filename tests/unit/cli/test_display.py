"""Unit tests for cli/display.py.

Tests for the pruning results table and summary line.
"""

import io
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console
from rmexcept.cli.display import create_results_table, print_report_summary
from rmexcept.core.theme import get_theme
from rmexcept.pruning.models import (
    EntryError,
    EntryType,
    PruneActionResult,
    PruneOutcome,
    PruneReport,
)

WORK = Path("/work")


def _render(renderable: object) -> str:
    """Render a Rich object to plain text."""
    buffer = io.StringIO()
    console = Console(file=buffer, theme=get_theme(), width=120, color_system=None)
    console.print(renderable)
    return buffer.getvalue()


@pytest.fixture
def mixed_report() -> PruneReport:
    """Report with one of every outcome except dry-run."""
    return PruneReport(
        target_dir=WORK,
        results=[
            PruneActionResult(WORK / "old.log", EntryType.FILE, PruneOutcome.DELETED),
            PruneActionResult(WORK / "build", EntryType.DIRECTORY, PruneOutcome.VANISHED),
            PruneActionResult(
                WORK / "dead", EntryType.OTHER, PruneOutcome.UNSUPPORTED, "Neither file"
            ),
            PruneActionResult(
                WORK / "locked", EntryType.DIRECTORY, PruneOutcome.FAILED, "Permission denied"
            ),
        ],
        kept=[WORK / "notes.txt"],
    )


class TestCreateResultsTable:
    """Tests for create_results_table."""

    def test_rows_and_title(self, mixed_report: PruneReport) -> None:
        """One row per kept entry plus one per result."""
        table = create_results_table(mixed_report)

        assert table.title == "Pruning Results"
        assert table.row_count == 5

    def test_rendered_content(self, mixed_report: PruneReport) -> None:
        """Statuses, names and errors appear in the table."""
        output = _render(create_results_table(mixed_report))

        for text in ("kept", "deleted", "vanished", "skipped", "failed"):
            assert text in output
        assert "notes.txt" in output
        assert "Permission denied" in output

    def test_dry_run_title(self) -> None:
        """Dry-run reports get a distinct title and detail."""
        report = PruneReport(
            target_dir=WORK,
            dry_run=True,
            results=[PruneActionResult(WORK / "a", EntryType.FILE, PruneOutcome.WOULD_DELETE)],
        )

        table = create_results_table(report)
        output = _render(table)

        assert table.title == "Pruning Results (Dry Run)"
        assert "Would delete" in output

    def test_markup_in_names_is_escaped(self) -> None:
        """Entry names that look like Rich markup are shown literally."""
        report = PruneReport(
            target_dir=WORK,
            results=[PruneActionResult(WORK / "[bold]x", EntryType.FILE, PruneOutcome.DELETED)],
        )

        assert "[bold]x" in _render(create_results_table(report))


class TestPrintReportSummary:
    """Tests for print_report_summary."""

    def test_all_deleted(self) -> None:
        """A clean run prints a success line."""
        report = PruneReport(
            target_dir=WORK,
            results=[PruneActionResult(WORK / "a", EntryType.FILE, PruneOutcome.DELETED)],
        )

        with patch("rmexcept.cli.display.print_success") as mock_success:
            print_report_summary(report)

        mock_success.assert_called_once_with("1 entry(ies) deleted, 0 kept.")

    def test_failures(self, mixed_report: PruneReport) -> None:
        """Failures and skips are counted in a warning."""
        mixed_report.entry_errors.append(EntryError(WORK / "x", "Permission denied"))

        with patch("rmexcept.cli.display.print_warning") as mock_warning:
            print_report_summary(mixed_report)

        mock_warning.assert_called_once_with("2 deleted, 2 failed, 1 skipped, 1 kept")

    def test_skipped_only(self) -> None:
        """Skipped entries alone produce a warning."""
        report = PruneReport(
            target_dir=WORK,
            results=[PruneActionResult(WORK / "p", EntryType.OTHER, PruneOutcome.UNSUPPORTED)],
        )

        with patch("rmexcept.cli.display.print_warning") as mock_warning:
            print_report_summary(report)

        mock_warning.assert_called_once_with("0 deleted, 1 skipped, 0 kept")

    def test_dry_run(self) -> None:
        """Dry-run summary says what would happen."""
        report = PruneReport(
            target_dir=WORK,
            dry_run=True,
            results=[PruneActionResult(WORK / "a", EntryType.FILE, PruneOutcome.WOULD_DELETE)],
            kept=[WORK / "b"],
        )

        with patch("rmexcept.cli.display.print_info") as mock_info:
            print_report_summary(report)

        mock_info.assert_called_once_with("Dry-run: 1 entry(ies) would be deleted, 1 kept.")
