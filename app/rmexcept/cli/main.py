"""Main CLI application entry point.

Defines the Typer application: remove every entry in the current
working directory except the ones given on the command line.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from rmexcept import __version__
from rmexcept.cli.display import print_results
from rmexcept.pruning.errors import DirectoryUnreadableError, PruneError
from rmexcept.pruning.pruner import Pruner
from rmexcept.pruning.resolver import resolve_keep_set
from rmexcept.utils.formatting import print_entry, print_error, print_warning

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="rm-except",
    help="Remove all entries in the current working directory except the given ones.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rm-except version {__version__}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _current_directory() -> Path:
    """Return the canonical working directory, which is the pruning target."""
    try:
        return Path.cwd().resolve(strict=True)
    except OSError as e:
        raise DirectoryUnreadableError(".", e.strerror or str(e)) from e


@app.command()
def main(
    keep: Annotated[
        list[str] | None,
        typer.Argument(
            help="The files or folders not to delete.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print every entry before deleting it."),
    ] = False,
    dry: Annotated[
        bool,
        typer.Option("--dry", "-d", help="Show what would be deleted without deleting."),
    ] = False,
    summary: Annotated[
        bool,
        typer.Option("--summary", "-s", help="Print a results table when done."),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Log debug information to stderr."),
    ] = False,
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
) -> None:
    """Remove all entries in the current working directory except KEEP.

    Hidden entries (names starting with a dot) are never deleted. Every
    entry to keep must exist and sit directly in the working directory;
    otherwise nothing is deleted.

    Examples:
        rm-except notes.txt src         # Keep two entries, delete the rest
        rm-except --dry -v notes.txt    # Preview what would be deleted
    """
    _configure_logging(debug)

    # Validate everything before touching the filesystem
    try:
        target_dir = _current_directory()
        keep_set = resolve_keep_set(keep or [], target_dir)
    except PruneError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    logger.debug("Pruning %s, keeping %d entries", target_dir, len(keep_set))
    pruner = Pruner(verbose=verbose, dry_run=dry, reporter=print_entry)

    try:
        report = pruner.prune(target_dir, keep_set)
    except PruneError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    for entry_error in report.entry_errors:
        print_warning(f"Cannot inspect {entry_error.path}: {entry_error.reason}")

    for result in report.unsupported:
        print_warning(f"Skipped {result.path}: neither file nor directory")

    for result in report.failed:
        print_error(f"Failed to delete {result.path}: {result.error}")

    if summary:
        print_results(report)

    # Exit with error if any deletion failed
    if report.has_failures:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
