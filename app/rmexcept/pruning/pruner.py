"""Selective directory pruner.

Deletes every non-hidden direct child of a directory that is not in
the keep set, with dry-run support and per-entry failure isolation.
Entries that vanish between listing and deletion count as removed.
"""

import logging
import shutil
from collections.abc import Callable, Set
from pathlib import Path

from rmexcept.pruning.enumerator import list_children
from rmexcept.pruning.models import (
    DirectoryEntry,
    EntryType,
    PruneActionResult,
    PruneOutcome,
    PruneReport,
)
from rmexcept.utils.formatting import printable

logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


class Pruner:
    """Removes the entries of a directory that are not kept.

    Attributes:
        _verbose: If True, report each entry before acting on it.
        _dry_run: If True, report what would be deleted without deleting.
        _reporter: Receives human-readable progress messages.
    """

    def __init__(
        self,
        *,
        verbose: bool = False,
        dry_run: bool = False,
        reporter: Reporter | None = None,
    ) -> None:
        """Initialize the Pruner.

        Args:
            verbose: If True, report each deletion before performing it.
            dry_run: If True, never modify the filesystem.
            reporter: Callable receiving progress messages. Defaults to print.
        """
        self._verbose = verbose
        self._dry_run = dry_run
        self._reporter: Reporter = reporter or print

    @property
    def dry_run(self) -> bool:
        """Whether this pruner only simulates deletions."""
        return self._dry_run

    def prune(self, target_dir: Path, keep: Set[Path]) -> PruneReport:
        """Delete every non-hidden child of ``target_dir`` not in ``keep``.

        Hidden entries are never scheduled. Failures are isolated per
        entry; the loop always runs to the end.

        Args:
            target_dir: Absolute directory to prune.
            keep: Absolute paths of direct children to leave in place.

        Returns:
            PruneReport with one result per scheduled entry.

        Raises:
            ValueError: If ``target_dir`` or any ``keep`` entry is not absolute.
            DirectoryUnreadableError: If ``target_dir`` cannot be listed.
        """
        if not target_dir.is_absolute():
            msg = f"Target directory must be absolute, got {target_dir}"
            raise ValueError(msg)
        relative = [str(p) for p in keep if not p.is_absolute()]
        if relative:
            msg = f"Entries to keep must be absolute, got {', '.join(relative)}"
            raise ValueError(msg)

        listing = list_children(target_dir, skip_hidden=True)
        report = PruneReport(
            target_dir=listing.directory,
            dry_run=self._dry_run,
            entry_errors=list(listing.errors),
        )

        for entry in listing.entries:
            if entry.path in keep:
                report.kept.append(entry.path)
                continue
            report.results.append(self._process(entry))

        logger.debug(
            "Pruned %s: %d scheduled, %d kept, %d failed",
            listing.directory,
            len(report.results),
            len(report.kept),
            len(report.failed),
        )
        return report

    def _process(self, entry: DirectoryEntry) -> PruneActionResult:
        """Report and delete (or simulate deleting) one entry.

        Unsupported entries are skipped the same way in both modes, so a
        dry-run never lists an entry that a real run would leave behind.
        """
        shown = printable(str(entry.path))

        if entry.entry_type == EntryType.OTHER:
            logger.warning("Neither file nor directory, skipping: %s", shown)
            return PruneActionResult(
                path=entry.path,
                entry_type=entry.entry_type,
                outcome=PruneOutcome.UNSUPPORTED,
                error=f"Neither file nor directory: {shown}",
            )

        if self._dry_run:
            self._reporter(f'Would delete entry "{shown}"')
            logger.info("Dry-run: would delete %s", shown)
            return PruneActionResult(
                path=entry.path,
                entry_type=entry.entry_type,
                outcome=PruneOutcome.WOULD_DELETE,
            )

        if self._verbose:
            self._reporter(f'Deleting entry "{shown}"')

        return self._delete_single(entry)

    def _delete_single(self, entry: DirectoryEntry) -> PruneActionResult:
        """Delete a file or directory entry.

        - Directories: shutil.rmtree
        - Files and live symlinks: Path.unlink

        Args:
            entry: Entry to delete.

        Returns:
            PruneActionResult describing the outcome.
        """
        path = entry.path

        try:
            if entry.entry_type == EntryType.DIRECTORY:
                shutil.rmtree(path, onexc=_ignore_vanished)
            else:
                path.unlink()
        except FileNotFoundError:
            logger.debug("Entry already gone: %s", path)
            return PruneActionResult(
                path=path,
                entry_type=entry.entry_type,
                outcome=PruneOutcome.VANISHED,
            )
        except OSError as e:
            return self._failure(entry, e)

        logger.debug("Deleted %s", path)
        return PruneActionResult(
            path=path,
            entry_type=entry.entry_type,
            outcome=PruneOutcome.DELETED,
        )

    @staticmethod
    def _failure(entry: DirectoryEntry, error: OSError) -> PruneActionResult:
        logger.warning("Failed to delete %s: %s", printable(str(entry.path)), error)
        return PruneActionResult(
            path=entry.path,
            entry_type=entry.entry_type,
            outcome=PruneOutcome.FAILED,
            error=str(error),
        )


def _ignore_vanished(_func: Callable[..., object], path: str, exc: BaseException) -> None:
    """rmtree error handler that tolerates entries removed concurrently."""
    if isinstance(exc, FileNotFoundError):
        logger.debug("Vanished during removal: %s", path)
        return
    raise exc


def prune(
    target_dir: Path,
    keep: Set[Path],
    verbose: bool = False,
    dry_run: bool = False,
) -> PruneReport:
    """Prune ``target_dir`` down to the entries in ``keep``.

    Convenience wrapper around :class:`Pruner` that prints progress
    messages to stdout.
    """
    return Pruner(verbose=verbose, dry_run=dry_run).prune(target_dir, keep)
