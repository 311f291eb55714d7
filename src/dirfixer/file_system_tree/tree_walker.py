"""Directory traversal with a configurable per-entry error policy.

This module separates the walk into two parts. ``iterate_entries`` produces one
``WalkEntry`` per filesystem entry below a root, carrying any traversal error for
that entry instead of raising it. ``fix_entries`` is the driver loop: it turns each
entry into an ``EntryResult`` via ``process_entry`` and decides, in one place,
whether to continue or abort. Because the driver accepts any iterable of entries,
the error policy can be exercised without touching the filesystem.
"""

import os
import posixpath
import stat
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from dirfixer.exceptions import DirFixerError, WalkEntryError, WalkError
from dirfixer.exclusion_rules.base_rules import BaseExclusionRules
from dirfixer.file_system_tree.error_action import ErrorAction
from dirfixer.file_system_tree.mode_setter import ModeSetter
from dirfixer.file_system_tree.path_validator import classify_path
from dirfixer.types import EntryType, PathType, WalkPhase


@dataclass(frozen=True)
class WalkEntry:
    """A filesystem entry produced by the traversal.

    Attributes:
        path: Path of the entry.
        entry_type: Type of the entry, or None if it could not be determined.
        error: Traversal error for this entry, if any.
    """

    path: Path
    entry_type: Optional[EntryType]
    error: Optional[OSError] = None


class EntryOutcome(Enum):
    """Outcome of processing a single entry."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    RECOVERABLE = "recoverable"
    FATAL = "fatal"


@dataclass(frozen=True)
class EntryResult:
    """The result of processing a single WalkEntry.

    Attributes:
        entry: The processed entry.
        outcome: What happened to the entry.
        executable: Whether a file entry was classified as executable.
        error: The wrapped error for RECOVERABLE and FATAL outcomes.
    """

    entry: WalkEntry
    outcome: EntryOutcome
    executable: bool = False
    error: Optional[WalkEntryError] = None


@dataclass
class FixSummary:
    """Counts accumulated over a run, plus the errors that were reported.

    Attributes:
        directories: Number of directories whose mode was set.
        files: Number of files whose mode was set (executables included).
        executables: Number of files classified as executable.
        skipped: Number of entries left untouched (FIFOs, sockets, devices, ...).
        errors: Recoverable errors, in the order they occurred.
    """

    directories: int = 0
    files: int = 0
    executables: int = 0
    skipped: int = 0
    errors: List[WalkEntryError] = field(default_factory=list)

    def record(self, result: EntryResult) -> None:
        """Update the counts with the result of one entry."""
        if result.outcome is EntryOutcome.SUCCESS:
            if result.entry.entry_type is EntryType.DIRECTORY:
                self.directories += 1
            else:
                self.files += 1
                if result.executable:
                    self.executables += 1
        elif result.outcome is EntryOutcome.SKIPPED:
            self.skipped += 1
        elif result.outcome is EntryOutcome.RECOVERABLE and result.error is not None:
            self.errors.append(result.error)


def iterate_entries(root: PathType, exclusion_rules: Optional[BaseExclusionRules] = None) -> Iterator[WalkEntry]:
    """Yield every entry below a directory, depth-first and in pre-order.

    The root is yielded first. Each directory is yielded before it is listed, so a
    consumer that changes the directory's mode on receipt does so before the listing
    happens. Children are visited in sorted name order. Symlinks to directories are
    not descended.

    Traversal errors never escape the generator for individual entries: a directory
    that cannot be listed is yielded a second time with its listing error, and a child
    that cannot be inspected is yielded with ``entry_type`` None and its error.

    Args:
        root: Directory to walk.
        exclusion_rules: Rules selecting entries to leave out. Paths are matched
            relative to the root, with a trailing slash for directories. Excluded
            directories are not descended, and excluded entries never produce errors.

    Yields:
        One WalkEntry per visited entry.

    Raises:
        WalkError: If the root cannot be inspected or is not a directory.
    """
    root_path = Path(root)
    try:
        root_info = os.stat(root_path)
    except OSError as e:
        raise WalkError(root_path, e) from e
    if not stat.S_ISDIR(root_info.st_mode):
        raise WalkError(root_path)

    # Stack of (entry, path relative to root); children are pushed in reverse so
    # that they pop in sorted order
    pending: List[Tuple[WalkEntry, str]] = [(WalkEntry(root_path, EntryType.DIRECTORY), "")]
    while pending:
        entry, relative = pending.pop()
        yield entry
        if entry.entry_type is not EntryType.DIRECTORY or entry.error is not None:
            continue

        try:
            with os.scandir(entry.path) as it:
                names = sorted(child.name for child in it)
        except OSError as e:
            yield WalkEntry(entry.path, EntryType.DIRECTORY, error=e)
            continue

        children: List[Tuple[WalkEntry, str]] = []
        for name in names:
            child = entry.path / name
            child_relative = posixpath.join(relative, name) if relative else name
            entry_type: Optional[EntryType] = None
            error: Optional[OSError] = None
            try:
                entry_type = classify_path(child)
            except OSError as e:
                error = e

            # Entries of unknown type are matched as non-directories
            match_path = child_relative + "/" if entry_type is EntryType.DIRECTORY else child_relative
            if exclusion_rules is not None and exclusion_rules.exclude(match_path):
                continue
            children.append((WalkEntry(child, entry_type, error=error), child_relative))

        pending.extend(reversed(children))


def process_entry(entry: WalkEntry, mode_setter: ModeSetter, error_action: ErrorAction) -> EntryResult:
    """Apply the matching handler to one entry and classify what happened.

    Args:
        entry: The entry to process.
        mode_setter: Applies the modes.
        error_action: Whether errors are recoverable (REPORT) or fatal (RAISE).

    Returns:
        The result for this entry. Errors are wrapped in WalkEntryError with the
        entry's path and the phase in which they occurred; they are returned, not
        raised.
    """
    failed = EntryOutcome.FATAL if error_action is ErrorAction.RAISE else EntryOutcome.RECOVERABLE

    if entry.error is not None:
        return EntryResult(entry, failed, error=WalkEntryError(entry.path, WalkPhase.ITERATE, entry.error))

    try:
        if entry.entry_type is EntryType.DIRECTORY:
            mode_setter.handle_directory(entry.path)
            return EntryResult(entry, EntryOutcome.SUCCESS)
        if entry.entry_type is EntryType.FILE:
            executable = mode_setter.handle_file(entry.path)
            return EntryResult(entry, EntryOutcome.SUCCESS, executable=executable)
    except DirFixerError as e:
        return EntryResult(entry, failed, error=WalkEntryError(entry.path, WalkPhase.HANDLE, e))

    return EntryResult(entry, EntryOutcome.SKIPPED)


def fix_entries(
    entries: Iterable[WalkEntry],
    mode_setter: ModeSetter,
    error_action: ErrorAction = ErrorAction.REPORT,
    on_error: Optional[Callable[[WalkEntryError], None]] = None,
) -> FixSummary:
    """Process entries in order, applying the error policy.

    Under REPORT, every error is recorded in the summary and passed to ``on_error``
    as soon as it occurs, and processing continues. Under RAISE, the first error
    is raised and no further entries are consumed.

    Args:
        entries: Entries to process, typically from iterate_entries().
        mode_setter: Applies the modes.
        error_action: The error policy.
        on_error: Called with each recoverable error.

    Returns:
        Counts and reported errors for the processed entries.

    Raises:
        WalkEntryError: Under RAISE, for the first failing entry.

    Example:
        >>> from pathlib import Path
        >>> setter = ModeSetter(detector=lambda path: False)
        >>> entries = [WalkEntry(Path("fifo"), EntryType.OTHER)]
        >>> fix_entries(entries, setter).skipped
        1
    """
    summary = FixSummary()
    for entry in entries:
        result = process_entry(entry, mode_setter, error_action)
        if result.outcome is EntryOutcome.FATAL and result.error is not None:
            raise result.error
        summary.record(result)
        if result.outcome is EntryOutcome.RECOVERABLE and result.error is not None and on_error is not None:
            on_error(result.error)
    return summary
