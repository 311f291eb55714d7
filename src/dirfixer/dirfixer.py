"""Permission normalization of a single target path.

This module provides the DirFixer class, which combines path validation, the
directory walk and mode application into one operation on a file or directory.
"""

from pathlib import Path
from typing import Callable, Optional, Union

from dirfixer.exceptions import PathNotFoundError, PathValidationError, WalkEntryError
from dirfixer.exclusion_rules.base_rules import BaseExclusionRules
from dirfixer.file_system_tree.error_action import ErrorAction
from dirfixer.file_system_tree.mode_setter import ModeSetter
from dirfixer.file_system_tree.path_validator import PathStatus, classify_path, validate_path
from dirfixer.file_system_tree.tree_walker import FixSummary, WalkEntry, fix_entries, iterate_entries
from dirfixer.modes import DEFAULT_MODES, ModeSet
from dirfixer.types import PathType, WalkPhase


class DirFixer:
    """Resets the permission bits of a file or of a whole directory tree.

    Directories receive the directory mode of the configured ModeSet; files receive
    the executable mode when they start with a shebang or the ELF magic, and the
    file mode otherwise. Existing bits are never consulted, so running twice gives
    the same result as running once.

    Error handling:
        Per-entry errors during a directory walk are handled according to
        ``error_action``:
        - REPORT (default): the error is passed to ``on_error`` and collected in the
          returned summary, and the walk continues
        - RAISE: the first error is raised as WalkEntryError and ends the walk

    Attributes:
        path (Path): The path to fix.
        error_action (ErrorAction): The per-entry error policy.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for leaving entries out.

    Example:
        >>> fixer = DirFixer("project", error_action="raise")  # doctest: +SKIP
        >>> summary = fixer.fix()  # doctest: +SKIP
        >>> summary.directories, summary.files, summary.executables  # doctest: +SKIP
        (3, 12, 2)
    """

    def __init__(
        self,
        path: PathType,
        *,
        modes: ModeSet = DEFAULT_MODES,
        error_action: Union[str, ErrorAction] = ErrorAction.REPORT,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        on_error: Optional[Callable[[WalkEntryError], None]] = None,
    ):
        """Initialize the fixer.

        Args:
            path: File or directory to fix. Can be any path-like object.
            modes: The modes to apply. Defaults to DEFAULT_MODES.
            error_action: How to handle per-entry errors during a walk. Can be either
                "report" or "raise", or an ErrorAction enum value.
            exclusion_rules: Optional rules selecting entries to leave untouched.
            on_error: Called with each per-entry error reported during a walk.

        Raises:
            ValueError: If error_action is not a valid action.
        """
        self.path = Path(path)

        if isinstance(error_action, str):
            try:
                error_action = ErrorAction(error_action.lower())
            except ValueError:
                raise ValueError(f"Invalid error_action: {error_action}. Must be one of: 'report', 'raise'")

        self.error_action = error_action
        self.exclusion_rules = exclusion_rules
        self._on_error = on_error
        self._mode_setter = ModeSetter(modes)

    @property
    def modes(self) -> ModeSet:
        """The modes applied by this fixer."""
        return self._mode_setter.modes

    def validate(self) -> PathStatus:
        """Check whether the path exists and whether it is a directory.

        Raises:
            PathValidationError: If the path cannot be inspected for a reason other
                than not existing.
        """
        try:
            return validate_path(self.path)
        except OSError as e:
            raise PathValidationError(self.path, e) from e

    def fix(self) -> FixSummary:
        """Validate the path and fix it as a single file or as a directory tree.

        Returns:
            Counts of the entries handled, and the errors reported during a walk.

        Raises:
            PathNotFoundError: If the path does not exist.
            PathValidationError: If the path cannot be inspected.
            WalkEntryError: If a single file cannot be fixed, or on the first
                per-entry error of a walk under RAISE.
            WalkError: If the walk cannot start.
        """
        status = self.validate()
        if status is PathStatus.MISSING:
            raise PathNotFoundError(self.path)
        if status is PathStatus.DIRECTORY:
            return self.fix_tree()
        return self.fix_file()

    def fix_file(self) -> FixSummary:
        """Fix the path as a single file.

        Errors always propagate, whatever the configured error action. Paths that
        are neither regular files nor symlinks to one (FIFOs, devices, ...) are
        skipped.

        Raises:
            WalkEntryError: If the file cannot be inspected, probed or changed.
        """
        try:
            entry = WalkEntry(self.path, classify_path(self.path))
        except OSError as e:
            raise WalkEntryError(self.path, WalkPhase.HANDLE, e) from e
        return fix_entries([entry], self._mode_setter, ErrorAction.RAISE)

    def fix_tree(self) -> FixSummary:
        """Fix the path as a directory tree, including the directory itself.

        Raises:
            WalkError: If the walk cannot start.
            WalkEntryError: On the first per-entry error, under RAISE.
        """
        entries = iterate_entries(self.path, self.exclusion_rules)
        return fix_entries(entries, self._mode_setter, self.error_action, self._on_error)
