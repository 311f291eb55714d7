"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dirfixer.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Paths are matched with the pathspec library the same way Git matches them:
    basic globs, directory-only patterns ending in ``/``, negations starting with
    ``!``, ``**`` and comment lines are all supported. Patterns loaded from files and
    patterns added directly are kept in the order they were added, so later patterns
    can override earlier ones.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("node_modules/")
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("web/node_modules/")
        True
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("app.log"), rules.exclude("keep.log")
        (True, False)

    Note:
        Paths given to exclude() must use forward slashes, even on Windows.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._patterns: List[GitWildMatchPattern] = []
        self.spec = PathSpec(self._patterns)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path matches the loaded patterns.

        Args:
            path: Path relative to the walk root. Directories end with a slash.

        Returns:
            bool: True if the last matching pattern is not a negation.
        """
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more .gitignore-style files.

        Args:
            rules_files: Path or sequence of paths to pattern files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._extend(PathSpec.from_lines(GitWildMatchPattern, lines).patterns)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern (e.g. "*.pyc", "build/", "!keep.txt").

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("build/")
            >>> rules.exclude("build/")
            True
            >>> rules.exclude("build")
            False
        """
        self._extend([GitWildMatchPattern(rule)])

    def _extend(self, patterns: Sequence[GitWildMatchPattern]) -> None:
        self._patterns.extend(patterns)
        self.spec = PathSpec(self._patterns)
