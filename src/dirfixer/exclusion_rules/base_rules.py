from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirfixer.types import PathType


class BaseExclusionRules(ABC):
    """
    Interface of the rules deciding which entries of a walk are left untouched.

    The walker only calls exclude(); the command line feeds patterns in through
    load_rules() and add_rule(), in the order the options were given.

    Example:
        >>> from dirfixer.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('.git/')
        >>> git_rules.exclude('.git/')
        True
        >>> git_rules.exclude('src/main.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Check whether an entry is left out of the walk.

        Args:
            path (str): Path relative to the walk root, with forward slashes.
                Directory paths end with a slash.

        Returns:
            bool: True if the entry is excluded.
        """

    @abstractmethod
    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the rules read from one or more files.

        Raises:
            FileNotFoundError: If a rules file does not exist.
        """

    @abstractmethod
    def add_rule(self, rule: str) -> None:
        """Append a single rule."""
