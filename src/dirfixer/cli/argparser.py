"""Command-line argument parsing for dirfixer.

This module defines the command-line interface for dirfixer,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union

from dirfixer.exclusion_rules.base_rules import BaseExclusionRules


class ExclusionRulesAction(argparse.Action):
    """Action recording -e/--exclude and -i/--ignore options in command-line order.

    Each occurrence is appended to ``namespace.exclusions`` as a ``(dest, value)``
    pair, so files and patterns can later be applied in exactly the order they were
    given. Nothing is read while parsing; see apply_exclusions().
    """

    def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        if values is None:
            return

        if getattr(namespace, "exclusions", None) is None:
            namespace.exclusions = []
        namespace.exclusions.append((self.dest, values))

        # Keep the raw values on the namespace as well
        if getattr(namespace, self.dest, None) is None:
            setattr(namespace, self.dest, [])
        getattr(namespace, self.dest).append(values)


def apply_exclusions(exclusion_rules: BaseExclusionRules, exclusions: Optional[List[Tuple[str, Any]]]) -> None:
    """Load recorded exclusion options into a rules object, in order.

    Args:
        exclusion_rules: The rules object to update.
        exclusions: ``(dest, value)`` pairs collected by ExclusionRulesAction, where
            dest is "exclude" for rule files and "ignore" for single patterns.

    Raises:
        FileNotFoundError: If a rules file does not exist.
    """
    for kind, value in exclusions or []:
        if kind == "exclude":
            exclusion_rules.load_rules(value)
        else:
            exclusion_rules.add_rule(str(value))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirfixer's options.
    """
    description = """
    dirfixer: A utility for resetting the permissions of a directory tree.

    Every directory below PATH (and PATH itself) gets mode 0750. Every file gets
    mode 0750 if it is executable and 0640 otherwise. A file is considered
    executable when it starts with a shebang (#!) or with the ELF magic bytes.
    Existing permission bits, including setuid, setgid and sticky bits, are
    replaced rather than merged.

    If PATH is a file, only that file is changed.
    """

    epilog = """
    Examples:
      # Fix a directory tree, reporting errors and carrying on
      dirfixer /path/to/project

      # Stop at the first error
      dirfixer -f /path/to/project

      # Fix a single file
      dirfixer /path/to/script.sh

      # Leave the Git metadata and anything matched by .gitignore alone
      dirfixer -i ".git/" -e /path/to/project/.gitignore /path/to/project

      # Print a summary of what was changed
      dirfixer -s /path/to/project

      # Display version information and exit
      dirfixer -V

    Exit codes:
      0  success (errors reported for individual entries do not change this)
      1  PATH does not exist
      2  any other failure
    """

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="The file or directory to fix.",
    )
    parser.add_argument(
        "-f",
        "--fail-early",
        action="store_true",
        help="Stop iterating over files and directories as soon as an error is encountered.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Print the program version and exit.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionRulesAction,
        help=(
            "Path to a file of gitignore-style patterns (e.g. .gitignore) selecting files and "
            "directories to leave untouched (can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionRulesAction,
        help=(
            "Gitignore-style pattern selecting files and directories to leave untouched. Patterns "
            "are matched relative to PATH; directory patterns end with a slash (build/). Can be "
            "specified multiple times, and patterns are processed in the order they appear, mixed "
            "with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print a summary of the directories and files handled.",
    )
    parser.set_defaults(exclusions=None)

    return parser


def validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs validation argparse cannot express: the path is optional for
    --version but required otherwise. Failures exit through parser.error(), with
    the usage message and exit code 2.

    Args:
        parser: The parser that produced args.
        args: Parsed command-line arguments.
    """
    if not args.path:
        parser.error("no fix path specified")
