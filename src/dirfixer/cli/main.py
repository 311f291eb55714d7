"""Command-line interface for dirfixer.

This module provides the command-line interface for dirfixer, which resets the
permission bits of a file or directory tree. It handles argument parsing, error
reporting and exit codes.

Error Reporting:
    All messages are written to stderr, prefixed with the program name. Errors for
    individual entries of a walk are reported as they occur and do not change the
    exit code, unless --fail-early is given, in which case the first one ends the run.

Exit Codes:
    0: Successful completion
    1: Path does not exist
    2: Any other failure (usage error, path validation, fail-early abort, ...)
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Fix a directory, stopping at the first error
    $ dirfixer -f /path/to/dir

    # Display version information
    $ dirfixer --version
"""

import sys
from typing import NoReturn

from dirfixer import __version__
from dirfixer.cli.argparser import apply_exclusions, create_parser, validate_args
from dirfixer.dirfixer import DirFixer
from dirfixer.exceptions import DirFixerError, PathNotFoundError, PathValidationError, WalkEntryError
from dirfixer.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirfixer.file_system_tree.error_action import ErrorAction
from dirfixer.file_system_tree.path_validator import PathStatus
from dirfixer.file_system_tree.tree_walker import FixSummary


def format_summary(summary: FixSummary) -> str:
    """Format the counts of a run into a human-readable string.

    Args:
        summary: The summary returned by the run.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    result = [
        f"Directories: {summary.directories}",
        f"Files: {summary.files}",
        f"Executables: {summary.executables}",
        f"Skipped: {summary.skipped}",
        f"Errors: {len(summary.errors)}",
    ]
    return "\n".join(result)


def fail(prog: str, message: str, code: int = 2) -> NoReturn:
    """Print an error message prefixed with the program name and exit."""
    print(f"{prog}: {message}", file=sys.stderr)
    sys.exit(code)


def main() -> None:
    """Main entry point for the dirfixer command-line interface.

    Exit codes:
        0: Successful completion
        1: Path does not exist
        2: Any other failure
        130: Interrupted by SIGINT (Ctrl+C)
    """
    parser = create_parser()
    prog = parser.prog

    try:
        # argparse exits with 2 on usage errors
        args = parser.parse_args()

        if args.version:
            try:
                print(f"dirfixer version {__version__}")
                sys.stdout.flush()
            except OSError as e:
                fail(prog, f"failed to print version: {e}")
            sys.exit(0)

        validate_args(parser, args)

        # Rule files are read only once the run is known to go ahead
        exclusion_rules = GitIgnoreExclusionRules()
        apply_exclusions(exclusion_rules, args.exclusions)

        def report(error: WalkEntryError) -> None:
            print(f"{prog}: failed to {error}", file=sys.stderr)

        fixer = DirFixer(
            args.path,
            error_action=ErrorAction.RAISE if args.fail_early else ErrorAction.REPORT,
            exclusion_rules=exclusion_rules,
            on_error=report,
        )

        status = fixer.validate()
        if status is PathStatus.MISSING:
            raise PathNotFoundError(args.path)

        if status is PathStatus.FILE:
            try:
                summary = fixer.fix_file()
            except WalkEntryError as e:
                fail(prog, f"failed to handle provided file: {e.cause}")
        else:
            try:
                summary = fixer.fix_tree()
            except DirFixerError as e:
                fail(prog, f"failed to fix path {args.path}: {e}")

        if args.summary:
            print(format_summary(summary))

    except PathNotFoundError:
        fail(prog, "path does not exist", 1)
    except PathValidationError as e:
        fail(prog, f"failed to validate path: {e}")
    except KeyboardInterrupt:
        fail(prog, "interrupted", 130)
    except Exception as e:
        fail(prog, f"error: {e}")


if __name__ == "__main__":
    main()
