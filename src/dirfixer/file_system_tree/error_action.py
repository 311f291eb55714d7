"""Error action enum for handling per-entry errors during directory traversal."""

from enum import Enum


class ErrorAction(str, Enum):
    """Action to take when an entry cannot be traversed or its mode cannot be set.

    Values:
        REPORT: Report the error and continue with the next entry (default behavior)
        RAISE: Raise the error immediately, aborting the rest of the walk
    """

    REPORT = "report"
    RAISE = "raise"
