from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryType(Enum):
    """Enumeration of entry types for choosing a handler during traversal.

    Attributes:
        FILE: Regular file, or a symlink whose target is a regular file
        DIRECTORY: Directory (never reached through a symlink)
        OTHER: Anything else (FIFOs, sockets, devices, symlinks to directories)
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class WalkPhase(str, Enum):
    """Phase of the walk in which a per-entry error occurred.

    Values:
        ITERATE: The traversal itself failed for the entry (listing, stat)
        HANDLE: Applying the mode to the entry failed
    """

    ITERATE = "iterate"
    HANDLE = "handle"

    @property
    def description(self) -> str:
        """Human-readable verb phrase used in error messages."""
        return "iterate over path" if self is WalkPhase.ITERATE else "handle path"
