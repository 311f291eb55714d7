"""Existence and type checks for paths handed to dirfixer."""

import os
import stat
from enum import Enum

from dirfixer.types import EntryType, PathType


class PathStatus(Enum):
    """Result of validating the path to fix.

    Attributes:
        MISSING: Nothing exists at the path
        DIRECTORY: The path (or its symlink target) is a directory
        FILE: The path exists and is not a directory
    """

    MISSING = "missing"
    DIRECTORY = "directory"
    FILE = "file"


def validate_path(path: PathType) -> PathStatus:
    """Report whether a path exists and whether it is a directory.

    A single stat call is made, following symlinks.

    Args:
        path: Path to inspect. Can be any path-like object.

    Returns:
        The status of the path.

    Raises:
        OSError: For any stat failure other than the path not existing.

    Example:
        >>> validate_path("/")
        <PathStatus.DIRECTORY: 'directory'>
        >>> validate_path("/no/such/path/anywhere")
        <PathStatus.MISSING: 'missing'>
    """
    try:
        info = os.stat(path)
    except FileNotFoundError:
        return PathStatus.MISSING
    return PathStatus.DIRECTORY if stat.S_ISDIR(info.st_mode) else PathStatus.FILE


def classify_path(path: PathType) -> EntryType:
    """Determine which handler applies to an entry found during traversal.

    Directories are recognized without following symlinks, so a symlink to a
    directory is never treated as one. Symlinks to regular files are classified as
    files; changing their mode changes the mode of the target. Dangling symlinks are
    classified as files too, so the failure surfaces when the file is handled.

    Args:
        path: Path of the entry.

    Returns:
        The entry type.

    Raises:
        OSError: If the entry cannot be inspected, e.g. a symlink loop.
    """
    info = os.lstat(path)
    if stat.S_ISDIR(info.st_mode):
        return EntryType.DIRECTORY
    if stat.S_ISLNK(info.st_mode):
        try:
            info = os.stat(path)
        except FileNotFoundError:
            return EntryType.FILE
        if stat.S_ISDIR(info.st_mode):
            return EntryType.OTHER
    return EntryType.FILE if stat.S_ISREG(info.st_mode) else EntryType.OTHER
