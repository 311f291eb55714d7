from typing import Optional

from dirfixer.types import PathType, WalkPhase


class DirFixerError(Exception):
    """
    Base class for all errors raised by dirfixer.

    Every subclass records the path the failing operation was applied to, so that
    callers can report errors without parsing messages.

    Attributes:
        path (str): Path the failing operation was applied to.
    """

    def __init__(self, path: PathType, message: str) -> None:
        self.path = str(path)
        super().__init__(message)


class PathNotFoundError(DirFixerError):
    """
    Exception raised when the path to fix does not exist.

    Example:
        >>> error = PathNotFoundError("/no/such/dir")
        >>> str(error)
        'path does not exist: /no/such/dir'
    """

    def __init__(self, path: PathType) -> None:
        super().__init__(path, f"path does not exist: {path}")


class PathValidationError(DirFixerError):
    """
    Exception raised when the path to fix cannot be inspected for a reason other
    than not existing (e.g. permission denied on a parent directory).

    Attributes:
        cause (OSError): The underlying stat failure.

    Example:
        >>> error = PathValidationError("/root/x", PermissionError(13, "Permission denied"))
        >>> str(error)
        '[Errno 13] Permission denied'
    """

    def __init__(self, path: PathType, cause: OSError) -> None:
        self.cause = cause
        super().__init__(path, str(cause))


class ExecutableDetectionError(DirFixerError):
    """
    Exception raised when a file cannot be opened, read or closed while probing
    it for a shebang or ELF header.

    A failed probe is never treated as "not executable"; it always surfaces as
    this error.

    Attributes:
        cause (OSError): The underlying I/O failure.

    Example:
        >>> error = ExecutableDetectionError("a.sh", PermissionError(13, "Permission denied"))
        >>> str(error)
        'checking if executable: [Errno 13] Permission denied'
    """

    def __init__(self, path: PathType, cause: OSError) -> None:
        self.cause = cause
        super().__init__(path, f"checking if executable: {cause}")


class ModeChangeError(DirFixerError):
    """
    Exception raised when the permission bits of a path cannot be changed.

    Attributes:
        mode (int): The mode that was being applied.
        cause (OSError): The underlying chmod failure.

    Example:
        >>> error = ModeChangeError("a.txt", 0o640, PermissionError(1, "Operation not permitted"))
        >>> str(error)
        'setting mode 0640: [Errno 1] Operation not permitted'
    """

    def __init__(self, path: PathType, mode: int, cause: OSError) -> None:
        self.mode = mode
        self.cause = cause
        super().__init__(path, f"setting mode {mode:04o}: {cause}")


class WalkEntryError(DirFixerError):
    """
    Exception describing a failure for a single entry of a directory walk.

    The phase tells whether the traversal itself failed for the entry or whether
    applying the mode failed. Under the report policy these errors are collected
    and reported; under the fail-early policy the first one is raised and ends
    the walk.

    Attributes:
        phase (WalkPhase): Phase in which the error occurred.
        cause (Exception): The underlying error (an OSError for the iterate phase,
            a DirFixerError for the handle phase).

    Example:
        >>> error = WalkEntryError("src/run.sh", WalkPhase.HANDLE, OSError("boom"))
        >>> str(error)
        'handle path src/run.sh: boom'
        >>> error = WalkEntryError("src", WalkPhase.ITERATE, OSError("denied"))
        >>> str(error)
        'iterate over path src: denied'
    """

    def __init__(self, path: PathType, phase: WalkPhase, cause: Exception) -> None:
        self.phase = phase
        self.cause = cause
        super().__init__(path, f"{phase.description} {path}: {cause}")


class WalkError(DirFixerError):
    """
    Exception raised when a walk cannot start at all, e.g. because the root
    vanished or is no longer a directory.

    Attributes:
        cause (Optional[OSError]): The underlying failure, if any.
    """

    def __init__(self, path: PathType, cause: Optional[OSError] = None) -> None:
        self.cause = cause
        reason = str(cause) if cause is not None else "not a directory"
        super().__init__(path, f"walk {path}: {reason}")
