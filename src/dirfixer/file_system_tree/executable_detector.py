"""Executable file detection utilities."""

from pathlib import Path

from dirfixer.exceptions import ExecutableDetectionError
from dirfixer.types import PathType

# Marker at the start of interpreted scripts
SHEBANG = b"#!"

# Executable and Linkable Format signature
ELF_MAGIC = b"\x7fELF"

# Bytes needed to recognize either signature
HEADER_SIZE = len(ELF_MAGIC)


def is_executable_header(header: bytes) -> bool:
    """Classify the first bytes of a file as executable or not.

    Checks, in order:
    1. Shebang: the first two bytes are ``#!``
    2. ELF: exactly four bytes were read and they equal the ELF magic

    A header shorter than four bytes can only match the shebang, so a truncated
    ELF signature is not executable.

    Args:
        header: Up to the first four bytes of a file.

    Returns:
        True if the header identifies an executable.

    Example:
        >>> is_executable_header(b"#!/b")
        True
        >>> is_executable_header(b"\\x7fELF")
        True
        >>> is_executable_header(b"\\x7fEL")
        False
        >>> is_executable_header(b"")
        False
    """
    if header[:2] == SHEBANG:
        return True
    return len(header) == HEADER_SIZE and header == ELF_MAGIC


def read_header(file_path: PathType, size: int = HEADER_SIZE) -> bytes:
    """Read at most ``size`` bytes from the start of a file.

    Reaching end of file early is not an error; short and empty files yield a
    shorter buffer. The file is closed before returning on every path.

    Args:
        file_path: Path to the file. Can be any path-like object.
        size: Maximum number of bytes to read.

    Returns:
        The bytes read.

    Raises:
        OSError: If the file cannot be opened, read or closed.
    """
    with open(Path(file_path), "rb") as file:
        return file.read(size)


def is_executable_file(file_path: PathType) -> bool:
    """Detect whether a file is a script with a shebang or an ELF binary.

    Args:
        file_path: Path to the file to analyze. Can be any path-like object.

    Returns:
        True if the file appears to be executable, False otherwise.

    Raises:
        ExecutableDetectionError: If the file cannot be opened, read or closed.

    Example:
        >>> is_executable_file("/bin/sh")  # doctest: +SKIP
        True
        >>> is_executable_file("README.md")  # doctest: +SKIP
        False
    """
    try:
        header = read_header(file_path)
    except OSError as e:
        raise ExecutableDetectionError(file_path, e) from e
    return is_executable_header(header)
