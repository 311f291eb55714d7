"""Directory permission normalization utilities.

This package provides tools for resetting the permission bits of a directory
tree to a fixed set of modes, giving executables (scripts with a shebang and
ELF binaries) their own mode.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirfixer")
except PackageNotFoundError:
    __version__ = "unknown"
