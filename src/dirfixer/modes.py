"""Permission mode sets applied by dirfixer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModeSet:
    """The three permission modes applied during a run.

    Applying a mode is a total overwrite of an entry's permission bits; nothing is
    derived from or merged with the existing bits. Only the nine rwx bits may be
    set, so setuid, setgid and sticky bits are always cleared.

    Attributes:
        directory: Mode for directories.
        file: Mode for regular files not detected as executable.
        executable: Mode for files starting with a shebang or the ELF magic.

    Example:
        >>> DEFAULT_MODES.file == 0o640
        True
        >>> ModeSet(file=0o4755)
        Traceback (most recent call last):
            ...
        ValueError: file mode 0o4755 is outside 0o000-0o777
    """

    directory: int = 0o750
    file: int = 0o640
    executable: int = 0o750

    def __post_init__(self) -> None:
        for name in ("directory", "file", "executable"):
            mode = getattr(self, name)
            if not 0 <= mode <= 0o777:
                raise ValueError(f"{name} mode {oct(mode)} is outside 0o000-0o777")


DEFAULT_MODES = ModeSet()
