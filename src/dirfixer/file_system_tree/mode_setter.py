"""Application of fixed permission modes to directories and files."""

import os
from typing import Callable

from dirfixer.exceptions import ModeChangeError
from dirfixer.file_system_tree.executable_detector import is_executable_file
from dirfixer.modes import DEFAULT_MODES, ModeSet
from dirfixer.types import PathType


class ModeSetter:
    """Applies the modes of a ModeSet to individual filesystem entries.

    The only side effect is on permission metadata. Files are read only as far as
    the executable probe needs and are never written.

    Attributes:
        modes (ModeSet): The modes to apply.
        detector (Callable[[PathType], bool]): Classifies a file as executable.

    Example:
        >>> setter = ModeSetter(ModeSet(file=0o600))
        >>> setter.modes.file == 0o600
        True
    """

    def __init__(
        self,
        modes: ModeSet = DEFAULT_MODES,
        detector: Callable[[PathType], bool] = is_executable_file,
    ) -> None:
        self.modes = modes
        self.detector = detector

    def handle_directory(self, path: PathType) -> None:
        """Set a directory's permission bits to the directory mode.

        Raises:
            ModeChangeError: If the mode cannot be changed.
        """
        self._chmod(path, self.modes.directory)

    def handle_file(self, path: PathType) -> bool:
        """Set a file's permission bits according to its executable classification.

        Args:
            path: Path of the file.

        Returns:
            True if the file was classified as executable.

        Raises:
            ExecutableDetectionError: If the file cannot be probed.
            ModeChangeError: If the mode cannot be changed.
        """
        executable = self.detector(path)
        self._chmod(path, self.modes.executable if executable else self.modes.file)
        return executable

    def _chmod(self, path: PathType, mode: int) -> None:
        try:
            os.chmod(path, mode)
        except OSError as e:
            raise ModeChangeError(path, mode, e) from e
