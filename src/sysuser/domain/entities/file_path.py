"""FilePath value object."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FilePath:
    """Filesystem path value.

    `FilePath()` is the empty path, used wherever a path could not be
    determined.

    Attributes:
        path: Path string ("" for the empty path).
    """

    path: str = ""

    @property
    def is_empty(self) -> bool:
        """Whether this is the empty path."""
        return not self.path

    @property
    def absolute_path(self) -> str:
        """Absolute form of the path ("" for the empty path)."""
        if self.is_empty:
            return ""
        return os.path.abspath(self.path)

    def exists(self) -> bool:
        """Check whether the path exists on the filesystem.

        Returns:
            False for the empty path or a path that does not exist.
        """
        if self.is_empty:
            return False
        return os.path.exists(self.path)

    def complete_path(self, child: str) -> "FilePath":
        """Join a child path onto this path.

        Args:
            child: Relative child path.

        Returns:
            The joined path. Joining onto the empty path yields the child.
        """
        if self.is_empty:
            return FilePath(child)
        return FilePath(os.path.join(self.path, child))

    def to_path(self) -> Path:
        """Convert to pathlib.Path.

        Raises:
            ValueError: If this is the empty path.
        """
        if self.is_empty:
            raise ValueError("Cannot convert an empty FilePath to Path")
        return Path(self.path)

    def __str__(self) -> str:
        return self.path
