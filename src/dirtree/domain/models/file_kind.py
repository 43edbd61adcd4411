"""FileKind model - three-way classification of a directory entry"""

import stat
from enum import Enum


class FileKind(str, Enum):
    """Kind of a filesystem node, valued by its one-character marker"""

    REGULAR_FILE = "f"
    DIRECTORY = "d"
    OTHER = "?"

    @property
    def marker(self) -> str:
        return self.value

    @classmethod
    def from_mode(cls, st_mode: int) -> "FileKind":
        """Classify unresolved (lstat) mode bits.

        Symlinks are never followed, so a link to a directory is OTHER. This
        is what keeps symlink cycles from being walked.

        Args:
            st_mode: Raw ``st_mode`` as returned by ``lstat``

        Returns:
            The kind of the node
        """
        if stat.S_ISREG(st_mode):
            return cls.REGULAR_FILE
        if stat.S_IFMT(st_mode) == stat.S_IFDIR:
            return cls.DIRECTORY
        return cls.OTHER

    @classmethod
    def from_marker(cls, marker: str) -> "FileKind":
        """Return the kind for a marker character

        Raises:
            ValueError: If marker is not one of ``f``, ``d`` or ``?``
        """
        return cls(marker)
