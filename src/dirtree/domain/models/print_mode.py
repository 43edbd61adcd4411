"""PrintMode - bit set of the fields rendered for each entry"""

from enum import IntFlag
from typing import Iterable


class PrintMode(IntFlag):
    """Fields to print next to each path.

    TYPE prints the kind marker (``f``, ``d`` or ``?``). SIZE prints the length
    in bytes of regular files and blanks for anything else, since the size of
    directories and links is system dependent. CRC32 prints the checksum of
    regular files, ``n/a`` otherwise. SYMLINK prints ``sym=1`` or ``sym=0``.
    PERM prints the Unix permission bits in octal.
    """

    NONE = 0
    TYPE = 1
    SIZE = 2
    CRC32 = 4
    SYMLINK = 8
    PERM = 16

    DEFAULT = TYPE | SIZE
    ALL = TYPE | SIZE | CRC32 | SYMLINK | PERM

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "PrintMode":
        """Build a mode from field or preset names (case insensitive)

        Args:
            names: Names such as ``["type", "crc32"]`` or ``["all"]``

        Returns:
            Union of the named flags

        Raises:
            ValueError: If a name is unknown
        """
        mode = cls.NONE
        for name in names:
            key = name.strip().upper()
            if not key:
                continue
            if key not in cls.__members__:
                valid = ", ".join(m.lower() for m in cls.__members__ if m != "NONE")
                raise ValueError(f"unknown print mode {name!r}, must be one of: {valid}")
            mode |= cls.__members__[key]
        return mode
