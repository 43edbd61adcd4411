"""Entry model - one listed filesystem node and its rendering"""

from dataclasses import dataclass

from dirtree.domain.models.file_kind import FileKind
from dirtree.domain.models.print_mode import PrintMode

NOT_APPLICABLE = "n/a"

# Sizes are padded to this many columns ("b" suffix included) so that paths
# line up for the usual file sizes. Bigger numbers are never truncated.
SIZE_WIDTH = 10

# Hex digits in a CRC-32
CHECKSUM_WIDTH = 8

CHECKSUM_NA = NOT_APPLICABLE.ljust(CHECKSUM_WIDTH)


def format_size(kind: FileKind, size: int) -> str:
    """Render the size column for an entry of the given kind"""
    if kind is not FileKind.REGULAR_FILE:
        return " " * SIZE_WIDTH
    return f"{size}b".ljust(SIZE_WIDTH)


@dataclass(frozen=True)
class Entry:
    """A visited filesystem node.

    Only the attributes requested by ``mode`` are meaningful: ``size`` is 0
    unless SIZE was requested for a regular file, ``checksum`` is empty unless
    CRC32 was requested.
    """

    path: str  # Full path inside its filesystem source
    rel_path: str  # Slash separated path relative to the root, "." for the root
    kind: FileKind
    mode: PrintMode = PrintMode.DEFAULT
    size: int = 0
    checksum: str = ""
    is_symlink: bool = False
    perm: int = 0

    def format(self) -> str:
        """Render the requested fields, each followed by a single space.

        The relative path is not included so callers can append it directly.
        """
        fields = []
        if self.mode & PrintMode.TYPE:
            fields.append(self.kind.marker)
        if self.mode & PrintMode.SIZE:
            fields.append(format_size(self.kind, self.size))
        if self.mode & PrintMode.CRC32:
            fields.append(f"crc={self.checksum or CHECKSUM_NA}")
        if self.mode & PrintMode.SYMLINK:
            fields.append(f"sym={int(self.is_symlink)}")
        if self.mode & PrintMode.PERM:
            fields.append(f"perm={self.perm:03o}")
        return "".join(f"{field} " for field in fields)

    def to_line(self) -> str:
        """Full listing line, without line terminator"""
        return f"{self.format()}{self.rel_path}"
