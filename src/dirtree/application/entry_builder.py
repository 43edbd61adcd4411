"""Construction of listing entries"""

from __future__ import annotations

from dirtree.domain.config.walk import WalkConfig
from dirtree.domain.errors import WalkError
from dirtree.domain.models.entry import Entry
from dirtree.domain.models.file_kind import FileKind
from dirtree.domain.models.print_mode import PrintMode
from dirtree.infrastructure.checksum import ChecksumEngine
from dirtree.infrastructure.filesystem import FileSystem

_STAT_FIELDS = PrintMode.SYMLINK | PrintMode.PERM


def build_entry(
    config: WalkConfig,
    fs: FileSystem,
    checksums: ChecksumEngine,
    path: str,
    rel_path: str,
    kind: FileKind,
) -> Entry:
    """Gather the attributes requested by the configured print mode

    Metadata is only read when a field needs it. Failing to lstat a node that
    was just listed is an error, while an unreadable file merely gets an
    "n/a" checksum.

    Args:
        config: Effective configuration
        fs: Filesystem the node belongs to
        checksums: Engine used for CRC32
        path: Full path of the node in fs
        rel_path: Slash separated path relative to the walk root
        kind: Kind of the node

    Returns:
        The entry

    Raises:
        WalkError: If the node metadata can't be read
    """
    mode = config.mode
    want_size = bool(mode & PrintMode.SIZE) and kind is FileKind.REGULAR_FILE

    size = 0
    is_symlink = False
    perm = 0
    if want_size or mode & _STAT_FIELDS:
        try:
            info = fs.lstat(path)
        except OSError as e:
            raise WalkError(f"can't create entry for {path}: lstat failed: {e}", path) from e
        if want_size:
            size = info.size
        is_symlink = info.is_symlink
        perm = info.perm

    checksum = checksums.checksum(kind, path) if mode & PrintMode.CRC32 else ""

    return Entry(
        path=path,
        rel_path=rel_path,
        kind=kind,
        mode=mode,
        size=size,
        checksum=checksum,
        is_symlink=is_symlink,
        perm=perm,
    )
