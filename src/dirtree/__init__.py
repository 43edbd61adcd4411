"""Deterministic, cross-platform listings of directory trees.

Listings are meant to be compared against golden files in tests::

    import dirtree

    print(dirtree.sprint("testdata", dirtree.PrintMode.ALL, dirtree.Ignore("*.tmp")))
"""

from dirtree.application.listing_service import (
    iter_entries,
    list_entries,
    list_entries_fs,
    sprint,
    sprint_fs,
    write,
    write_fs,
)
from dirtree.domain.errors import ConfigurationError, DirtreeError, OutputError, WalkError
from dirtree.domain.models.entry import Entry
from dirtree.domain.models.file_kind import FileKind
from dirtree.domain.models.print_mode import PrintMode
from dirtree.domain.options import EXCLUDE_ROOT, Depth, Ignore, IncludeRoot, Match, Option, Type
from dirtree.infrastructure.filesystem import (
    FileSystem,
    MemoryFile,
    MemoryFileSystem,
    OSFileSystem,
)

__version__ = "0.1.0"

__all__ = [
    "iter_entries",
    "list_entries",
    "list_entries_fs",
    "sprint",
    "sprint_fs",
    "write",
    "write_fs",
    "ConfigurationError",
    "DirtreeError",
    "OutputError",
    "WalkError",
    "Entry",
    "FileKind",
    "PrintMode",
    "EXCLUDE_ROOT",
    "Depth",
    "Ignore",
    "IncludeRoot",
    "Match",
    "Option",
    "Type",
    "FileSystem",
    "MemoryFile",
    "MemoryFileSystem",
    "OSFileSystem",
]
