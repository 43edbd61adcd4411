"""Listing service - the public entry points of dirtree"""

from __future__ import annotations

import io
import logging
import os
from typing import Iterator, List, Optional, TextIO, Union

from dirtree.application.walker import Walker
from dirtree.domain.errors import OutputError
from dirtree.domain.models.entry import Entry
from dirtree.domain.options import Option
from dirtree.infrastructure.config.config_resolver import resolve_config
from dirtree.infrastructure.filesystem import FileSystem

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def iter_entries(fs: Optional[FileSystem], root: PathLike, *options: Option) -> Iterator[Entry]:
    """Walk the tree rooted at root in fs, lazily yielding entries

    Options are resolved right away, so configuration errors are raised by
    this call and not when iterating.

    Args:
        fs: Filesystem to walk (real filesystem if None)
        root: Root of the walk
        *options: Listing options

    Returns:
        Iterator over the listed entries, in walk order

    Raises:
        ConfigurationError: If an option is invalid
    """
    config = resolve_config(*options)
    return Walker(config, fs).walk(root)


def list_entries_fs(fs: Optional[FileSystem], root: PathLike, *options: Option) -> List[Entry]:
    """Walk the tree rooted at root in fs and return its entries

    Raises:
        ConfigurationError: If an option is invalid
        WalkError: If the walk fails
    """
    return list(iter_entries(fs, root, *options))


def list_entries(root: PathLike, *options: Option) -> List[Entry]:
    """Walk the tree rooted at root on the real filesystem and return its entries"""
    return list_entries_fs(None, root, *options)


def _write_line(sink: TextIO, line: str) -> None:
    try:
        sink.write(line)
    except (OSError, ValueError) as e:
        raise OutputError(f"can't write output: {e}") from e


def write_fs(sink: TextIO, fs: Optional[FileSystem], root: PathLike, *options: Option) -> None:
    """Walk the tree rooted at root in fs and write one line per entry to sink

    Each line is the formatted fields followed by the relative path. Lines
    are written as the walk goes and the sink is flushed before returning.

    Args:
        sink: Writable text stream
        fs: Filesystem to walk (real filesystem if None)
        root: Root of the walk
        *options: Listing options

    Raises:
        ConfigurationError: If an option is invalid
        WalkError: If the walk fails
        OutputError: If sink can't be written to
    """
    lines = 0
    for entry in iter_entries(fs, root, *options):
        _write_line(sink, f"{entry.to_line()}\n")
        lines += 1

    flush = getattr(sink, "flush", None)
    if flush is not None:
        try:
            flush()
        except (OSError, ValueError) as e:
            raise OutputError(f"can't write output: {e}") from e
    logger.debug(f"Wrote {lines} lines for {root}")


def write(sink: TextIO, root: PathLike, *options: Option) -> None:
    """Walk the tree rooted at root on the real filesystem and write it to sink"""
    write_fs(sink, None, root, *options)


def sprint_fs(fs: Optional[FileSystem], root: PathLike, *options: Option) -> str:
    """Return the listing of the tree rooted at root in fs as a string

    Wrapper around :func:`write_fs`.
    """
    buf = io.StringIO()
    write_fs(buf, fs, root, *options)
    return buf.getvalue()


def sprint(root: PathLike, *options: Option) -> str:
    """Return the listing of the tree rooted at root on the real filesystem"""
    return sprint_fs(None, root, *options)
