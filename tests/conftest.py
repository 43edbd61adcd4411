"""Shared fixtures: the same small tree on disk and in memory.

    .
    └── A
        ├── B
        │   └── symdirA -> A
        ├── file1        ("dummy content")
        └── symfile1 -> A/file1
"""

import os
import stat
from pathlib import Path

import pytest

from dirtree.infrastructure.filesystem import MemoryFile, MemoryFileSystem

FILE1_CONTENT = b"dummy content"
FILE1_CRC = "0451ac5e"


def _symlinks_supported(tmp_path: Path) -> bool:
    target = tmp_path / "target"
    target.write_bytes(b"")
    try:
        os.symlink(target, tmp_path / "link")
    except (OSError, NotImplementedError, AttributeError):
        return False
    finally:
        target.unlink()
    (tmp_path / "link").unlink()
    return True


@pytest.fixture
def disk_tree(tmp_path):
    """Create the test tree on disk and return its root"""
    if not _symlinks_supported(tmp_path):
        pytest.skip("symlinks not supported")

    root = tmp_path / "root"
    dir_a = root / "A"
    (dir_a / "B").mkdir(parents=True)
    file1 = dir_a / "file1"
    file1.write_bytes(FILE1_CONTENT)
    os.chmod(file1, 0o644)
    os.symlink(file1, dir_a / "symfile1")
    os.symlink(dir_a, dir_a / "B" / "symdirA")
    return root


@pytest.fixture
def memory_tree():
    """Return the test tree as an in-memory filesystem"""
    return MemoryFileSystem(
        {
            "A/file1": MemoryFile(FILE1_CONTENT),
            "A/symfile1": MemoryFile(mode=stat.S_IFLNK | 0o777),
            "A/B/symdirA": MemoryFile(mode=stat.S_IFLNK | 0o777),
        }
    )


UNDECODABLE_NAME = b"\x80bad"


@pytest.fixture
def raw_names_tree(tmp_path):
    """Create a directory holding "é" and a file whose name is not valid UTF-8"""
    root = tmp_path / "raw"
    root.mkdir()
    try:
        (root / os.fsdecode(UNDECODABLE_NAME)).write_bytes(b"")
    except (OSError, UnicodeError):
        pytest.skip("filesystem rejects names that are not valid UTF-8")
    (root / "é").write_bytes(b"")
    return root
