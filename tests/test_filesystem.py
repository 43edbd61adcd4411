"""Tests for filesystem sources"""

import errno
import os
import stat

import pytest

from dirtree.infrastructure.filesystem import (
    FileInfo,
    MemoryFile,
    MemoryFileSystem,
    OSFileSystem,
)


class TestMemoryFileSystem:
    """Tests for the in-memory filesystem"""

    def test_implicit_directories(self, memory_tree):
        """Test parents of listed paths are directories"""
        for path in (".", "A", "A/B", "./A/", "/A"):
            info = memory_tree.lstat(path)
            assert stat.S_ISDIR(info.mode), path

    def test_regular_file(self, memory_tree):
        """Test a file without type bits is regular"""
        info = memory_tree.lstat("A/file1")
        assert stat.S_ISREG(info.mode)
        assert info.size == 13
        assert info.perm == 0o644
        assert not info.is_symlink

    def test_symlink(self, memory_tree):
        """Test symlinks keep their type bits"""
        assert memory_tree.lstat("A/symfile1").is_symlink

    def test_missing(self, memory_tree):
        """Test missing paths raise FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            memory_tree.lstat("A/nope")
        with pytest.raises(FileNotFoundError):
            memory_tree.open("A/nope")

    def test_scandir_sorted(self, memory_tree):
        """Test children are listed once, sorted, with their type"""
        root = memory_tree.scandir(".")
        assert [(e.name, e.type_bits) for e in root] == [("A", stat.S_IFDIR)]

        children = memory_tree.scandir("A")
        assert [e.name for e in children] == ["B", "file1", "symfile1"]
        assert [e.type_bits for e in children] == [stat.S_IFDIR, stat.S_IFREG, stat.S_IFLNK]

    @pytest.mark.skipif(os.name == "nt", reason="file names are not bytes on Windows")
    def test_scandir_byte_order(self):
        """Test undecodable names sort by their bytes, like on disk"""
        fs = MemoryFileSystem({os.fsdecode(b"\x80bad"): MemoryFile(), "é": MemoryFile()})
        assert [os.fsencode(e.name) for e in fs.scandir(".")] == [b"\x80bad", os.fsencode("é")]

    def test_scandir_explicit_empty_directory(self):
        """Test explicit directories can be empty"""
        fs = MemoryFileSystem({"empty": MemoryFile(mode=stat.S_IFDIR | 0o700)})
        assert fs.scandir("empty") == []
        assert fs.lstat("empty").perm == 0o700

    def test_scandir_not_a_directory(self, memory_tree):
        """Test listing a file fails"""
        with pytest.raises(NotADirectoryError):
            memory_tree.scandir("A/file1")

    def test_open(self, memory_tree):
        """Test reading file content"""
        with memory_tree.open("A/file1") as f:
            assert f.read() == b"dummy content"

    def test_open_directory(self, memory_tree):
        """Test opening a directory fails"""
        with pytest.raises(IsADirectoryError):
            memory_tree.open("A")

    def test_join(self, memory_tree):
        """Test joining paths from the root"""
        assert memory_tree.join(".", "A") == "A"
        assert memory_tree.join("A", "B") == "A/B"


class TestOSFileSystem:
    """Tests for the real filesystem"""

    def test_scandir(self, disk_tree):
        """Test children are sorted and symlinks are not followed"""
        fs = OSFileSystem()
        entries = fs.scandir(str(disk_tree / "A"))
        assert [e.name for e in entries] == ["B", "file1", "symfile1"]
        assert [e.type_bits for e in entries] == [stat.S_IFDIR, stat.S_IFREG, stat.S_IFLNK]

    def test_scandir_byte_order(self, raw_names_tree):
        """Test children are sorted by the bytes of their name, not by code point"""
        entries = OSFileSystem().scandir(str(raw_names_tree))
        assert [os.fsencode(e.name) for e in entries] == [b"\x80bad", os.fsencode("é")]

    def test_lstat_does_not_follow_symlinks(self, disk_tree):
        """Test lstat reports the link itself"""
        info = OSFileSystem().lstat(str(disk_tree / "A" / "B" / "symdirA"))
        assert info.is_symlink
        assert not stat.S_ISDIR(info.mode)

    def test_missing(self, tmp_path):
        """Test errors are OSError"""
        with pytest.raises(OSError) as exc_info:
            OSFileSystem().lstat(str(tmp_path / "missing"))
        assert exc_info.value.errno == errno.ENOENT

    def test_open(self, disk_tree):
        """Test reading file content"""
        with OSFileSystem().open(str(disk_tree / "A" / "file1")) as f:
            assert f.read() == b"dummy content"

    def test_join(self):
        """Test joining uses the platform separator"""
        assert OSFileSystem().join("a", "b") == os.path.join("a", "b")


def test_file_info_perm():
    """Test only permission bits are reported as perm"""
    info = FileInfo(mode=stat.S_IFREG | stat.S_ISUID | 0o755, size=1)
    assert info.perm == 0o755
