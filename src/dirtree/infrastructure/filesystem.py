"""Filesystem sources a directory tree can be listed from.

A source only needs three capabilities: ``lstat`` a path, list the entries of
a directory and open a file for reading. :class:`OSFileSystem` reads the real
filesystem, :class:`MemoryFileSystem` serves an in-memory tree so listings
can be tested without touching the disk.
"""

import errno
import io
import os
import posixpath
import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import BinaryIO, Dict, List, Optional

PERM_MASK = 0o777


@dataclass(frozen=True)
class FileInfo:
    """Unresolved (lstat) metadata of a node"""

    mode: int  # st_mode, file type bits included
    size: int = 0

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.mode)

    @property
    def perm(self) -> int:
        return self.mode & PERM_MASK


@dataclass(frozen=True)
class DirEntry:
    """A child of a directory, as returned by :meth:`FileSystem.scandir`"""

    name: str
    type_bits: int  # S_IFMT part of the unresolved mode


class FileSystem(ABC):
    """Minimal read-only filesystem interface used by the walker"""

    @abstractmethod
    def lstat(self, path: str) -> FileInfo:
        """Return metadata of path, without following symlinks

        Raises:
            OSError: If path can't be stat'ed
        """

    @abstractmethod
    def scandir(self, path: str) -> List[DirEntry]:
        """Return the children of a directory, sorted by the bytes of their name

        Raises:
            OSError: If the directory can't be read
        """

    @abstractmethod
    def open(self, path: str) -> BinaryIO:
        """Open a file for binary reading

        Raises:
            OSError: If the file can't be opened
        """

    def join(self, parent: str, name: str) -> str:
        return os.path.join(parent, name)


class OSFileSystem(FileSystem):
    """The real filesystem"""

    def lstat(self, path: str) -> FileInfo:
        st = os.lstat(path)
        return FileInfo(mode=st.st_mode, size=st.st_size)

    def scandir(self, path: str) -> List[DirEntry]:
        entries = []
        with os.scandir(path) as it:
            for child in it:
                entries.append(DirEntry(child.name, self._type_bits(child)))
        entries.sort(key=lambda e: os.fsencode(e.name))
        return entries

    def open(self, path: str) -> BinaryIO:
        return open(path, "rb", buffering=0)

    @staticmethod
    def _type_bits(child: os.DirEntry) -> int:
        # Answered from d_type when the platform provides it
        if child.is_symlink():
            return stat.S_IFLNK
        if child.is_dir(follow_symlinks=False):
            return stat.S_IFDIR
        if child.is_file(follow_symlinks=False):
            return stat.S_IFREG
        return stat.S_IFMT(child.stat(follow_symlinks=False).st_mode)


@dataclass
class MemoryFile:
    """A node of a :class:`MemoryFileSystem`.

    ``mode`` is a full st_mode; without file type bits the node is a regular
    file. Use ``stat.S_IFLNK`` for symlinks and ``stat.S_IFDIR`` for explicit
    (possibly empty) directories.
    """

    data: bytes = b""
    mode: int = 0o644

    def __post_init__(self):
        if stat.S_IFMT(self.mode) == 0:
            self.mode |= stat.S_IFREG


_IMPLICIT_DIR_MODE = stat.S_IFDIR | 0o755


def _not_found(path: str) -> OSError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)


@dataclass
class MemoryFileSystem(FileSystem):
    """In-memory tree keyed by slash separated paths.

    Parent directories are implied by the paths of their descendants, e.g.
    ``{"A/file1": MemoryFile(b"x")}`` holds the directories ``.`` and ``A``.
    """

    files: Dict[str, MemoryFile] = field(default_factory=dict)

    def __post_init__(self):
        self.files = {self.clean(name): file for name, file in self.files.items()}

    @staticmethod
    def clean(path: str) -> str:
        cleaned = posixpath.normpath(path.replace("\\", "/")).lstrip("/")
        return cleaned or "."

    def join(self, parent: str, name: str) -> str:
        return name if parent in ("", ".") else f"{parent}/{name}"

    def _is_implicit_dir(self, path: str) -> bool:
        if path == ".":
            return True
        prefix = path + "/"
        return any(name.startswith(prefix) for name in self.files)

    def _node(self, path: str) -> Optional[MemoryFile]:
        return self.files.get(path)

    def lstat(self, path: str) -> FileInfo:
        path = self.clean(path)
        node = self._node(path)
        if node is not None:
            return FileInfo(mode=node.mode, size=len(node.data))
        if self._is_implicit_dir(path):
            return FileInfo(mode=_IMPLICIT_DIR_MODE)
        raise _not_found(path)

    def scandir(self, path: str) -> List[DirEntry]:
        path = self.clean(path)
        info = self.lstat(path)
        if stat.S_IFMT(info.mode) != stat.S_IFDIR:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)

        prefix = "" if path == "." else path + "/"
        children: Dict[str, int] = {}
        for name, node in self.files.items():
            if not name.startswith(prefix):
                continue
            child, _, rest = name[len(prefix):].partition("/")
            if rest:
                children.setdefault(child, stat.S_IFDIR)
            else:
                children[child] = stat.S_IFMT(node.mode)
        return [DirEntry(name, children[name]) for name in sorted(children, key=os.fsencode)]

    def open(self, path: str) -> BinaryIO:
        path = self.clean(path)
        node = self._node(path)
        if node is None:
            if self._is_implicit_dir(path):
                raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
            raise _not_found(path)
        if stat.S_IFMT(node.mode) == stat.S_IFDIR:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
        return io.BytesIO(node.data)
