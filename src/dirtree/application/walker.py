"""Depth-first walk of a directory tree"""

from __future__ import annotations

import logging
import os
from typing import Iterator, List, Optional, Tuple, Union

from dirtree.application.entry_builder import build_entry
from dirtree.domain.config.walk import WalkConfig
from dirtree.domain.errors import WalkError
from dirtree.domain.models.entry import Entry
from dirtree.domain.models.file_kind import FileKind
from dirtree.infrastructure.checksum import ChecksumEngine
from dirtree.infrastructure.filesystem import FileSystem, OSFileSystem
from dirtree.domain.pattern_matcher import keep

logger = logging.getLogger(__name__)

ROOT_REL_PATH = "."

# (full path, relative path, kind, number of segments of the relative path)
_Node = Tuple[str, str, FileKind, int]


class Walker:
    """Walks a tree in pre-order and yields the entries to list.

    Children are visited in name order. Symlinks are never followed. Nodes
    filtered out by kind, root visibility or patterns are not listed but
    directories among them are still walked into; only the depth limit
    prunes whole subtrees.
    """

    def __init__(self, config: WalkConfig, fs: Optional[FileSystem] = None):
        """Initialize walker

        Args:
            config: Effective configuration
            fs: Filesystem to walk (real filesystem if None)
        """
        self.config = config
        self.fs = fs or OSFileSystem()
        self.checksums = ChecksumEngine(self.fs)

    def walk(self, root: Union[str, os.PathLike]) -> Iterator[Entry]:
        """Yield the listed entries under root, root included

        Raises:
            WalkError: If root, a directory or the metadata of a node can't
                be read
        """
        root = os.fspath(root)
        try:
            info = self.fs.lstat(root)
        except OSError as e:
            raise WalkError(f"can't walk {root}: {e}", root) from e

        logger.debug(f"Walking {root}")
        listed = 0
        stack: List[_Node] = [(root, ROOT_REL_PATH, FileKind.from_mode(info.mode), 1)]
        while stack:
            path, rel_path, kind, segments = stack.pop()
            is_root = rel_path == ROOT_REL_PATH

            if self._listed(rel_path, kind, is_root):
                yield build_entry(self.config, self.fs, self.checksums, path, rel_path, kind)
                listed += 1

            if kind is FileKind.DIRECTORY:
                child_segments = 1 if is_root else segments + 1
                if self._too_deep(child_segments):
                    logger.debug(f"Not descending into {rel_path}: depth limit reached")
                    continue
                children = self._children(path, rel_path, is_root, child_segments)
                stack.extend(reversed(children))

        logger.info(f"Listed {listed} entries under {root}")

    def _too_deep(self, segments: int) -> bool:
        return not self.config.unlimited_depth and segments > self.config.depth

    def _listed(self, rel_path: str, kind: FileKind, is_root: bool) -> bool:
        if kind not in self.config.kinds:
            return False
        if is_root and not self.config.include_root:
            return False
        return keep(rel_path, self.config.patterns)

    def _children(self, path: str, rel_path: str, is_root: bool, segments: int) -> List[_Node]:
        try:
            dirents = self.fs.scandir(path)
        except OSError as e:
            raise WalkError(f"can't read directory {path}: {e}", path) from e

        children = []
        for dirent in dirents:
            child_rel = dirent.name if is_root else f"{rel_path}/{dirent.name}"
            children.append(
                (
                    self.fs.join(path, dirent.name),
                    child_rel,
                    FileKind.from_mode(dirent.type_bits),
                    segments,
                )
            )
        return children
