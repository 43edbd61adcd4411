"""CRC-32 checksums of regular files"""

import logging
import zlib
from typing import Optional

from dirtree.domain.models.entry import CHECKSUM_NA, CHECKSUM_WIDTH
from dirtree.domain.models.file_kind import FileKind
from dirtree.infrastructure.filesystem import FileSystem, OSFileSystem

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 32 * 1024


class ChecksumEngine:
    """Computes CRC-32 (IEEE) checksums through a reusable buffer.

    The buffer belongs to the instance, so an engine must not be shared
    between threads. Create one engine per walk.
    """

    def __init__(self, fs: Optional[FileSystem] = None, buffer_size: int = DEFAULT_BUFFER_SIZE):
        """Initialize checksum engine

        Args:
            fs: Filesystem files are read from (real filesystem if None)
            buffer_size: Size of the read buffer in bytes

        Raises:
            ValueError: If buffer_size is not positive
        """
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fs = fs or OSFileSystem()
        self._buffer = bytearray(buffer_size)
        self._view = memoryview(self._buffer)

    def checksum(self, kind: FileKind, path: str) -> str:
        """Return the checksum of a file as 8 lowercase hex digits

        Anything but a regular file, and any file that can't be read (missing,
        permission denied, I/O error), gets the "n/a" sentinel instead.

        Args:
            kind: Kind of the node at path
            path: Path inside the engine's filesystem

        Returns:
            Hex checksum or CHECKSUM_NA
        """
        if kind is not FileKind.REGULAR_FILE:
            return CHECKSUM_NA

        crc = 0
        try:
            with self.fs.open(path) as f:
                while True:
                    n = f.readinto(self._buffer)
                    if not n:
                        break
                    crc = zlib.crc32(self._view[:n], crc)
        except OSError as e:
            logger.debug(f"Can't compute checksum of {path}: {e}")
            return CHECKSUM_NA

        return f"{crc:0{CHECKSUM_WIDTH}x}"
