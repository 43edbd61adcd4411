"""Exceptions raised while listing a directory tree"""


class DirtreeError(Exception):
    """Base class for all dirtree errors."""

    pass


class ConfigurationError(DirtreeError):
    """Invalid listing option, detected before the filesystem is touched."""

    pass


class WalkError(DirtreeError):
    """Traversal failure: unreadable directory, missing root or failed lstat."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class OutputError(DirtreeError):
    """The output sink could not be written to or flushed."""

    pass
