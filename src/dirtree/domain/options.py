"""Listing options.

Each option is a small immutable value that updates one aspect of a
:class:`~dirtree.domain.config.walk.WalkConfig`. Options validate themselves
when applied and raise :class:`~dirtree.domain.errors.ConfigurationError`, so
a bad option list fails before the filesystem is touched.

A :class:`~dirtree.domain.models.print_mode.PrintMode` value is an option too:
it selects the fields printed for each entry.
"""

from dataclasses import dataclass
from typing import Union

from dirtree.domain.config.patterns import GlobPattern
from dirtree.domain.config.walk import WalkConfig
from dirtree.domain.errors import ConfigurationError
from dirtree.domain.models.file_kind import FileKind
from dirtree.domain.models.pattern_role import PatternRole
from dirtree.domain.models.print_mode import PrintMode
from dirtree.domain.pattern_matcher import translate_glob

_TYPE_CHARS = "".join(kind.marker for kind in FileKind)


@dataclass(frozen=True)
class Type:
    """Limit the listing to some kinds of files.

    ``types`` is formed of one or more of ``f`` (regular files), ``d``
    (directories) and ``?`` (anything else: symlinks, devices, ...). Excluded
    directories are still walked into.
    """

    types: str

    def apply(self, config: WalkConfig) -> None:
        if not isinstance(self.types, str):
            raise ConfigurationError(f"invalid Type {self.types!r}: must be a string")
        if not self.types:
            raise ConfigurationError("invalid Type: at least one type must be listed")
        kinds = set()
        for char in self.types:
            if char not in _TYPE_CHARS:
                raise ConfigurationError(
                    f"invalid Type char {char!r}, must be one of {', '.join(_TYPE_CHARS)}"
                )
            kinds.add(FileKind.from_marker(char))
        config.kinds = frozenset(kinds)


@dataclass(frozen=True)
class IncludeRoot:
    """Control whether the root directory is listed, as "." """

    include: bool = True

    def apply(self, config: WalkConfig) -> None:
        if not isinstance(self.include, bool):
            raise ConfigurationError(f"invalid IncludeRoot {self.include!r}: must be a boolean")
        config.include_root = self.include


EXCLUDE_ROOT = IncludeRoot(False)


def _glob(kind: str, pattern: str, role: PatternRole) -> GlobPattern:
    if not isinstance(pattern, str):
        raise ConfigurationError(f"invalid {kind} pattern {pattern!r}: not a string")
    try:
        translate_glob(pattern)
    except ValueError as e:
        raise ConfigurationError(f"invalid {kind} pattern {pattern!r}: {e}") from e
    return GlobPattern(pattern=pattern, role=role)


@dataclass(frozen=True)
class Ignore:
    """Leave out paths matching a glob.

    The slash separated path relative to the root is matched against the
    pattern (``*`` does not cross ``/``). Can be given several times: a path
    matching any Ignore pattern is left out, even if it matches a Match
    pattern.
    """

    pattern: str

    def apply(self, config: WalkConfig) -> None:
        glob = _glob("ignore", self.pattern, PatternRole.IGNORE)
        config.patterns = [*config.patterns, glob]


@dataclass(frozen=True)
class Match:
    """Only list paths matching a glob.

    Can be given several times: a path is listed if it matches at least one
    Match pattern and no Ignore pattern.
    """

    pattern: str

    def apply(self, config: WalkConfig) -> None:
        glob = _glob("match", self.pattern, PatternRole.MATCH)
        config.patterns = [*config.patterns, glob]


@dataclass(frozen=True)
class Depth:
    """Maximum number of path segments below the root, 0 means no limit"""

    levels: int

    def apply(self, config: WalkConfig) -> None:
        if isinstance(self.levels, bool) or not isinstance(self.levels, int):
            raise ConfigurationError(f"invalid Depth {self.levels!r}: must be an integer")
        if self.levels < 0:
            raise ConfigurationError(f"negative Depth {self.levels} is invalid")
        config.depth = self.levels


Option = Union[PrintMode, Type, IncludeRoot, Ignore, Match, Depth]
