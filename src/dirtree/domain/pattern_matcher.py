"""Glob matching of relative paths against match/ignore patterns"""

import logging
import re
from functools import lru_cache
from typing import Iterable, Protocol

from dirtree.domain.models.pattern_role import PatternRole

logger = logging.getLogger(__name__)


class RolePattern(Protocol):
    pattern: str
    role: PatternRole


def _class_char(pattern: str, i: int) -> tuple[str, int]:
    """Read one (possibly escaped) character of a bracket expression"""
    if i >= len(pattern):
        raise ValueError("unterminated character class")
    c = pattern[i]
    if c == "\\":
        i += 1
        if i >= len(pattern):
            raise ValueError("unterminated character class")
        return pattern[i], i + 1
    if c in "-]":
        raise ValueError(f"unexpected {c!r} in character class")
    return c, i + 1


def _translate_class(pattern: str, i: int) -> tuple[str, int]:
    """Translate a bracket expression starting right after its '['"""
    negate = False
    if i < len(pattern) and pattern[i] in "^!":
        negate = True
        i += 1

    ranges = []
    while True:
        if i >= len(pattern):
            raise ValueError("unterminated character class")
        if pattern[i] == "]" and ranges:
            i += 1
            break
        lo, i = _class_char(pattern, i)
        hi = lo
        if i < len(pattern) and pattern[i] == "-":
            hi, i = _class_char(pattern, i + 1)
            if hi < lo:
                raise ValueError(f"invalid character range {lo}-{hi}")
        ranges.append(re.escape(lo) if lo == hi else f"{re.escape(lo)}-{re.escape(hi)}")

    body = "".join(ranges)
    return (f"[^{body}]" if negate else f"[{body}]"), i


def translate_glob(pattern: str) -> str:
    """Translate a shell glob into an equivalent regular expression

    ``*`` matches any run of characters except ``/``, ``?`` a single character
    except ``/``, ``[...]`` a character class (``^`` or ``!`` negates it) and
    ``\\`` escapes the next character.

    Args:
        pattern: Glob pattern

    Returns:
        Regular expression to be used with ``re.fullmatch``

    Raises:
        ValueError: If the pattern is malformed
    """
    out = []
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c == "*":
            while i < n and pattern[i] == "*":
                i += 1
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "\\":
            if i >= n:
                raise ValueError("trailing backslash")
            out.append(re.escape(pattern[i]))
            i += 1
        elif c == "[":
            expr, i = _translate_class(pattern, i)
            out.append(expr)
        else:
            out.append(re.escape(c))
    return "".join(out)


@lru_cache(maxsize=256)
def compile_glob(pattern: str) -> re.Pattern:
    """Compile (and cache) a glob pattern"""
    return re.compile(translate_glob(pattern), re.DOTALL)


def validate_glob(pattern: str) -> str:
    """Check that a glob is well formed

    Returns:
        The pattern, unchanged

    Raises:
        ValueError: If the pattern is malformed
    """
    try:
        compile_glob(pattern)
    except ValueError as e:
        raise ValueError(f"invalid pattern {pattern!r}: {e}") from e
    return pattern


def matches(rel_path: str, pattern: str) -> bool:
    """Check if a slash separated relative path matches a glob pattern"""
    return compile_glob(pattern).fullmatch(rel_path) is not None


def keep(rel_path: str, patterns: Iterable[RolePattern]) -> bool:
    """Decide whether a path survives the match/ignore patterns

    A path matching any ignore pattern is dropped, whatever the match
    patterns say. Otherwise, if there is at least one match pattern, the path
    must match one of them. Without patterns everything is kept.

    Args:
        rel_path: Slash separated path relative to the walk root
        patterns: Ordered match/ignore patterns, already validated

    Returns:
        True if the path should be listed
    """
    has_match = False
    matched = False
    for p in patterns:
        hit = matches(rel_path, p.pattern)
        if p.role == PatternRole.IGNORE:
            if hit:
                logger.debug(f"Ignoring {rel_path}: matches ignore pattern {p.pattern}")
                return False
        else:
            has_match = True
            matched = matched or hit
    return matched or not has_match
