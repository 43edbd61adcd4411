"""PatternRole - whether a glob selects or rejects paths"""

from enum import Enum


class PatternRole(str, Enum):
    """Role of a glob pattern in the listing filter"""

    MATCH = "match"
    IGNORE = "ignore"
