"""Glob pattern configuration model."""

from pydantic import BaseModel, ConfigDict, field_validator

from dirtree.domain.models.pattern_role import PatternRole
from dirtree.domain.pattern_matcher import validate_glob


class GlobPattern(BaseModel):
    """A match or ignore glob, checked when it is created.

    Attributes:
        pattern: Glob matched against the slash separated relative path
        role: Whether a matching path is selected or rejected
    """

    pattern: str
    role: PatternRole = PatternRole.MATCH

    model_config = ConfigDict(frozen=True)

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        return validate_glob(value)
