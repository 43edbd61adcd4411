"""Walk configuration model."""

from typing import Annotated, Any, FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, field_validator

from dirtree.domain.config.patterns import GlobPattern
from dirtree.domain.models.file_kind import FileKind
from dirtree.domain.models.print_mode import PrintMode

ALL_KINDS = frozenset(FileKind)


def _as_print_mode(value: Any) -> PrintMode:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"print mode must be a PrintMode, got {value!r}")
    return PrintMode(value)


class WalkConfig(BaseModel):
    """Effective configuration of a directory listing.

    The defaults are the baseline every option list is applied to.

    Attributes:
        mode: Fields rendered for each entry
        include_root: Whether the root itself is listed (as ".")
        depth: Maximum number of path segments listed, 0 for no limit
        kinds: Kinds of nodes listed
        patterns: Ordered match/ignore globs, ignore always wins
    """

    mode: Annotated[PrintMode, PlainValidator(_as_print_mode)] = PrintMode.DEFAULT
    include_root: bool = True
    depth: int = Field(0, ge=0)
    kinds: FrozenSet[FileKind] = ALL_KINDS
    patterns: List[GlobPattern] = Field(default_factory=list)

    model_config = ConfigDict(
        validate_assignment=True,  # Options assign fields one by one
        extra="forbid",
    )

    @field_validator("kinds")
    @classmethod
    def _check_kinds(cls, value: FrozenSet[FileKind]) -> FrozenSet[FileKind]:
        if not value:
            raise ValueError("at least one file kind must be listed")
        return value

    @property
    def unlimited_depth(self) -> bool:
        return self.depth == 0
