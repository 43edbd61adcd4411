"""Command line listing settings model."""

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dirtree.domain.models.file_kind import FileKind
from dirtree.domain.models.print_mode import PrintMode
from dirtree.domain.pattern_matcher import validate_glob


class ListingSettings(BaseModel):
    """Listing settings read from .dirtree.yml and the environment.

    Attributes:
        mode: Field names ("type", "size", "crc32", "symlink", "perm") or a
            preset ("default", "all")
        types: Kinds to list, any of "f", "d" and "?"
        include_root: Whether the root is listed as "."
        depth: Maximum depth (0 = unlimited)
        ignore: Glob patterns of paths to leave out
        match: Glob patterns of paths to list (all when empty)
    """

    mode: List[str] = Field(default_factory=lambda: ["all"])
    types: str = "fd?"
    include_root: bool = True
    depth: int = Field(0, ge=0)
    ignore: List[str] = Field(default_factory=list)
    match: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @field_validator("mode", mode="before")
    @classmethod
    def _check_mode(cls, value: Union[str, List[str]]) -> List[str]:
        if isinstance(value, str):
            names = value.split(",")
        elif isinstance(value, list):
            names = [str(name) for name in value]
        else:
            raise ValueError("mode must be a field name or a list of field names")
        PrintMode.from_names(names)
        return [name.strip().lower() for name in names if name.strip()]

    @field_validator("types")
    @classmethod
    def _check_types(cls, value: str) -> str:
        if not value:
            raise ValueError("at least one type must be listed")
        for char in value:
            FileKind.from_marker(char)
        return value

    @field_validator("ignore", "match")
    @classmethod
    def _check_patterns(cls, value: List[str]) -> List[str]:
        for pattern in value:
            validate_glob(pattern)
        return value

    @property
    def print_mode(self) -> PrintMode:
        return PrintMode.from_names(self.mode)
