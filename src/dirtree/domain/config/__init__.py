"""Configuration models with Pydantic validation."""

from dirtree.domain.config.patterns import GlobPattern
from dirtree.domain.config.settings import ListingSettings
from dirtree.domain.config.walk import ALL_KINDS, WalkConfig

__all__ = [
    "ALL_KINDS",
    "GlobPattern",
    "ListingSettings",
    "WalkConfig",
]
