"""Configuration manager for loading and validating .dirtree.yml"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from dirtree.domain.config.settings import ListingSettings
from dirtree.domain.errors import ConfigurationError
from dirtree.domain.options import Depth, Ignore, IncludeRoot, Match, Option, Type
from dirtree.infrastructure.config.config_resolver import format_validation_error

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".dirtree.yml"


class ConfigManager:
    """Manages command line listing settings

    Settings priority:
    1. Default values (defined in ListingSettings)
    2. .dirtree.yml file (searched from the start directory upwards)
    3. Environment variables (DIRTREE_MODE, DIRTREE_DEPTH)
    """

    def __init__(self, config_path: Optional[Path] = None, start_dir: Optional[Path] = None):
        """Initialize config manager

        Args:
            config_path: Path to .dirtree.yml (searched for if None)
            start_dir: Directory the search starts from (current directory if None)

        Raises:
            ConfigurationError: If the settings are invalid
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)
        self.config_path = config_path or self._find_config_file(start_dir or Path.cwd())
        try:
            self.settings: ListingSettings = self._load_settings()
        except ValidationError as e:
            raise ConfigurationError(
                "Configuration validation failed:\n" + format_validation_error(e)
            ) from e

    def _find_config_file(self, start: Path) -> Optional[Path]:
        """Find .dirtree.yml starting from start and going up

        Returns:
            Path to config file or None if not found
        """
        start = start.resolve()
        for parent in [start] + list(start.parents):
            config_file = parent / CONFIG_FILENAME
            if config_file.is_file():
                logger.info(f"Found config file: {config_file}")
                return config_file
        logger.debug(f"No {CONFIG_FILENAME} found, using defaults")
        return None

    def _load_settings(self) -> ListingSettings:
        """Load settings from file and environment, then validate

        Raises:
            ConfigurationError: If the file can't be read or parsed
            ValidationError: If a setting is invalid
        """
        raw: Dict[str, Any] = {}
        if self.config_path is not None:
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    raw = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Can't load {self.config_path}: {e}") from e
            if not isinstance(raw, dict):
                raise ConfigurationError(f"{self.config_path} must contain a mapping")
            logger.info(f"Loaded configuration from {self.config_path}")

        raw = self._apply_env_overrides(raw)
        return ListingSettings(**raw)

    def _apply_env_overrides(self, raw: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides

        Args:
            raw: Settings read from file

        Returns:
            Settings with env overrides applied
        """
        result = dict(raw)
        if os.getenv("DIRTREE_MODE"):
            result["mode"] = os.getenv("DIRTREE_MODE")
        if os.getenv("DIRTREE_DEPTH"):
            result["depth"] = os.getenv("DIRTREE_DEPTH")
        return result

    def get_options(self) -> List[Option]:
        """Turn settings into listing options

        Returns:
            Options to pass to dirtree.write and friends
        """
        s = self.settings
        options: List[Option] = [s.print_mode, Type(s.types), IncludeRoot(s.include_root)]
        if s.depth:
            options.append(Depth(s.depth))
        options.extend(Ignore(pattern) for pattern in s.ignore)
        options.extend(Match(pattern) for pattern in s.match)
        return options
