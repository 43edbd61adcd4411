"""Resolution of listing options into a walk configuration"""

import logging

from pydantic import ValidationError

from dirtree.domain.config.walk import WalkConfig
from dirtree.domain.errors import ConfigurationError
from dirtree.domain.models.print_mode import PrintMode
from dirtree.domain.options import Depth, Ignore, IncludeRoot, Match, Option, Type

logger = logging.getLogger(__name__)

_OPTION_TYPES = (Type, IncludeRoot, Ignore, Match, Depth)


def format_validation_error(error: ValidationError) -> str:
    """Format pydantic validation errors, one line per offending field"""
    lines = []
    for err in error.errors():
        field = ".".join(str(x) for x in err["loc"])
        msg = err["msg"]
        lines.append(f"  - {field}: {msg}" if field else f"  - {msg}")
    return "\n".join(lines)


def resolve_config(*options: Option) -> WalkConfig:
    """Apply options, in order, over the baseline configuration

    The baseline prints PrintMode.DEFAULT, includes the root, has no depth
    limit, lists every kind of file and has no patterns.

    Args:
        *options: PrintMode values and option objects

    Returns:
        Effective configuration

    Raises:
        ConfigurationError: If an option is invalid or of an unknown type
    """
    config = WalkConfig()
    for option in options:
        try:
            if isinstance(option, PrintMode):
                config.mode = option
            elif isinstance(option, _OPTION_TYPES):
                option.apply(config)
            else:
                raise ConfigurationError(f"unsupported option {option!r}")
        except ValidationError as e:
            raise ConfigurationError(
                f"invalid option {option!r}:\n" + format_validation_error(e)
            ) from e

    logger.debug(
        f"Resolved configuration: mode={config.mode!r} include_root={config.include_root} "
        f"depth={config.depth} kinds={sorted(k.value for k in config.kinds)} "
        f"patterns={len(config.patterns)}"
    )
    return config
