"""CLI interface for dirtree"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

import click

from dirtree.application.listing_service import write
from dirtree.domain.errors import DirtreeError
from dirtree.infrastructure.config.config_manager import ConfigManager

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration, on stderr so the listing stays clean"""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger().setLevel(level)


def _verbose_from_env() -> bool:
    return os.getenv("DIRTREE_VERBOSE", "").lower() in ("1", "true", "yes", "on")


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


def _listing_stream() -> TextIO:
    """Return stdout, writing undecodable file names back as their raw bytes"""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")
    return sys.stdout


@click.command()
@click.argument("directory", required=False, default=".", type=click.Path(path_type=Path))
def cli(directory: Path):
    """Recursively list the content of a directory.

    DIRECTORY defaults to the current directory. The fields printed for each
    file, as well as filters, can be set in a .dirtree.yml file found in
    DIRECTORY or the nearest of its parents.
    """
    verbose = _verbose_from_env()
    setup_logging(verbose)
    logger.debug(f"Listing {directory}")

    try:
        config_manager = ConfigManager(start_dir=directory)
        write(_listing_stream(), directory, *config_manager.get_options())
    except DirtreeError as e:
        _die(str(e), verbose=verbose, exc=e)


def main():
    """Main entry point"""
    cli()


if __name__ == "__main__":
    main()
