"""Logging configuration for the CLI.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves; the CLI attaches one handler to the
``cast_profiles`` package logger at startup.
"""

from __future__ import annotations

import logging
import sys

from cast_profiles.cli.console import get_rich_console

PACKAGE_LOGGER: str = "cast_profiles"


def _build_handler() -> logging.Handler:
    """Return a Rich handler on stderr, or a plain stream handler without Rich."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )
        return handler
    return RichHandler(console=get_rich_console(), show_path=False)


def configure_logging(verbose: bool) -> None:
    """Install the package log handler.

    Parameters
    ----------
    verbose:
        ``True`` logs at DEBUG, otherwise only warnings and above.
    """
    level: int = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    # Idempotent across repeated main() calls in one process.
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_handler())
