"""Logging setup for speedmatch.

Modules log through ``logging.getLogger(__name__)``; the CLI calls
``setup_logging`` once to attach a rich console handler to the package
logger.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import ConfigError

LOGGER_NAME = "speedmatch"

_HANDLER_ATTR = "_speedmatch_handler"


def setup_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        console: Optional rich console to write to (defaults to stderr).

    Returns:
        The configured ``speedmatch`` logger.
    """
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ConfigError(f"Unknown log level: {level}", field="log_level", value=level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric)

    # Replace a handler from an earlier call instead of stacking them
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def reset_logging() -> None:
    """Remove handlers installed by ``setup_logging`` (useful for testing)."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
