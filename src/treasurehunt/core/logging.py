"""Logger helpers for the package.

Every module grabs its own logger with ``get_logger(__name__)``. The package
root only carries a ``NullHandler``; embedding applications either configure
logging themselves or call ``configure_logging`` once at start-up.
"""
from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "treasurehunt"
_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module of this package."""
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_treasurehunt_handler", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    handler._treasurehunt_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
