"""Logging helpers for bangumatch.

Provides debug(), info(), warn(), error() on the ``bangumatch`` logger plus
advisory() for resolution advisories. Debug output is enabled by the
BANGUMATCH_DEBUG environment variable or by set_debug() (the CLI --debug flag).
"""

import logging
import os
from typing import Optional

from bangumatch.models.core import Advisory

LOGGER_NAME = "bangumatch"

_logger: Optional[logging.Logger] = None
_debug_on: bool = os.getenv("BANGUMATCH_DEBUG", "0") == "1"


def setup_logger() -> logging.Logger:
    """Return the package logger, attaching a stderr handler on first use."""
    global _logger
    if _logger is not None:
        return _logger
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(asctime)s %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if _debug_on else logging.INFO)
    _logger = logger
    return logger


def set_debug(enabled: bool) -> None:
    """Switch debug logging on or off at runtime."""
    global _debug_on
    _debug_on = enabled
    setup_logger().setLevel(logging.DEBUG if enabled else logging.INFO)


def debug(msg: str) -> None:
    if _debug_on:
        setup_logger().debug(msg)


def info(msg: str) -> None:
    setup_logger().info(msg)


def warn(msg: str) -> None:
    setup_logger().warning(msg)


def error(msg: str) -> None:
    setup_logger().error(msg)


def advisory(item: Advisory) -> None:
    """Log a resolution advisory as a warning tagged with its kind."""
    setup_logger().warning("[%s] %s", item.kind.value, item.message)
