"""
Logging helpers.

Library modules get their logger with ``get_logger(__name__)``; applications
and notebooks call ``setup_logging()`` once to attach a handler.
"""

import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "dmmclust"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(
    level: Optional[Union[int, str]] = None,
    fmt: str = DEFAULT_FORMAT,
    stream=None,
) -> logging.Logger:
    """
    Configure the package logger.

    Calling it again replaces the handler installed by a previous call
    instead of stacking a second one.

    Args:
        level: Logging level name or number. Defaults to
            ``settings.log_level`` (DMMCLUST_LOG_LEVEL).
        fmt: Format string for records
        stream: Output stream (default: sys.stderr)

    Returns:
        The configured ``dmmclust`` logger
    """
    if level is None:
        from ..config import settings

        level = settings.log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_dmmclust_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    handler._dmmclust_handler = True
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``dmmclust`` namespace."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
