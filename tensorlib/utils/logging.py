"""Logging configuration helper for tensorlib."""

import logging
import sys
from typing import Optional, TextIO, Union

__all__ = ["setup_logging"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the ``tensorlib`` logger.

    Attaches a single StreamHandler (stdout by default) using the format
    "timestamp - logger name - level - message". Calling it again replaces
    the handler instead of stacking another one.

    Args:
        level: Logging level name or number.
        stream: Destination stream.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("tensorlib")
    for handler in list(logger.handlers):
        if getattr(handler, "_tensorlib_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._tensorlib_handler = True
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
