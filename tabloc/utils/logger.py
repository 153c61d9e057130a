"""
Package logger

The rich handler itself is installed once in ``tabloc/__init__.py``; modules
log through ``logging.getLogger(__name__)`` and inherit its level from here.
"""

import logging
from typing import Union

logger = logging.getLogger("tabloc")


def set_level(level: Union[int, str]) -> None:
    """
    Set the log level of all tabloc loggers

    Args:
        level: Logging level name ("DEBUG", "INFO", ...) or number

    Example:
        >>> from tabloc.utils import set_level
        >>> set_level("DEBUG")
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
