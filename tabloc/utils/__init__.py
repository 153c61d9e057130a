"""
Utils module for tabloc
"""

from .progress import with_spinner_progress
from .logger import logger, set_level

__all__ = [
    "with_spinner_progress",
    "logger",
    "set_level",
]
