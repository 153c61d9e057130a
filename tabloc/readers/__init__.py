"""
Readers - build labeled Node trees from documents
"""

from .base import BaseReader
from .html import HtmlReader

__all__ = ["BaseReader", "HtmlReader"]
