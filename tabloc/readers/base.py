"""
Base reader class for all tree sources
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ..schemas import Node


class BaseReader(ABC):
    """
    Base class for all readers
    Simple interface definition - readers parse files and return a Node tree

    Readers live outside the locator core: any object tree works with the
    locators as long as a TreeAccessor understands it.
    """
    
    @abstractmethod
    def read(self, source: Union[str, Path]) -> Node:
        """
        Read and parse a file
        
        Args:
            source: File path (str or Path object, relative/absolute)
            
        Returns:
            Root Node of an independent, fully materialized tree
        """
        pass
