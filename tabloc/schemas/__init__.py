"""
Schemas module - Core data structures
"""

from .types import UnlabeledPolicy, UNLABELED
from .tree import Node
from .source import LabeledNode, TreeAccessor, SoupAccessor, DEFAULT_ACCESSOR
from .candidate import Candidate, RankedResult

__all__ = [
    # Enums and constants
    "UnlabeledPolicy",
    "UNLABELED",
    # Tree
    "Node",
    # Tree source accessors
    "LabeledNode",
    "TreeAccessor",
    "SoupAccessor",
    "DEFAULT_ACCESSOR",
    # Results
    "Candidate",
    "RankedResult",
]
