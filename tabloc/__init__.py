"""
Tabloc - locate tabular groups in labeled trees
"""

import logging
from rich.console import Console
from rich.logging import RichHandler

__version__ = "0.1.0"

# Configure rich logging
_console = Console(stderr=True)
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(
        console=_console,
        rich_tracebacks=True,
        show_time=True,
        show_path=False
    )]
)

# Exceptions
from .exceptions import (
    TablocError,
    ConfigurationError,
    StructuralError,
    EmptyHistogramError,
    ReaderError,
)

# Core schemas
from .schemas import (
    Node,
    Candidate,
    RankedResult,
    UnlabeledPolicy,
    UNLABELED,
    LabeledNode,
    TreeAccessor,
    SoupAccessor,
)

# Configuration
from .config import LocatorConfig

# Locators
from .locators import (
    GroupLocator,
    extract_ranked_groups,
    iter_parents,
    build_histogram,
    extract_dominance,
    rank_candidates,
    has_label,
    within,
    has_attr,
    all_of,
)

# Readers
from .readers import BaseReader, HtmlReader

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "TablocError",
    "ConfigurationError",
    "StructuralError",
    "EmptyHistogramError",
    "ReaderError",
    # Schemas
    "Node",
    "Candidate",
    "RankedResult",
    "UnlabeledPolicy",
    "UNLABELED",
    "LabeledNode",
    "TreeAccessor",
    "SoupAccessor",
    # Configuration
    "LocatorConfig",
    # Locators
    "GroupLocator",
    "extract_ranked_groups",
    "iter_parents",
    "build_histogram",
    "extract_dominance",
    "rank_candidates",
    "has_label",
    "within",
    "has_attr",
    "all_of",
    # Readers
    "BaseReader",
    "HtmlReader",
]
