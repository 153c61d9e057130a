"""
Locators for finding repeated-label groups in labeled trees

Locators are responsible for:
- Enumerating the parent nodes of a tree in document order
- Counting the labels of each parent's direct children
- Ranking parents by how strongly one label repeats among their children

Locators never parse markup; they consume a tree through a TreeAccessor.
"""

from .enumerator import iter_parents
from .histogram import build_histogram
from .dominance import Dominance, extract_dominance
from .ranking import rank_candidates
from .scopes import Scope, has_label, within, has_attr, all_of
from .locator import GroupLocator, extract_ranked_groups

__all__ = [
    "iter_parents",
    "build_histogram",
    "Dominance",
    "extract_dominance",
    "rank_candidates",
    "Scope",
    "has_label",
    "within",
    "has_attr",
    "all_of",
    "GroupLocator",
    "extract_ranked_groups",
]
