"""
Child label histogram builder
"""

from typing import Any, Dict, Optional

from ..schemas.source import TreeAccessor, DEFAULT_ACCESSOR
from ..schemas.types import UnlabeledPolicy, UNLABELED


def build_histogram(
    node: Any,
    policy: UnlabeledPolicy = UnlabeledPolicy.EXCLUDE,
    accessor: Optional[TreeAccessor] = None,
) -> Dict[str, int]:
    """
    Count the direct children of ``node`` per label

    Only immediate children are counted, never deeper descendants. Keys are
    inserted in order of first appearance among the children, which is what
    the dominance tie-break relies on.

    Args:
        node: Parent node
        policy: Treatment of children without a label
                - EXCLUDE: skip them (default)
                - SENTINEL: count them under ``UNLABELED``
        accessor: Tree accessor (default: attribute-based TreeAccessor)

    Returns:
        Mapping label -> count (empty if no child was counted)
    """
    accessor = accessor or DEFAULT_ACCESSOR
    histogram: Dict[str, int] = {}

    for child in accessor.children(node):
        label = accessor.label(child)
        if not label:
            if policy is UnlabeledPolicy.EXCLUDE:
                continue
            label = UNLABELED
        histogram[label] = histogram.get(label, 0) + 1

    return histogram
