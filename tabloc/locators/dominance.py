"""
Dominance extractor - reduce a histogram to its strongest label
"""

from typing import Mapping, NamedTuple

from ..exceptions import EmptyHistogramError


class Dominance(NamedTuple):
    """Dominant label of a histogram"""

    label: str
    count: int
    tied_labels: list[str]


def extract_dominance(histogram: Mapping[str, int]) -> Dominance:
    """
    Find the label with the highest count

    When several labels share the maximum, the first one in the mapping's
    iteration order wins. Histograms from ``build_histogram`` iterate in
    order of first appearance among the children, so ties resolve to the
    label met first in the document.

    Args:
        histogram: Mapping label -> count

    Returns:
        Dominance(label, count, tied_labels)

    Raises:
        EmptyHistogramError: If the histogram has no entries
    """
    if not histogram:
        raise EmptyHistogramError("Cannot extract dominance from an empty histogram")

    count = max(histogram.values())
    tied = [label for label, value in histogram.items() if value == count]
    return Dominance(label=tied[0], count=count, tied_labels=tied)
