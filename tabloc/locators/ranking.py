"""
Ranking engine - order candidates by dominance
"""

from typing import Iterable

from ..schemas.candidate import Candidate, RankedResult


def rank_candidates(candidates: Iterable[Candidate]) -> RankedResult:
    """
    Sort candidates by ``dominant_count`` descending

    Equal counts keep enumeration (document) order. Counts are not
    normalized by the number of children: a node with 51 matching children
    outranks a fully homogeneous node with 3, which favors large groups over
    pure ones (see ``Candidate.homogeneity`` for the ratio).

    Must be given the complete candidate collection of one run.

    Args:
        candidates: Candidates of a single locator run

    Returns:
        RankedResult in ranking order
    """
    ranked = sorted(candidates, key=lambda c: (-c.dominant_count, c.position))
    return RankedResult(ranked)
