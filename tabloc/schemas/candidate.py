"""
Candidate and ranked result schemas

A Candidate is an ephemeral record produced per locator run: a parent node,
the histogram of its direct children's labels and the dominance summary of
that histogram. A RankedResult is the ordered, read-only view over the
Candidates of one run.
"""

from typing import Any, Dict, Iterator, List, Optional, Sequence

from pydantic import BaseModel, Field


class Candidate(BaseModel):
    """Parent node considered for ranking.

    Attributes:
        node: The parent node (any object the accessor understands).
        label: Label of the parent node itself.
        histogram: Label -> count of direct children, keys in order of
            first appearance among the children.
        dominant_label: Label with the highest count (first in document
            order on ties).
        dominant_count: Highest per-label count.
        tied_labels: Every label reaching ``dominant_count``, in document order.
        position: Preorder index of the node among enumerated parents.
        children: Direct children of the node, in document order.
    """

    node: Any
    label: Optional[str] = None
    histogram: Dict[str, int]
    dominant_label: str
    dominant_count: int
    tied_labels: List[str] = Field(default_factory=list)
    position: int
    children: List[Any] = Field(default_factory=list)

    model_config = {
        "arbitrary_types_allowed": True,
    }

    @property
    def child_count(self) -> int:
        """Number of counted children (sum of the histogram)."""
        return sum(self.histogram.values())

    @property
    def homogeneity(self) -> float:
        """Share of counted children carrying the dominant label.

        Informational only: ranking uses the raw ``dominant_count``.
        """
        total = self.child_count
        return self.dominant_count / total if total else 0.0

    def to_record(self) -> Dict[str, Any]:
        """Plain-dict summary (no node references) for reporting layers."""

        return {
            "position": self.position,
            "label": self.label,
            "dominant_label": self.dominant_label,
            "dominant_count": self.dominant_count,
            "tied_labels": list(self.tied_labels),
            "child_count": self.child_count,
            "homogeneity": round(self.homogeneity, 4),
            "histogram": dict(self.histogram),
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return (
            f"Candidate(label={self.label!r}, dominant={self.dominant_label!r}:"
            f"{self.dominant_count}, position={self.position})"
        )

    __str__ = __repr__


class RankedResult(Sequence[Candidate]):
    """Ordered sequence of Candidates, highest dominance first.

    An empty RankedResult is a valid outcome: the tree simply had no node
    with counted children.

    Example:
        >>> result = extract_ranked_groups(root)
        >>> for child in result.children(0):
        ...     print(child.text_content())
    """

    def __init__(self, candidates: Sequence[Candidate]) -> None:
        self._candidates = tuple(candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return RankedResult(self._candidates[index])
        return self._candidates[index]

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates)

    @property
    def is_empty(self) -> bool:
        return not self._candidates

    def children(self, k: int) -> List[Any]:
        """Return the ordered direct children of the k-th ranked Candidate.

        Raises:
            IndexError: If ``k`` is out of range.
        """

        try:
            candidate = self._candidates[k]
        except IndexError:
            raise IndexError(
                f"Rank {k} out of range for a result of {len(self._candidates)} candidates"
            ) from None
        return list(candidate.children)

    def top(self, n: int) -> "RankedResult":
        """Return the first ``n`` candidates as a new RankedResult."""

        if n < 0:
            raise ValueError(f"n must be non-negative, got: {n}")
        return RankedResult(self._candidates[:n])

    def to_records(self) -> List[Dict[str, Any]]:
        return [candidate.to_record() for candidate in self._candidates]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RankedResult):
            return NotImplemented
        return self._candidates == other._candidates

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"RankedResult(candidates={len(self._candidates)})"
