"""
GroupLocator - find repeated-label groups in a labeled tree

Pipeline:
    1. Enumerate parent nodes in preorder (iter_parents)
    2. Build a child label histogram per parent (build_histogram)
    3. Reduce each histogram to its dominant label (extract_dominance)
    4. Rank all candidates by dominant count (rank_candidates)

Steps 2-3 are independent per parent and may run on a thread pool; the
ranking always runs once over the complete candidate collection.
"""

import asyncio
import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from itertools import count
from typing import Any, Callable, Iterable, List, Optional

from ..config import LocatorConfig
from ..schemas.candidate import Candidate, RankedResult
from ..schemas.source import TreeAccessor, DEFAULT_ACCESSOR
from ..utils.progress import with_spinner_progress
from .dominance import extract_dominance
from .enumerator import iter_parents
from .histogram import build_histogram
from .ranking import rank_candidates

logger = logging.getLogger(__name__)


class GroupLocator:
    """
    Locate tabular groups (lists, row sets, card grids) in a labeled tree

    A group is a parent node whose direct children are dominated by a single
    repeated label. Every parent becomes a Candidate; candidates are ranked
    by how many children carry the dominant label, document order breaking
    ties.

    Examples:
        >>> locator = GroupLocator()
        >>> result = locator.locate(root)
        >>> best = result[0]
        >>> print(best.dominant_label, best.dominant_count)

        >>> # Parallel histogram construction, only the 5 strongest groups
        >>> locator = GroupLocator(max_workers=4, top_k=5)
        >>> result = locator.locate(root, scope=within("main"))
    """

    def __init__(
        self,
        config: Optional[LocatorConfig] = None,
        *,
        accessor: Optional[TreeAccessor] = None,
        executor: Optional[Executor] = None,
        **options: Any,
    ):
        """
        Initialize the locator

        Args:
            config: Locator configuration (default: LocatorConfig())
            accessor: Tree accessor (default: attribute-based TreeAccessor)
            executor: Optional executor for histogram construction. It is
                      used as-is and never shut down by the locator.
            **options: LocatorConfig fields overriding ``config``
                       (e.g. max_workers=4, top_k=10)
        """
        if config is None:
            config = LocatorConfig(**options)
        elif options:
            config = LocatorConfig(**{**config.model_dump(), **options})

        self.config = config
        self.accessor = accessor or DEFAULT_ACCESSOR
        self._executor = executor

    def locate(
        self,
        root: Any,
        scope: Optional[Callable[[Any], bool]] = None,
    ) -> RankedResult:
        """
        Rank the parent nodes of the tree at ``root``

        Args:
            root: Root (or sub-root) of the tree
            scope: Optional predicate restricting which parents are considered

        Returns:
            RankedResult, empty when no node has counted children

        Raises:
            StructuralError: If the input contains a cycle
        """
        parents = iter_parents(root, scope=scope, accessor=self.accessor)
        candidates = [c for c in self._build_candidates(parents) if c is not None]

        ranked = rank_candidates(candidates)

        if self.config.min_dominant_count > 1:
            ranked = RankedResult(
                [c for c in ranked if c.dominant_count >= self.config.min_dominant_count]
            )
        if self.config.top_k is not None:
            ranked = ranked.top(self.config.top_k)

        if ranked.is_empty:
            logger.info("No repeated-label group found")
        else:
            best = ranked[0]
            logger.info(
                f"Ranked {len(ranked)} candidate groups "
                f"(best: {best.label!r} with {best.dominant_count}x {best.dominant_label!r})"
            )
        return ranked

    async def alocate(
        self,
        root: Any,
        scope: Optional[Callable[[Any], bool]] = None,
    ) -> RankedResult:
        """
        Async version of locate

        Runs the pipeline in a worker thread so the event loop stays free.
        """
        return await asyncio.to_thread(self.locate, root, scope)

    @with_spinner_progress("Locating groups in {count} trees")
    def locate_many(
        self,
        roots: List[Any],
        scope: Optional[Callable[[Any], bool]] = None,
    ) -> List[RankedResult]:
        """
        Locate groups in several trees

        Args:
            roots: Tree roots (a single root is accepted too)
            scope: Optional predicate applied to every tree

        Returns:
            One RankedResult per root, in input order
        """
        return [self.locate(root, scope=scope) for root in roots]

    # ------------------------------------------------------------------
    # Candidate construction
    # ------------------------------------------------------------------
    def _build_candidates(self, parents: Iterable[Any]) -> List[Optional[Candidate]]:
        """Build candidates in enumeration order, on a pool if configured."""

        if self._executor is not None:
            return list(self._executor.map(self._build_candidate, count(), list(parents)))

        max_workers = self.config.max_workers
        if max_workers is None or max_workers == 1:
            return [self._build_candidate(i, node) for i, node in enumerate(parents)]

        # Enumerate fully first so a StructuralError surfaces before any work
        nodes = list(parents)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self._build_candidate, count(), nodes))

    def _build_candidate(self, position: int, node: Any) -> Optional[Candidate]:
        """Histogram + dominance for one parent; None if nothing was counted."""

        histogram = build_histogram(
            node,
            policy=self.config.unlabeled_policy,
            accessor=self.accessor,
        )
        if not histogram:
            logger.debug(f"Skipping {self.accessor.label(node)!r}: no labeled children")
            return None

        dominance = extract_dominance(histogram)
        return Candidate(
            node=node,
            label=self.accessor.label(node),
            histogram=histogram,
            dominant_label=dominance.label,
            dominant_count=dominance.count,
            tied_labels=dominance.tied_labels,
            position=position,
            children=list(self.accessor.children(node)),
        )


def extract_ranked_groups(
    root: Any,
    scope: Optional[Callable[[Any], bool]] = None,
    *,
    accessor: Optional[TreeAccessor] = None,
    **options: Any,
) -> RankedResult:
    """
    Rank the repeated-label groups of a tree

    Convenience wrapper around ``GroupLocator(...).locate(root, scope)``.

    Args:
        root: Root (or sub-root) of the tree
        scope: Optional predicate restricting which parents are considered
        accessor: Tree accessor (default: attribute-based TreeAccessor)
        **options: LocatorConfig fields (max_workers, top_k, ...)

    Returns:
        RankedResult, highest dominant count first

    Example:
        >>> result = extract_ranked_groups(root)
        >>> rows = result.children(0)
    """
    return GroupLocator(accessor=accessor, **options).locate(root, scope=scope)
