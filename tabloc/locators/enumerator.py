"""
Parent enumerator - walk a labeled tree and yield its internal nodes.
"""

from typing import Any, Callable, Iterator, Optional

from ..exceptions import StructuralError
from ..schemas.source import TreeAccessor, DEFAULT_ACCESSOR
from .scopes import bind_scope


def iter_parents(
    root: Any,
    scope: Optional[Callable[[Any], bool]] = None,
    accessor: Optional[TreeAccessor] = None,
) -> Iterator[Any]:
    """
    Yield every node under ``root`` that owns at least one child

    Nodes come out in preorder (parent before descendants, siblings in
    document order), so enumerating the same tree twice yields the same
    sequence. Leaves are never yielded. The generator is lazy and cannot be
    restarted; stop consuming it to abandon the walk.

    Args:
        root: Root (or any sub-root) of the tree to walk
        scope: Optional predicate; only nodes for which it returns True are
               yielded. Traversal still descends through rejected nodes.
        accessor: Tree accessor (default: attribute-based TreeAccessor)

    Yields:
        Internal nodes in preorder

    Raises:
        StructuralError: If a node is reached twice (cycle or shared subtree)
    """
    accessor = accessor or DEFAULT_ACCESSOR
    scope = bind_scope(scope, accessor)
    # Holding the nodes keeps ids unique for accessors that wrap on demand
    visited: dict[int, Any] = {id(root): root}
    stack = [root]

    while stack:
        node = stack.pop()
        children = list(accessor.children(node))

        for child in children:
            if id(child) in visited:
                raise StructuralError(
                    f"Node {accessor.label(child)!r} reached twice under "
                    f"{accessor.label(node)!r}; input is not a tree"
                )
            visited[id(child)] = child

        if not children:
            continue

        if scope is None or scope(node):
            yield node

        # Reversed so the first child is popped (and yielded) first
        stack.extend(reversed(children))
