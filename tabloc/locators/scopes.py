"""
Scope predicates for restricting enumeration

A scope is any callable ``node -> bool``. These helpers cover the common
cases, such as searching only under a given ancestor.

Helpers read nodes through a TreeAccessor. Unless one is passed explicitly,
they take the accessor of the enumeration they are used in, so
``within("body")`` works the same on Node trees and on BeautifulSoup trees.

Examples:
    >>> extract_ranked_groups(root, scope=within("table"))
    >>> extract_ranked_groups(root, scope=all_of(has_label("ul", "ol"), within("main")))
    >>> extract_ranked_groups(soup.body, scope=within("main"), accessor=SoupAccessor())
"""

from typing import Any, Callable, Optional

from ..schemas.source import TreeAccessor, DEFAULT_ACCESSOR


class Scope:
    """
    Node predicate reading nodes through an accessor

    Args:
        test: Function ``(node, accessor) -> bool``
        accessor: Explicit accessor. When None, ``bind()`` supplies the
                  accessor of the enumeration and calling the scope unbound
                  falls back to the attribute-based TreeAccessor.
    """

    def __init__(
        self,
        test: Callable[[Any, TreeAccessor], bool],
        accessor: Optional[TreeAccessor] = None,
    ):
        self._test = test
        self.accessor = accessor

    def bind(self, accessor: TreeAccessor) -> "Scope":
        """Return this scope reading through ``accessor`` unless one was set explicitly."""
        if self.accessor is not None:
            return self
        return Scope(self._test, accessor)

    def __call__(self, node: Any) -> bool:
        return self._test(node, self.accessor or DEFAULT_ACCESSOR)


def bind_scope(
    scope: Optional[Callable[[Any], bool]],
    accessor: TreeAccessor,
) -> Optional[Callable[[Any], bool]]:
    """Bind helper scopes to ``accessor``; plain callables pass through unchanged."""
    if isinstance(scope, Scope):
        return scope.bind(accessor)
    return scope


def has_label(*labels: str, accessor: Optional[TreeAccessor] = None) -> Scope:
    """Accept nodes whose own label is one of ``labels``."""
    wanted = set(labels)

    def test(node: Any, acc: TreeAccessor) -> bool:
        return acc.label(node) in wanted

    return Scope(test, accessor)


def within(label: str, inclusive: bool = True, accessor: Optional[TreeAccessor] = None) -> Scope:
    """
    Accept nodes located under an ancestor labeled ``label``

    Walks the parent links of each node, so the tree source must provide
    them.

    Args:
        label: Ancestor label to look for
        inclusive: Also accept a node that itself carries ``label``
        accessor: Explicit accessor. Leave unset to use the locator's one;
                  an accessor that does not match the tree (e.g. the default
                  TreeAccessor on a soup, where ``tag.label`` is a child
                  lookup) rejects every node.
    """

    def test(node: Any, acc: TreeAccessor) -> bool:
        current = node if inclusive else acc.parent(node)
        while current is not None:
            if acc.label(current) == label:
                return True
            current = acc.parent(current)
        return False

    return Scope(test, accessor)


def has_attr(name: str, value: Optional[str] = None, accessor: Optional[TreeAccessor] = None) -> Scope:
    """
    Accept nodes carrying attribute ``name`` (optionally equal to ``value``)

    Multi-valued attributes such as ``class`` match when ``value`` is one of
    their whitespace-separated tokens.
    """

    def test(node: Any, acc: TreeAccessor) -> bool:
        attrs = acc.attrs(node)
        if name not in attrs:
            return False
        if value is None:
            return True
        actual = attrs[name]
        tokens = actual if isinstance(actual, (list, tuple)) else str(actual).split()
        return actual == value or value in tokens

    return Scope(test, accessor)


def all_of(*predicates: Callable[[Any], bool]) -> Scope:
    """Accept nodes satisfying every predicate."""

    def test(node: Any, acc: TreeAccessor) -> bool:
        return all(bind_scope(p, acc)(node) for p in predicates)

    return Scope(test)
