"""
Tree source accessors

The locator never touches a tree directly; it reads labels, children and
parents through an accessor. This keeps the pipeline independent of how a
tree was produced (markup parsing, synthetic construction, test fixtures).

    - LabeledNode: structural protocol satisfied by ``Node``
    - TreeAccessor: default accessor, reads the ``label``/``children``/``parent``
      attributes of each node
    - SoupAccessor: reads a BeautifulSoup ``Tag`` tree in place
"""

from typing import Any, Mapping, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class LabeledNode(Protocol):
    """Minimal node capability required by the locator"""

    @property
    def label(self) -> Optional[str]: ...

    @property
    def children(self) -> Sequence[Any]: ...

    @property
    def parent(self) -> Optional[Any]: ...


class TreeAccessor:
    """
    Attribute-based accessor for ``LabeledNode`` trees

    Subclass and override the three methods to adapt any other tree
    representation without converting it first.
    """

    def label(self, node: Any) -> Optional[str]:
        return node.label

    def children(self, node: Any) -> Sequence[Any]:
        return node.children

    def parent(self, node: Any) -> Optional[Any]:
        return getattr(node, "parent", None)

    def attrs(self, node: Any) -> Mapping[str, Any]:
        return getattr(node, "attrs", None) or {}


class SoupAccessor(TreeAccessor):
    """
    Accessor for BeautifulSoup trees

    Only element children (``Tag``) are considered; strings, comments and
    other navigable strings are ignored. The soup is read in place, so
    mutating it while a locator runs is undefined behavior. Use
    ``HtmlReader`` to snapshot markup into an independent ``Node`` tree
    instead.

    Example:
        >>> soup = BeautifulSoup(html, "html.parser")
        >>> result = extract_ranked_groups(soup.body, accessor=SoupAccessor())
    """

    def label(self, node: Any) -> Optional[str]:
        return node.name

    def children(self, node: Any) -> Sequence[Any]:
        return node.find_all(True, recursive=False)

    def parent(self, node: Any) -> Optional[Any]:
        parent = node.parent
        # The BeautifulSoup object itself is the parent of the top element
        if parent is None or parent.name == "[document]":
            return None
        return parent


DEFAULT_ACCESSOR = TreeAccessor()
