"""
Tree schemas - labeled trees consumed by the group locator.

This module defines:
    - Node: a labeled tree node with ordered children and a weak parent link

Ownership flows strictly from parent to child. The parent link is a
``weakref.ref`` kept in a private attribute, so a tree never forms a
reference cycle through its back-references and a detached subtree simply
reports ``parent is None`` once its former parent is collected.
"""

from typing import Any, Dict, Iterator, List, Optional
import json
import weakref

from pydantic import BaseModel, Field, PrivateAttr


class Node(BaseModel):
    """Labeled tree node.

    Attributes:
        label: Tag name of the node (``None`` for anonymous nodes).
        children: Ordered child nodes.
        attrs: Optional string attributes (e.g. ``id``, ``class``).
        text: Text directly owned by this node, excluding descendants.

    Example:
        >>> ul = Node(label="ul", children=[Node(label="li"), Node(label="li")])
        >>> ul.children[0].parent is ul
        True
    """

    label: Optional[str] = None
    children: List["Node"] = Field(default_factory=list)
    attrs: Dict[str, str] = Field(default_factory=dict)
    text: str = ""

    _parent: Optional[weakref.ref] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        # Children are built before their parent, so only the direct
        # links are missing at this point
        for child in self.children:
            child._parent = weakref.ref(self)

    @property
    def parent(self) -> Optional["Node"]:
        """Parent node, or None for a root (or an orphaned subtree)."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def bind_parents(self) -> "Node":
        """Re-link parent references of the whole subtree.

        Call this after mutating ``children`` lists in place. Nodes already
        seen are not descended into again.
        """

        seen = {id(self)}
        stack = [self]
        while stack:
            node = stack.pop()
            for child in node.children:
                child._parent = weakref.ref(node)
                if id(child) not in seen:
                    seen.add(id(child))
                    stack.append(child)
        return self

    # ------------------------------------------------------------------
    # Traversal helpers
    # ------------------------------------------------------------------
    def iter_nodes(self) -> Iterator["Node"]:
        """Yield this node and all descendants in preorder traversal order."""

        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, label: str) -> Optional["Node"]:
        """Return the first node (preorder) carrying ``label``."""

        for node in self.iter_nodes():
            if node.label == label:
                return node
        return None

    def find_all(self, label: str) -> List["Node"]:
        return [node for node in self.iter_nodes() if node.label == label]

    def iter_text(self) -> Iterator[str]:
        """Yield non-empty text fragments of the subtree in document order."""

        for node in self.iter_nodes():
            if node.text:
                yield node.text

    def text_content(self, separator: str = " ") -> str:
        return separator.join(self.iter_text())

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        """Create a Node tree from a nested dictionary.

        Expected format:
            {"label": str, "children": [Node-like dict, ...],
             "attrs": {...}, "text": str}
        """

        return cls.model_validate(data)

    @classmethod
    def from_json(cls, json_path: str) -> "Node":
        """Load a Node tree from a JSON file."""

        with open(json_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the subtree to a serializable dict."""

        return self.model_dump(exclude_defaults=True)

    def to_json(self, json_path: str) -> None:
        """Serialize the subtree to a JSON file."""

        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)

    def __eq__(self, other: object) -> bool:
        # The parent link is left out: comparing it would walk back up the tree
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.label == other.label
            and self.attrs == other.attrs
            and self.text == other.text
            and self.children == other.children
        )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Node(label={self.label!r}, children={len(self.children)})"

    __str__ = __repr__
