"""
HtmlReader - snapshot HTML markup into a labeled Node tree.

Only element nodes become Nodes; text is kept on the element that directly
owns it, comments and doctype declarations are dropped. The resulting tree
is independent from the soup, so the locator can run on it while the
original document is discarded or modified.
"""

from pathlib import Path
from typing import Optional, Sequence, Union
import logging

from bs4 import BeautifulSoup, NavigableString, Tag

from ..exceptions import ReaderError
from ..schemas import Node
from .base import BaseReader

logger = logging.getLogger(__name__)


class HtmlReader(BaseReader):
    """Read HTML into a Node tree.

    Usage:
        >>> reader = HtmlReader()
        >>> root = reader.read("page.html")
        >>> body = reader.read_string(markup, root="body")

        >>> # Tell cards apart from other divs by their classes
        >>> reader = HtmlReader(label_classes=True)   # labels like "div.card"

    Notes:
        - Without a ``root`` selector the returned Node is a synthetic
          ``#document`` node whose children are the top-level elements
        - ``attrs`` only keeps the attributes listed in ``keep_attrs``
        - Whitespace inside text is collapsed to single spaces
    """

    DOCUMENT_LABEL = "#document"

    def __init__(
        self,
        parser: str = "html.parser",
        label_classes: bool = False,
        keep_attrs: Sequence[str] = ("id", "class"),
    ) -> None:
        """
        Args:
            parser: BeautifulSoup parser name ("html.parser", "lxml", ...)
            label_classes: Append CSS classes to labels ("li.item.active")
            keep_attrs: Attribute names copied onto each Node
        """
        self.parser = parser
        self.label_classes = label_classes
        self.keep_attrs = tuple(keep_attrs)

    def read(self, source: Union[str, Path], root: Optional[str] = None) -> Node:
        """Read an HTML file.

        Args:
            source: Path to the HTML file
            root: Optional CSS selector of the sub-root to return

        Raises:
            ReaderError: If the file does not exist or holds no element
        """

        path = Path(source)
        if not path.is_file():
            raise ReaderError(f"File not found: {path}")

        markup = path.read_text(encoding="utf-8", errors="replace")
        logger.debug(f"Read {len(markup)} characters from {path}")
        return self.read_string(markup, root=root)

    def read_string(self, markup: str, root: Optional[str] = None) -> Node:
        """Parse HTML markup.

        Args:
            markup: HTML text (full document or fragment)
            root: Optional CSS selector of the sub-root to return

        Raises:
            ReaderError: If no element is found (or ``root`` matches nothing)
        """

        soup = BeautifulSoup(markup, self.parser)

        if root is not None:
            top = soup.select_one(root)
            if top is None:
                raise ReaderError(f"Selector {root!r} matched no element")
            return self._convert(top)

        if soup.find(True) is None:
            raise ReaderError("Document contains no element")

        document = Node(label=self.DOCUMENT_LABEL)
        for tag in soup.find_all(True, recursive=False):
            document.children.append(self._convert(tag))
        return document.bind_parents()

    # ------------------------------------------------------------------
    # Conversion helpers
    # ------------------------------------------------------------------
    def _convert(self, top: Tag) -> Node:
        """Convert a Tag subtree iteratively (deep documents are common)."""

        root = self._make_node(top)
        stack = [(top, root)]
        while stack:
            tag, node = stack.pop()
            for child_tag in tag.find_all(True, recursive=False):
                child = self._make_node(child_tag)
                node.children.append(child)
                stack.append((child_tag, child))
        return root.bind_parents()

    def _make_node(self, tag: Tag) -> Node:
        return Node(
            label=self._label(tag),
            attrs=self._attrs(tag),
            text=self._own_text(tag),
        )

    def _label(self, tag: Tag) -> str:
        if not self.label_classes:
            return tag.name
        classes = tag.get("class") or []
        return ".".join([tag.name, *classes])

    def _attrs(self, tag: Tag) -> dict[str, str]:
        attrs = {}
        for name in self.keep_attrs:
            value = tag.get(name)
            if value is None:
                continue
            # Multi-valued attributes (class, rel, ...) come back as lists
            attrs[name] = " ".join(value) if isinstance(value, list) else str(value)
        return attrs

    @staticmethod
    def _own_text(tag: Tag) -> str:
        # Subclasses of NavigableString are comments, doctypes, CDATA, scripts...
        parts = [str(s) for s in tag.children if type(s) is NavigableString]
        return " ".join(" ".join(parts).split())
