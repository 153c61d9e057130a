"""Shared test configuration and fixtures."""

import pytest

from tabloc import Node


def _node(label, *children, text="", **attrs):
    return Node(label=label, children=list(children), attrs=attrs, text=text)


@pytest.fixture
def n():
    """Builder: n("ul", n("li"), n("li"), id="menu") -> Node."""
    return _node


@pytest.fixture
def scenario_tree():
    """body -> [div#1 -> [a, a, a], ul -> [li x 5]]"""
    return _node(
        "body",
        _node("div", _node("a"), _node("a"), _node("a"), id="1"),
        _node("ul", *[_node("li", text=str(i)) for i in range(5)]),
    )


@pytest.fixture
def leaf_only_tree():
    return _node("body")


@pytest.fixture
def sample_html():
    return """
<!DOCTYPE html>
<html>
  <body>
    <div id="1"><a>x</a><a>y</a><a>z</a></div>
    <ul>
      <li>one</li><li>two</li><li>three</li><li>four</li><li>five</li>
    </ul>
  </body>
</html>
"""
