"""Generic markup tree serializer.

A tiny element tree with three kinds of children:

- `Node`: an element, always rendered as an open/close pair
- `str`: text, escaped on output
- `Raw`: trusted markup, written verbatim

Attributes keep insertion order. Empty attribute values are dropped unless
the attribute is marked required.

Example:
    >>> from instantpress.markup.tree import Node, Raw, render
    >>> p = Node("p", children=[Raw("Hello <b>world</b>")])
    >>> render(p)
    '<p>Hello <b>world</b></p>'
    >>> render(Node("h1", children=["Fish & Chips"]))
    '<h1>Fish &amp; Chips</h1>'
    >>> render(Node("img").set("src", "a.jpg").set("alt", ""))
    '<img src="a.jpg"></img>'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from xml.sax.saxutils import escape

_ATTR_ENTITIES = {'"': "&quot;"}


@dataclass(frozen=True)
class Raw:
    """Markup written to the output without escaping."""

    markup: str


@dataclass
class Node:
    """An element with ordered attributes and mixed children."""

    tag: str
    attrs: list[tuple[str, str]] = field(default_factory=list)
    children: list[Node | Raw | str] = field(default_factory=list)

    def set(self, name: str, value: str, *, required: bool = False) -> Node:
        """Add an attribute, skipping empty values unless required."""
        if value or required:
            self.attrs.append((name, value))
        return self

    def append(self, child: Node | Raw | str | None) -> Node:
        """Append a child; None and empty strings are ignored."""
        if child is not None and child != "":
            self.children.append(child)
        return self

    def extend(self, children: list[Node]) -> Node:
        for child in children:
            self.append(child)
        return self


def escape_text(text: str) -> str:
    return escape(text)


def escape_attr(value: str) -> str:
    return escape(value, _ATTR_ENTITIES)


def format_attrs(attrs: list[tuple[str, str]]) -> str:
    """Render attributes as ``name="value"`` pairs, each preceded by a space."""
    return "".join(f' {name}="{escape_attr(value)}"' for name, value in attrs)


def render(node: Node) -> str:
    """Render a node and its subtree to a string."""
    parts: list[str] = []
    _write(node, parts)
    return "".join(parts)


def _write(node: Node, parts: list[str]) -> None:
    parts.append(f"<{node.tag}{format_attrs(node.attrs)}>")
    for child in node.children:
        if isinstance(child, Node):
            _write(child, parts)
        elif isinstance(child, Raw):
            parts.append(child.markup)
        else:
            parts.append(escape_text(child))
    parts.append(f"</{node.tag}>")


def text_node(tag: str, text: str) -> Node | None:
    """Element wrapping escaped text, or None when text is empty.

    Example:
        >>> from instantpress.markup.tree import text_node
        >>> text_node("h2", "") is None
        True
    """
    if not text:
        return None
    return Node(tag, children=[text])
