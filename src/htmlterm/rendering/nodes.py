# topmark:header:start
#
#   project      : htmlterm
#   file         : nodes.py
#   file_relpath : src/htmlterm/rendering/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read-only view over BeautifulSoup node trees.

The renderer only needs a handful of questions answered about a node: its kind,
its tag name, an attribute value, its children and whether some ancestor has a
given property. This module answers them for `bs4` trees and never mutates them.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag
from bs4.element import PreformattedString

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from bs4.element import PageElement


class NodeKind(Enum):
    """Kinds of nodes found in a parsed document tree.

    Members:
        DOCUMENT: The tree root produced by the parser.
        ELEMENT: A tag such as ``<p>``.
        TEXT: Character data.
        COMMENT: An HTML comment.
        DOCTYPE: A ``<!DOCTYPE ...>`` declaration.
        OTHER: CDATA, processing instructions and other declarations.
    """

    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"
    OTHER = "other"


def node_kind(node: PageElement) -> NodeKind:
    """Classify a node.

    Args:
        node (PageElement): The node to classify.

    Returns:
        NodeKind: The node's kind.
    """
    # BeautifulSoup is itself a Tag subclass: test it first
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    if isinstance(node, Doctype):
        return NodeKind.DOCTYPE
    if isinstance(node, PreformattedString):
        return NodeKind.OTHER
    if isinstance(node, NavigableString):
        return NodeKind.TEXT
    return NodeKind.OTHER


def element_name(node: PageElement) -> str | None:
    """Return the tag name of an element node, or None for any other kind."""
    if node_kind(node) is NodeKind.ELEMENT:
        return str(node.name).lower()
    return None


def get_attribute(node: PageElement, key: str) -> str:
    """Return an attribute value of an element, or an empty string if absent.

    Duplicate attributes are resolved by the parser (see `htmlterm.parsing`).
    Multi-valued attributes (``class``, ``rel``) are joined with spaces when the
    tree was built with list values.

    Args:
        node (PageElement): The element to query.
        key (str): The attribute name.

    Returns:
        str: The attribute value, or ``""``.
    """
    if not isinstance(node, Tag):
        return ""
    value = node.attrs.get(key)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def children(node: PageElement) -> Sequence[PageElement]:
    """Return the ordered children of a node (empty for leaf nodes)."""
    if isinstance(node, Tag):
        return node.contents
    return ()


def text_of(node: PageElement) -> str:
    """Return the character data of a text node."""
    return str(node)


def has_ancestor(node: PageElement, predicate: Callable[[str], bool]) -> bool:
    """Return True if an element ancestor's tag name satisfies ``predicate``.

    Args:
        node (PageElement): Node whose parent chain is searched.
        predicate (Callable[[str], bool]): Test applied to each ancestor tag name.

    Returns:
        bool: True if some ancestor element matches.
    """
    for parent in node.parents:
        name: str | None = element_name(parent)
        if name is not None and predicate(name):
            return True
    return False
