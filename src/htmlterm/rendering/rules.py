# topmark:header:start
#
#   project      : htmlterm
#   file         : rules.py
#   file_relpath : src/htmlterm/rendering/rules.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-element rendering rules.

Every element type the renderer knows about maps to one `ElementRule`: whether it
is block-display (newline before and after), ignored (whole subtree skipped) or
preformatted (descendant text keeps its whitespace), plus an opening and a
closing `Effect`. Unknown tags get `DEFAULT_RULE`, which does nothing.

Effects form a small closed set of immutable variants. Each renders to a string
given the node and the color flag, so adding an element type is a table change:

- `NoOp`: nothing.
- `FixedText`: the same text in both output styles.
- `StyledText`: an ANSI start (or reset) sequence when colored, punctuation otherwise.
- `ImageLabel`: ``(image: ALT) `` or ``(image) ``.
- `LinkTarget`: `` (HREF)`` after the link text, unless ``rel`` is set.
- `Preformatted`: the code fence around a ``<pre>`` block.

Example:
    ```python
    rule = rule_for("b")
    rule.open.render(node, color=False)   # '*'
    rule.close.render(node, color=True)   # '\\x1b[0m'
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from htmlterm.rendering.nodes import get_attribute
from htmlterm.rendering.styles import (
    BOLD_STYLE,
    CODE_STYLE,
    HEADING_STYLE,
    ITALIC_STYLE,
    RESET_SEQUENCE,
    TextStyle,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from bs4.element import PageElement


class Effect(Protocol):
    """Text emitted when the renderer enters or leaves an element."""

    def render(self, node: PageElement, *, color: bool) -> str:
        """Return the text to write for ``node`` (may be empty).

        Args:
            node (PageElement): The element being entered or left.
            color (bool): Whether the colored output style is active.

        Returns:
            str: The text to write.
        """
        ...


@dataclass(frozen=True)
class NoOp:
    """Emit nothing."""

    def render(self, node: PageElement, *, color: bool) -> str:  # pylint: disable=unused-argument
        """Return an empty string."""
        return ""


@dataclass(frozen=True)
class FixedText:
    """Emit the same text in both output styles."""

    text: str

    def render(self, node: PageElement, *, color: bool) -> str:  # pylint: disable=unused-argument
        """Return the fixed text."""
        return self.text


@dataclass(frozen=True)
class StyledText:
    """Emit a style marker.

    When colored, an opening marker is the style's start sequence and a closing
    marker is the generic reset sequence; a reset also ends any outer style that
    is still open. Without color, the punctuation ``plain`` is emitted.

    Attributes:
        style (TextStyle): Attributes switched on by an opening marker.
        plain (str): Punctuation used when color is disabled.
        closing (bool): Whether this is the closing marker.
    """

    style: TextStyle
    plain: str
    closing: bool = False

    def render(self, node: PageElement, *, color: bool) -> str:  # pylint: disable=unused-argument
        """Return the escape sequence or the punctuation."""
        if not color:
            return self.plain
        return RESET_SEQUENCE if self.closing else self.style.open_sequence()


@dataclass(frozen=True)
class ImageLabel:
    """Describe an image by its ``alt`` text."""

    def render(self, node: PageElement, *, color: bool) -> str:  # pylint: disable=unused-argument
        """Return ``(image: ALT) `` or ``(image) `` when ``alt`` is empty."""
        alt: str = get_attribute(node, "alt")
        if alt:
            return f"(image: {alt}) "
        return "(image) "


@dataclass(frozen=True)
class LinkTarget:
    """Annotate link text with its target URL.

    The URL is only shown for links with a non-empty ``href`` and no ``rel``:
    any relation (``nofollow``, ``stylesheet``, ``footnote``...) suppresses it.
    """

    def render(self, node: PageElement, *, color: bool) -> str:  # pylint: disable=unused-argument
        """Return `` (HREF)`` or an empty string."""
        href: str = get_attribute(node, "href")
        if href and not get_attribute(node, "rel"):
            return f" ({href})"
        return ""


@dataclass(frozen=True)
class Preformatted:
    """Fence a preformatted block with triple backticks."""

    closing: bool = False

    def render(self, node: PageElement, *, color: bool) -> str:  # pylint: disable=unused-argument
        """Return the opening or closing fence."""
        return "\n```" if self.closing else "```\n"


NO_OP = NoOp()


@dataclass(frozen=True)
class ElementRule:
    """How one element type is rendered.

    Attributes:
        block (bool): Emit a newline before and after the element.
        ignored (bool): Skip the element and its whole subtree.
        preformatted (bool): Descendant text keeps its whitespace verbatim.
        open (Effect): Emitted before the element's content.
        close (Effect): Emitted after the element's content.
    """

    block: bool = False
    ignored: bool = False
    preformatted: bool = False
    open: Effect = NO_OP
    close: Effect = NO_OP


DEFAULT_RULE = ElementRule()

#: Elements rendered on lines of their own.
BLOCK_ELEMENTS: frozenset[str] = frozenset(
    {
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "header",
        "hr",
        "p",
        "pre",
        "figcaption",
        "footer",
        "nav",
        "title",
    }
)

#: Elements whose subtree never produces output.
IGNORED_ELEMENTS: frozenset[str] = frozenset({"meta", "script", "style", "title"})


def _heading(level: int) -> ElementRule:
    # No closing marker: the colored style ends with the per-node reset
    return ElementRule(open=StyledText(HEADING_STYLE, "#" * level + " "))


def _inline(style: TextStyle, plain: str) -> ElementRule:
    return ElementRule(
        open=StyledText(style, plain),
        close=StyledText(style, plain, closing=True),
    )


_EFFECTS: dict[str, ElementRule] = {
    "img": ElementRule(open=ImageLabel()),
    "h1": _heading(1),
    "h2": _heading(2),
    "h3": _heading(3),
    "h4": _heading(4),
    "h5": _heading(5),
    "br": ElementRule(open=FixedText("\n")),
    "hr": ElementRule(open=FixedText("------\n")),
    "figcaption": ElementRule(open=FixedText("["), close=FixedText("]")),
    "i": _inline(ITALIC_STYLE, "_"),
    "cite": _inline(ITALIC_STYLE, "_"),
    "b": _inline(BOLD_STYLE, "*"),
    "em": _inline(BOLD_STYLE, "*"),
    "code": _inline(CODE_STYLE, "`"),
    "tt": _inline(CODE_STYLE, "`"),
    "pre": ElementRule(
        preformatted=True,
        open=Preformatted(),
        close=Preformatted(closing=True),
    ),
    "a": ElementRule(close=LinkTarget()),
}


def _build_rules() -> dict[str, ElementRule]:
    rules: dict[str, ElementRule] = {}
    for name in _EFFECTS.keys() | BLOCK_ELEMENTS | IGNORED_ELEMENTS:
        base: ElementRule = _EFFECTS.get(name, DEFAULT_RULE)
        rules[name] = ElementRule(
            block=name in BLOCK_ELEMENTS,
            ignored=name in IGNORED_ELEMENTS,
            preformatted=base.preformatted,
            open=base.open,
            close=base.close,
        )
    return rules


#: Read-only rule table keyed by lower-case tag name.
ELEMENT_RULES: Mapping[str, ElementRule] = MappingProxyType(_build_rules())


def rule_for(name: str | None) -> ElementRule:
    """Return the rule for a tag name (`DEFAULT_RULE` for unknown tags or non-elements).

    Args:
        name (str | None): Lower-case tag name, or None for non-element nodes.

    Returns:
        ElementRule: The rule to apply.
    """
    if name is None:
        return DEFAULT_RULE
    return ELEMENT_RULES.get(name, DEFAULT_RULE)


def is_preformatted(name: str) -> bool:
    """Return True if text below an element with this tag name keeps its whitespace."""
    return rule_for(name).preformatted
