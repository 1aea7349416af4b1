# topmark:header:start
#
#   project      : htmlterm
#   file         : renderer.py
#   file_relpath : src/htmlterm/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a parsed HTML tree as plain or ANSI-colored text.

The renderer walks the tree depth-first. Opening effects are written when a node
is entered (pre-order) and closing effects when it is left (post-order). Output is
written to the sink as it is produced; nothing is buffered.

For every node, in order:

1. Ignored elements (``script``, ``style``, ``meta``, ``title``) end the visit:
   neither the node nor its descendants produce output.
2. Block elements write a newline.
3. The element's opening effect is written.
4. Text nodes are written when their parent is an element other than ``html`` or
   ``body``. Each whitespace run collapses to one space, unless the text has a
   ``<pre>`` ancestor, in which case it is written verbatim.
5. Children are visited in document order.
6. The element's closing effect is written.
7. Block elements write a trailing newline.
8. In the colored style, a reset sequence is written after every node.

Step 8 means a closing reset also ends outer styles that are still open: text
after a nested ``<i>`` inside ``<b>`` is no longer bold. This is the documented
behavior of the colored style, not something the renderer compensates for.

Traversal uses an explicit stack, so deeply nested input cannot exhaust the
Python call stack; `RenderConfig.max_depth` bounds the nesting instead.

Example:
    ```python
    import sys

    from htmlterm.parsing import parse_document
    from htmlterm.rendering.renderer import render

    doc = parse_document("<h1>Hi</h1>")
    render(sys.stdout, doc)  # same as render(sys.stdout, doc, doc)
    ```
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from htmlterm.config.logging import get_logger
from htmlterm.config.model import RenderConfig
from htmlterm.errors import RenderDepthError
from htmlterm.rendering.nodes import (
    NodeKind,
    children,
    element_name,
    has_ancestor,
    node_kind,
    text_of,
)
from htmlterm.rendering.rules import ElementRule, is_preformatted, rule_for
from htmlterm.rendering.styles import RESET_SEQUENCE

if TYPE_CHECKING:
    from typing import TextIO

    from bs4.element import PageElement

    from htmlterm.config.logging import HtmltermLogger

logger: HtmltermLogger = get_logger(__name__)

# HTML (ASCII) whitespace; a no-break space is content, not a separator
_SPACES = re.compile(r"[ \t\n\f\r]+")

# Text directly below these elements is not rendered.
_TEXTLESS_PARENTS: frozenset[str] = frozenset({"html", "body"})


@dataclass(frozen=True)
class _Frame:
    """A pending step of the traversal.

    Attributes:
        node (PageElement): The node to enter or leave.
        parent (PageElement): The node it was reached from.
        depth (int): Nesting depth below the render root (root = 0).
        rule (ElementRule | None): The node's rule when leaving; None when entering.
    """

    node: PageElement
    parent: PageElement
    depth: int
    rule: ElementRule | None = None


class Renderer:
    """Writes a text rendition of HTML node trees.

    A renderer holds an immutable `RenderConfig`; the output style (colored or
    plain) is fixed for its whole lifetime. Renderers keep no state between
    calls, so one instance can render any number of trees.

    Attributes:
        config (RenderConfig): The render settings.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config: RenderConfig = config or RenderConfig()

    def render(self, sink: TextIO, node: PageElement, parent: PageElement) -> None:
        """Write a rendition of ``node`` and all its descendants to ``sink``.

        When rendering from a root node, pass that node as ``parent`` too.

        Args:
            sink (TextIO): Text stream receiving the output. Write errors propagate.
            node (PageElement): The node to render.
            parent (PageElement): The parent of ``node`` (``node`` itself for a root).

        Raises:
            RenderDepthError: If the tree nests deeper than ``config.max_depth``.
                Output written before the limit was hit stays written; in the
                colored style a reset sequence is written before raising.
        """
        logger.trace("Rendering %s (color=%s)", node_kind(node).value, self.config.color)
        stack: list[_Frame] = [_Frame(node=node, parent=parent, depth=0)]
        try:
            while stack:
                frame: _Frame = stack.pop()
                if frame.rule is None:
                    self._enter(sink, frame, stack)
                else:
                    self._leave(sink, frame, frame.rule)
        except RenderDepthError:
            # Pending leave frames are dropped: end any style still open
            if self.config.color:
                sink.write(RESET_SEQUENCE)
            raise

    def _enter(self, sink: TextIO, frame: _Frame, stack: list[_Frame]) -> None:
        node: PageElement = frame.node
        rule: ElementRule = rule_for(element_name(node))
        if rule.ignored:
            return

        max_depth: int | None = self.config.max_depth
        if max_depth is not None and frame.depth > max_depth:
            logger.error("Nesting depth %d exceeds the limit of %d", frame.depth, max_depth)
            raise RenderDepthError(max_depth)

        if rule.block:
            sink.write("\n")
        self._write(sink, rule.open.render(node, color=self.config.color))

        if node_kind(node) is NodeKind.TEXT and self._renders_text_below(frame.parent):
            self._write(sink, self._normalize(node))

        # Leave after all children; children are pushed in reverse to pop in order
        stack.append(_Frame(node=node, parent=frame.parent, depth=frame.depth, rule=rule))
        stack.extend(
            _Frame(node=child, parent=node, depth=frame.depth + 1)
            for child in reversed(children(node))
        )

    def _leave(self, sink: TextIO, frame: _Frame, rule: ElementRule) -> None:
        self._write(sink, rule.close.render(frame.node, color=self.config.color))
        if rule.block:
            sink.write("\n")
        if self.config.color:
            sink.write(RESET_SEQUENCE)

    @staticmethod
    def _renders_text_below(parent: PageElement) -> bool:
        name: str | None = element_name(parent)
        return name is not None and name not in _TEXTLESS_PARENTS

    @staticmethod
    def _normalize(node: PageElement) -> str:
        text: str = text_of(node)
        if has_ancestor(node, is_preformatted):
            return text
        return _SPACES.sub(" ", text)

    @staticmethod
    def _write(sink: TextIO, text: str) -> None:
        if text:
            sink.write(text)


def render(
    sink: TextIO,
    node: PageElement,
    parent: PageElement | None = None,
    *,
    config: RenderConfig | None = None,
) -> None:
    """Write a rendition of ``node`` to ``sink``.

    Args:
        sink (TextIO): Text stream receiving the output.
        node (PageElement): The node to render, typically the parsed document.
        parent (PageElement | None): The parent of ``node``; defaults to ``node``
            itself, the calling convention for a tree root.
        config (RenderConfig | None): Render settings; defaults to `RenderConfig()`.
    """
    Renderer(config).render(sink, node, node if parent is None else parent)
