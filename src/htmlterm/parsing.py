# topmark:header:start
#
#   project      : htmlterm
#   file         : parsing.py
#   file_relpath : src/htmlterm/parsing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse HTML markup into a BeautifulSoup tree.

The renderer never parses markup itself; this module is the boundary that turns
text or bytes into a node tree. Bytes are decoded by BeautifulSoup's encoding
detection (``<meta charset>``, BOM, heuristics).

Attribute values are kept as plain strings (``multi_valued_attributes=None``),
and with the default ``html.parser`` builder the first of several duplicate
attributes wins.

HTML drops a newline that directly follows a ``<pre>`` start tag. ``html5lib``
implements that rule; for the other builders it is applied after parsing.
"""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup, FeatureNotFound, NavigableString
from bs4.builder import ParserRejectedMarkup

from htmlterm.config.logging import get_logger
from htmlterm.constants import DEFAULT_PARSER
from htmlterm.errors import HtmlParseError

logger = get_logger(__name__)


def parse_document(markup: str | bytes, *, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Parse an HTML document.

    Args:
        markup (str | bytes): The HTML source; bytes are decoded by BeautifulSoup.
        parser (str): BeautifulSoup tree builder (``html.parser``, ``lxml``, ``html5lib``).

    Returns:
        BeautifulSoup: The parsed document (the tree root).

    Raises:
        HtmlParseError: If the tree builder is not installed or rejects the markup.
    """
    options: dict[str, Any] = {"multi_valued_attributes": None}
    if parser == "html.parser":
        # Only the stdlib builder supports choosing how duplicates are resolved
        options["on_duplicate_attribute"] = "ignore"

    try:
        document = BeautifulSoup(markup, parser, **options)
    except FeatureNotFound as exc:
        raise HtmlParseError(f"HTML parser not available: {parser}") from exc
    except ParserRejectedMarkup as exc:
        raise HtmlParseError(f"HTML parser rejected the input: {exc}") from exc

    if "html5" not in document.builder.features:
        _drop_newline_after_pre(document)

    logger.debug(
        "Parsed document with %s (original encoding: %s)",
        parser,
        document.original_encoding,
    )
    return document


def _drop_newline_after_pre(document: BeautifulSoup) -> None:
    for pre in document.find_all("pre"):
        first = pre.contents[0] if pre.contents else None
        # Exact type: comments and CDATA are NavigableString subclasses
        if type(first) is not NavigableString:
            continue
        for newline in ("\r\n", "\n"):
            if first.startswith(newline):
                rest: str = first[len(newline) :]
                if rest:
                    first.replace_with(NavigableString(rest))
                else:
                    first.extract()
                break
