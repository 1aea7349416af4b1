# topmark:header:start
#
#   project      : htmlterm
#   file         : api.py
#   file_relpath : src/htmlterm/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public convenience API for htmlterm.

These helpers combine parsing and rendering for the common cases. For full
control, parse with `htmlterm.parsing.parse_document` and render with a
`htmlterm.rendering.renderer.Renderer`.

Example:
    ```python
    from htmlterm import render_html
    from htmlterm.config import plain_config

    render_html("<h1>Hi</h1>", config=plain_config())  # '\\n# Hi\\n'
    ```
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from htmlterm.config.logging import get_logger
from htmlterm.config.model import RenderConfig
from htmlterm.errors import HtmlInputError
from htmlterm.parsing import parse_document
from htmlterm.rendering.renderer import Renderer

if TYPE_CHECKING:
    from pathlib import Path
    from typing import TextIO

    from bs4 import BeautifulSoup

    from htmlterm.config.logging import HtmltermLogger

logger: HtmltermLogger = get_logger(__name__)


def render_html(markup: str | bytes, *, config: RenderConfig | None = None) -> str:
    """Parse and render an HTML document, returning the text.

    Args:
        markup (str | bytes): The HTML source.
        config (RenderConfig | None): Render settings; defaults to `RenderConfig()`.

    Returns:
        str: The rendered text.
    """
    config = config or RenderConfig()
    document: BeautifulSoup = parse_document(markup, parser=config.parser)
    buffer = io.StringIO()
    Renderer(config).render(buffer, document, document)
    return buffer.getvalue()


def read_input(path: Path) -> bytes:
    """Read an input document.

    Args:
        path (Path): The file to read.

    Returns:
        bytes: The raw file content.

    Raises:
        HtmlInputError: If the file cannot be opened or read. The message is the
            OS error description; callers know which path they passed.
    """
    try:
        return path.read_bytes()
    except OSError as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        raise HtmlInputError(exc.strerror or str(exc)) from exc


def render_document(sink: TextIO, markup: str | bytes, *, config: RenderConfig) -> None:
    """Parse ``markup`` and stream its rendition to ``sink``.

    Args:
        sink (TextIO): Text stream receiving the output.
        markup (str | bytes): The HTML source.
        config (RenderConfig): Render settings.
    """
    document: BeautifulSoup = parse_document(markup, parser=config.parser)
    Renderer(config).render(sink, document, document)


def render_file(path: Path, sink: TextIO, *, config: RenderConfig | None = None) -> None:
    """Read, parse and render an HTML file to ``sink``.

    Args:
        path (Path): The HTML file.
        sink (TextIO): Text stream receiving the output.
        config (RenderConfig | None): Render settings; defaults to `RenderConfig()`.
    """
    logger.info("Rendering %s", path)
    render_document(sink, read_input(path), config=config or RenderConfig())
