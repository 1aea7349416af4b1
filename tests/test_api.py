# topmark:header:start
#
#   project      : htmlterm
#   file         : test_api.py
#   file_relpath : tests/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public convenience API."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

import htmlterm
from htmlterm.api import read_input, render_document
from htmlterm.config.model import RenderConfig, plain_config
from htmlterm.errors import HtmlInputError, HtmlParseError, HtmltermError
from htmlterm.parsing import parse_document

if TYPE_CHECKING:
    from pathlib import Path


def test_public_exports() -> None:
    """The package root exposes the main entry points."""
    for name in ("render", "render_file", "render_html", "Renderer", "RenderConfig"):
        assert hasattr(htmlterm, name), name


def test_render_html_plain() -> None:
    """render_html returns the text rendition."""
    assert htmlterm.render_html("<h1>Hi</h1>", config=plain_config()) == "\n# Hi\n"


def test_render_html_defaults_to_color() -> None:
    """The default config renders in color."""
    assert "\x1b[" in htmlterm.render_html("<h1>Hi</h1>")


def test_render_html_accepts_bytes() -> None:
    """Bytes are decoded by the parser."""
    output: str = htmlterm.render_html(
        '<meta charset="utf-8"><p>naïve</p>'.encode(), config=plain_config()
    )
    assert output == "\nnaïve\n"


def test_render_file(tmp_path: Path) -> None:
    """render_file streams the rendition of a file to the sink."""
    page: Path = tmp_path / "page.html"
    page.write_text("<p>Go <a href='/x'>there</a></p>", encoding="utf-8")
    sink = io.StringIO()

    htmlterm.render_file(page, sink, config=plain_config())

    assert sink.getvalue() == "\nGo there (/x)\n"


def test_render_file_missing(tmp_path: Path) -> None:
    """A missing file raises HtmlInputError and writes nothing."""
    sink = io.StringIO()

    with pytest.raises(HtmlInputError):
        htmlterm.render_file(tmp_path / "missing.html", sink)

    assert sink.getvalue() == ""


def test_read_input_error_message(tmp_path: Path) -> None:
    """The error message is the OS description, without the path."""
    with pytest.raises(HtmlInputError) as excinfo:
        read_input(tmp_path / "missing.html")

    assert str(tmp_path) not in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_render_document_parser_error() -> None:
    """Parser problems surface as HtmlParseError, an HtmltermError."""
    with pytest.raises(HtmltermError) as excinfo:
        render_document(io.StringIO(), "<p>x</p>", config=RenderConfig(parser="nope"))

    assert isinstance(excinfo.value, HtmlParseError)


def test_functional_render_entry_point() -> None:
    """render() defaults the parent to the node itself."""
    sink = io.StringIO()
    htmlterm.render(sink, parse_document("<b>x</b>"), config=plain_config())

    assert sink.getvalue() == "*x*"
