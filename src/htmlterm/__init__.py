# topmark:header:start
#
#   project      : htmlterm
#   file         : __init__.py
#   file_relpath : src/htmlterm/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""htmlterm package.

htmlterm renders parsed HTML document trees as readable terminal text. Structural
cues (headings, emphasis, links, images, rules, code blocks) are shown with ANSI
colors, or with Markdown-like punctuation when color is disabled. It exposes both
a CLI and a small typed API.
"""

from __future__ import annotations

from htmlterm.api import render_file, render_html
from htmlterm.config.model import MutableRenderConfig, RenderConfig
from htmlterm.rendering.renderer import Renderer, render

__all__: list[str] = [
    "MutableRenderConfig",
    "RenderConfig",
    "Renderer",
    "render",
    "render_file",
    "render_html",
]
