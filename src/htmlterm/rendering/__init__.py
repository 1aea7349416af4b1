# topmark:header:start
#
#   project      : htmlterm
#   file         : __init__.py
#   file_relpath : src/htmlterm/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of parsed HTML trees as terminal text.

Public modules:
    - htmlterm.rendering.nodes
    - htmlterm.rendering.styles
    - htmlterm.rendering.rules
    - htmlterm.rendering.renderer
"""

from __future__ import annotations
