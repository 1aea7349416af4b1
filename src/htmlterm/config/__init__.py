# topmark:header:start
#
#   project      : htmlterm
#   file         : __init__.py
#   file_relpath : src/htmlterm/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for htmlterm: render settings, color resolution and logging.

Public modules:
    - htmlterm.config.model
    - htmlterm.config.color
    - htmlterm.config.loaders
    - htmlterm.config.logging
"""

from __future__ import annotations

from htmlterm.config.color import ColorMode, resolve_color_mode
from htmlterm.config.model import MutableRenderConfig, RenderConfig, plain_config

__all__: list[str] = [
    "ColorMode",
    "MutableRenderConfig",
    "RenderConfig",
    "plain_config",
    "resolve_color_mode",
]
