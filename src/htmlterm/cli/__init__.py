# topmark:header:start
#
#   project      : htmlterm
#   file         : __init__.py
#   file_relpath : src/htmlterm/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""htmlterm CLI package.

This package groups the Click command definition and supporting utilities
for the htmlterm command-line interface.

Typical usage:
    The console script entry points are defined in ``pyproject.toml`` as::

        [project.scripts]
        htmlterm = "htmlterm.cli.main:cli"
        html2text = "htmlterm.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main at module import time
