# topmark:header:start
#
#   project      : htmlterm
#   file         : __main__.py
#   file_relpath : src/htmlterm/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running htmlterm via ``python -m htmlterm``.

It delegates directly to :func:`htmlterm.cli.main.cli`, so the module interface and
the ``htmlterm`` / ``html2text`` console scripts share a single entry point.

Examples:
    Render a saved page without colors::

        python -m htmlterm --no-color page.html
"""

from __future__ import annotations

from htmlterm.cli.main import cli

if __name__ == "__main__":
    cli()
