# topmark:header:start
#
#   project      : htmlterm
#   file         : errors.py
#   file_relpath : src/htmlterm/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the htmlterm library.

All errors originate at the boundary (reading input, parsing, configuration) or
from the nesting guard of the renderer. Traversal itself never fails on a
well-formed tree. Output sink failures are not wrapped: they propagate as-is.

The CLI maps these exceptions to per-input error reports (see
`htmlterm.cli.main`); library callers can catch `HtmltermError` to handle them all.
"""

from __future__ import annotations


class HtmltermError(Exception):
    """Base class for all htmlterm library errors."""


class HtmlInputError(HtmltermError):
    """Error when an input document cannot be acquired (missing/unreadable file)."""


class HtmlParseError(HtmltermError):
    """Error when the HTML parser rejects the input or cannot be loaded."""


class ConfigError(HtmltermError):
    """Error for malformed configuration values or unreadable config files."""


class RenderDepthError(HtmltermError):
    """Error when a document nests deeper than the configured maximum depth.

    Attributes:
        max_depth (int): The limit that was exceeded.
    """

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Document nesting exceeds the maximum depth of {max_depth}")
        self.max_depth = max_depth
