# topmark:header:start
#
#   project      : htmlterm
#   file         : constants.py
#   file_relpath : src/htmlterm/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""htmlterm Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

HTMLTERM_VERSION: str = get_version("htmlterm")

# Name of the table holding htmlterm settings in a TOML config file:
CONFIG_SECTION: str = "htmlterm"
# ... and its location when the settings live in `pyproject.toml`:
PYPROJECT_CONFIG_SECTION: tuple[str, str] = ("tool", "htmlterm")

DEFAULT_PARSER: str = "html.parser"
DEFAULT_MAX_DEPTH: int = 512

ENV_LOG_LEVEL: str = "HTMLTERM_LOG_LEVEL"
ENV_NO_COLOR: str = "NO_COLOR"
ENV_FORCE_COLOR: str = "FORCE_COLOR"
