# topmark:header:start
#
#   project      : htmlterm
#   file         : options.py
#   file_relpath : src/htmlterm/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for htmlterm.

This module centralizes reusable options (verbosity, color, rendering) and their
resolution logic, so the command itself can stay thin. The helpers here are
Click-aware.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from htmlterm.cli.errors import HtmltermUsageError
from htmlterm.config.color import ColorMode
from htmlterm.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: The logging level.

    Raises:
        HtmltermUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise HtmltermUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def resolve_cli_color_mode(color_mode: str | None, no_color: bool) -> ColorMode | None:
    """Combine ``--color`` and ``--no-color`` into one color intent.

    Args:
        color_mode (str | None): Value of ``--color``, or None if not given.
        no_color (bool): Whether ``--no-color`` was passed; it wins over ``--color``.

    Returns:
        ColorMode | None: The explicit intent, or None when neither flag was given.
    """
    if no_color:
        return ColorMode.NEVER
    if color_mode is None:
        return None
    return ColorMode(color_mode)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help=(
            "Color output: auto (default; honors FORCE_COLOR and NO_COLOR), always, or never. "
            "Without color, structure is shown with Markdown-like punctuation."
        ),
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def render_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --parser, --max-depth and --config options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with render options added.
    """
    f = click.option(
        "--parser",
        "parser",
        type=str,
        default=None,
        help="BeautifulSoup tree builder: html.parser (default), lxml or html5lib.",
    )(f)
    f = click.option(
        "--max-depth",
        "max_depth",
        type=click.IntRange(min=0),
        default=None,
        help="Maximum node nesting depth below the document root (0 = unlimited).",
    )(f)
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from a TOML file ([htmlterm] table, or [tool.htmlterm] in "
        "pyproject.toml).",
    )(f)
    return f
