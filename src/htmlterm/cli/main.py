# topmark:header:start
#
#   project      : htmlterm
#   file         : main.py
#   file_relpath : src/htmlterm/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``htmlterm`` command (also installed as ``html2text``).

Without an explicit pathname, it converts the standard input. Given the name of
one or more files, it converts those files in order. It always writes to the
standard output.

Usage:

    htmlterm [OPTIONS] [PATHNAME ...]

htmlterm uses ANSI colors to distinguish some HTML tags. If you don't want color,
pass ``--no-color`` or set the ``NO_COLOR`` environment variable to a non-empty
value::

    NO_COLOR=true htmlterm page.html

Without color, some HTML tags are displayed with markup that looks not entirely
unlike Markdown.

A file that cannot be read or parsed is reported on stderr and skipped; the
remaining files are still converted and the exit status is not affected.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from htmlterm.api import read_input, render_document
from htmlterm.cli.console import ClickConsole
from htmlterm.cli.errors import HtmltermConfigError
from htmlterm.cli.options import (
    common_color_options,
    common_verbose_options,
    render_options,
    resolve_cli_color_mode,
    resolve_verbosity,
)
from htmlterm.config.logging import get_logger, resolve_env_log_level, setup_logging
from htmlterm.config.model import MutableRenderConfig
from htmlterm.constants import HTMLTERM_VERSION
from htmlterm.errors import ConfigError, HtmltermError

if TYPE_CHECKING:
    from htmlterm.cli.console import ConsoleLike
    from htmlterm.config.color import ColorMode
    from htmlterm.config.logging import HtmltermLogger
    from htmlterm.config.model import RenderConfig

logger: HtmltermLogger = get_logger(__name__)

#: Pathname that stands for the standard input.
STDIN_PATHNAME = "-"


def build_render_config(
    *,
    color_mode: ColorMode | None,
    max_depth: int | None,
    parser: str | None,
    config_file: Path | None,
) -> RenderConfig:
    """Merge defaults, an optional config file and CLI overrides.

    Args:
        color_mode (ColorMode | None): Color intent from the CLI.
        max_depth (int | None): Value of ``--max-depth``.
        parser (str | None): Value of ``--parser``.
        config_file (Path | None): Value of ``--config``.

    Returns:
        RenderConfig: The frozen configuration for this run.

    Raises:
        HtmltermConfigError: If the config file cannot be loaded or holds invalid values.
    """
    try:
        builder: MutableRenderConfig = MutableRenderConfig.from_defaults()
        if config_file is not None:
            builder.merge_file(config_file)
        builder.apply_overrides(color_mode=color_mode, max_depth=max_depth, parser=parser)
        config: RenderConfig = builder.freeze()
    except ConfigError as exc:
        raise HtmltermConfigError(str(exc)) from exc
    logger.debug("Effective render config: %s", config)
    return config


def render_source(console: ConsoleLike, pathname: str, config: RenderConfig) -> bool:
    """Render one input to the console's output stream.

    Input-acquisition and parse errors are reported on stderr; output write errors
    propagate and end the run.

    Args:
        console (ConsoleLike): Console providing the output sink and error channel.
        pathname (str): A file path, or ``-`` for the standard input.
        config (RenderConfig): Render settings.

    Returns:
        bool: True if the input was rendered, False if it was skipped.
    """
    label: str = "<stdin>" if pathname == STDIN_PATHNAME else pathname
    try:
        if pathname == STDIN_PATHNAME:
            markup: bytes = sys.stdin.buffer.read()
        else:
            markup = read_input(Path(pathname))
        render_document(console.out, markup, config=config)
    except HtmltermError as exc:
        logger.debug("Skipping %s: %r", label, exc)
        console.error(f"{label}: {exc}")
        return False
    console.out.flush()
    return True


@click.command(
    name="htmlterm",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Convert HTML files (or the standard input) to readable terminal text.",
)
@click.argument("pathnames", nargs=-1, type=click.Path(dir_okay=True, allow_dash=True))
@common_verbose_options
@common_color_options
@render_options
@click.version_option(HTMLTERM_VERSION, "--version", prog_name="htmlterm")
@click.pass_context
def cli(
    ctx: click.Context,
    pathnames: tuple[str, ...],
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    parser: str | None,
    max_depth: int | None,
    config_file: Path | None,
) -> None:
    """Entry point for the htmlterm CLI."""
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    setup_logging(level=resolve_env_log_level() or level_cli)

    config: RenderConfig = build_render_config(
        color_mode=resolve_cli_color_mode(color_mode, no_color),
        max_depth=max_depth,
        parser=parser,
        config_file=config_file,
    )
    console = ClickConsole(enable_color=config.color)
    ctx.obj["console"] = console
    ctx.color = config.color

    sources: tuple[str, ...] = pathnames or (STDIN_PATHNAME,)
    skipped: int = sum(not render_source(console, source, config) for source in sources)
    if skipped:
        logger.info("Skipped %d of %d input(s)", skipped, len(sources))


if __name__ == "__main__":
    cli()
