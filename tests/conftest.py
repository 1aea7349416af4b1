# topmark:header:start
#
#   project      : htmlterm
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the htmlterm test suite.

This file sets up global fixtures and the logging configuration for test runs,
and provides small rendering helpers shared by the test modules.

Notes:
    The color flag is part of the frozen `RenderConfig`. Tests that care about the
    output style pass an explicit config (`plain_config()` or
    `RenderConfig(color=True)`) instead of relying on the environment.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from htmlterm.config import logging
from htmlterm.config.model import RenderConfig, plain_config
from htmlterm.parsing import parse_document
from htmlterm.rendering.renderer import Renderer

if TYPE_CHECKING:
    from bs4 import BeautifulSoup

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def neutral_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell does not leak into test runs.

    Removes `HTMLTERM_LOG_LEVEL` (log noise) and `NO_COLOR` / `FORCE_COLOR`
    (color resolution). Individual tests set them again when needed.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in ("HTMLTERM_LOG_LEVEL", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def render_markup(markup: str | bytes, config: RenderConfig) -> str:
    """Parse ``markup`` and return its rendition under ``config``.

    Args:
        markup (str | bytes): HTML source.
        config (RenderConfig): Render settings.

    Returns:
        str: The rendered text.
    """
    document: BeautifulSoup = parse_document(markup, parser=config.parser)
    sink = io.StringIO()
    Renderer(config).render(sink, document, document)
    return sink.getvalue()


def render_plain(markup: str | bytes, **kwargs: Any) -> str:
    """Render ``markup`` in the plain (punctuated) style.

    Args:
        markup (str | bytes): HTML source.
        **kwargs (Any): Extra `RenderConfig` fields.

    Returns:
        str: The rendered text.
    """
    return render_markup(markup, plain_config(**kwargs))


def render_colored(markup: str | bytes, **kwargs: Any) -> str:
    """Render ``markup`` in the ANSI-colored style.

    Args:
        markup (str | bytes): HTML source.
        **kwargs (Any): Extra `RenderConfig` fields.

    Returns:
        str: The rendered text.
    """
    return render_markup(markup, RenderConfig(color=True, **kwargs))
