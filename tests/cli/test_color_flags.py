# topmark:header:start
#
#   project      : htmlterm
#   file         : test_color_flags.py
#   file_relpath : tests/cli/test_color_flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: color selection through flags, config files and the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

MARKUP = "<p><b>x</b></p>"
PLAIN = "\n*x*\n"
BOLD = "\x1b[1m"


def _is_colored(result: Result) -> bool:
    assert_SUCCESS(result)
    if BOLD in result.stdout:
        return True
    assert result.stdout == PLAIN
    return False


@mark_cli
def test_color_is_on_by_default() -> None:
    """Without flags or environment, output is colored."""
    assert _is_colored(run_cli([], input_text=MARKUP))


@mark_cli
@parametrize(
    "argv, env, colored",
    [
        (["--no-color"], {}, False),
        (["--color", "never"], {}, False),
        (["--color", "always"], {}, True),
        (["--color", "auto"], {}, True),
        ([], {"NO_COLOR": "1"}, False),
        ([], {"NO_COLOR": ""}, True),
        ([], {"FORCE_COLOR": "1", "NO_COLOR": "1"}, True),
        ([], {"FORCE_COLOR": "0", "NO_COLOR": "1"}, False),
        (["--color", "always"], {"NO_COLOR": "1"}, True),
        (["--color", "auto"], {"NO_COLOR": "1"}, False),
        (["--no-color"], {"FORCE_COLOR": "1"}, False),
        (["--no-color", "--color", "always"], {}, False),
    ],
)
def test_color_resolution(argv: list[str], env: dict[str, str], colored: bool) -> None:
    """Flags beat the environment; FORCE_COLOR beats NO_COLOR."""
    assert _is_colored(run_cli(argv, input_text=MARKUP, env=env)) is colored


@mark_cli
def test_config_file_color(tmp_path: Path) -> None:
    """A config file setting applies unless a flag overrides it."""
    config: Path = tmp_path / "htmlterm.toml"
    config.write_text('[htmlterm]\ncolor = "never"\n', encoding="utf-8")

    assert not _is_colored(run_cli(["--config", str(config)], input_text=MARKUP))
    assert _is_colored(
        run_cli(["--config", str(config), "--color", "always"], input_text=MARKUP)
    )
    # The file setting beats the environment
    assert not _is_colored(
        run_cli(["--config", str(config)], input_text=MARKUP, env={"FORCE_COLOR": "1"})
    )


@mark_cli
def test_invalid_config_file(tmp_path: Path) -> None:
    """An invalid config file aborts the run with CONFIG_ERROR."""
    config: Path = tmp_path / "htmlterm.toml"
    config.write_text("[htmlterm]\nmax_depth = -3\n", encoding="utf-8")

    result: Result = run_cli(["--config", str(config)], input_text=MARKUP)

    assert_CONFIG_ERROR(result)
    assert "max_depth" in result.stderr
    assert result.stdout == ""
