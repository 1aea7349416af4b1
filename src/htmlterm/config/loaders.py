# topmark:header:start
#
#   project      : htmlterm
#   file         : loaders.py
#   file_relpath : src/htmlterm/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Settings are read from:
- a standalone TOML file with an ``[htmlterm]`` table, or
- ``pyproject.toml`` with a ``[tool.htmlterm]`` table.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from htmlterm.config.logging import get_logger
from htmlterm.constants import CONFIG_SECTION, PYPROJECT_CONFIG_SECTION
from htmlterm.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from htmlterm.config.logging import HtmltermLogger

TomlTable = dict[str, Any]

logger: HtmltermLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in config file {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_settings_table(data: TomlTable, *, is_pyproject: bool) -> TomlTable:
    """Return the htmlterm settings table from a parsed TOML document.

    Args:
        data (TomlTable): The parsed TOML document.
        is_pyproject (bool): Look under ``[tool.htmlterm]`` instead of ``[htmlterm]``.

    Returns:
        TomlTable: The settings table, or an empty dict if the section is missing.

    Raises:
        ConfigError: If the section exists but is not a table.
    """
    if is_pyproject:
        tool_name, section_name = PYPROJECT_CONFIG_SECTION
        table: Any = data.get(tool_name, {})
        table = table.get(section_name, {}) if isinstance(table, dict) else {}
    else:
        table = data.get(CONFIG_SECTION, {})

    if not isinstance(table, dict):
        raise ConfigError(f"Config section '{CONFIG_SECTION}' must be a table")
    if not table:
        logger.debug("No htmlterm settings found in TOML document")
    return cast("TomlTable", table)


def load_settings_table(path: Path) -> TomlTable:
    """Load the htmlterm settings table from a TOML file.

    Args:
        path (Path): Path to ``pyproject.toml`` or a standalone config file.

    Returns:
        TomlTable: The settings table (possibly empty).
    """
    logger.debug("Loading htmlterm settings from: %s", path)
    return extract_settings_table(load_toml_dict(path), is_pyproject=path.name == "pyproject.toml")
