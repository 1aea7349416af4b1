# topmark:header:start
#
#   project      : htmlterm
#   file         : color.py
#   file_relpath : src/htmlterm/config/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for htmlterm.

This module provides:

- the `ColorMode` enum (user intent for colored output), and
- color-mode resolution based on CLI flags, config files and the environment.

The resolved value is a plain `bool` stored in `RenderConfig.color`; the renderer
never looks at the environment itself.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING

from htmlterm.config.logging import get_logger
from htmlterm.constants import ENV_FORCE_COLOR, ENV_NO_COLOR

if TYPE_CHECKING:
    from htmlterm.config.logging import HtmltermLogger


logger: HtmltermLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Let the environment decide (``FORCE_COLOR`` / ``NO_COLOR``), color otherwise.
        ALWAYS: Force-enable color.
        NEVER: Disable color entirely; structural cues use punctuation instead.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def from_setting(cls, value: object) -> ColorMode:
        """Parse a config-file value (``"auto"|"always"|"never"`` or a boolean).

        Args:
            value (object): The raw TOML value.

        Returns:
            ColorMode: The parsed mode.

        Raises:
            ValueError: If the value is neither a known mode name nor a boolean.
        """
        if isinstance(value, bool):
            return cls.ALWAYS if value else cls.NEVER
        if isinstance(value, str):
            return cls(value.strip().lower())
        raise ValueError(f"Invalid color mode: {value!r}")


def resolve_color_mode(*, color_mode_override: ColorMode | None) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to a non-empty value) → False
        3. **Default**: True. An absent or empty `NO_COLOR` enables color.

    Args:
        color_mode_override (ColorMode | None): Mode from the CLI or a config file;
            `None` or `AUTO` defer to the environment.

    Returns:
        bool: True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv(ENV_FORCE_COLOR)
    if force_color and force_color != "0":
        logger.debug("Color forced on by %s=%s", ENV_FORCE_COLOR, force_color)
        return True
    if os.getenv(ENV_NO_COLOR):
        logger.debug("Color disabled by %s", ENV_NO_COLOR)
        return False
    return True
