# topmark:header:start
#
#   project      : htmlterm
#   file         : model.py
#   file_relpath : src/htmlterm/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render configuration model.

`MutableRenderConfig` collects settings from defaults, an optional TOML file and
CLI overrides, then produces an immutable `RenderConfig` via `freeze`. The frozen
snapshot is what the renderer receives: it never reads process-wide state, so
renderers with different settings can coexist (e.g., in parallel tests).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from htmlterm.config.color import ColorMode, resolve_color_mode
from htmlterm.config.loaders import load_settings_table
from htmlterm.config.logging import get_logger
from htmlterm.constants import DEFAULT_MAX_DEPTH, DEFAULT_PARSER
from htmlterm.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from htmlterm.config.loaders import TomlTable
    from htmlterm.config.logging import HtmltermLogger

logger: HtmltermLogger = get_logger(__name__)

KEY_COLOR = "color"
KEY_MAX_DEPTH = "max_depth"
KEY_PARSER = "parser"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable runtime configuration for a render pass.

    Attributes:
        color (bool): Emit ANSI escape sequences (True) or Markdown-like punctuation (False).
        max_depth (int | None): Maximum node nesting depth; `None` disables the limit.
        parser (str): BeautifulSoup tree builder used to parse input documents.
        config_files (tuple[str, ...]): Config files that contributed to this snapshot.
    """

    color: bool = True
    max_depth: int | None = DEFAULT_MAX_DEPTH
    parser: str = DEFAULT_PARSER
    config_files: tuple[str, ...] = ()

    def thaw(self) -> MutableRenderConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableRenderConfig: A mutable builder initialized from this snapshot.
        """
        return MutableRenderConfig(
            color_mode=ColorMode.ALWAYS if self.color else ColorMode.NEVER,
            max_depth=self.max_depth,
            parser=self.parser,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableRenderConfig:
    """Mutable configuration used while merging config sources.

    Attributes:
        color_mode (ColorMode | None): Color intent; `None`/`AUTO` defer to the environment
            when freezing.
        max_depth (int | None): Maximum node nesting depth; `None` disables the limit.
        parser (str): BeautifulSoup tree builder name.
        config_files (list[str]): Config files merged so far.
    """

    color_mode: ColorMode | None = None
    max_depth: int | None = DEFAULT_MAX_DEPTH
    parser: str = DEFAULT_PARSER
    config_files: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableRenderConfig:
        """Return a builder holding the runtime defaults."""
        return cls()

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableRenderConfig:
        """Load configuration from a single TOML file on top of the defaults.

        Args:
            path (Path): Path to ``pyproject.toml`` or a standalone config file.

        Returns:
            MutableRenderConfig: The merged builder.
        """
        return cls.from_defaults().merge_file(path)

    def merge_file(self, path: Path) -> MutableRenderConfig:
        """Merge the htmlterm settings of a TOML file into this builder.

        Args:
            path (Path): Path to ``pyproject.toml`` or a standalone config file.

        Returns:
            MutableRenderConfig: ``self``, for chaining.
        """
        self.merge_dict(load_settings_table(path))
        self.config_files.append(str(path))
        return self

    def merge_dict(self, table: TomlTable) -> MutableRenderConfig:
        """Merge a settings table into this builder.

        Args:
            table (TomlTable): Settings table (``color``, ``max_depth``, ``parser``).

        Returns:
            MutableRenderConfig: ``self``, for chaining.

        Raises:
            ConfigError: If a known key has a value of the wrong type.
        """
        for key, value in table.items():
            if key == KEY_COLOR:
                try:
                    self.color_mode = ColorMode.from_setting(value)
                except ValueError as exc:
                    raise ConfigError(f"Invalid value for '{KEY_COLOR}': {value!r}") from exc
            elif key == KEY_MAX_DEPTH:
                # bool is an int subclass
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise ConfigError(
                        f"Invalid value for '{KEY_MAX_DEPTH}': {value!r} "
                        "(expected a non-negative integer, 0 = unlimited)"
                    )
                self.max_depth = value or None
            elif key == KEY_PARSER:
                if not isinstance(value, str) or not value.strip():
                    raise ConfigError(f"Invalid value for '{KEY_PARSER}': {value!r}")
                self.parser = value.strip()
            else:
                logger.warning("Ignoring unknown config key: %s", key)
        return self

    def apply_overrides(
        self,
        *,
        color_mode: ColorMode | None = None,
        max_depth: int | None = None,
        parser: str | None = None,
    ) -> MutableRenderConfig:
        """Apply CLI overrides; `None` leaves the current value untouched.

        A ``max_depth`` of 0 disables the nesting limit.

        Args:
            color_mode (ColorMode | None): Color intent from ``--color``/``--no-color``.
                `AUTO` keeps whatever a config file set.
            max_depth (int | None): Value of ``--max-depth``.
            parser (str | None): Value of ``--parser``.

        Returns:
            MutableRenderConfig: ``self``, for chaining.
        """
        if color_mode is not None and color_mode != ColorMode.AUTO:
            self.color_mode = color_mode
        if max_depth is not None:
            self.max_depth = max_depth or None
        if parser is not None:
            self.parser = parser
        return self

    def freeze(self) -> RenderConfig:
        """Freeze this mutable builder into an immutable `RenderConfig`.

        The color flag is resolved here, once: explicit modes win, otherwise the
        environment (``FORCE_COLOR`` / ``NO_COLOR``) decides.

        Returns:
            RenderConfig: The immutable snapshot.

        Raises:
            ConfigError: If ``max_depth`` is negative.
        """
        if self.max_depth is not None and self.max_depth < 0:
            raise ConfigError(f"Invalid max_depth: {self.max_depth}")
        return RenderConfig(
            color=resolve_color_mode(color_mode_override=self.color_mode),
            max_depth=self.max_depth,
            parser=self.parser,
            config_files=tuple(self.config_files),
        )


def plain_config(**kwargs: Any) -> RenderConfig:
    """Return a colorless `RenderConfig`, independent of the environment.

    Args:
        **kwargs (Any): Extra `RenderConfig` fields (``max_depth``, ``parser``).

    Returns:
        RenderConfig: The snapshot with ``color=False``.
    """
    return RenderConfig(color=False, **kwargs)
