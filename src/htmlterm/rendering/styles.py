# topmark:header:start
#
#   project      : htmlterm
#   file         : styles.py
#   file_relpath : src/htmlterm/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI start/reset sequences for the colored output style.

Escape sequences come from `click.style` with ``reset=False``, so a style can be
opened before streaming an element's content and closed afterwards with the
generic `RESET_SEQUENCE`. There is no style-specific undo.
"""

from __future__ import annotations

from dataclasses import dataclass

import click

#: Reset all attributes to the terminal defaults (``ESC[0m``).
RESET_SEQUENCE: str = click.style("", reset=True)


@dataclass(frozen=True)
class TextStyle:
    """A set of terminal text attributes.

    Attributes:
        fg (str | None): Foreground color name as accepted by `click.style`.
        bg (str | None): Background color name as accepted by `click.style`.
        bold (bool): Bold text.
        underline (bool): Underlined text.
    """

    fg: str | None = None
    bg: str | None = None
    bold: bool = False
    underline: bool = False

    def open_sequence(self) -> str:
        """Return the escape sequence that switches these attributes on."""
        # click emits an explicit "off" code for False, so unset flags become None
        return click.style(
            "",
            fg=self.fg,
            bg=self.bg,
            bold=self.bold or None,
            underline=self.underline or None,
            reset=False,
        )


HEADING_STYLE = TextStyle(fg="white", bg="blue", bold=True)
ITALIC_STYLE = TextStyle(underline=True)
BOLD_STYLE = TextStyle(bold=True)
CODE_STYLE = TextStyle(fg="red", bg="bright_white")
