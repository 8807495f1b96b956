"""
Style descriptors and the default terminal style renderer.

A StyleDescriptor only describes a look. Turning it into escape codes is the
job of a style renderer: any callable taking (text, style) and returning the
string to emit. The default renderer builds SGR escape codes with rich.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from rich.style import Style


class Color(Enum):
    """The sixteen ANSI terminal colors, usable as foreground or background."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"


class Decoration(Enum):
    """Text decoration; values are rich Style attribute names."""

    BOLD = "bold"
    FAINT = "dim"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strike"


@dataclass(frozen=True)
class StyleDescriptor:
    """A visual style. None in a field means unset (inherit / default)."""

    fg: Color | None = None
    bg: Color | None = None
    decoration: Decoration | None = None

    def with_fg(self, fg: Color) -> StyleDescriptor:
        return replace(self, fg=fg)

    def with_bg(self, bg: Color) -> StyleDescriptor:
        return replace(self, bg=bg)

    def with_decoration(self, decoration: Decoration) -> StyleDescriptor:
        return replace(self, decoration=decoration)

    @property
    def is_empty(self) -> bool:
        return self.fg is None and self.bg is None and self.decoration is None

    def merged_over(self, other: StyleDescriptor) -> StyleDescriptor:
        """
        Combine with a lower-precedence style.

        Fields set on self win; fields left unset are taken from other.
        """
        return StyleDescriptor(
            fg=self.fg if self.fg is not None else other.fg,
            bg=self.bg if self.bg is not None else other.bg,
            decoration=self.decoration if self.decoration is not None else other.decoration,
        )


StyleRenderer = Callable[[str, StyleDescriptor], str]


def to_rich_style(style: StyleDescriptor) -> Style:
    """The rich Style equivalent of a descriptor."""
    attributes: dict[str, bool] = {}
    if style.decoration is not None:
        attributes[style.decoration.value] = True
    return Style(
        color=style.fg.value if style.fg is not None else None,
        bgcolor=style.bg.value if style.bg is not None else None,
        **attributes,
    )


def ansi_renderer(text: str, style: StyleDescriptor) -> str:
    """
    Wrap text in SGR escape codes for style, followed by a reset.

    Decorations come first, then foreground, then background, e.g.
    '\\x1b[1;31;47mtext\\x1b[0m' for bold red on white.
    """
    if style.is_empty:
        return text
    return to_rich_style(style).render(text)


def plain_renderer(text: str, style: StyleDescriptor) -> str:
    """Ignore styling entirely (for pipes, logs and tests)."""
    return text
