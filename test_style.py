"""Tests for style descriptors and renderers."""

import pytest

import demo
from grid_printer import Color, Decoration, StyleDescriptor, ansi_renderer, plain_renderer


class TestStyleDescriptor:
    """Tests for the StyleDescriptor value type."""

    def test_default_is_empty(self) -> None:
        style = StyleDescriptor()
        assert style.is_empty
        assert style.fg is None and style.bg is None and style.decoration is None

    def test_value_equality(self) -> None:
        """Descriptors compare by value."""
        assert StyleDescriptor(fg=Color.RED) == StyleDescriptor().with_fg(Color.RED)
        assert StyleDescriptor(fg=Color.RED) != StyleDescriptor(bg=Color.RED)

    def test_with_methods_return_new_descriptors(self) -> None:
        base = StyleDescriptor(fg=Color.CYAN)
        styled = base.with_bg(Color.BRIGHT_BLACK).with_decoration(Decoration.UNDERLINE)

        assert base == StyleDescriptor(fg=Color.CYAN)
        assert styled == StyleDescriptor(Color.CYAN, Color.BRIGHT_BLACK, Decoration.UNDERLINE)
        assert not styled.is_empty

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            StyleDescriptor().fg = Color.RED  # type: ignore[misc]

    def test_merged_over_fills_unset_fields(self) -> None:
        high = StyleDescriptor(fg=Color.GREEN)
        low = StyleDescriptor(fg=Color.RED, bg=Color.RED, decoration=Decoration.BOLD)
        assert high.merged_over(low) == StyleDescriptor(Color.GREEN, Color.RED, Decoration.BOLD)
        assert low.merged_over(high) == low


# SGR parameters for each color as a foreground; backgrounds are +10
FOREGROUND_CODES = {
    Color.BLACK: 30,
    Color.RED: 31,
    Color.GREEN: 32,
    Color.YELLOW: 33,
    Color.BLUE: 34,
    Color.MAGENTA: 35,
    Color.CYAN: 36,
    Color.WHITE: 37,
    Color.BRIGHT_BLACK: 90,
    Color.BRIGHT_RED: 91,
    Color.BRIGHT_GREEN: 92,
    Color.BRIGHT_YELLOW: 93,
    Color.BRIGHT_BLUE: 94,
    Color.BRIGHT_MAGENTA: 95,
    Color.BRIGHT_CYAN: 96,
    Color.BRIGHT_WHITE: 97,
}

DECORATION_CODES = {
    Decoration.BOLD: 1,
    Decoration.FAINT: 2,
    Decoration.ITALIC: 3,
    Decoration.UNDERLINE: 4,
    Decoration.STRIKETHROUGH: 9,
}


class TestAnsiRenderer:
    """Tests for the exact escape codes emitted by ansi_renderer."""

    def test_every_color_and_decoration_has_a_code(self) -> None:
        assert set(FOREGROUND_CODES) == set(Color)
        assert set(DECORATION_CODES) == set(Decoration)

    @pytest.mark.parametrize("color", list(Color))
    def test_foreground(self, color: Color) -> None:
        code = FOREGROUND_CODES[color]
        assert ansi_renderer("x", StyleDescriptor(fg=color)) == f"\x1b[{code}mx\x1b[0m"

    @pytest.mark.parametrize("color", list(Color))
    def test_background(self, color: Color) -> None:
        code = FOREGROUND_CODES[color] + 10
        assert ansi_renderer("x", StyleDescriptor(bg=color)) == f"\x1b[{code}mx\x1b[0m"

    @pytest.mark.parametrize("decoration", list(Decoration))
    def test_decoration(self, decoration: Decoration) -> None:
        code = DECORATION_CODES[decoration]
        assert ansi_renderer("x", StyleDescriptor(decoration=decoration)) == f"\x1b[{code}mx\x1b[0m"

    def test_combined_order(self) -> None:
        """Decoration, then foreground, then background in one sequence."""
        style = StyleDescriptor(Color.RED, Color.BRIGHT_WHITE, Decoration.STRIKETHROUGH)
        assert ansi_renderer("x", style) == "\x1b[9;31;107mx\x1b[0m"

    def test_empty_style_is_passthrough(self) -> None:
        """No styling means no escape codes at all."""
        assert ansi_renderer("  text ", StyleDescriptor()) == "  text "

    def test_padding_is_styled_with_text(self) -> None:
        assert ansi_renderer("ab  ", StyleDescriptor(fg=Color.GREEN)) == "\x1b[32mab  \x1b[0m"

    def test_plain_ignores_style(self) -> None:
        assert plain_renderer("x", StyleDescriptor(fg=Color.RED)) == "x"


class TestDemoPrinters:
    """The bundled demos render every decoration they use."""

    def test_column_colors(self) -> None:
        lines = demo.colors_printer().render(demo.NUMBERS).split("\n")
        assert lines[0] == (
            "\x1b[35m1\x1b[0m  "
            "\x1b[30;103m2 \x1b[0m  "
            "\x1b[9m3 \x1b[0m  "
            "\x1b[3;30;47m4 \x1b[0m"
        )

    def test_underlined_header(self) -> None:
        header = demo.highlight_printer().render(demo.CARS).split("\n")[0]
        assert header.startswith("\x1b[4;36mMake       \x1b[0m")
