"""
Demonstration scripts for the grid printer.

Run with no arguments to print every demo to the terminal, with 'panel' to
show them inside rich panels, or with 'log' to also see layout logging.
"""

import io
import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from grid_printer import (
    Alignment,
    Axis,
    Color,
    Decoration,
    GridPrinter,
    ShapeMismatch,
    StyleDescriptor,
)

CARS = [
    ["Make", "Model", "Color", "Year", "Price"],
    ["Ford", "Pinto", "Green", "1978", "$750.00"],
    ["Toyota", "Tacoma", "Red", "2006", "$15,475.23"],
    ["Lamborghini", "Diablo", "Yellow", "2001", "$238,459.99"],
]

NUMBERS = [
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
]


def cars_printer() -> GridPrinter:
    """The plain cars table, header included as row 0."""
    return GridPrinter.builder(len(CARS), len(CARS[0])).col_spacing(4).build()


def colors_printer() -> GridPrinter:
    """One style per column."""
    return (
        GridPrinter.builder(len(NUMBERS), len(NUMBERS[0]))
        .col_style(0, StyleDescriptor().with_fg(Color.MAGENTA))
        .col_style(1, StyleDescriptor().with_fg(Color.BLACK).with_bg(Color.BRIGHT_YELLOW))
        .col_style(2, StyleDescriptor().with_decoration(Decoration.STRIKETHROUGH))
        .col_style(
            3,
            StyleDescriptor(fg=Color.BLACK, bg=Color.WHITE, decoration=Decoration.ITALIC),
        )
        .build()
    )


def highlight_printer() -> GridPrinter:
    """Header row, right-aligned prices and a predicate over the Year column."""
    return (
        GridPrinter.builder(len(CARS), len(CARS[0]))
        .col_spacing(3)
        .row_style(0, StyleDescriptor(decoration=Decoration.UNDERLINE))
        .col_style(0, StyleDescriptor(fg=Color.CYAN))
        .alignment(4, Alignment.RIGHT)
        .alignment(3, Alignment.CENTER)
        .style_func(
            Axis.COLUMN,
            StyleDescriptor(bg=Color.RED),
            StyleDescriptor(),
            lambda year: year.isdigit() and int(year) < 2000,
            index=3,
        )
        .build()
    )


def show(title: str, printer: GridPrinter, data: list, use_panel: bool, console: Console) -> None:
    if use_panel:
        console.print(Panel(Text.from_ansi(printer.render(data)), title=title, expand=False))
        return

    print("=" * 40)
    print(title)
    print("=" * 40)
    printer.print(data)
    print()


def demo(use_panel: bool = False) -> None:
    """Run every demo."""
    console = Console()

    show("Cars", cars_printer(), CARS, use_panel, console)
    show("Column colors", colors_printer(), NUMBERS, use_panel, console)
    show("Row, column and predicate styles", highlight_printer(), CARS, use_panel, console)

    # Shape errors are reported to the caller and nothing is printed
    sink = io.StringIO()
    printer = GridPrinter.builder(3, 3).sink(sink).build()
    try:
        printer.print(NUMBERS)
    except ShapeMismatch as err:
        print(err)
        print(repr(err))
        print(f"sink received {len(sink.getvalue())} characters")


if __name__ == "__main__":
    if "log" in sys.argv[1:]:
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    demo(use_panel="panel" in sys.argv[1:])
