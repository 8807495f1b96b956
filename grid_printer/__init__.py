"""
Print a two-dimensional array as an aligned, optionally colored text grid.

Layout directives and styles are gathered with GridPrinter.builder(rows, cols),
validated against the grid shape as they are added, and frozen into an
immutable GridPrinter by build().
"""

from grid_printer.grid_builder import GridBuilder
from grid_printer.grid_types import (
    Alignment,
    Axis,
    CellPredicate,
    ColumnSelector,
    Dimensions,
    GridPrinterError,
    LayoutConfig,
    OutOfBounds,
    PredicateSelector,
    RowSelector,
    Selector,
    ShapeMismatch,
    StyleDirective,
    precedence_order,
)
from grid_printer.layout import align_text, check_shape, compute_widths, render_row, stringify
from grid_printer.printer import GridPrinter
from grid_printer.resolver import matching_styles, merge_styles, resolve_style
from grid_printer.style import (
    Color,
    Decoration,
    StyleDescriptor,
    StyleRenderer,
    ansi_renderer,
    plain_renderer,
)


def builder(rows: int, cols: int) -> GridBuilder:
    """Start configuring a printer for a rows x cols grid."""
    return GridBuilder(rows, cols)


__all__ = [
    "Alignment",
    "Axis",
    "CellPredicate",
    "Color",
    "ColumnSelector",
    "Decoration",
    "Dimensions",
    "GridBuilder",
    "GridPrinter",
    "GridPrinterError",
    "LayoutConfig",
    "OutOfBounds",
    "PredicateSelector",
    "RowSelector",
    "Selector",
    "ShapeMismatch",
    "StyleDescriptor",
    "StyleDirective",
    "StyleRenderer",
    "align_text",
    "ansi_renderer",
    "builder",
    "check_shape",
    "compute_widths",
    "matching_styles",
    "merge_styles",
    "plain_renderer",
    "precedence_order",
    "render_row",
    "resolve_style",
    "stringify",
]
