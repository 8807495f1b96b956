"""
Shared type definitions for the grid printer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, TextIO

from grid_printer.style import StyleDescriptor, StyleRenderer, ansi_renderer


class Axis(Enum):
    """Grid axis a directive or error refers to."""

    ROW = "row"
    COLUMN = "column"


class Alignment(Enum):
    """Horizontal placement of text inside its column."""

    LEFT = "left"  # Pad on the right
    RIGHT = "right"  # Pad on the left
    CENTER = "center"  # Odd padding space goes to the right


@dataclass(frozen=True)
class Dimensions:
    """Shape of a grid."""

    rows: int
    cols: int

    def __str__(self) -> str:
        return f"({self.rows}, {self.cols})"

    def extent(self, axis: Axis) -> int:
        return self.rows if axis is Axis.ROW else self.cols


# =============================================================================
# Style Directives
# =============================================================================


CellPredicate = Callable[[Any], bool]


@dataclass(frozen=True)
class RowSelector:
    """Selects every cell of one row."""

    index: int


@dataclass(frozen=True)
class ColumnSelector:
    """Selects every cell of one column."""

    index: int


@dataclass(frozen=True)
class PredicateSelector:
    """Selects cells by testing their value.

    With index None the predicate covers every row (or column) of its axis;
    otherwise only the row (or column) at index.
    """

    axis: Axis
    predicate: CellPredicate
    index: int | None = None

    def covers(self, row: int, col: int) -> bool:
        if self.index is None:
            return True
        return (row if self.axis is Axis.ROW else col) == self.index


Selector = RowSelector | ColumnSelector | PredicateSelector


@dataclass(frozen=True)
class StyleDirective:
    """Binds a style to a selector.

    style_if_false only matters for PredicateSelector: it is the style
    contributed when the predicate is false on the cell's value.
    """

    selector: Selector
    style: StyleDescriptor
    style_if_false: StyleDescriptor = field(default_factory=StyleDescriptor)


_PRECEDENCE = {PredicateSelector: 0, RowSelector: 1, ColumnSelector: 2}


def precedence_order(directives: Iterable[StyleDirective]) -> tuple[StyleDirective, ...]:
    """Predicates first, then rows, then columns; insertion order kept within each."""
    return tuple(sorted(directives, key=lambda d: _PRECEDENCE[type(d.selector)]))


# =============================================================================
# Configuration
# =============================================================================


DEFAULT_COL_SPACING = 2


@dataclass(frozen=True)
class LayoutConfig:
    """Immutable, validated printer configuration produced by GridBuilder."""

    dimensions: Dimensions
    col_spacing: int = DEFAULT_COL_SPACING
    alignments: Mapping[int, Alignment] = field(default_factory=lambda: MappingProxyType({}))
    default_alignment: Alignment = Alignment.LEFT
    directives: tuple[StyleDirective, ...] = ()
    formatter: Callable[[Any], str] = str
    renderer: StyleRenderer = ansi_renderer
    sink: TextIO | None = None  # None = sys.stdout at print time

    def __post_init__(self) -> None:
        object.__setattr__(self, "directives", precedence_order(self.directives))

    def alignment_for(self, col: int) -> Alignment:
        return self.alignments.get(col, self.default_alignment)

    def output_stream(self) -> TextIO:
        return self.sink if self.sink is not None else sys.stdout


# =============================================================================
# Errors
# =============================================================================


class GridPrinterError(Exception):
    """Base class for grid printer errors."""


class OutOfBounds(GridPrinterError, IndexError):
    """A builder call referenced a row or column outside the declared grid."""

    def __init__(self, index: int, axis: Axis, valid_range: range) -> None:
        self.index = index
        self.axis = axis
        self.valid_range = valid_range
        error_msg = (
            f"{axis.value.capitalize()} index {index} is out of bounds\n"
            f"  Valid range: {valid_range.start}..{valid_range.stop}"
        )
        if not valid_range:
            error_msg += f" (grid has no {axis.value}s)"
        super().__init__(error_msg)


class ShapeMismatch(GridPrinterError, ValueError):
    """Data passed to print does not have the shape the printer was built for."""

    def __init__(self, expected: Dimensions, actual: Dimensions) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Data shape does not match printer dimensions\n"
            f"  Expected: {expected.rows} rows x {expected.cols} columns\n"
            f"  Actual: {actual.rows} rows x {actual.cols} columns"
        )
