"""
GridBuilder: accumulates layout and style directives for a GridPrinter.

Every index-taking call is checked against the declared dimensions as it is
made, so a built printer can never fail on a directive at print time. A call
that fails leaves the builder exactly as it was.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Sequence, TextIO

from grid_printer.grid_types import (
    DEFAULT_COL_SPACING,
    Alignment,
    Axis,
    CellPredicate,
    ColumnSelector,
    Dimensions,
    LayoutConfig,
    OutOfBounds,
    PredicateSelector,
    RowSelector,
    StyleDirective,
)
from grid_printer.style import StyleDescriptor, StyleRenderer, ansi_renderer

if TYPE_CHECKING:
    from grid_printer.printer import GridPrinter

logger = logging.getLogger(__name__)


class GridBuilder:
    """Mutable, single-owner builder consumed by build()."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")
        self._dimensions = Dimensions(rows, cols)
        self._col_spacing = DEFAULT_COL_SPACING
        self._alignments: dict[int, Alignment] = {}
        self._default_alignment = Alignment.LEFT
        self._row_styles: dict[int, StyleDescriptor] = {}
        self._col_styles: dict[int, StyleDescriptor] = {}
        self._predicates: list[StyleDirective] = []
        self._formatter: Callable[[Any], str] = str
        self._renderer: StyleRenderer = ansi_renderer
        self._sink: TextIO | None = None
        self._consumed = False

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    def _check_open(self) -> None:
        if self._consumed:
            raise RuntimeError("GridBuilder has already been built; create a new builder")

    def _check_index(self, index: int, axis: Axis) -> None:
        valid_range = range(self._dimensions.extent(axis))
        if index not in valid_range:
            raise OutOfBounds(index, axis, valid_range)

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def col_spacing(self, spacing: int) -> GridBuilder:
        """Number of literal spaces between adjacent columns."""
        self._check_open()
        if spacing < 0:
            raise ValueError(f"Column spacing must be non-negative, got {spacing}")
        self._col_spacing = spacing
        return self

    def alignment(self, index: int, alignment: Alignment) -> GridBuilder:
        self._check_open()
        self._check_index(index, Axis.COLUMN)
        self._alignments[index] = alignment
        return self

    def default_alignment(self, alignment: Alignment) -> GridBuilder:
        """Alignment for columns without an explicit override (LEFT unless set)."""
        self._check_open()
        self._default_alignment = alignment
        return self

    # -------------------------------------------------------------------------
    # Styling
    # -------------------------------------------------------------------------

    def col_style(self, index: int, style: StyleDescriptor) -> GridBuilder:
        """Style every cell of column index. Replaces an earlier style for it."""
        self._check_open()
        self._check_index(index, Axis.COLUMN)
        self._col_styles[index] = style
        logger.debug("col_style: column %d -> %s", index, style)
        return self

    def col_styles(self, styles: Sequence[StyleDescriptor | None]) -> GridBuilder:
        """
        Set column styles positionally; None entries leave a column unstyled.

        The whole sequence is validated before anything is applied.
        """
        self._check_open()
        for index in range(len(styles)):
            self._check_index(index, Axis.COLUMN)
        for index, style in enumerate(styles):
            if style is None:
                self._col_styles.pop(index, None)
            else:
                self._col_styles[index] = style
        return self

    def row_style(self, index: int, style: StyleDescriptor) -> GridBuilder:
        """Style every cell of row index. Replaces an earlier style for it."""
        self._check_open()
        self._check_index(index, Axis.ROW)
        self._row_styles[index] = style
        logger.debug("row_style: row %d -> %s", index, style)
        return self

    def style_func(
        self,
        axis: Axis,
        style_if_true: StyleDescriptor,
        style_if_false: StyleDescriptor,
        predicate: CellPredicate,
        index: int | None = None,
    ) -> GridBuilder:
        """
        Style cells conditionally on their value.

        Args:
            axis: Axis the directive is laid over
            style_if_true: Style contributed where predicate(value) is true
            style_if_false: Style contributed where it is false
                (pass StyleDescriptor() to contribute nothing)
            predicate: Called with the raw cell value, not its text
            index: Restrict to a single row/column of axis; None covers all

        Returns:
            The builder, for chaining
        """
        self._check_open()
        if index is not None:
            self._check_index(index, axis)
        directive = StyleDirective(
            PredicateSelector(axis, predicate, index),
            style_if_true,
            style_if_false,
        )
        self._predicates.append(directive)
        logger.debug("style_func: %s index=%s (directive #%d)", axis.value, index, len(self._predicates))
        return self

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def formatter(self, formatter: Callable[[Any], str]) -> GridBuilder:
        """Stringification applied to every cell (str unless set)."""
        self._check_open()
        self._formatter = formatter
        return self

    def renderer(self, renderer: StyleRenderer) -> GridBuilder:
        """Replace the default ANSI style renderer."""
        self._check_open()
        self._renderer = renderer
        return self

    def sink(self, stream: TextIO) -> GridBuilder:
        """Stream print() writes to (sys.stdout unless set)."""
        self._check_open()
        self._sink = stream
        return self

    # -------------------------------------------------------------------------
    # Finalization
    # -------------------------------------------------------------------------

    def build_config(self) -> LayoutConfig:
        """Consume the builder and return its LayoutConfig."""
        self._check_open()
        self._consumed = True

        # Predicates first (insertion order), then rows, then columns
        directives: list[StyleDirective] = list(self._predicates)
        directives.extend(
            StyleDirective(RowSelector(index), style) for index, style in sorted(self._row_styles.items())
        )
        directives.extend(
            StyleDirective(ColumnSelector(index), style) for index, style in sorted(self._col_styles.items())
        )

        return LayoutConfig(
            dimensions=self._dimensions,
            col_spacing=self._col_spacing,
            alignments=MappingProxyType(dict(self._alignments)),
            default_alignment=self._default_alignment,
            directives=tuple(directives),
            formatter=self._formatter,
            renderer=self._renderer,
            sink=self._sink,
        )

    def build(self) -> GridPrinter:
        """Consume the builder and return a ready-to-use GridPrinter."""
        from grid_printer.printer import GridPrinter

        return GridPrinter(self.build_config())
