"""
GridPrinter: render a two-dimensional sequence as an aligned, styled text block.

Example:
    cars = [
        ["Make", "Model", "Color", "Year", "Price"],
        ["Ford", "Pinto", "Green", "1978", "$750.00"],
        ["Toyota", "Tacoma", "Red", "2006", "$15,475.23"],
        ["Lamborghini", "Diablo", "Yellow", "2001", "$238,459.99"],
    ]
    printer = GridPrinter.builder(len(cars), len(cars[0])).col_spacing(4).build()
    printer.print(cars)

Output:
    Make           Model     Color     Year    Price
    Ford           Pinto     Green     1978    $750.00
    Toyota         Tacoma    Red       2006    $15,475.23
    Lamborghini    Diablo    Yellow    2001    $238,459.99
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, TextIO

from grid_printer.grid_builder import GridBuilder
from grid_printer.grid_types import LayoutConfig
from grid_printer.layout import align_text, compute_widths, render_row, stringify
from grid_printer.resolver import resolve_style

logger = logging.getLogger(__name__)


class GridPrinter:
    """Immutable printer; reusable for any data of the configured shape."""

    def __init__(self, config: LayoutConfig) -> None:
        self._config = config
        logger.info(
            "GridPrinter: %s grid, col_spacing=%d, %d style directives",
            config.dimensions,
            config.col_spacing,
            len(config.directives),
        )

    @classmethod
    def builder(cls, rows: int, cols: int) -> GridBuilder:
        return GridBuilder(rows, cols)

    @classmethod
    def new(cls, rows: int, cols: int) -> GridPrinter:
        """A printer with every option at its default."""
        return GridBuilder(rows, cols).build()

    @property
    def config(self) -> LayoutConfig:
        return self._config

    def render(self, data: Sequence[Sequence[Any]]) -> str:
        """
        Render data to a string without writing it anywhere.

        Args:
            data: rows x cols values; each is passed through the configured formatter

        Returns:
            One line per row joined with newlines (no trailing newline)

        Raises:
            ShapeMismatch: If data does not match the printer's dimensions
        """
        config = self._config
        texts = stringify(data, config.dimensions, config.formatter)
        widths = compute_widths(texts, config.dimensions.cols)

        lines: list[str] = []
        for r_idx, row in enumerate(texts):
            fragments = []
            for c_idx, text in enumerate(row):
                padded = align_text(text, widths[c_idx], config.alignment_for(c_idx))
                style = resolve_style(config, r_idx, c_idx, data[r_idx][c_idx])
                fragments.append(config.renderer(padded, style))
            lines.append(render_row(fragments, config.col_spacing))

        return "\n".join(lines)

    def print(self, data: Sequence[Sequence[Any]], file: TextIO | None = None) -> None:
        """
        Render data and write it, newline terminated, to file or the configured sink.

        Nothing is written if data has the wrong shape.
        """
        block = self.render(data)
        if not self._config.dimensions.rows:
            return

        stream = file if file is not None else self._config.output_stream()
        stream.write(block + "\n")
        if hasattr(stream, "flush"):
            stream.flush()
