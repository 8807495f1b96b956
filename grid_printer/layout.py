"""
Column layout: shape validation, stringification, widths and alignment.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from grid_printer.grid_types import Alignment, Dimensions, ShapeMismatch

logger = logging.getLogger(__name__)


def check_shape(data: Sequence[Sequence[Any]], expected: Dimensions) -> None:
    """Raise ShapeMismatch unless data is exactly expected.rows x expected.cols."""
    rows = len(data)
    if rows != expected.rows:
        actual = Dimensions(rows, len(data[0]) if rows else 0)
        logger.warning("check_shape: expected %s, got %s", expected, actual)
        raise ShapeMismatch(expected, actual)

    for row in data:
        if len(row) != expected.cols:
            actual = Dimensions(rows, len(row))
            logger.warning("check_shape: expected %s, got %s", expected, actual)
            raise ShapeMismatch(expected, actual)


def stringify(
    data: Sequence[Sequence[Any]],
    expected: Dimensions,
    formatter: Callable[[Any], str] = str,
) -> list[list[str]]:
    """Validate the shape of data and convert every cell to its display text."""
    check_shape(data, expected)
    return [[formatter(value) for value in row] for row in data]


def compute_widths(texts: Sequence[Sequence[str]], cols: int) -> list[int]:
    """
    Width of each column: the longest text in it.

    A header row needs no special handling: it is row 0 like any other.
    """
    widths = [0] * cols
    for row in texts:
        for col, text in enumerate(row):
            if len(text) > widths[col]:
                widths[col] = len(text)

    logger.info("compute_widths: %d rows, widths=%s", len(texts), widths)
    return widths


def align_text(text: str, width: int, alignment: Alignment) -> str:
    """Pad text to width. Text already at or beyond width is returned as is."""
    padding = width - len(text)
    if padding <= 0:
        return text

    match alignment:
        case Alignment.LEFT:
            return text + " " * padding
        case Alignment.RIGHT:
            return " " * padding + text
        case Alignment.CENTER:
            left = padding // 2
            return " " * left + text + " " * (padding - left)
    raise ValueError(f"Unknown alignment: {alignment}")


def render_row(fragments: Sequence[str], col_spacing: int) -> str:
    """Join already padded (and possibly styled) cells of one row."""
    return (" " * col_spacing).join(fragments)
