"""
Style resolution: merge every directive that applies to a cell into one style.

Precedence, highest first:
1. Predicate directives covering the cell, in the order they were added
2. The row directive for the cell's row
3. The column directive for the cell's column

Merging is field by field: a higher-precedence directive's set fields win and
lower-precedence directives only fill fields that are still unset.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from grid_printer.grid_types import (
    ColumnSelector,
    LayoutConfig,
    PredicateSelector,
    RowSelector,
    StyleDirective,
)
from grid_printer.style import StyleDescriptor


def matching_styles(
    directives: Sequence[StyleDirective],
    row: int,
    col: int,
    value: Any,
) -> Iterator[StyleDescriptor]:
    """
    Yield the styles contributed to cell (row, col), highest precedence first.

    directives must already be in precedence order, as LayoutConfig keeps them.
    """
    for directive in directives:
        match directive.selector:
            case PredicateSelector() as selector:
                if not selector.covers(row, col):
                    continue
                if selector.predicate(value):
                    yield directive.style
                else:
                    yield directive.style_if_false
            case RowSelector(index=index):
                if index == row:
                    yield directive.style
            case ColumnSelector(index=index):
                if index == col:
                    yield directive.style


def merge_styles(styles: Iterator[StyleDescriptor] | Sequence[StyleDescriptor]) -> StyleDescriptor:
    """Fold styles given highest precedence first into a single descriptor."""
    resolved = StyleDescriptor()
    for style in styles:
        resolved = resolved.merged_over(style)
    return resolved


def resolve_style(config: LayoutConfig, row: int, col: int, value: Any) -> StyleDescriptor:
    """Style for the cell at (row, col) holding value; all-unset if nothing applies."""
    return merge_styles(matching_styles(config.directives, row, col, value))
