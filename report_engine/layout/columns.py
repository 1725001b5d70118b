"""
Column Width Estimation.

Sizes table columns from their content and centres the table on a page
wide enough to hold it. No user hints: widths come from character counts.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import LayoutConfig, DEFAULT_LAYOUT


@dataclass(frozen=True)
class TableGeometry:
    """Column widths and the page geometry derived from them (cm)."""
    column_widths: Tuple[float, ...]
    table_width: float
    page_width: float
    side_margin: float


def calculate_column_width(
    header_row: Sequence[Optional[str]],
    data_rows: Sequence[Sequence[Optional[str]]],
    column_index: int,
    char_width: float,
    min_width: float,
    max_width: float,
    reference_length: int = 10,
) -> float:
    """Estimate one column's width.

    The widest of (a) the longest word in the header cell, (b) the longest
    cell in the column and (c) the reference length, times the character
    width, clamped to [min_width, max_width]. Rows too short to reach the
    column are skipped.
    """
    header = header_row[column_index] or ""
    max_word_length = max((len(word) for word in header.split()), default=0)

    lengths = [len(header)]
    for row in data_rows:
        if column_index < len(row) and row[column_index] is not None:
            lengths.append(len(row[column_index]))

    longest = max(max_word_length, max(lengths), reference_length)
    return min(max(longest * char_width, min_width), max_width)


def calculate_table_geometry(
    header_row: Sequence[Optional[str]],
    data_rows: Sequence[Sequence[Optional[str]]],
    config: Optional[LayoutConfig] = None,
) -> TableGeometry:
    """Size every column and centre the table on its page.

    Page width is the table width plus padding, clamped to the configured
    bounds; the leftover space is split evenly between both side margins.
    """
    config = config or DEFAULT_LAYOUT

    widths: List[float] = [
        calculate_column_width(
            header_row,
            data_rows,
            i,
            config.char_width,
            config.min_column_width,
            config.max_column_width,
            config.reference_length,
        )
        for i in range(len(header_row))
    ]

    table_width = sum(widths)
    page_width = max(
        min(table_width + config.table_page_padding, config.max_table_page_width),
        config.min_table_page_width,
    )

    return TableGeometry(
        column_widths=tuple(widths),
        table_width=table_width,
        page_width=page_width,
        side_margin=(page_width - table_width) / 2,
    )
