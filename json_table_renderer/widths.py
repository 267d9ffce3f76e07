from __future__ import annotations

from typing import Any, Dict, Sequence

from .accessors import get_value_by_path
from .paths import last_segment
from .text_wrap import wrap_text
from .values import to_cell_text

MIN_COLUMN_WIDTH = 10
MAX_COLUMN_WIDTH = 30
MEASURE_WRAP_WIDTH = 30


def compute_widths(records: Sequence[Any], columns: Sequence[str]) -> Dict[str, int]:
    """Display width per column, clamped to [MIN_COLUMN_WIDTH, MAX_COLUMN_WIDTH].

    The width is the longest of the column's own label and every wrapped line
    of its value across all records. Fanned-out values are joined with ', '.
    """
    widths: Dict[str, int] = {}
    for column in columns:
        longest = len(last_segment(column))
        for record in records:
            text = to_cell_text(get_value_by_path(record, column))
            for line in wrap_text(text, MEASURE_WRAP_WIDTH):
                longest = max(longest, len(line))
        widths[column] = min(max(MIN_COLUMN_WIDTH, longest), MAX_COLUMN_WIDTH)
    return widths
