"""Box-drawn ASCII table with a multi-row header.

Borders use one padding space on each side of a column, so a column of
width ``w`` occupies ``w + 2`` characters between separators.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from .expander import expand_record
from .header_layout import build_header_rows, leaf_columns
from .schema_utils import build_header_tree, extract_columns
from .text_wrap import wrap_text
from .values import to_cell_text
from .widths import compute_widths

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data to display"

# Column whose text is shown only on the first line of each record.
PRIMARY_KEY_COLUMN = "user_id"

HORIZONTAL = "─"
VERTICAL = "│"


def pad(text: str, width: int, align: str = "left") -> str:
    if len(text) >= width:
        return text
    space = " " * (width - len(text))
    if align == "center":
        half = len(space) // 2
        return space[:half] + text + space[half:]
    if align == "right":
        return space + text
    return text + space


def draw_line(left: str, middle: str, right: str, columns: Sequence[str], widths: Dict[str, int]) -> str:
    return left + middle.join(HORIZONTAL * (widths[c] + 2) for c in columns) + right + "\n"


def draw_header_row(row: Sequence[Dict[str, Any]], columns: Sequence[str], widths: Dict[str, int]) -> str:
    cells: List[str] = []
    col_index = 0
    for cell in row:
        span = cell["span"]
        covered = columns[col_index:col_index + span]
        # A merged cell also takes over the separators between its columns.
        width = sum(widths[c] + 2 for c in covered) + len(covered) - 1
        cells.append(pad(cell["label"][:width], width, "center"))
        col_index += span
    return VERTICAL + VERTICAL.join(cells) + VERTICAL + "\n"


def draw_record(
    record: Any,
    columns: Sequence[str],
    widths: Dict[str, int],
    primary_key_column: str,
) -> str:
    out: List[str] = []
    for row_idx, cells in enumerate(expand_record(record, columns)):
        wrapped = [wrap_text(to_cell_text(cell), widths[col]) for cell, col in zip(cells, columns)]
        height = max(len(lines) for lines in wrapped)
        for line_idx in range(height):
            parts = []
            for lines, col in zip(wrapped, columns):
                if col == primary_key_column and (row_idx > 0 or line_idx > 0):
                    text = ""
                else:
                    text = lines[line_idx] if line_idx < len(lines) else ""
                parts.append(" " + pad(text, widths[col]) + " ")
            out.append(VERTICAL + VERTICAL.join(parts) + VERTICAL + "\n")
    return "".join(out)


def render_table(records: Sequence[Any], primary_key_column: str = PRIMARY_KEY_COLUMN) -> str:
    """Render records as a box-drawn table.

    Returns ``NO_DATA_MESSAGE`` for an empty collection, or when the records
    contain no columns at all.
    """
    if not records:
        return NO_DATA_MESSAGE

    tree = build_header_tree(extract_columns(records))
    columns = leaf_columns(tree)
    if not columns:
        return NO_DATA_MESSAGE

    header_rows = build_header_rows(tree)
    widths = compute_widths(records, columns)
    logger.debug("Rendering %d records over %d columns (%d header rows)", len(records), len(columns), len(header_rows))

    table = [draw_line("┌", "┬", "┐", columns, widths)]
    for row in header_rows:
        table.append(draw_header_row(row, columns, widths))
    table.append(draw_line("├", "┼", "┤", columns, widths))

    for index, record in enumerate(records):
        table.append(draw_record(record, columns, widths, primary_key_column))
        if index < len(records) - 1:
            table.append(draw_line("├", "┼", "┤", columns, widths))

    table.append(draw_line("└", "┴", "┘", columns, widths))
    return "".join(table)
