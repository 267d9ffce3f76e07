from __future__ import annotations

from typing import Any, List, Sequence

from .accessors import resolve_cells


def expand_record(record: Any, columns: Sequence[str]) -> List[List[Any]]:
    """Turn one record into one or more physical rows of raw cell values.

    The row count is the longest fan-out among the columns. A column with a
    single value shows it on row 0 only and leaves the cell empty on the
    rows below, so a scalar is not repeated under every array element.
    """
    resolved = [resolve_cells(record, column) for column in columns]
    max_rows = max([len(values) for values in resolved] + [1])

    rows: List[List[Any]] = []
    for i in range(max_rows):
        rows.append([values[i] if i < len(values) else None for values in resolved])
    return rows
