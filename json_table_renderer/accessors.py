from __future__ import annotations

from typing import Any, List, Tuple

from .paths import split_path
from .values import MAPPING, SEQUENCE, value_kind


def collect_values(container: Any, key: str) -> List[Any]:
    """Broadcast a key lookup over a list, keeping one slot per element.

    Nested lists are flattened into the result. Elements that are not
    objects, or lack the key, yield ``None``.
    """
    results: List[Any] = []
    for item in container:
        kind = value_kind(item)
        if kind == MAPPING:
            results.append(item.get(key))
        elif kind == SEQUENCE:
            results.extend(collect_values(item, key))
        else:
            results.append(None)
    return results


def descend(record: Any, column: str) -> Tuple[Any, bool]:
    """Follow a column path into a record.

    Returns ``(value, fanned_out)``. Once a list is met on the way down, the
    remaining keys are mapped over its elements and the value becomes a list
    with one entry per element.
    """
    value = record
    fanned_out = False
    for key in split_path(column):
        kind = value_kind(value)
        if kind == SEQUENCE:
            value = collect_values(value, key)
            fanned_out = True
        elif kind == MAPPING:
            value = value.get(key)
        else:
            value = None
    return value, fanned_out


def get_value_by_path(record: Any, column: str) -> Any:
    value, _ = descend(record, column)
    return value


def resolve_cells(record: Any, column: str) -> List[Any]:
    """Values a column takes in a record, one per physical row.

    A terminal list that was not reached through fan-out (e.g. a list of
    tags) stays a single cell.
    """
    value, fanned_out = descend(record, column)
    if fanned_out:
        return list(value)
    return [value]
