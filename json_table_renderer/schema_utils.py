from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .paths import join_path, split_path
from .values import MAPPING, SEQUENCE, is_scalar_sequence, value_kind

# Child key used when a path is both a leaf and a parent (e.g. 'a' and 'a.b').
# Not a string, so no decoded JSON key can collide with it.
SELF_KEY = object()


def _collect_columns(value: Any, prefix: str, seen: Dict[str, None]) -> Dict[str, None]:
    kind = value_kind(value)
    if kind == SEQUENCE:
        if is_scalar_sequence(value):
            # A list of primitives is one column; its values are joined for display.
            seen.setdefault(prefix, None)
        else:
            # Lists of objects fan out under the same prefix.
            for item in value:
                _collect_columns(item, prefix, seen)
    elif kind == MAPPING:
        for key, child in value.items():
            _collect_columns(child, join_path(prefix, key), seen)
    else:
        seen.setdefault(prefix, None)
    return seen


def extract_columns(records: Sequence[Any]) -> List[str]:
    """Return the union of dot-path columns across all records, in first-seen order.

    A top-level scalar record contributes the empty column ''.
    """
    seen: Dict[str, None] = {}
    for record in records or []:
        seen = _collect_columns(record, '', seen)
    return list(seen)


def build_header_tree(columns: Sequence[str]) -> Dict[str, Any]:
    """Convert dot-path columns into a nested dictionary tree.

    Every node is a dict; leaves are empty dicts. Sibling order follows the
    order columns are supplied. A column that is also the parent of another
    column keeps a ``SELF_KEY`` leaf under its node.
    """
    tree: Dict[str, Any] = {}
    for column in columns:
        parts = split_path(column)
        current = tree
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            elif not current[part]:
                # Previously a leaf: keep it as the node's own column.
                current[part][SELF_KEY] = {}
            current = current[part]

        last_part = parts[-1]
        if last_part not in current:
            current[last_part] = {}
        elif current[last_part] and SELF_KEY not in current[last_part]:
            current[last_part][SELF_KEY] = {}
    return tree
