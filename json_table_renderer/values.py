"""Classification and display of decoded JSON values.

Every value reaching the renderer is one of four kinds. Anything else that a
caller managed to put into a record (tuples aside) goes through the explicit
fallback and is shown with ``str()``.
"""
from __future__ import annotations

import json
from typing import Any

SCALAR = 'scalar'
SEQUENCE = 'sequence'
MAPPING = 'mapping'
NULL = 'null'
OTHER = 'other'

SCALAR_TYPES = (str, int, float, bool)


def value_kind(value: Any) -> str:
    if value is None:
        return NULL
    if isinstance(value, SCALAR_TYPES):
        return SCALAR
    if isinstance(value, (list, tuple)):
        return SEQUENCE
    if isinstance(value, dict):
        return MAPPING
    return OTHER


def is_scalar_sequence(value: Any) -> bool:
    """True for a sequence whose elements are all strings, numbers or booleans.

    The empty sequence qualifies. ``None`` elements do not.
    """
    return value_kind(value) == SEQUENCE and all(value_kind(v) == SCALAR for v in value)


def to_json_text(value: Any) -> str:
    """Compact JSON, the way objects are shown inside a cell."""
    try:
        return json.dumps(value, ensure_ascii=False, separators=(',', ':'))
    except (TypeError, ValueError):
        return str(value)


def scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_cell_text(value: Any) -> str:
    """Stringify any record value for display in a single cell."""
    kind = value_kind(value)
    if kind == NULL:
        return ''
    if kind == SCALAR:
        return scalar_text(value)
    if kind == SEQUENCE:
        parts = []
        for item in value:
            item_kind = value_kind(item)
            if item_kind == NULL:
                parts.append('')
            elif item_kind == SCALAR:
                parts.append(scalar_text(item))
            else:
                parts.append(to_json_text(item))
        return ', '.join(parts)
    if kind == MAPPING:
        return to_json_text(value)
    return str(value)
