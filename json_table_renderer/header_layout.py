"""Header layout: spans, depth and one header row per tree level.

Each header row is a list of ``{"label": str, "span": int}`` cells. For every
row, the spans add up to the number of leaf columns, which is what keeps a
merged parent label over exactly the data columns beneath it.
"""
from __future__ import annotations

from typing import Any, Dict, List

from .paths import join_path
from .schema_utils import SELF_KEY

EMPTY_HEADER_CELL = {'label': '', 'span': 1}


def compute_span(node: Dict[str, Any]) -> int:
    if not node:
        return 1
    return sum(compute_span(child) for child in node.values())


def compute_depth(node: Dict[str, Any]) -> int:
    if not node:
        return 0
    return 1 + max(compute_depth(child) for child in node.values())


def header_label(key: str) -> str:
    return '' if key is SELF_KEY else key


def build_header_rows(tree: Dict[str, Any]) -> List[List[Dict[str, Any]]]:
    max_depth = compute_depth(tree)
    rows: List[List[Dict[str, Any]]] = [[] for _ in range(max_depth)]

    def traverse(node: Dict[str, Any], level: int) -> None:
        for key, child in node.items():
            rows[level].append({'label': header_label(key), 'span': compute_span(child)})
            if child:
                traverse(child, level + 1)
            else:
                # Pad short branches so lower rows stay aligned.
                for lower in range(level + 1, max_depth):
                    rows[lower].append(dict(EMPTY_HEADER_CELL))

    traverse(tree, 0)
    return rows


def leaf_columns(tree: Dict[str, Any], prefix: str = '') -> List[str]:
    """Column paths of the tree's leaves, depth first.

    This is the left-to-right order of the data columns under the header.
    """
    columns: List[str] = []
    for key, child in tree.items():
        path = prefix if key is SELF_KEY else join_path(prefix, key)
        if child:
            columns.extend(leaf_columns(child, path))
        else:
            columns.append(path)
    return columns
