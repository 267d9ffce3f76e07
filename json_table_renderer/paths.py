from __future__ import annotations

from typing import List

PATH_SEP = '.'


def escape_path_segment(segment: str) -> str:
    """Escape a single key segment for dot-path representation.

    - Dots are escaped as '\\.' so keys like 'gpt-3.5-turbo' remain one segment.
    - Backslashes are escaped as '\\\\' to preserve round-tripping.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    return segment.replace('\\', '\\\\').replace(PATH_SEP, '\\' + PATH_SEP)


def join_path(prefix: str, key) -> str:
    escaped = escape_path_segment(key)
    return f"{prefix}{PATH_SEP}{escaped}" if prefix else escaped


def split_path(path: str) -> List[str]:
    """Split a dot path on unescaped '.' and unescape each segment.

    Empty segments are kept: the empty path is the single segment ''.
    """
    if path is None:
        return []
    if not isinstance(path, str):
        path = str(path)

    parts: List[str] = []
    buf: List[str] = []
    escaping = False

    for ch in path:
        if escaping:
            buf.append(ch)
            escaping = False
            continue
        if ch == '\\':
            escaping = True
            continue
        if ch == PATH_SEP:
            parts.append(''.join(buf))
            buf = []
            continue
        buf.append(ch)

    if escaping:
        # Trailing backslash; treat as literal.
        buf.append('\\')

    parts.append(''.join(buf))
    return parts


def last_segment(path: str) -> str:
    parts = split_path(path)
    return parts[-1] if parts else ''
