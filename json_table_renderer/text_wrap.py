from __future__ import annotations

from typing import Any, List


def wrap_text(text: Any, max_width: int) -> List[str]:
    """Greedy word-wrap on single spaces.

    Words longer than ``max_width`` are hard-split into fixed-width chunks.
    Always returns at least one line; empty input gives ``['']``.
    """
    if max_width < 1:
        raise ValueError(f"max_width must be at least 1, got {max_width}")

    text = '' if text is None else str(text)
    lines: List[str] = []
    current = ''

    for word in text.split(' '):
        if len(word) > max_width:
            if current.strip():
                lines.append(current.strip())
            current = ''
            for i in range(0, len(word), max_width):
                lines.append(word[i:i + max_width])
        elif len((current + ' ' + word).strip()) > max_width:
            lines.append(current.strip())
            current = word
        else:
            current += ' ' + word

    if current.strip():
        lines.append(current.strip())
    return lines or ['']
