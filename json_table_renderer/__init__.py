"""Core logic for the JSON table renderer.

The HTTP boundary lives in `api.py` and the Gradio UI in the root `app.py`.
This package contains pure functions that:
- discover dot-path columns across heterogeneous records
- lay out a multi-row header from the column tree
- expand records with nested arrays into physical rows
- draw the box table and wrap it in a markdown document
"""
from __future__ import annotations

from .document import TableOptions, generate_markdown_document
from .renderer import NO_DATA_MESSAGE, render_table

__all__ = ["NO_DATA_MESSAGE", "TableOptions", "generate_markdown_document", "render_table"]
