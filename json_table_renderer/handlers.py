from __future__ import annotations

import json
import logging
from typing import Any, Optional

import gradio as gr

from .config import get_settings
from .document import TableOptions, generate_markdown_document
from .io_utils import as_records, read_json_content, write_document
from .schema_utils import extract_columns

logger = logging.getLogger(__name__)


def load_json_file(file_obj):
    """Parse an uploaded file into the JSON editor; returns (status message, editor update)."""
    if file_obj is None:
        return "No file uploaded.", gr.update()

    try:
        data = read_json_content(file_obj)
    except Exception as e:
        return f"Error parsing JSON: {str(e)}", gr.update()

    records = as_records(data)
    columns = extract_columns(records)
    message = f"Successfully loaded {len(records)} records with {len(columns)} columns."
    return message, gr.update(value=json.dumps(data, indent=2, ensure_ascii=False))


def parse_pasted_json(text: Optional[str]):
    if not text or not text.strip():
        return None, "Nothing to parse."
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return None, f"Error parsing JSON: {str(e)}"
    return data, f"Parsed {len(as_records(data))} records."


def render_document_handler(text: Optional[str], title: Optional[str]):
    """Render pasted JSON into the markdown document shown in the preview."""
    data, message = parse_pasted_json(text)
    if data is None:
        return "", message

    try:
        document = generate_markdown_document(as_records(data), TableOptions(title=title or None))
    except Exception as e:
        logger.exception("Error rendering table from the UI")
        return "", f"Error rendering table: {str(e)}"
    return document, message


def save_document_handler(document: Optional[str], file_name: Optional[str], output_dir: Any = None):
    if not document:
        return None, "Render a table before saving."

    if output_dir is None:
        output_dir = get_settings().output_dir

    try:
        path = write_document(output_dir, (file_name or "").strip(), document)
    except OSError as e:
        return None, f"Error during save: {str(e)}"
    return str(path), f"Saved to {path}"
