from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, List, Optional, Union

logger = logging.getLogger(__name__)


def read_json_content(file_obj):
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return json.loads(content)

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def as_records(data: Any) -> List[Any]:
    """A decoded payload as a record list: a lone object becomes a one-item list."""
    if data is None:
        return []
    if isinstance(data, list):
        return data
    return [data]


def default_output_filename(now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"dynamic-table-{now_ms}.md"


def safe_output_filename(filename: Optional[str]) -> str:
    """Base name of the requested file, or the timestamped default."""
    name = Path(filename).name if filename else ''
    return name or default_output_filename()


def write_document(output_dir: Union[str, Path], filename: str, document: str) -> Path:
    """Write the finished document in one go, creating the directory if needed."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / safe_output_filename(filename)
    path.write_text(document, encoding='utf-8')
    logger.info("Wrote %d characters to %s", len(document), path)
    return path
