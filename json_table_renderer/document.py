from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence, Union

from pydantic import BaseModel, Field

from .renderer import render_table

DEFAULT_TITLE = "Dynamic Data Table"
DEFAULT_FORMAT = "ascii"


class TableOptions(BaseModel):
    title: Optional[str] = Field(DEFAULT_TITLE, description="Document heading text")
    # Informational only: ascii is the one table format.
    format: Optional[str] = Field(DEFAULT_FORMAT, description="Table format")

    def resolved(self) -> Dict[str, str]:
        """Options as reported back to callers, with empty values defaulted."""
        return {
            "format": self.format or DEFAULT_FORMAT,
            "title": self.title or DEFAULT_TITLE,
        }


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC timestamp with milliseconds and a trailing 'Z'."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_markdown_document(
    records: Sequence[Any],
    options: Union[TableOptions, Dict[str, Any], None] = None,
    now: Optional[datetime] = None,
) -> str:
    """Heading, generation timestamp, then the table in a plain code fence."""
    if options is None:
        options = TableOptions()
    elif isinstance(options, dict):
        options = TableOptions(**options)

    title = options.resolved()["title"]
    document = f"# {title}\n\n"
    document += f"*Generated on: {iso_timestamp(now)}*\n\n"
    document += "```\n"
    document += render_table(records)
    document += "\n```\n"
    return document
