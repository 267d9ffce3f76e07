"""Error taxonomy for the HTTP boundary.

The rendering engine raises none of these itself; the API turns missing
input and engine failures into them so every error response has the same
``{"success": false, "error": ..., "message": ...}`` shape.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class TableServiceError(Exception):
    status_code = 500
    error = "Internal server error"

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if error is not None:
            self.error = error

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": self.error, "message": self.message}


class ValidationError(TableServiceError):
    status_code = 400
    error = "Invalid request"


class RenderError(TableServiceError):
    status_code = 500
    error = "Failed to generate file"


class NotFoundError(TableServiceError):
    status_code = 404
    error = "Not found"


class PayloadTooLargeError(TableServiceError):
    status_code = 413
    error = "Payload too large"
