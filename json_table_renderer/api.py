"""FastAPI boundary for the table renderer.

Usage:
    python app.py
    # => POST http://localhost:5001/api/generate-file
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .document import TableOptions, generate_markdown_document, iso_timestamp
from .errors import NotFoundError, PayloadTooLargeError, RenderError, TableServiceError, ValidationError
from .io_utils import safe_output_filename, write_document

logger = logging.getLogger(__name__)

SERVICE_NAME = "json-table-renderer"


class GenerateRequest(BaseModel):
    data: Optional[List[Any]] = Field(None, description="Records to render")
    filename: Optional[str] = Field(None, description="Output file name (generate-file only)")
    options: TableOptions = Field(default_factory=TableOptions)


def _require_data(req: GenerateRequest) -> List[Any]:
    if req.data is None:
        raise ValidationError(
            "Please provide JSON data in the request body",
            error="Missing required field: data",
        )
    return req.data


def _error_response(exc: TableServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="JSON Table Renderer")
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
    )

    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        length = request.headers.get("content-length")
        if length and length.isdigit() and int(length) > settings.max_body_bytes:
            return _error_response(
                PayloadTooLargeError(f"Request body exceeds {settings.max_body_bytes} bytes")
            )
        return await call_next(request)

    async def check_received_body(request: Request) -> None:
        # Chunked uploads carry no Content-Length, so measure what arrived.
        body = await request.body()
        if len(body) > settings.max_body_bytes:
            raise PayloadTooLargeError(f"Request body exceeds {settings.max_body_bytes} bytes")

    @app.exception_handler(TableServiceError)
    async def service_error_handler(request: Request, exc: TableServiceError):
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        first = exc.errors()[0] if exc.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg", "Invalid request body"))
        return _error_response(ValidationError(message))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error_response(NotFoundError("The requested endpoint does not exist"))
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": "HTTP error", "message": str(exc.detail)},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Internal server error", "message": "Something went wrong"},
        )

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"status": "healthy", "service": SERVICE_NAME, "timestamp": iso_timestamp()}

    @app.post("/api/generate-table", dependencies=[Depends(check_received_body)])
    def generate_table(req: GenerateRequest) -> Dict[str, Any]:
        data = _require_data(req)
        try:
            document = generate_markdown_document(data, req.options)
        except Exception as e:
            logger.exception("Error generating table")
            raise RenderError("The table could not be rendered", error="Failed to generate table") from e

        return {
            "success": True,
            "message": "Dynamic markdown table generated successfully",
            "markdown": document,
            "options": req.options.resolved(),
            "timestamp": iso_timestamp(),
        }

    @app.post("/api/generate-file", dependencies=[Depends(check_received_body)])
    def generate_file(req: GenerateRequest) -> Dict[str, Any]:
        data = _require_data(req)
        filename = safe_output_filename(req.filename)
        try:
            document = generate_markdown_document(data, req.options)
            path = write_document(settings.output_dir, filename, document)
        except Exception as e:
            logger.exception("Error generating file")
            raise RenderError("The table could not be rendered or saved") from e

        return {
            "success": True,
            "message": "Dynamic markdown file generated successfully",
            "filename": filename,
            "filePath": str(path),
            "options": req.options.resolved(),
            "timestamp": iso_timestamp(),
        }

    return app
