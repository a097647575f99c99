"""FastAPI application bootstrap."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from src.story_journal.logger import setup_logger

from .dependencies import (
    get_config,
    get_journal_store,
    get_page_renderer,
    get_summarizer,
    get_workflow,
    reset_dependencies,
)
from .routes import register_journal_routes, register_page_routes
from .schemas import ValidationErrorResponse

RESOURCES_DIR = Path(__file__).parent / "resources"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 with the list of problems."""
    body = ValidationErrorResponse(errors=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_config()
    setup_logger(log_level=config.log_level, log_file=config.log_file)

    app = FastAPI(title="Story Journal", version="1.0.0")
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.mount("/resources", StaticFiles(directory=RESOURCES_DIR), name="resources")

    register_page_routes(app)
    register_journal_routes(app)

    return app


app = create_app()

__all__ = [
    "app",
    "create_app",
    "get_config",
    "get_journal_store",
    "get_page_renderer",
    "get_summarizer",
    "get_workflow",
    "reset_dependencies",
]
