"""HTML page routes."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse

from src.journal import SummarizationError

from ..dependencies import get_page_renderer, get_workflow

logger = logging.getLogger(__name__)


def register_page_routes(app: FastAPI) -> None:
    """Register landing, write form and story listing pages."""

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        """Landing page with entry count and most recent entry date."""
        workflow = get_workflow()
        try:
            count = await workflow.count()
            last_entry = await workflow.most_recent()
            return HTMLResponse(get_page_renderer().render_index(count, last_entry))
        except Exception as exc:
            logger.exception("Failed to render landing page: %s", exc)
            raise HTTPException(status_code=500, detail="Internal Server Error") from exc

    @app.get("/write", response_class=HTMLResponse)
    @app.get("/write/{entry_id}", response_class=HTMLResponse)
    async def write(entry_id: Optional[str] = None) -> HTMLResponse:
        """Write form, pre-filled when ``entry_id`` resolves to an entry."""
        workflow = get_workflow()
        try:
            entry = await workflow.find_by_id(entry_id)
            return HTMLResponse(get_page_renderer().render_write(entry))
        except Exception as exc:
            logger.exception("Failed to render write page: %s", exc)
            raise HTTPException(status_code=500, detail="Internal Server Error") from exc

    @app.get("/journals", response_class=HTMLResponse)
    async def journals() -> HTMLResponse:
        """Fill in missing stories, then list every entry."""
        workflow = get_workflow()
        try:
            entries = await workflow.list_entries(summarize=True)
            return HTMLResponse(get_page_renderer().render_journals(entries))
        except SummarizationError as exc:
            logger.error("Story generation failed: %s", exc)
            raise HTTPException(status_code=500, detail="Internal Server Error") from exc
        except Exception as exc:
            logger.exception("Failed to render journals page: %s", exc)
            raise HTTPException(status_code=500, detail="Internal Server Error") from exc
