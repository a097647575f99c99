"""Journal entry endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException

from src.journal import NotFoundError, ValidationError

from ..dependencies import get_workflow, serialize_entry
from ..schemas import EntryResponse, EntrySaveRequest, EntrySaveResponse, HealthResponse

logger = logging.getLogger(__name__)


def register_journal_routes(app: FastAPI) -> None:
    """Register save and JSON read endpoints."""

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Simple health check endpoint."""
        return HealthResponse(status="ok")

    @app.post("/write/save", response_model=EntrySaveResponse)
    async def save_entry(request: EntrySaveRequest) -> EntrySaveResponse:
        """Create an entry, or replace the one named by ``id``."""
        workflow = get_workflow()
        try:
            entry, created = await workflow.save_entry(
                request.prompt,
                request.date or "",
                entry_id=request.id,
                story=request.story,
            )
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except NotFoundError as exc:
            raise HTTPException(status_code=404, detail="Prompt not found") from exc
        except Exception as exc:
            logger.exception("Failed to save prompt: %s", exc)
            raise HTTPException(status_code=500, detail="Internal Server Error") from exc

        message = "Prompt added successfully!" if created else "Prompt updated successfully!"
        return EntrySaveResponse(id=entry.id, created=created, message=message)

    @app.get("/api/journals", response_model=List[EntryResponse])
    async def list_entries() -> List[EntryResponse]:
        """List entries as stored, without generating stories."""
        workflow = get_workflow()
        try:
            entries = await workflow.list_entries(summarize=False)
            return [serialize_entry(entry) for entry in entries]
        except Exception as exc:
            logger.exception("Failed to list prompts: %s", exc)
            raise HTTPException(status_code=500, detail="Internal Server Error") from exc

    @app.get("/api/journals/{entry_id}", response_model=EntryResponse)
    async def get_entry(entry_id: str) -> EntryResponse:
        """Fetch one entry by id."""
        workflow = get_workflow()
        try:
            entry = await workflow.find_by_id(entry_id)
            if entry is None:
                raise HTTPException(status_code=404, detail="Prompt not found")
            return serialize_entry(entry)
        except HTTPException:
            raise
        except Exception as exc:
            logger.exception("Failed to get prompt: %s", exc)
            raise HTTPException(status_code=500, detail="Internal Server Error") from exc
