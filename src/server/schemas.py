"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str


class EntrySaveRequest(BaseModel):
    """Request body for ``POST /write/save``.

    Without ``id`` a new entry is created; with ``id`` that entry is replaced.
    """

    prompt: str = Field(..., description="Diary text written by the user")
    date: Optional[str] = Field(default="", description="Display label for the entry")
    id: Optional[str] = Field(default=None, description="Entry to update (omit to create)")
    story: Optional[str] = Field(
        default=None,
        description="Previously generated story to keep on update",
    )


class EntrySaveResponse(BaseModel):
    """Response body for a successful save."""

    id: str
    created: bool
    message: str


class EntryResponse(BaseModel):
    """Serialized journal entry."""

    id: str
    date: str
    prompt: str
    story: Optional[str] = None


class ValidationErrorResponse(BaseModel):
    """Body returned with HTTP 400 for malformed requests."""

    errors: List[dict]
