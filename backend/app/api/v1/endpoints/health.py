from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.config import settings
from app.dependencies import get_note_service, get_tag_service

if TYPE_CHECKING:
    from app.core.services.note_service import NoteService
    from app.core.services.tag_service import TagService

router = APIRouter()


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "ocean-notes-api",
            "version": "0.1.0"
        }
    )


@router.get("/ready")
async def readiness_check(
    note_service: NoteService = Depends(get_note_service),
    tag_service: TagService = Depends(get_tag_service),
):
    """Readiness check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "ready",
            "storage": "in-memory",
            "notes": note_service.count(),
            "tags": tag_service.count(),
            "api_prefix": settings.api_prefix
        }
    )
