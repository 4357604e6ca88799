from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends

from app.api.v1.schemas.metadata import PruneResult
from app.dependencies import get_note_service, get_tag_service

if TYPE_CHECKING:
    from app.core.services.note_service import NoteService
    from app.core.services.tag_service import TagService


router = APIRouter()


@router.post("/prune-dangling-tags", response_model=PruneResult)
async def prune_dangling_tags(
    note_service: NoteService = Depends(get_note_service),
    tag_service: TagService = Depends(get_tag_service),
) -> PruneResult:
    """Remove tag ids that do not resolve to a known tag from every note."""
    updated = note_service.prune_dangling_tags(tag_service.known_tag_ids())
    return PruneResult(updated=updated)
