from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.v1.schemas.note import NoteCreate, NoteRead, NoteUpdate
from app.core.services.tag_service import parse_tag_input
from app.dependencies import get_note_service, get_tag_service

if TYPE_CHECKING:
    from app.core.services.note_service import NoteService
    from app.core.services.tag_service import TagService

router = APIRouter()


def _collect_tag_ids(payload: NoteCreate | NoteUpdate, tag_service: TagService) -> list[str]:
    names = list(payload.tag_names or []) + parse_tag_input(payload.tag_input)
    return list(payload.tags or []) + tag_service.resolve_tag_names(names)


@router.get("/", response_model=list[NoteRead])
async def list_notes(
    tag: str | None = None,
    q: str | None = None,
    service: NoteService = Depends(get_note_service),
):
    """List notes, most recently updated first, optionally filtered by tag id and text."""
    notes = service.list_notes(tag_id=tag, query=q)
    return [NoteRead.model_validate(n) for n in notes]


@router.post("/", response_model=NoteRead, status_code=status.HTTP_201_CREATED)
async def create_note(
    payload: NoteCreate,
    service: NoteService = Depends(get_note_service),
    tag_service: TagService = Depends(get_tag_service),
):
    tag_ids = _collect_tag_ids(payload, tag_service)
    note = service.create_note(title=payload.title, content=payload.content, tag_ids=tag_ids)
    return NoteRead.model_validate(note)


@router.get("/{note_id}", response_model=NoteRead)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
):
    note = service.get_note(note_id)
    if not note:
        raise HTTPException(status_code=404, detail="Note not found")
    return NoteRead.model_validate(note)


@router.patch("/{note_id}", response_model=NoteRead)
async def update_note(
    note_id: str,
    payload: NoteUpdate,
    service: NoteService = Depends(get_note_service),
    tag_service: TagService = Depends(get_tag_service),
):
    if service.get_note(note_id) is None:
        # Checked first so unknown notes do not create tags as a side effect
        raise HTTPException(status_code=404, detail="Note not found")
    tag_ids = None
    if payload.tags_supplied():
        tag_ids = _collect_tag_ids(payload, tag_service)
    note = service.update_note(
        note_id, title=payload.title, content=payload.content, tag_ids=tag_ids
    )
    if not note:
        raise HTTPException(status_code=404, detail="Note not found")
    return NoteRead.model_validate(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
):
    deleted = service.delete_note(note_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Note not found")
    return None
