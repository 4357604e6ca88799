from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.schemas.tag import TagCreate, TagRead
from app.dependencies import get_tag_service

if TYPE_CHECKING:
    from app.core.services.tag_service import TagService

router = APIRouter()


@router.get("/", response_model=list[TagRead])
async def list_tags(service: TagService = Depends(get_tag_service)):
    return [TagRead.model_validate(t) for t in service.list_tags()]


@router.post("/", response_model=TagRead)
async def upsert_tag(
    payload: TagCreate,
    service: TagService = Depends(get_tag_service),
):
    """Create a tag or return the existing one with the same name.

    The color is only applied when the tag is new.
    """
    tag = service.upsert_tag(payload.name, color=payload.color)
    return TagRead.model_validate(tag)


@router.get("/{tag_id}", response_model=TagRead)
async def get_tag(tag_id: str, service: TagService = Depends(get_tag_service)):
    tag = service.get_tag(tag_id)
    if not tag:
        raise HTTPException(status_code=404, detail="Tag not found")
    return TagRead.model_validate(tag)
