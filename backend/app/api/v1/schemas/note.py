from __future__ import annotations

from datetime import datetime  # noqa: TCH003

from pydantic import Field

from app.core.models.base import AppBaseModel


class NoteCreate(AppBaseModel):
    title: str | None = Field(default=None, description="Note title; blank becomes 'Untitled'")
    content: str | None = Field(default=None, description="Note content")
    tags: list[str] = Field(default_factory=list, description="Existing tag ids")
    tag_names: list[str] = Field(
        default_factory=list,
        description="Tag names to create or reuse; appended after `tags`",
    )
    tag_input: str | None = Field(
        default=None,
        description="Comma-separated tag names, e.g. \"Work, Ideas\"; appended after `tag_names`",
    )


class NoteUpdate(AppBaseModel):
    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None
    tag_names: list[str] | None = None
    tag_input: str | None = None

    def tags_supplied(self) -> bool:
        return any(v is not None for v in (self.tags, self.tag_names, self.tag_input))


class NoteRead(AppBaseModel):
    id: str
    title: str
    content: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime
