from __future__ import annotations

from pydantic import Field, field_validator

from app.core.models.base import AppBaseModel


class TagCreate(AppBaseModel):
    name: str = Field(description="Tag name, matched case-insensitively")
    color: str | None = Field(default=None, description="Only used when the tag is new")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Tag name must not be blank")
        return v


class TagRead(AppBaseModel):
    id: str
    name: str
    color: str | None
