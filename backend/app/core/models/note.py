from __future__ import annotations

from pydantic import Field

from .base import TimestampedModel

UNTITLED = "Untitled"


def normalize_title(title: str | None) -> str:
    """Trim a title, falling back to ``UNTITLED`` when nothing is left."""
    stripped = (title or "").strip()
    return stripped or UNTITLED


class Note(TimestampedModel):
    """Note domain model."""

    id: str = Field(description="Opaque note identifier")

    title: str = Field(default=UNTITLED, description="Note title")
    content: str = Field(default="", description="Note content")

    # Tag ids in user order. Duplicates are kept and ids are not checked
    # against the tag registry.
    tags: list[str] = Field(default_factory=list, description="Tag identifiers")

    def has_tag(self, tag_id: str) -> bool:
        return tag_id in self.tags

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match over title and content."""
        needle = query.casefold()
        return needle in self.title.casefold() or needle in self.content.casefold()

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "n_8c1d2e3f4a5b6c7d9e0f",
                    "title": "Tasks",
                    "content": "1. Draft proposal\n2. Review design\n3. Sync with team",
                    "tags": ["t_3f9a1c0e77b2a41c"],
                    "created_at": "2026-01-01T09:00:00Z",
                    "updated_at": "2026-01-01T09:55:00Z",
                }
            ]
        }
    }
