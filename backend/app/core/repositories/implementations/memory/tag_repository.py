from __future__ import annotations

from typing import TYPE_CHECKING

from app.core.models.tag import normalize_tag_name
from app.core.repositories.tag_repository import TagRepository

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.core.models.tag import Tag
    from app.db.base import InMemoryDatabase


class InMemoryTagRepository(TagRepository):
    """TagRepository backed by ``InMemoryDatabase.tags``.

    Name lookups scan the collection; there is no secondary index.
    """

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def create(self, tag: Tag) -> Tag:
        self._db.tags[tag.id] = tag
        return tag

    def get(self, tag_id: str) -> Tag | None:
        return self._db.tags.get(tag_id)

    def list(self) -> Sequence[Tag]:
        return list(self._db.tags.values())

    def find_by_name(self, name: str) -> Tag | None:
        key = normalize_tag_name(name)
        return next((t for t in self._db.tags.values() if t.normalized_name == key), None)

    def count(self) -> int:
        return len(self._db.tags)
