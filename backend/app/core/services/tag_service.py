from __future__ import annotations

from typing import TYPE_CHECKING

from app.core.models.tag import Tag
from app.utils.ids import TAG_ID_PREFIX, new_id
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.core.repositories.tag_repository import TagRepository


logger = get_logger(__name__)


def parse_tag_input(raw: str | None) -> list[str]:
    """Split a comma-separated tag field ("Work, ideas ,") into trimmed names."""
    if not raw:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


class TagService:
    """Tag registry: listing plus create-or-fetch by case-insensitive name."""

    def __init__(self, repo: TagRepository) -> None:
        self._repo = repo

    def list_tags(self) -> list[Tag]:
        """Return all tags ordered by name, ignoring case."""
        return sorted(self._repo.list(), key=lambda t: (t.name.casefold(), t.name))

    def get_tag(self, tag_id: str) -> Tag | None:
        return self._repo.get(tag_id)

    def upsert_tag(self, name: str, color: str | None = None) -> Tag:
        """Return the tag named ``name`` (trim + case-insensitive), creating it if needed.

        When a tag already matches, it is returned unchanged and ``color`` is
        ignored. Blank names are accepted and yield a tag with an empty name.
        """
        existing = self._repo.find_by_name(name)
        if existing is not None:
            if color is not None and color != existing.color:
                logger.debug(
                    "Ignoring color for existing tag",
                    extra={"tag_id": existing.id, "color": color},
                )
            return existing

        tag = Tag(id=new_id(TAG_ID_PREFIX), name=name.strip(), color=color)
        created = self._repo.create(tag)
        logger.info("Created tag", extra={"tag_id": created.id, "tag_name": created.name})
        return created

    def resolve_tag_names(self, names: Iterable[str]) -> list[str]:
        """Upsert each non-blank name and return the tag ids in input order."""
        tag_ids: list[str] = []
        for name in names:
            if not name or not name.strip():
                continue
            tag_ids.append(self.upsert_tag(name).id)
        return tag_ids

    def known_tag_ids(self) -> set[str]:
        return {t.id for t in self._repo.list()}

    def count(self) -> int:
        return self._repo.count()
