from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.core.models.tag import Tag


class TagRepository(ABC):
    """Abstract repository interface for tags. Tags are never updated or deleted."""

    @abstractmethod
    def create(self, tag: Tag) -> Tag:  # pragma: no cover - interface only
        """Store a new tag and return it."""

    @abstractmethod
    def get(self, tag_id: str) -> Tag | None:  # pragma: no cover
        """Fetch a tag by id or return None if not found."""

    @abstractmethod
    def list(self) -> Sequence[Tag]:  # pragma: no cover
        """Return every tag in storage order."""

    @abstractmethod
    def find_by_name(self, name: str) -> Tag | None:  # pragma: no cover
        """Return the tag whose name equals ``name`` after trim and case-fold."""

    @abstractmethod
    def count(self) -> int:  # pragma: no cover
        """Number of stored tags."""
