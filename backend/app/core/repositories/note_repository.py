from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.core.models.note import Note


class NoteRepository(ABC):
    """Abstract repository interface for notes.

    Contract used by services and dependency injection. Implementations hold
    no business rules: title normalization, timestamps and filtering belong to
    ``NoteService``.
    """

    @abstractmethod
    def create(self, note: Note) -> Note:  # pragma: no cover - interface only
        """Store a new note and return the stored entity."""

    @abstractmethod
    def get(self, note_id: str) -> Note | None:  # pragma: no cover
        """Fetch a note by id or return None if not found."""

    @abstractmethod
    def list(self) -> Sequence[Note]:  # pragma: no cover
        """Return every note in storage order (oldest insertion first)."""

    @abstractmethod
    def update_fields(self, note_id: str, changes: dict[str, Any]) -> Note | None:  # pragma: no cover
        """Replace the given fields on a note and return it, or None if missing."""

    @abstractmethod
    def delete(self, note_id: str) -> bool:  # pragma: no cover
        """Delete a note by id. Return True if a note was removed, False otherwise."""

    @abstractmethod
    def count(self) -> int:  # pragma: no cover
        """Number of stored notes."""
