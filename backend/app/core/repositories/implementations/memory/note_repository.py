from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.core.repositories.note_repository import NoteRepository
from app.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.core.models.note import Note
    from app.db.base import InMemoryDatabase


class InMemoryNoteRepository(NoteRepository):
    """NoteRepository backed by ``InMemoryDatabase.notes``.

    Callers always receive copies, so editing a returned note never changes
    the store. Updates replace the value under the same key, keeping the
    note in its storage position.
    """

    IMMUTABLE_FIELDS = frozenset({"id", "created_at"})

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def create(self, note: Note) -> Note:
        self._db.notes[note.id] = note.model_copy(deep=True)
        return note.model_copy(deep=True)

    def get(self, note_id: str) -> Note | None:
        note = self._db.notes.get(note_id)
        return note.model_copy(deep=True) if note is not None else None

    def list(self) -> Sequence[Note]:
        return [n.model_copy(deep=True) for n in self._db.notes.values()]

    def update_fields(self, note_id: str, changes: dict[str, Any]) -> Note | None:
        existing = self._db.notes.get(note_id)
        if existing is None:
            return None
        sanitized = {k: v for k, v in changes.items() if k not in self.IMMUTABLE_FIELDS}
        updated = existing.model_copy(update=sanitized)
        self._db.notes[note_id] = updated
        return updated.model_copy(deep=True)

    def delete(self, note_id: str) -> bool:
        removed = self._db.notes.pop(note_id, None)
        return removed is not None

    def count(self) -> int:
        return len(self._db.notes)
