from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.core.models.note import Note, normalize_title
from app.utils.ids import NOTE_ID_PREFIX, new_id
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Sequence
    from datetime import datetime

    from app.core.repositories.note_repository import NoteRepository


logger = get_logger(__name__)


class NoteService:
    """Service for creating, querying and editing notes.

    Operations never raise for unknown ids: lookups return None and deletes
    return False, leaving the caller to decide how to report it.
    """

    def __init__(self, repo: NoteRepository, clock: Callable[[], datetime]) -> None:
        self._repo = repo
        self._clock = clock

    def create_note(
        self,
        title: str | None = None,
        content: str | None = None,
        tag_ids: Sequence[str] | None = None,
    ) -> Note:
        """Create a note; a missing or blank title becomes "Untitled"."""
        now = self._clock()
        note = Note(
            id=new_id(NOTE_ID_PREFIX),
            title=normalize_title(title),
            content=content or "",
            tags=list(tag_ids or []),
            created_at=now,
            updated_at=now,
        )
        created = self._repo.create(note)
        logger.info("Created note", extra={"note_id": created.id})
        return created

    def get_note(self, note_id: str) -> Note | None:
        return self._repo.get(note_id)

    def list_notes(self, tag_id: str | None = None, query: str | None = None) -> list[Note]:
        """List notes, most recently updated first.

        ``tag_id`` keeps notes carrying that exact id; ``query`` keeps notes whose
        title or content contains it, ignoring case. Both filters may be combined.
        Notes with equal ``updated_at`` keep storage order.
        """
        notes: Sequence[Note] = self._repo.list()
        if tag_id:
            notes = [n for n in notes if n.has_tag(tag_id)]
        if query:
            notes = [n for n in notes if n.matches(query)]
        return sorted(notes, key=lambda n: n.updated_at, reverse=True)

    def update_note(
        self,
        note_id: str,
        title: str | None = None,
        content: str | None = None,
        tag_ids: Sequence[str] | None = None,
    ) -> Note | None:
        """Replace the supplied fields and bump ``updated_at``.

        ``updated_at`` moves even when nothing else changes. Returns None if the
        note does not exist.
        """
        existing = self._repo.get(note_id)
        if existing is None:
            return None

        changes: dict[str, Any] = {"updated_at": max(self._clock(), existing.created_at)}
        if title is not None:
            changes["title"] = normalize_title(title)
        if content is not None:
            changes["content"] = content
        if tag_ids is not None:
            changes["tags"] = list(tag_ids)
        return self._repo.update_fields(note_id, changes)

    def delete_note(self, note_id: str) -> bool:
        deleted = self._repo.delete(note_id)
        if deleted:
            logger.info("Deleted note", extra={"note_id": note_id})
        return deleted

    def prune_dangling_tags(self, known_tag_ids: Collection[str]) -> int:
        """Drop tag ids that no longer resolve to a tag. Returns the number of notes changed.

        Only runs when called explicitly; notes normally tolerate dangling ids.
        """
        changed = 0
        for note in self._repo.list():
            kept = [t for t in note.tags if t in known_tag_ids]
            if len(kept) == len(note.tags):
                continue
            self.update_note(note.id, tag_ids=kept)
            changed += 1
        if changed:
            logger.info("Pruned dangling tag ids", extra={"notes_changed": changed})
        return changed

    def count(self) -> int:
        return self._repo.count()
