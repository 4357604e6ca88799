from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from app.core.models.note import Note
from app.core.models.tag import Tag
from app.utils.ids import NOTE_ID_PREFIX, TAG_ID_PREFIX, new_id
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from app.db.base import InMemoryDatabase

logger = get_logger(__name__)

WELCOME_CONTENT = (
    "This is your personal notes app. Select a note, or create a new one.\n\n"
    "- Modern Ocean Professional theme\n"
    "- Blue & amber accents\n"
    "- Clean, minimalist UI"
)


def seed_demo_data(db: InMemoryDatabase) -> bool:
    """Populate an empty store with two demo tags and two demo notes.

    Returns False without touching anything when the store already holds data.
    """
    if not db.is_empty():
        return False

    now = db.now()
    work = Tag(id=new_id(TAG_ID_PREFIX), name="Work", color="#2563EB")
    ideas = Tag(id=new_id(TAG_ID_PREFIX), name="Ideas", color="#F59E0B")
    for tag in (work, ideas):
        db.tags[tag.id] = tag

    welcome = Note(
        id=new_id(NOTE_ID_PREFIX),
        title="Welcome to Ocean Notes",
        content=WELCOME_CONTENT,
        tags=[ideas.id],
        created_at=now - timedelta(days=1),
        updated_at=now - timedelta(minutes=30),
    )
    tasks = Note(
        id=new_id(NOTE_ID_PREFIX),
        title="Tasks",
        content="1. Draft proposal\n2. Review design\n3. Sync with team",
        tags=[work.id],
        created_at=now - timedelta(hours=1),
        updated_at=now - timedelta(minutes=5),
    )
    for note in (welcome, tasks):
        db.notes[note.id] = note

    logger.info("Seeded demo data", extra={"notes": len(db.notes), "tags": len(db.tags)})
    return True
