from __future__ import annotations

from typing import TYPE_CHECKING

from app.core.models.base import utc_now
from app.db.seed import seed_demo_data
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from app.core.models.note import Note
    from app.core.models.tag import Tag

logger = get_logger(__name__)


class InMemoryDatabase:
    """Process-local storage handle owning the note and tag collections.

    Both collections are plain dicts keyed by id and keep insertion order.
    Nothing is persisted: dropping the handle discards every note and tag.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self.notes: dict[str, Note] = {}
        self.tags: dict[str, Tag] = {}
        self.clock: Callable[[], datetime] = clock or utc_now

    def now(self) -> datetime:
        return self.clock()

    def is_empty(self) -> bool:
        return not self.notes and not self.tags


def create_database(
    *, seed: bool = False, clock: Callable[[], datetime] | None = None
) -> InMemoryDatabase:
    """Create a fresh store, optionally populated with the demo notes."""
    db = InMemoryDatabase(clock=clock)
    if seed:
        seed_demo_data(db)
    logger.debug("Created in-memory database", extra={"seeded": seed})
    return db
