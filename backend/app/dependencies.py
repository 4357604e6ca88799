from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from app.core.repositories.implementations.memory.note_repository import (
    InMemoryNoteRepository,
)
from app.core.repositories.implementations.memory.tag_repository import (
    InMemoryTagRepository,
)
from app.core.services.note_service import NoteService
from app.core.services.tag_service import TagService
from app.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from app.core.repositories.note_repository import NoteRepository
    from app.core.repositories.tag_repository import TagRepository
    from app.db.base import InMemoryDatabase


def get_database(request: Request) -> InMemoryDatabase:
    """Return the store handle attached to the application at startup."""
    return request.app.state.database


def get_note_repository(db: InMemoryDatabase = Depends(get_database)) -> NoteRepository:
    """Get a request-scoped note repository over the shared store."""
    return InMemoryNoteRepository(db)


def get_tag_repository(db: InMemoryDatabase = Depends(get_database)) -> TagRepository:
    """Get a request-scoped tag repository over the shared store."""
    return InMemoryTagRepository(db)


def get_note_service(
    repo: NoteRepository = Depends(get_note_repository),
    db: InMemoryDatabase = Depends(get_database),
) -> NoteService:
    """Get a request-scoped note service instance."""
    return NoteService(repo, clock=db.now)


def get_tag_service(repo: TagRepository = Depends(get_tag_repository)) -> TagService:
    """Get a request-scoped tag service instance."""
    return TagService(repo)
