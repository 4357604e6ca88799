"""Shared test fixtures."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from app.core.repositories.implementations.memory.note_repository import (
    InMemoryNoteRepository,
)
from app.core.repositories.implementations.memory.tag_repository import (
    InMemoryTagRepository,
)
from app.core.services.note_service import NoteService
from app.core.services.tag_service import TagService
from app.db.base import create_database
from app.main import create_app


class FakeClock:
    """Clock that advances one second on every reading."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2026, 1, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def db(clock):
    """Fresh, unseeded store per test."""
    return create_database(seed=False, clock=clock)


@pytest.fixture
def note_service(db):
    return NoteService(InMemoryNoteRepository(db), clock=db.now)


@pytest.fixture
def tag_service(db):
    return TagService(InMemoryTagRepository(db))


@pytest.fixture
def client(db):
    with TestClient(create_app(database=db)) as c:
        yield c


@pytest.fixture
def api_prefix():
    from app.config import settings

    return settings.api_prefix
