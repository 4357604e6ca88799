"""Tests for store construction and demo seeding."""

from __future__ import annotations

from app.core.repositories.implementations.memory.note_repository import (
    InMemoryNoteRepository,
)
from app.core.services.note_service import NoteService
from app.db.base import create_database
from app.db.seed import seed_demo_data


def test_unseeded_database_is_empty() -> None:
    db = create_database()
    assert db.notes == {}
    assert db.tags == {}


def test_seeded_database_contents(clock) -> None:
    db = create_database(seed=True, clock=clock)
    assert sorted(t.name for t in db.tags.values()) == ["Ideas", "Work"]
    assert {t.name: t.color for t in db.tags.values()} == {
        "Work": "#2563EB",
        "Ideas": "#F59E0B",
    }

    by_title = {n.title: n for n in db.notes.values()}
    assert set(by_title) == {"Welcome to Ocean Notes", "Tasks"}
    tag_names = {t.id: t.name for t in db.tags.values()}
    assert [tag_names[i] for i in by_title["Tasks"].tags] == ["Work"]
    assert [tag_names[i] for i in by_title["Welcome to Ocean Notes"].tags] == ["Ideas"]
    for note in db.notes.values():
        assert note.updated_at >= note.created_at


def test_seeded_notes_list_most_recent_first(clock) -> None:
    db = create_database(seed=True, clock=clock)
    service = NoteService(InMemoryNoteRepository(db), clock=db.now)
    assert [n.title for n in service.list_notes()] == ["Tasks", "Welcome to Ocean Notes"]


def test_seed_skips_non_empty_store(db, note_service) -> None:
    note_service.create_note(title="mine")
    assert seed_demo_data(db) is False
    assert len(db.notes) == 1
    assert db.tags == {}


def test_separate_databases_do_not_share_state() -> None:
    first = create_database(seed=True)
    second = create_database()
    assert len(first.notes) == 2
    assert second.notes == {}

