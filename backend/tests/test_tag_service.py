"""Unit tests for the tag registry."""

from __future__ import annotations

from app.core.services.tag_service import parse_tag_input


def test_upsert_creates_tag_with_trimmed_name(tag_service) -> None:
    tag = tag_service.upsert_tag("  Work  ", color="#2563EB")
    assert tag.name == "Work"
    assert tag.color == "#2563EB"
    assert tag.id.startswith("t_")
    assert tag_service.get_tag(tag.id) == tag


def test_upsert_is_case_insensitive_after_trim(tag_service) -> None:
    first = tag_service.upsert_tag("Work")
    second = tag_service.upsert_tag("work")
    third = tag_service.upsert_tag("  WORK  ")
    assert first.id == second.id == third.id
    assert tag_service.count() == 1


def test_upsert_ignores_color_for_existing_tag(tag_service) -> None:
    original = tag_service.upsert_tag("Ideas", color="#F59E0B")
    again = tag_service.upsert_tag("ideas", color="#000000")
    assert again.id == original.id
    assert again.color == "#F59E0B"
    assert again.name == "Ideas"


def test_upsert_accepts_blank_name(tag_service) -> None:
    blank = tag_service.upsert_tag("   ")
    assert blank.name == ""
    assert tag_service.upsert_tag("").id == blank.id


def test_list_tags_sorted_by_name_ignoring_case(tag_service) -> None:
    for name in ("work", "Ideas", "archive", "Books"):
        tag_service.upsert_tag(name)
    assert [t.name for t in tag_service.list_tags()] == ["archive", "Books", "Ideas", "work"]


def test_list_tags_empty(tag_service) -> None:
    assert tag_service.list_tags() == []


def test_get_unknown_tag_returns_none(tag_service) -> None:
    assert tag_service.get_tag("t_missing") is None


def test_resolve_tag_names_skips_blanks_and_keeps_order(tag_service) -> None:
    ids = tag_service.resolve_tag_names(["Work", "", "ideas", "  ", "WORK"])
    work = tag_service.upsert_tag("work")
    ideas = tag_service.upsert_tag("Ideas")
    assert ids == [work.id, ideas.id, work.id]
    assert tag_service.count() == 2


def test_parse_tag_input() -> None:
    assert parse_tag_input("Work, ideas ,, ") == ["Work", "ideas"]
    assert parse_tag_input("") == []
    assert parse_tag_input(None) == []
