"""HTTP tests for the tag and metadata endpoints."""

from __future__ import annotations


def test_upsert_tag_returns_same_tag_for_same_name(client, api_prefix) -> None:
    first = client.post(f"{api_prefix}/tags/", json={"name": "Work", "color": "#2563EB"})
    assert first.status_code == 200
    second = client.post(f"{api_prefix}/tags/", json={"name": "  WORK ", "color": "#FFFFFF"})
    assert second.json() == first.json()
    assert second.json()["color"] == "#2563EB"


def test_upsert_tag_rejects_blank_name(client, api_prefix) -> None:
    r = client.post(f"{api_prefix}/tags/", json={"name": "   "})
    assert r.status_code == 422


def test_list_tags_sorted(client, api_prefix) -> None:
    for name in ("zeta", "Alpha", "beta"):
        client.post(f"{api_prefix}/tags/", json={"name": name})
    r = client.get(f"{api_prefix}/tags/")
    assert [t["name"] for t in r.json()] == ["Alpha", "beta", "zeta"]


def test_get_tag(client, api_prefix) -> None:
    tag = client.post(f"{api_prefix}/tags/", json={"name": "Ideas"}).json()
    assert client.get(f"{api_prefix}/tags/{tag['id']}").json() == tag
    r = client.get(f"{api_prefix}/tags/t_missing")
    assert r.status_code == 404
    assert r.json()["detail"] == "Tag not found"


def test_prune_dangling_tags(client, api_prefix) -> None:
    note = client.post(
        f"{api_prefix}/notes/", json={"tags": ["t_gone"], "tag_names": ["Work"]}
    ).json()

    r = client.post(f"{api_prefix}/metadata/prune-dangling-tags")
    assert r.status_code == 200
    assert r.json() == {"updated": 1}

    refreshed = client.get(f"{api_prefix}/notes/{note['id']}").json()
    assert refreshed["tags"] == note["tags"][1:]

    r = client.post(f"{api_prefix}/metadata/prune-dangling-tags")
    assert r.json() == {"updated": 0}
