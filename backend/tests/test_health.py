from __future__ import annotations

from fastapi.testclient import TestClient

from app.db.base import create_database
from app.main import create_app


def test_health(client, api_prefix) -> None:
    r = client.get(f"{api_prefix}/health/")
    assert r.status_code == 200 and r.json()["status"] == "healthy"


def test_ready_reports_store_size(client, api_prefix) -> None:
    client.post(f"{api_prefix}/notes/", json={"title": "one", "tag_names": ["Work"]})
    body = client.get(f"{api_prefix}/health/ready").json()
    assert body["status"] == "ready"
    assert body["notes"] == 1
    assert body["tags"] == 1


def test_seeded_app_serves_demo_notes(api_prefix) -> None:
    with TestClient(create_app(database=create_database(seed=True))) as c:
        titles = [n["title"] for n in c.get(f"{api_prefix}/notes/").json()]
    assert titles == ["Tasks", "Welcome to Ocean Notes"]


def test_ready_counts_seeded_store(api_prefix) -> None:
    with TestClient(create_app(database=create_database(seed=True))) as c:
        body = c.get(f"{api_prefix}/health/ready").json()
    assert body["notes"] == 2
    assert body["tags"] == 2
