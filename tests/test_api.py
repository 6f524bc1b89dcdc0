"""Tests for the HTTP contract of GET /matches/{volunteer_id}."""

from datetime import date

import httpx
import pytest
from fastapi.testclient import TestClient

from volunteer_match.db.base import get_db
from volunteer_match.db.unit_of_work import UnitOfWork
from volunteer_match.main import app
from volunteer_match.matching.exceptions import StoreError
from volunteer_match.matching.router import get_match_store
from volunteer_match.matching.store import InMemoryMatchStore


class BrokenStore(InMemoryMatchStore):
    async def get_volunteer_preferences(self, volunteer_id):
        raise StoreError("connection refused")


@pytest.fixture
def client_for():
    """Build a TestClient whose match routes read from the given store."""

    def _client(store):
        app.dependency_overrides[get_match_store] = lambda: store
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


def test_health_endpoints():
    client = TestClient(app)

    assert client.get("/").json() == {"status": "ok"}
    body = client.get("/healthz").json()
    assert body["status"] == "healthy"


def test_matches_ordered_best_first(client_for, memory_store):
    client = client_for(memory_store)

    resp = client.get("/matches/7")

    assert resp.status_code == 200
    body = resp.json()
    assert [e["title"] for e in body] == ["Test Match Good", "Bayou Cleanup", "Test Match Bad"]
    assert [e["matchScore"] for e in body] == [100, 40, 0]

    best = body[0]
    assert best["skillsNeeded"] == ["Cooking"]
    assert best["skills"] == ["Cooking"]
    assert best["date"] == "2025-12-05"
    assert best["priority"] == "HIGH"
    assert best["urgency"] == 3
    assert "match_percentage" not in best
    assert "x-request-id" in resp.headers


def test_unknown_volunteer_returns_404(client_for, memory_store):
    client = client_for(memory_store)

    resp = client.get("/matches/404")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Volunteer profile not found for this user"}


@pytest.mark.parametrize(
    "volunteer_id", ["abc", "0", "-1", "%C2%B2", "99999999999999999999"]
)
def test_invalid_volunteer_id_returns_400(client_for, memory_store, volunteer_id):
    client = client_for(memory_store)

    resp = client.get(f"/matches/{volunteer_id}")

    assert resp.status_code == 400
    assert "error" in resp.json()


def test_store_failure_returns_500(client_for):
    client = client_for(BrokenStore())

    resp = client.get("/matches/1")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Server error while computing matches"}


@pytest.mark.asyncio
async def test_matches_from_database(test_db):
    """End to end through get_db and the SQL store."""
    async with UnitOfWork() as uow:
        cooking = await uow.skills.get_or_create("Cooking")
        await uow.volunteers.create_with_skills(
            [cooking], user_id=11, city="Katy", availability="2025-11-20"
        )
        await uow.events.create_with_skills(
            [cooking],
            name="Food Bank Delivery",
            location="45 Mason Rd, Katy, TX",
            urgency=2,
            event_date=date(2025, 11, 20),
        )
        await uow.events.create_with_skills(
            [],
            name="Health Fair",
            location="Dallas, TX",
            event_date=date(2025, 11, 20),
        )

    async def _override_get_db():
        async with test_db() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.get("/matches/11")
            missing = await client.get("/matches/12")
            too_large = await client.get("/matches/99999999999999999999")
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 200
    body = resp.json()
    assert [(e["title"], e["matchScore"]) for e in body] == [
        ("Food Bank Delivery", 100),
        ("Health Fair", 20),
    ]
    assert body[0]["priority"] == "MEDIUM"
    assert [e["date"] for e in body] == ["2025-11-20", "2025-11-20"]
    assert missing.status_code == 404
    assert too_large.status_code == 400
