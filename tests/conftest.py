import os
import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Ensure project root is on sys.path so `import volunteer_match` works when running pytest from root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Force test database URL before any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("DEBUG", "false")

import volunteer_match.db.base  # noqa: E402
from volunteer_match.db.base import Base  # noqa: E402
from volunteer_match.db import models  # noqa: E402,F401
from volunteer_match.matching.models import Event, VolunteerPreferences  # noqa: E402
from volunteer_match.matching.store import InMemoryMatchStore  # noqa: E402


@pytest_asyncio.fixture
async def test_db(monkeypatch) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """
    Provide a session factory bound to a fresh in-memory database.

    volunteer_match.db.base is patched so UnitOfWork() and get_db use it too.
    """
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    monkeypatch.setattr(volunteer_match.db.base, "engine", engine)
    monkeypatch.setattr(volunteer_match.db.base, "AsyncSessionLocal", session_factory)

    yield session_factory

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_db) -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for a test."""
    async with test_db() as session:
        yield session
        await session.rollback()


@pytest.fixture
def houston_volunteer() -> VolunteerPreferences:
    """Volunteer in Houston who cooks and is free on 2025-12-05."""
    return VolunteerPreferences(
        preferred_locations=["Houston"],
        skills=["Cooking", "First Aid"],
        preferred_dates=["2025-12-05"],
    )


@pytest.fixture
def perfect_match() -> Event:
    return Event(
        id=1,
        title="Perfect Match",
        location="1200 Main St, Houston, TX",
        skills_needed=["cooking"],
        date="2025-12-05",
    )


@pytest.fixture
def skills_only() -> Event:
    return Event(
        id=2,
        title="Skills Only",
        location="900 Commerce St, Dallas, TX",
        skills_needed=["Cooking", "First Aid"],
        date="2025-12-10",
    )


@pytest.fixture
def no_match() -> Event:
    return Event(
        id=3,
        title="No Match",
        location="Austin, TX",
        skills_needed=["Carpentry"],
        date="2026-01-01",
    )


@pytest.fixture
def memory_store() -> InMemoryMatchStore:
    """In-memory store with one Houston volunteer (user 7) and three events."""
    store = InMemoryMatchStore()
    store.add_volunteer(
        7,
        preferred_city="Houston",
        availability="2025-12-05, 2025-12-06",
        skills=["Cooking"],
    )
    store.add_event(
        title="Test Match Bad",
        location="Dallas",
        date="2025-12-10",
        skill_names=["First Aid"],
        urgency=1,
    )
    store.add_event(
        title="Test Match Good",
        location="Houston",
        date="2025-12-05",
        skill_names=["Cooking"],
        urgency=3,
        volunteers=4,
        description="Same city, date and skill",
    )
    store.add_event(
        title="Bayou Cleanup",
        location="Buffalo Bayou, Houston",
        date="2025-12-20",
        skill_names=[],
    )
    return store
