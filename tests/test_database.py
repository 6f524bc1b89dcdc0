"""Tests for database models, repositories and the SQL match store."""

from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from volunteer_match.db.unit_of_work import UnitOfWork
from volunteer_match.matching.engine import MatchingEngine
from volunteer_match.matching.exceptions import StoreError, VolunteerNotFoundError
from volunteer_match.matching.store import SqlMatchStore


async def seed_houston(uow: UnitOfWork) -> None:
    """One Houston volunteer (user 9001) who cooks, and two events."""
    cooking = await uow.skills.get_or_create("Cooking_TEST")
    first_aid = await uow.skills.get_or_create("First Aid_TEST")

    await uow.volunteers.create_with_skills(
        [cooking],
        user_id=9001,
        full_name="Test User",
        city="Houston",
        state_code="TX",
        availability="2025-12-05",
    )
    await uow.events.create_with_skills(
        [cooking],
        name="Test Match Good",
        description="Good match: same city, date, and skill",
        location="Houston",
        urgency=3,
        event_date=date(2025, 12, 5),
    )
    await uow.events.create_with_skills(
        [first_aid],
        name="Test Match Bad",
        description="Bad match: different city, date, and skill",
        location="Dallas",
        urgency=1,
        event_date=date(2025, 12, 10),
    )


@pytest.mark.asyncio
class TestRepositories:
    """Test repositories through the unit of work."""

    async def test_skill_get_or_create(self, test_db):
        async with UnitOfWork() as uow:
            first = await uow.skills.get_or_create("Cooking")
            again = await uow.skills.get_or_create("Cooking")
            many = await uow.skills.get_or_create_many(["Driving", "Cooking", "Driving"])

            assert first.id == again.id
            assert [s.name for s in many] == ["Driving", "Cooking"]
            assert await uow.skills.list_names() == ["Cooking", "Driving"]

    async def test_volunteer_skill_names(self, test_db):
        async with UnitOfWork() as uow:
            await seed_houston(uow)
            await uow.commit()

        async with UnitOfWork() as uow:
            profile = await uow.volunteers.get_by_user_id(9001)
            assert profile is not None
            assert profile.city == "Houston"
            assert await uow.volunteers.get_skill_names(9001) == ["Cooking_TEST"]
            assert await uow.volunteers.get_skill_names(1234) == []

    async def test_events_with_skills(self, test_db):
        async with UnitOfWork() as uow:
            await seed_houston(uow)
            await uow.commit()

        async with UnitOfWork() as uow:
            events = await uow.events.list_with_skills()

            assert [e.name for e in events] == ["Test Match Good", "Test Match Bad"]
            assert [s.name for s in events[0].skills] == ["Cooking_TEST"]
            assert events[0].event_date == date(2025, 12, 5)

    async def test_rollback_on_error(self, test_db):
        with pytest.raises(RuntimeError):
            async with UnitOfWork() as uow:
                await uow.skills.create(name="Temporary")
                raise RuntimeError("boom")

        async with UnitOfWork() as uow:
            assert await uow.skills.get_by_name("Temporary") is None


@pytest.mark.asyncio
class TestSqlMatchStore:
    """Test the SQL store and the engine on top of it."""

    async def test_store_rows(self, db_session):
        async with UnitOfWork(db_session) as uow:
            await seed_houston(uow)
            await uow.commit()

        store = SqlMatchStore(db_session)
        prefs = await store.get_volunteer_preferences(9001)
        events = await store.list_events_with_skills()

        assert prefs.preferred_city == "Houston"
        assert prefs.availability == "2025-12-05"
        assert await store.get_volunteer_skill_names(9001) == ["Cooking_TEST"]
        assert await store.get_volunteer_preferences(1) is None
        assert events[0].title == "Test Match Good"
        assert events[0].skill_names == ["Cooking_TEST"]
        assert events[1].urgency == 1
        assert events[0].date == date(2025, 12, 5)
        assert type(events[0].date) is date

    async def test_engine_ranks_persisted_events(self, db_session):
        async with UnitOfWork(db_session) as uow:
            await seed_houston(uow)
            await uow.commit()

        matches = await MatchingEngine(SqlMatchStore(db_session)).match_volunteer(9001)

        assert [m.title for m in matches] == ["Test Match Good", "Test Match Bad"]
        assert [m.match_score for m in matches] == [100, 0]
        assert matches[0].priority == "HIGH"
        assert matches[0].date == date(2025, 12, 5)
        assert matches[0].model_dump(mode="json", by_alias=True)["date"] == "2025-12-05"

    async def test_engine_unknown_volunteer(self, db_session):
        with pytest.raises(VolunteerNotFoundError):
            await MatchingEngine(SqlMatchStore(db_session)).match_volunteer(9001)

    async def test_database_errors_become_store_errors(self, db_session, monkeypatch):
        async def broken_execute(*args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

        monkeypatch.setattr(db_session, "execute", broken_execute)

        with pytest.raises(StoreError):
            await SqlMatchStore(db_session).list_events_with_skills()
