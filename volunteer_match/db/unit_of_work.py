"""Unit of Work pattern for managing database transactions."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from volunteer_match.db import base
from volunteer_match.db.models import Event, Skill, VolunteerProfile
from volunteer_match.db.repositories import (
    EventRepository,
    SkillRepository,
    VolunteerRepository,
)


class UnitOfWork:
    """
    Unit of Work pattern implementation for managing database transactions.

    This class provides a single entry point for all repository operations
    and ensures that all operations within a context share the same database
    session and transaction.

    Usage:
        async with UnitOfWork() as uow:
            cooking = await uow.skills.get_or_create("Cooking")
            await uow.volunteers.create_with_skills(
                [cooking], user_id=7, city="Houston", availability="2025-12-05"
            )
            await uow.commit()
    """

    def __init__(self, session: Optional[AsyncSession] = None):
        """
        Initialize Unit of Work.

        Args:
            session: Optional existing session (useful for testing)
        """
        self._session = session
        self._owned_session = session is None

        # Repositories (initialized in __aenter__)
        self.skills: SkillRepository = None  # type: ignore
        self.volunteers: VolunteerRepository = None  # type: ignore
        self.events: EventRepository = None  # type: ignore

    async def __aenter__(self):
        """Enter async context manager."""
        if self._owned_session:
            # Resolved at call time so tests can swap the session factory
            self._session = base.AsyncSessionLocal()

        assert self._session is not None, "Session must be initialized"
        self.skills = SkillRepository(Skill, self._session)
        self.volunteers = VolunteerRepository(VolunteerProfile, self._session)
        self.events = EventRepository(Event, self._session)

        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager."""
        if exc_type is not None:
            await self.rollback()
        elif self._owned_session:
            await self.commit()

        if self._owned_session and self._session:
            await self._session.close()

    async def commit(self):
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self):
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    @property
    def session(self) -> AsyncSession:
        """Get the current session."""
        assert self._session is not None, "Session not initialized"
        return self._session
