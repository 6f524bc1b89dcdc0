"""
Read-only data access used by the matching engine.

Defines the contract the engine depends on, plus a SQLAlchemy
implementation and an in-memory one for tests and local demos.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from volunteer_match.db.unit_of_work import UnitOfWork
from volunteer_match.matching.exceptions import StoreError
from volunteer_match.matching.models import DateLike

logger = logging.getLogger(__name__)


class PreferenceRow(BaseModel):
    """Stored matching preferences of one volunteer."""

    preferred_city: Optional[str] = None
    availability: Any = Field(
        default=None, description="Comma separated dates, a date, or a list of dates"
    )


class EventRow(BaseModel):
    """Stored event with the names of the skills it requires."""

    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    date: Optional[DateLike] = None
    skill_names: list[str] = Field(default_factory=list)
    urgency: Optional[int] = None
    volunteers: int = 0


class BaseMatchStore(ABC):
    """
    Abstract base class for the data the matching engine reads.

    Implementations raise StoreError when the backing store fails.
    """

    @abstractmethod
    async def get_volunteer_preferences(self, volunteer_id: int) -> Optional[PreferenceRow]:
        """
        Fetch the preferences of a volunteer.

        Args:
            volunteer_id: Owning user account id

        Returns:
            Preference row or None if the volunteer has no profile
        """

    @abstractmethod
    async def get_volunteer_skill_names(self, volunteer_id: int) -> list[str]:
        """
        Fetch the names of the skills a volunteer holds.

        Args:
            volunteer_id: Owning user account id

        Returns:
            Skill names, empty when the volunteer has none
        """

    @abstractmethod
    async def list_events_with_skills(self) -> list[EventRow]:
        """
        Fetch every event with its required skill names.

        Returns:
            Event rows
        """


class SqlMatchStore(BaseMatchStore):
    """Match store backed by the SQLAlchemy repositories."""

    def __init__(self, session: AsyncSession):
        """
        Initialize SQL store.

        Args:
            session: Database session, owned by the caller
        """
        self.session = session

    async def get_volunteer_preferences(self, volunteer_id: int) -> Optional[PreferenceRow]:
        try:
            async with UnitOfWork(self.session) as uow:
                profile = await uow.volunteers.get_by_user_id(volunteer_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load volunteer {volunteer_id}: {e}") from e

        if profile is None:
            return None
        return PreferenceRow(preferred_city=profile.city, availability=profile.availability)

    async def get_volunteer_skill_names(self, volunteer_id: int) -> list[str]:
        try:
            async with UnitOfWork(self.session) as uow:
                return await uow.volunteers.get_skill_names(volunteer_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load skills of volunteer {volunteer_id}: {e}") from e

    async def list_events_with_skills(self) -> list[EventRow]:
        try:
            async with UnitOfWork(self.session) as uow:
                events = await uow.events.list_with_skills()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load events: {e}") from e

        return [
            EventRow(
                id=event.id,
                title=event.name,
                description=event.description,
                location=event.location,
                date=event.event_date,
                skill_names=[skill.name for skill in event.skills],
                urgency=event.urgency,
                volunteers=event.volunteers or 0,
            )
            for event in events
        ]


class InMemoryMatchStore(BaseMatchStore):
    """
    Match store holding rows in instance attributes.

    Each instance is independent; nothing is shared between stores.
    """

    def __init__(self):
        self._preferences: dict[int, PreferenceRow] = {}
        self._skills: dict[int, list[str]] = {}
        self._events: list[EventRow] = []

    def add_volunteer(
        self,
        volunteer_id: int,
        preferred_city: Optional[str] = None,
        availability: Any = None,
        skills: Optional[list[str]] = None,
    ) -> PreferenceRow:
        """Insert or replace a volunteer's preferences and skills."""
        row = PreferenceRow(preferred_city=preferred_city, availability=availability)
        self._preferences[volunteer_id] = row
        self._skills[volunteer_id] = list(skills or [])
        return row

    def add_event(self, **fields: Any) -> EventRow:
        """Insert an event; the id defaults to the next free one."""
        fields.setdefault("id", len(self._events) + 1)
        row = EventRow(**fields)
        self._events.append(row)
        return row

    async def get_volunteer_preferences(self, volunteer_id: int) -> Optional[PreferenceRow]:
        return self._preferences.get(volunteer_id)

    async def get_volunteer_skill_names(self, volunteer_id: int) -> list[str]:
        return list(self._skills.get(volunteer_id, []))

    async def list_events_with_skills(self) -> list[EventRow]:
        return [row.model_copy(deep=True) for row in self._events]
