"""Event repository with matching-specific queries."""

from typing import Iterable, List

from sqlalchemy import select

from volunteer_match.db.models.event import Event
from volunteer_match.db.models.skill import Skill
from volunteer_match.db.repository import BaseRepository


class EventRepository(BaseRepository[Event]):
    """Repository for Event model."""

    async def list_with_skills(self) -> List[Event]:
        """
        Get every event with its required skills loaded.

        Returns:
            Events ordered by id
        """
        # skills relationship is selectin-loaded
        query = select(self.model).order_by(self.model.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def create_with_skills(self, skills: Iterable[Skill] = (), **fields) -> Event:
        """Create an event requiring already-persisted skills."""
        return await self.create(skills=list(skills), **fields)
