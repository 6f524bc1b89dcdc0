"""Volunteer profile repository with matching-specific queries."""

from typing import Iterable, List, Optional

from sqlalchemy import select

from volunteer_match.db.models.skill import Skill, volunteer_skills
from volunteer_match.db.models.volunteer import VolunteerProfile
from volunteer_match.db.repository import BaseRepository


class VolunteerRepository(BaseRepository[VolunteerProfile]):
    """Repository for VolunteerProfile model."""

    async def get_by_user_id(self, user_id: int) -> Optional[VolunteerProfile]:
        """Get the profile owned by a user account."""
        return await self.get_by_field("user_id", user_id)

    async def get_skill_names(self, user_id: int) -> List[str]:
        """
        Get the skill names held by the volunteer owned by a user account.

        Args:
            user_id: Owning user account id

        Returns:
            Skill names, alphabetical; empty when the volunteer has none
        """
        query = (
            select(Skill.name)
            .join(volunteer_skills, volunteer_skills.c.skill_id == Skill.id)
            .join(
                VolunteerProfile,
                VolunteerProfile.id == volunteer_skills.c.volunteer_id,
            )
            .where(VolunteerProfile.user_id == user_id)
            .order_by(Skill.name)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def create_with_skills(
        self, skills: Iterable[Skill] = (), **fields
    ) -> VolunteerProfile:
        """Create a profile and attach already-persisted skills."""
        return await self.create(skills=list(skills), **fields)
