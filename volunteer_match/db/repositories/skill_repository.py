"""Skill repository."""

from typing import Iterable, List

from sqlalchemy import select

from volunteer_match.db.models.skill import Skill
from volunteer_match.db.repository import BaseRepository


class SkillRepository(BaseRepository[Skill]):
    """Repository for the skill catalogue."""

    async def get_by_name(self, name: str) -> Skill | None:
        """Get a skill by its exact name."""
        return await self.get_by_field("name", name)

    async def get_or_create(self, name: str) -> Skill:
        """Return the skill with this name, creating it when missing."""
        skill = await self.get_by_name(name)
        if skill is None:
            skill = await self.create(name=name)
        return skill

    async def get_or_create_many(self, names: Iterable[str]) -> List[Skill]:
        """Resolve several skill names, preserving order and dropping repeats."""
        skills: List[Skill] = []
        seen: set[str] = set()
        for name in names:
            if name in seen:
                continue
            seen.add(name)
            skills.append(await self.get_or_create(name))
        return skills

    async def list_names(self) -> List[str]:
        """All skill names in alphabetical order."""
        result = await self.session.execute(select(self.model.name).order_by(self.model.name))
        return list(result.scalars().all())
