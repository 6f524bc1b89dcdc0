"""Repository exports."""

from .skill_repository import SkillRepository
from .volunteer_repository import VolunteerRepository
from .event_repository import EventRepository

__all__ = [
    "SkillRepository",
    "VolunteerRepository",
    "EventRepository",
]
