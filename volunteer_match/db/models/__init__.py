"""Database models for the Volunteer Match Service."""

from .skill import Skill, volunteer_skills, event_skills
from .volunteer import VolunteerProfile
from .event import Event

__all__ = ["Skill", "VolunteerProfile", "Event", "volunteer_skills", "event_skills"]
