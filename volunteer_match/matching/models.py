"""Data models for volunteer preferences, events and match results."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DateLike = Union[datetime, date, str]


class VolunteerPreferences(BaseModel):
    """What a volunteer is looking for. Every field may be empty."""

    preferred_locations: list[str] = Field(
        default_factory=list, description="City names the volunteer will travel to"
    )
    skills: list[str] = Field(
        default_factory=list, description="Skill names, compared case-insensitively"
    )
    preferred_dates: list[DateLike] = Field(
        default_factory=list, description="Dates the volunteer is available"
    )

    @field_validator("preferred_locations", "skills", "preferred_dates", mode="before")
    @classmethod
    def empty_when_none(cls, value: Any) -> Any:
        return [] if value is None else value


class Event(BaseModel):
    """An event offered to volunteers.

    Only location, skills_needed and date are scored; title (or name) orders
    ties. Any additional display fields are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = Field(default=None, description="Event id")
    title: Optional[str] = Field(default=None, description="Display title")
    name: Optional[str] = Field(default=None, description="Title fallback")
    location: Optional[str] = Field(default=None, description="Free-text address")
    skills_needed: list[str] = Field(
        default_factory=list, description="Skill names the event requires"
    )
    date: Optional[DateLike] = Field(default=None, description="Day of the event")

    @field_validator("skills_needed", mode="before")
    @classmethod
    def empty_when_none(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def sort_title(self) -> str:
        """Title used to order events with equal match percentages."""
        return self.title or self.name or ""


class MatchResult(Event):
    """An event copy annotated with its match percentage. Never persisted."""

    match_percentage: int = Field(..., ge=0, le=100, description="Match percentage")


class MatchBreakdown(BaseModel):
    """Per-criterion scores behind one match percentage."""

    location: float = Field(..., ge=0.0, le=1.0)
    skills: float = Field(..., ge=0.0, le=1.0)
    date: float = Field(..., ge=0.0, le=1.0)
    match_percentage: int = Field(..., ge=0, le=100)


class EventMatch(BaseModel):
    """Public JSON shape of one ranked event returned by GET /matches/{id}."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    date: Optional[DateLike] = None
    skills_needed: list[str] = Field(default_factory=list, alias="skillsNeeded")
    skills: list[str] = Field(default_factory=list)
    volunteers: int = 0
    urgency: Optional[int] = None
    priority: str = "LOW"
    match_score: int = Field(..., ge=0, le=100, alias="matchScore")

    @classmethod
    def from_result(cls, result: MatchResult) -> "EventMatch":
        """Expose a ranked result under the public field names."""
        extras = result.model_extra or {}
        return cls(
            id=result.id,
            title=result.title or result.name,
            description=extras.get("description"),
            location=result.location,
            date=result.date,
            skills_needed=list(result.skills_needed),
            skills=list(result.skills_needed),
            volunteers=extras.get("volunteers") or 0,
            urgency=extras.get("urgency"),
            priority=extras.get("priority", "LOW"),
            match_score=result.match_percentage,
        )
