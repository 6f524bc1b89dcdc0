"""Skill catalogue and the association tables linking skills to volunteers and events."""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from volunteer_match.db.base import Base

volunteer_skills = Table(
    "volunteer_skills",
    Base.metadata,
    Column(
        "volunteer_id",
        Integer,
        ForeignKey("volunteer_profiles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "skill_id",
        Integer,
        ForeignKey("skills.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

event_skills = Table(
    "event_skills",
    Base.metadata,
    Column(
        "event_id",
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "skill_id",
        Integer,
        ForeignKey("skills.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Skill(Base):
    """A named skill a volunteer can hold or an event can require."""

    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False, index=True, comment="Skill name"
    )

    def __repr__(self) -> str:
        return f"<Skill(id={self.id}, name={self.name})>"
