"""Volunteer profile model holding the preferences used for matching."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from volunteer_match.db.base import Base
from volunteer_match.db.models.skill import Skill, volunteer_skills


class VolunteerProfile(Base):
    """
    Profile of a volunteer, owned by a user account.

    Only the city, availability and skills take part in matching; the
    remaining columns are display data maintained by the profile pages.
    """

    __tablename__ = "volunteer_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        unique=True,
        nullable=False,
        index=True,
        comment="Owning user account id",
    )
    full_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True, comment="Preferred city"
    )
    state_code: Mapped[Optional[str]] = mapped_column(String(2), nullable=True)
    availability: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Available dates, comma separated (YYYY-MM-DD)",
    )

    skills: Mapped[List[Skill]] = relationship(
        Skill, secondary=volunteer_skills, lazy="selectin"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return (
            f"<VolunteerProfile(id={self.id}, user_id={self.user_id}, "
            f"city={self.city}, availability={self.availability})>"
        )
