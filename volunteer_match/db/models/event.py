"""Event model describing volunteering opportunities."""

from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import Date, DateTime, Index, Integer, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from volunteer_match.db.base import Base
from volunteer_match.db.models.skill import Skill, event_skills


class Event(Base):
    """
    A volunteering event with its location, date and required skills.

    Urgency is stored as 1=Low, 2=Medium, 3=High, 4=Critical.
    """

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True, comment="Event title"
    )
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True, comment="Free-text address"
    )
    urgency: Mapped[Optional[int]] = mapped_column(
        SmallInteger, nullable=True, comment="1=Low, 2=Medium, 3=High, 4=Critical"
    )
    event_date: Mapped[Optional[date]] = mapped_column(
        Date, nullable=True, index=True, comment="Day the event takes place"
    )
    volunteers: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, comment="Volunteers signed up"
    )

    skills: Mapped[List[Skill]] = relationship(
        Skill, secondary=event_skills, lazy="selectin"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (Index("idx_event_date_location", "event_date", "location"),)

    def __repr__(self) -> str:
        return (
            f"<Event(id={self.id}, name={self.name}, "
            f"location={self.location}, event_date={self.event_date})>"
        )
