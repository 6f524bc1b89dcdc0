"""Matching engine: loads a volunteer and the events, then ranks them."""

from __future__ import annotations

import logging
from typing import Any

from volunteer_match.core.logging import bind_volunteer
from volunteer_match.matching.config import MatchingConfig
from volunteer_match.matching.exceptions import (
    InvalidVolunteerIdError,
    VolunteerNotFoundError,
)
from volunteer_match.matching.models import Event, EventMatch, VolunteerPreferences
from volunteer_match.matching.scorer import MatchScorer
from volunteer_match.matching.store import BaseMatchStore, EventRow, PreferenceRow
from volunteer_match.normalization.normalizer import parse_availability

logger = logging.getLogger(__name__)

URGENCY_LABELS = {1: "LOW", 2: "MEDIUM", 3: "HIGH", 4: "CRITICAL"}

# Largest value a signed 32-bit INTEGER key column holds
MAX_VOLUNTEER_ID = 2**31 - 1


def parse_volunteer_id(raw: Any) -> int:
    """
    Validate a volunteer identifier taken from a request.

    Args:
        raw: Identifier as received (usually a path segment)

    Returns:
        The identifier as a positive integer

    Raises:
        InvalidVolunteerIdError: If it is missing or not a positive integer
    """
    if isinstance(raw, bool):
        raise InvalidVolunteerIdError(f"Invalid volunteer id: {raw!r}")
    text = str(raw).strip() if raw is not None else ""
    if not (text.isascii() and text.isdecimal()):
        raise InvalidVolunteerIdError(f"Invalid volunteer id: {raw!r}")
    value = int(text)
    if not 0 < value <= MAX_VOLUNTEER_ID:
        raise InvalidVolunteerIdError(f"Invalid volunteer id: {raw!r}")
    return value


def priority_label(urgency: int | None) -> str:
    """Map a stored urgency (1-4) to its display label, LOW when unknown."""
    return URGENCY_LABELS.get(urgency or 0, "LOW")


def build_preferences(row: PreferenceRow, skill_names: list[str]) -> VolunteerPreferences:
    """Map stored preference and skill rows into matching preferences."""
    return VolunteerPreferences(
        preferred_locations=[row.preferred_city] if row.preferred_city else [],
        skills=list(skill_names),
        preferred_dates=parse_availability(row.availability),
    )


def build_event(row: EventRow) -> Event:
    """Map a stored event row into a matching event with its display fields."""
    return Event(
        id=row.id,
        title=row.title,
        location=row.location,
        date=row.date,
        skills_needed=list(row.skill_names),
        description=row.description,
        volunteers=row.volunteers,
        urgency=row.urgency,
        priority=priority_label(row.urgency),
    )


class MatchingEngine:
    """
    Ranks every event for one volunteer.

    Orchestrates:
    1. Identifier validation
    2. Preference, skill and event retrieval
    3. Mapping rows into matching models
    4. Scoring and ranking
    """

    def __init__(self, store: BaseMatchStore, config: MatchingConfig | None = None):
        """
        Initialize matching engine.

        Args:
            store: Data source for volunteers and events
            config: Matching configuration
        """
        self.store = store
        self.config = config or MatchingConfig()
        self.scorer = MatchScorer(self.config)

    async def match_volunteer(self, volunteer_id: Any) -> list[EventMatch]:
        """
        Rank all events for a volunteer, best match first.

        Args:
            volunteer_id: Owning user account id of the volunteer

        Returns:
            Ranked events with their matchScore

        Raises:
            InvalidVolunteerIdError: Before any store access, for a bad id
            VolunteerNotFoundError: Before events are loaded, for an unknown volunteer
            StoreError: If the store fails
        """
        volunteer_id = parse_volunteer_id(volunteer_id)
        bind_volunteer(volunteer_id)
        logger.info(f"[MATCH] Starting match process for volunteer {volunteer_id}")

        # Step 1: Preferences
        preference_row = await self.store.get_volunteer_preferences(volunteer_id)
        if preference_row is None:
            logger.warning(f"[MATCH] No profile for volunteer {volunteer_id}")
            raise VolunteerNotFoundError(volunteer_id)

        # Step 2: Skills
        skill_names = await self.store.get_volunteer_skill_names(volunteer_id)
        prefs = build_preferences(preference_row, skill_names)

        # Step 3: Events
        event_rows = await self.store.list_events_with_skills()
        logger.info(
            f"[MATCH] Loaded {len(event_rows)} events | "
            f"Locations: {prefs.preferred_locations} | "
            f"Skills: {len(prefs.skills)} | Dates: {len(prefs.preferred_dates)}"
        )

        # Step 4: Rank
        ranked = self.scorer.rank_events(prefs, [build_event(row) for row in event_rows])

        logger.info(
            f"[MATCH] ✓ Match completed for volunteer {volunteer_id} | "
            f"Events ranked: {len(ranked)}"
        )
        return [EventMatch.from_result(result) for result in ranked]
