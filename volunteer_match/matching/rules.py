"""Individual matching criteria scoring one event against volunteer preferences.

Every rule is total: missing or empty inputs score 0 instead of raising.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from volunteer_match.matching.models import Event, VolunteerPreferences
from volunteer_match.normalization.normalizer import (
    normalize_date,
    normalize_dates,
    normalize_string,
)

TWO_PLACES = Decimal("0.01")


def match_by_location(
    prefs: VolunteerPreferences | None, event: Event | None
) -> int:
    """
    Check whether any preferred city appears in the event address.

    Event locations are free-text addresses, so a city matches when its
    normalized name is a substring of the normalized location.

    Args:
        prefs: Volunteer preferences
        event: Event to score

    Returns:
        1 on a match, otherwise 0
    """
    if prefs is None or not prefs.preferred_locations:
        return 0
    if event is None or not event.location:
        return 0

    location = normalize_string(event.location)
    for city in map(normalize_string, prefs.preferred_locations):
        if city and city in location:
            return 1
    return 0


def match_by_skills(
    prefs: VolunteerPreferences | None, event: Event | None
) -> float:
    """
    Fraction of the event's required skills that the volunteer has.

    The denominator is the number of distinct required skills, so extra
    volunteer skills never lower the score.

    Args:
        prefs: Volunteer preferences
        event: Event to score

    Returns:
        Fraction in [0, 1] rounded half-up to 2 decimals (0.33, 0.67, 1.0)
    """
    if prefs is None or not prefs.skills:
        return 0.0
    if event is None or not event.skills_needed:
        return 0.0

    required = {normalize_string(skill) for skill in event.skills_needed} - {""}
    if not required:
        return 0.0
    held = {normalize_string(skill) for skill in prefs.skills}

    fraction = Decimal(len(required & held)) / Decimal(len(required))
    return float(fraction.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def match_by_date(prefs: VolunteerPreferences | None, event: Event | None) -> int:
    """
    Check whether the event falls on one of the volunteer's preferred dates.

    Both sides are normalized to 'YYYY-MM-DD' first.

    Args:
        prefs: Volunteer preferences
        event: Event to score

    Returns:
        1 on a match, otherwise 0
    """
    if prefs is None or not prefs.preferred_dates:
        return 0
    if event is None or event.date is None or event.date == "":
        return 0

    event_date = normalize_date(event.date)
    if not event_date:
        return 0
    return 1 if event_date in normalize_dates(prefs.preferred_dates) else 0
