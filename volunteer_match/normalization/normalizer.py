"""Canonical forms for the strings and dates compared by the matching rules."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timezone
from typing import Any, Iterable

logger = logging.getLogger(__name__)


# ============================================================================
# Strings
# ============================================================================

def normalize_string(value: Any) -> str:
    """
    Trim and lowercase a value for case-insensitive comparison.

    Args:
        value: Any value; non-strings are converted with str()

    Returns:
        Normalized string, "" for None
    """
    if value is None:
        return ""
    return str(value).strip().lower()


# ============================================================================
# Dates
# ============================================================================

# Two-digit years below the pivot belong to the 2000s, the rest to the 1900s
# (00-68 -> 20xx, 69-99 -> 19xx), the POSIX strptime %y convention.
TWO_DIGIT_YEAR_PIVOT = 69

TWO_DIGIT_YEAR_PATTERN = re.compile(r"^(\d{2})-(\d{1,2})-(\d{1,2})$")

DATE_FORMATS = [
    "%Y/%m/%d",   # 2025/11/02
    "%m/%d/%Y",   # 11/02/2025
    "%B %d, %Y",  # November 2, 2025
    "%b %d, %Y",  # Nov 2, 2025
    "%d %B %Y",   # 2 November 2025
    "%d %b %Y",   # 2 Nov 2025
]


def expand_two_digit_year(year: int) -> int:
    """
    Expand a two-digit year to four digits using TWO_DIGIT_YEAR_PIVOT.

    Examples:
        25 -> 2025, 68 -> 2068, 69 -> 1969, 75 -> 1975
    """
    if year < TWO_DIGIT_YEAR_PIVOT:
        return 2000 + year
    return 1900 + year


def _to_day(value: date | datetime) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def _parse_date_string(text: str) -> date | None:
    match = TWO_DIGIT_YEAR_PATTERN.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        try:
            return date(expand_two_digit_year(year), month, day)
        except ValueError:
            return None

    try:
        return _to_day(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return None


def normalize_date(value: Any) -> str:
    """
    Normalize a date-like value to 'YYYY-MM-DD'.

    Handles:
    - date and datetime objects (aware datetimes are converted to UTC first)
    - ISO 8601 strings: "2025-11-02", "2025-11-02T10:30:00Z"
    - two-digit years: "25-11-02" -> "2025-11-02", "75-01-05" -> "1975-01-05"
    - a few common formats: "11/02/2025", "2025/11/02", "Nov 2, 2025"

    Args:
        value: Date-like value

    Returns:
        'YYYY-MM-DD', "" for None or empty input, or the trimmed string
        itself when it cannot be parsed
    """
    if value is None:
        return ""

    if isinstance(value, (date, datetime)):
        return _to_day(value).isoformat()

    text = str(value).strip()
    if not text:
        return ""

    parsed = _parse_date_string(text)
    if parsed is None:
        logger.debug(f"Could not parse date '{text}', comparing raw string")
        return text

    return parsed.isoformat()


def normalize_dates(values: Iterable[Any] | None) -> set[str]:
    """Normalize several date-like values, dropping empty results."""
    if not values:
        return set()
    return {normalized for normalized in map(normalize_date, values) if normalized}


def parse_availability(value: Any) -> list[str]:
    """
    Turn a stored availability value into a list of preferred dates.

    Handles:
    - None -> []
    - "2025-12-03" or "2025-12-03, 2025-12-04" (comma separated)
    - a date/datetime -> its 'YYYY-MM-DD' form
    - a list or tuple of dates or strings

    Args:
        value: Availability as stored on the volunteer profile

    Returns:
        Preferred date strings, in their stored order
    """
    if value is None:
        return []

    if isinstance(value, (date, datetime)):
        return [normalize_date(value)]

    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]

    if isinstance(value, (list, tuple, set, frozenset)):
        dates = []
        for item in value:
            if isinstance(item, (date, datetime)):
                dates.append(normalize_date(item))
            elif item is not None and str(item).strip():
                dates.append(str(item).strip())
        return dates

    logger.warning(f"Unsupported availability type {type(value).__name__}, ignoring")
    return []
