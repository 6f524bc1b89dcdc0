"""Normalization of the strings and dates compared during matching."""

from volunteer_match.normalization.normalizer import (
    TWO_DIGIT_YEAR_PIVOT,
    expand_two_digit_year,
    normalize_date,
    normalize_dates,
    normalize_string,
    parse_availability,
)

__all__ = [
    "TWO_DIGIT_YEAR_PIVOT",
    "expand_two_digit_year",
    "normalize_date",
    "normalize_dates",
    "normalize_string",
    "parse_availability",
]
