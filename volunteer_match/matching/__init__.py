"""Matching engine module exports."""

from volunteer_match.matching.config import MatchingConfig, RuleWeights

from volunteer_match.matching.models import (
    VolunteerPreferences,
    Event,
    MatchResult,
    MatchBreakdown,
    EventMatch,
)

from volunteer_match.matching.rules import (
    match_by_location,
    match_by_skills,
    match_by_date,
)

from volunteer_match.matching.scorer import (
    MatchScorer,
    total_match_percentage,
    rank_events_by_match,
)

from volunteer_match.matching.exceptions import (
    MatchingError,
    InvalidVolunteerIdError,
    VolunteerNotFoundError,
    StoreError,
)

__all__ = [
    # Config
    "MatchingConfig",
    "RuleWeights",
    # Models
    "VolunteerPreferences",
    "Event",
    "MatchResult",
    "MatchBreakdown",
    "EventMatch",
    # Rules
    "match_by_location",
    "match_by_skills",
    "match_by_date",
    # Scoring
    "MatchScorer",
    "total_match_percentage",
    "rank_events_by_match",
    # Errors
    "MatchingError",
    "InvalidVolunteerIdError",
    "VolunteerNotFoundError",
    "StoreError",
]
