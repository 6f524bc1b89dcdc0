"""Scoring and ranking of events for one volunteer."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from volunteer_match.matching.config import MatchingConfig, RuleWeights
from volunteer_match.matching.models import (
    Event,
    MatchBreakdown,
    MatchResult,
    VolunteerPreferences,
)
from volunteer_match.matching.rules import (
    match_by_date,
    match_by_location,
    match_by_skills,
)

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS = RuleWeights()


def _clamp(score: float) -> Decimal:
    return min(max(Decimal(str(score)), Decimal(0)), Decimal(1))


def total_match_percentage(
    loc_score: float,
    skill_score: float,
    date_score: float,
    weights: RuleWeights | None = None,
) -> int:
    """
    Combine the criterion scores into a 0..100 match percentage.

    raw = 0.4 * location + 0.4 * skills + 0.2 * date, rounded half away
    from zero: total_match_percentage(1, 0.5, 1) == 80,
    total_match_percentage(1 / 3, 0, 0) == 13.

    Args:
        loc_score: Location score in [0, 1]
        skill_score: Skill overlap fraction in [0, 1]
        date_score: Date score in [0, 1]
        weights: Rule weights (defaults to 0.4 / 0.4 / 0.2)

    Returns:
        Integer percentage in [0, 100]
    """
    weights = weights or DEFAULT_WEIGHTS

    raw = (
        Decimal(str(weights.location)) * _clamp(loc_score)
        + Decimal(str(weights.skills)) * _clamp(skill_score)
        + Decimal(str(weights.date)) * _clamp(date_score)
    )
    percentage = int((raw * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return min(max(percentage, 0), 100)


class MatchScorer:
    """Scores and ranks events for a volunteer."""

    def __init__(self, config: MatchingConfig | None = None):
        """
        Initialize match scorer.

        Args:
            config: Matching configuration
        """
        self.config = config or MatchingConfig()
        self.config.validate_config()

    def score_event(self, prefs: VolunteerPreferences, event: Event) -> MatchBreakdown:
        """
        Score a single event against volunteer preferences.

        Args:
            prefs: Volunteer preferences
            event: Event to score

        Returns:
            Per-criterion scores and the combined percentage
        """
        location = match_by_location(prefs, event)
        skills = match_by_skills(prefs, event)
        date = match_by_date(prefs, event)

        breakdown = MatchBreakdown(
            location=location,
            skills=skills,
            date=date,
            match_percentage=total_match_percentage(
                location, skills, date, self.config.rule_weights
            ),
        )

        if self.config.debug:
            logger.debug(
                f"[SCORER] Event {event.id} '{event.sort_title}': "
                f"{breakdown.match_percentage}% | location={location} "
                f"skills={skills} date={date}"
            )

        return breakdown

    def rank_events(
        self, prefs: VolunteerPreferences, events: Iterable[Event]
    ) -> list[MatchResult]:
        """
        Score every event and order best match first.

        Equal percentages are ordered by title (falling back to name, then
        ""), ascending by code point, so the comparison is case-sensitive
        ("Zulu" sorts before "alpha"). Input events are copied, never modified.

        Args:
            prefs: Volunteer preferences
            events: Events to rank

        Returns:
            One MatchResult per input event
        """
        results = [
            MatchResult(
                **event.model_dump(exclude={"match_percentage"}),
                match_percentage=self.score_event(prefs, event).match_percentage,
            )
            for event in events
        ]

        ranked = sorted(results, key=lambda r: (-r.match_percentage, r.sort_title))

        if ranked:
            logger.info(
                f"[SCORER] Ranked {len(ranked)} events | "
                f"Best: '{ranked[0].sort_title}' ({ranked[0].match_percentage}%) | "
                f"Worst: '{ranked[-1].sort_title}' ({ranked[-1].match_percentage}%)"
            )

        return ranked


# Convenience function
def rank_events_by_match(
    prefs: VolunteerPreferences,
    events: Iterable[Event],
    config: MatchingConfig | None = None,
) -> list[MatchResult]:
    """
    Score and rank events for a volunteer.

    Args:
        prefs: Volunteer preferences
        events: Events to rank
        config: Matching configuration

    Returns:
        Ranked match results
    """
    return MatchScorer(config).rank_events(prefs, events)
