"""Configuration for the matching engine.

Match Percentage:
-----------------
Each criterion scores an event in [0, 1]:
   - location : 1 if a preferred city appears in the event address
   - skills   : share of the event's required skills the volunteer has
   - date     : 1 if the event date is one of the preferred dates

The scores are combined with fixed weights (0.4 / 0.4 / 0.2) and rounded
to an integer percentage. A missing criterion scores 0; the remaining
weights are not renormalized.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RuleWeights(BaseModel):
    """Weights for the matching criteria."""

    location: float = Field(
        default=0.4, ge=0.0, le=1.0, description="Weight for location match"
    )
    skills: float = Field(
        default=0.4, ge=0.0, le=1.0, description="Weight for skill overlap"
    )
    date: float = Field(
        default=0.2, ge=0.0, le=1.0, description="Weight for availability date match"
    )

    def total_weight(self) -> float:
        """Sum of all rule weights."""
        return self.location + self.skills + self.date


class MatchingConfig(BaseModel):
    """Main configuration for the matching engine."""

    rule_weights: RuleWeights = Field(default_factory=RuleWeights)

    debug: bool = Field(
        default=False, description="Log the per-criterion breakdown of every event"
    )

    def validate_config(self) -> None:
        """Ensure rule weights sum to 1.0.

        Raises ValueError if validation fails.
        """
        total_weight = self.rule_weights.total_weight()
        if abs(total_weight - 1.0) > 1e-9:
            raise ValueError(f"Rule weights must sum to 1.0, got {total_weight:.2f}")
