"""Errors raised by the matching boundary and surfaced over HTTP."""

from __future__ import annotations


class MatchingError(Exception):
    """Base error for the match service."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidVolunteerIdError(MatchingError):
    """Volunteer identifier is missing or not a positive integer."""

    status_code = 400


class VolunteerNotFoundError(MatchingError):
    """No volunteer profile exists for the identifier."""

    status_code = 404

    def __init__(self, volunteer_id: int):
        super().__init__("Volunteer profile not found for this user")
        self.volunteer_id = volunteer_id


class StoreError(MatchingError):
    """The backing store failed while loading preferences, skills or events."""

    status_code = 500
