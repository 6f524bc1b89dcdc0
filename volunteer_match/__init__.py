"""Volunteer Match Service: ranks events for a volunteer."""

__version__ = "0.1.0"
