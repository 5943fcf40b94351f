"""Exceptions raised by holiday calendars."""

from __future__ import annotations


class CalendarError(ValueError):
    """Base class for calendar failures."""


class InvalidArgumentError(CalendarError):
    """Raised when a calendar is built or queried with invalid input."""


class OutOfRangeError(CalendarError):
    """Raised when a date falls outside the range of known holidays."""


class IncompatibleRangeError(CalendarError):
    """Raised when two calendars cover disjoint, non-adjacent date spans."""


__all__ = [
    "CalendarError",
    "IncompatibleRangeError",
    "InvalidArgumentError",
    "OutOfRangeError",
]
