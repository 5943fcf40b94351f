"""Date range primitives shared by the calendar packages."""

from .range import DateRange, DateRangeError, DisjointRangeError

__all__ = ["DateRange", "DateRangeError", "DisjointRangeError"]
