"""Inclusive date ranges with optional unbounded ends."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import ClassVar


class DateRangeError(ValueError):
    """Raised when a range cannot be built or combined."""


class DisjointRangeError(DateRangeError):
    """Raised when two ranges neither overlap nor abut."""


@dataclass(frozen=True, slots=True)
class DateRange:
    """Closed date interval; ``None`` on a side means unbounded."""

    start: date | None = None
    end: date | None = None

    ALL: ClassVar["DateRange"]

    def __post_init__(self) -> None:
        for label, value in (("start", self.start), ("end", self.end)):
            if value is None:
                continue
            if not isinstance(value, date) or isinstance(value, datetime):
                raise DateRangeError(f"{label} must be a date, got {value!r}")
        if self.start is not None and self.end is not None and self.start > self.end:
            raise DateRangeError(f"start {self.start} is after end {self.end}")

    @classmethod
    def of_closed(cls, start: date, end: date) -> "DateRange":
        if start is None or end is None:
            raise DateRangeError("closed ranges need both start and end")
        return cls(start, end)

    @classmethod
    def of_year(cls, year: int) -> "DateRange":
        return cls.of_years(year, year)

    @classmethod
    def of_years(cls, first_year: int, last_year: int) -> "DateRange":
        return cls(date(first_year, 1, 1), date(last_year, 12, 31))

    @property
    def is_unbounded(self) -> bool:
        return self.start is None or self.end is None

    @property
    def end_exclusive(self) -> date | None:
        """Day after ``end``; ``None`` when there is no such day."""
        if self.end is None or self.end == date.max:
            return None
        return self.end + timedelta(days=1)

    def contains(self, value: date) -> bool:
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value > self.end:
            return False
        return True

    def __contains__(self, value: object) -> bool:
        return isinstance(value, date) and self.contains(value)

    def overlaps(self, other: "DateRange") -> bool:
        if self.end is not None and other.start is not None and self.end < other.start:
            return False
        if other.end is not None and self.start is not None and other.end < self.start:
            return False
        return True

    def is_connected(self, other: "DateRange") -> bool:
        """True when the ranges overlap or one starts the day after the other ends."""
        if self.overlaps(other):
            return True
        return _abuts(self, other) or _abuts(other, self)

    def union(self, other: "DateRange") -> "DateRange":
        if not self.is_connected(other):
            raise DisjointRangeError(f"ranges {self} and {other} do not overlap or abut")
        start = None if self.start is None or other.start is None else min(self.start, other.start)
        end = None if self.end is None or other.end is None else max(self.end, other.end)
        return DateRange(start, end)

    def intersection(self, other: "DateRange") -> "DateRange":
        if not self.overlaps(other):
            raise DisjointRangeError(f"ranges {self} and {other} do not overlap")
        starts = [value for value in (self.start, other.start) if value is not None]
        ends = [value for value in (self.end, other.end) if value is not None]
        return DateRange(max(starts) if starts else None, min(ends) if ends else None)

    def __str__(self) -> str:
        start = self.start.isoformat() if self.start else "-inf"
        end = self.end.isoformat() if self.end else "+inf"
        return f"[{start},{end}]"


def _abuts(first: DateRange, second: DateRange) -> bool:
    return first.end_exclusive is not None and first.end_exclusive == second.start


DateRange.ALL = DateRange()


__all__ = ["DateRange", "DateRangeError", "DisjointRangeError"]
