"""Holiday calendar capability shared by every calendar variant."""

from __future__ import annotations

import calendar as _stdlib_calendar
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import ClassVar, Iterator

from dates import DateRange, DisjointRangeError

from .errors import IncompatibleRangeError, InvalidArgumentError, OutOfRangeError

ONE_DAY = timedelta(days=1)
NAME_SEPARATOR = "+"

logger = logging.getLogger("holidaycal.calendars.base")


class CalendarKind(str, Enum):
    """Closed set of calendar variants."""

    STANDARD = "standard"
    NONE = "none"
    COMBINED = "combined"
    CUSTOM = "custom"


def require_date(value: object, argument: str = "date") -> date:
    if value is None or not isinstance(value, date) or isinstance(value, datetime):
        raise InvalidArgumentError(f"{argument} must be a date, got {value!r}")
    return value


class HolidayCalendar(ABC):
    """Answers whether a date is a holiday and combines with other calendars.

    Subclasses provide ``name``, ``range`` and ``is_holiday``; everything else
    walks day by day on top of ``is_holiday`` and therefore raises
    ``OutOfRangeError`` once a walk leaves the calendar's valid range.
    """

    kind: ClassVar[CalendarKind] = CalendarKind.CUSTOM
    name: str
    range: DateRange

    @abstractmethod
    def is_holiday(self, value: date) -> bool:
        """Return True when ``value`` is not a business day."""

    def is_business_day(self, value: date) -> bool:
        return not self.is_holiday(value)

    def combine_with(self, other: "HolidayCalendar") -> "HolidayCalendar":
        """Calendar whose holidays are the union of both calendars' holidays."""
        if not isinstance(other, HolidayCalendar):
            raise InvalidArgumentError(f"other must be a HolidayCalendar, got {other!r}")
        if other is self or other == self:
            return self
        if other.kind is CalendarKind.NONE:
            return self
        if self.kind is CalendarKind.NONE:
            return other
        logger.debug("Combining %s with %s using generic fallback", self.name, other.name)
        return CombinedHolidayCalendar(self, other)

    def __add__(self, other: object) -> "HolidayCalendar":
        if not isinstance(other, HolidayCalendar):
            return NotImplemented
        return self.combine_with(other)

    # -- date walking -----------------------------------------------------

    def next_business_day(self, value: date) -> date:
        current = _step(require_date(value), ONE_DAY)
        while self.is_holiday(current):
            current = _step(current, ONE_DAY)
        return current

    def next_or_same(self, value: date) -> date:
        require_date(value)
        return value if self.is_business_day(value) else self.next_business_day(value)

    def previous_business_day(self, value: date) -> date:
        current = _step(require_date(value), -ONE_DAY)
        while self.is_holiday(current):
            current = _step(current, -ONE_DAY)
        return current

    def previous_or_same(self, value: date) -> date:
        require_date(value)
        return value if self.is_business_day(value) else self.previous_business_day(value)

    def shift(self, value: date, amount: int) -> date:
        """Move ``amount`` business days forward (positive) or backward (negative)."""
        require_date(value)
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidArgumentError(f"amount must be an integer, got {amount!r}")
        result = value
        if amount > 0:
            for _ in range(amount):
                result = self.next_business_day(result)
        elif amount < 0:
            for _ in range(-amount):
                result = self.previous_business_day(result)
        return result

    def next_business_day_in_month(self, value: date) -> date | None:
        """Next business day after ``value`` within its month, or None if there is none.

        Never looks past the month end, so it stays inside a range ending on Dec 31.
        """
        current = require_date(value)
        last_day = _month_end(current)
        while current < last_day:
            current += ONE_DAY
            if self.is_business_day(current):
                return current
        return None

    def previous_business_day_in_month(self, value: date) -> date | None:
        """Previous business day before ``value`` within its month, or None."""
        current = require_date(value)
        while current.day > 1:
            current -= ONE_DAY
            if self.is_business_day(current):
                return current
        return None

    def next_same_or_last_in_month(self, value: date) -> date:
        """Next-or-same business day, falling back to the previous one at month end."""
        if self.is_business_day(value):
            return value
        following = self.next_business_day_in_month(value)
        if following is None:
            return self.previous_business_day(value)
        return following

    def is_last_business_day_of_month(self, value: date) -> bool:
        return self.is_business_day(value) and self.next_business_day_in_month(value) is None

    def last_business_day_of_month(self, value: date) -> date:
        require_date(value)
        return self.previous_or_same(_month_end(value))

    def business_days(self, start: date, end: date) -> Iterator[date]:
        """Yield business days in ``[start, end)``."""
        require_date(start, "start")
        require_date(end, "end")
        if end < start:
            raise InvalidArgumentError(f"end {end} is before start {start}")
        current = start
        while current < end:
            if self.is_business_day(current):
                yield current
            current += ONE_DAY

    def days_between(self, start: date, end: date) -> int:
        """Count business days in ``[start, end)``."""
        return sum(1 for _ in self.business_days(start, end))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class CombinedHolidayCalendar(HolidayCalendar):
    """Generic union of two calendars, evaluated lazily against both."""

    kind: ClassVar[CalendarKind] = CalendarKind.COMBINED

    first: HolidayCalendar
    second: HolidayCalendar

    @property
    def name(self) -> str:  # type: ignore[override]
        return f"{self.first.name}{NAME_SEPARATOR}{self.second.name}"

    @property
    def range(self) -> DateRange:  # type: ignore[override]
        try:
            return self.first.range.intersection(self.second.range)
        except DisjointRangeError as exc:
            raise IncompatibleRangeError(
                f"{self.first.name} {self.first.range} and "
                f"{self.second.name} {self.second.range} do not overlap"
            ) from exc

    def is_holiday(self, value: date) -> bool:
        return self.first.is_holiday(value) or self.second.is_holiday(value)


def _month_end(value: date) -> date:
    return value.replace(day=_stdlib_calendar.monthrange(value.year, value.month)[1])


def _step(value: date, delta: timedelta) -> date:
    try:
        return value + delta
    except OverflowError as exc:
        raise OutOfRangeError(f"Date is not within the range of known holidays: {value}") from exc


__all__ = [
    "CalendarKind",
    "CombinedHolidayCalendar",
    "HolidayCalendar",
    "NAME_SEPARATOR",
    "ONE_DAY",
    "require_date",
]
