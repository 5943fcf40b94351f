"""Holiday calendar backed by an explicit set of dates and weekend days."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar, Iterable

from dates import DateRange, DisjointRangeError

from .base import NAME_SEPARATOR, CalendarKind, HolidayCalendar, require_date
from .errors import IncompatibleRangeError, InvalidArgumentError, OutOfRangeError
from .weekdays import Weekday, parse_weekdays

logger = logging.getLogger("holidaycal.calendars.standard")


@dataclass(frozen=True)
class StandardHolidayCalendar(HolidayCalendar):
    """Immutable calendar of explicit holidays plus recurring weekend days.

    The valid range is derived from the holidays: unbounded when there are
    none, otherwise from January 1st of the earliest holiday's year to
    December 31st of the latest holiday's year. Queries outside it raise
    ``OutOfRangeError``.
    """

    kind: ClassVar[CalendarKind] = CalendarKind.STANDARD

    name: str
    holidays: tuple[date, ...]
    weekend_days: frozenset[Weekday]
    range: DateRange = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgumentError(f"name must be a non-empty string, got {self.name!r}")
        holidays = _normalize_holidays(self.holidays)
        object.__setattr__(self, "holidays", holidays)
        object.__setattr__(self, "_holiday_lookup", frozenset(holidays))
        object.__setattr__(self, "weekend_days", parse_weekdays(self.weekend_days, "weekend_days"))
        object.__setattr__(self, "range", _derive_range(holidays))

    @classmethod
    def of(
        cls,
        name: str,
        holidays: Iterable[date],
        first_weekend_day: Weekday | int | str,
        second_weekend_day: Weekday | int | str,
    ) -> "StandardHolidayCalendar":
        """Build with two weekend days; pass the same day twice for one-day weekends."""
        if first_weekend_day is None or second_weekend_day is None:
            raise InvalidArgumentError("weekend days must not be None")
        return cls(name, holidays, (first_weekend_day, second_weekend_day))

    @classmethod
    def of_weekend_days(
        cls,
        name: str,
        holidays: Iterable[date],
        weekend_days: Iterable[Weekday | int | str],
    ) -> "StandardHolidayCalendar":
        return cls(name, holidays, weekend_days)

    def is_holiday(self, value: date) -> bool:
        require_date(value)
        if not self.range.contains(value):
            raise OutOfRangeError(
                f"Date is not within the range of known holidays: {value}, {self.range}"
            )
        return value in self._holiday_lookup or Weekday.of(value) in self.weekend_days

    def combine_with(self, other: HolidayCalendar) -> HolidayCalendar:
        if other is self or other == self:
            return self
        if isinstance(other, HolidayCalendar) and other.kind is CalendarKind.NONE:
            return self
        if not isinstance(other, StandardHolidayCalendar):
            return super().combine_with(other)
        try:
            new_range = self.range.union(other.range)
        except DisjointRangeError as exc:
            raise IncompatibleRangeError(
                f"Cannot combine {self.name} {self.range} with {other.name} {other.range}"
            ) from exc
        merged = set(self.holidays).union(other.holidays)
        end_exclusive = new_range.end_exclusive
        new_holidays = [
            day
            for day in merged
            if (new_range.start is None or day >= new_range.start)
            and (end_exclusive is None or day < end_exclusive)
        ]
        dropped = len(merged) - len(new_holidays)
        if dropped:
            logger.debug("Dropped %s holidays outside %s while combining", dropped, new_range)
        combined_name = f"{self.name}{NAME_SEPARATOR}{other.name}"
        logger.debug("Combining %s with %s into %s", self.name, other.name, combined_name)
        return StandardHolidayCalendar(
            combined_name, new_holidays, self.weekend_days | other.weekend_days
        )


def _normalize_holidays(values: Iterable[date] | None) -> tuple[date, ...]:
    if values is None or isinstance(values, (str, bytes)):
        raise InvalidArgumentError(f"holidays must be an iterable of dates, got {values!r}")
    try:
        items = list(values)
    except TypeError as exc:
        raise InvalidArgumentError(f"holidays must be iterable, got {values!r}") from exc
    for item in items:
        require_date(item, "holidays element")
    return tuple(sorted(set(items)))


def _derive_range(holidays: tuple[date, ...]) -> DateRange:
    if not holidays:
        return DateRange.ALL
    return DateRange.of_years(holidays[0].year, holidays[-1].year)


__all__ = ["StandardHolidayCalendar"]
