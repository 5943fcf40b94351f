"""Sentinel calendar with no holidays plus the weekend-only calendars."""

from __future__ import annotations

from datetime import date
from typing import ClassVar

from dates import DateRange

from .base import CalendarKind, HolidayCalendar, require_date
from .standard import StandardHolidayCalendar
from .weekdays import Weekday


class NoHolidaysCalendar(HolidayCalendar):
    """Every date is a business day. Use the ``NONE`` instance."""

    kind: ClassVar[CalendarKind] = CalendarKind.NONE
    name = "NoHolidays"
    range = DateRange.ALL

    _instance: ClassVar["NoHolidaysCalendar | None"] = None

    def __new__(cls) -> "NoHolidaysCalendar":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_holiday(self, value: date) -> bool:
        require_date(value)
        return False

    def combine_with(self, other: HolidayCalendar) -> HolidayCalendar:
        if not isinstance(other, HolidayCalendar):
            return super().combine_with(other)
        return other

    def __repr__(self) -> str:
        return "NONE"


NONE = NoHolidaysCalendar()

SAT_SUN = StandardHolidayCalendar.of("Sat/Sun", (), Weekday.SAT, Weekday.SUN)
FRI_SAT = StandardHolidayCalendar.of("Fri/Sat", (), Weekday.FRI, Weekday.SAT)
THU_FRI = StandardHolidayCalendar.of("Thu/Fri", (), Weekday.THU, Weekday.FRI)


__all__ = ["FRI_SAT", "NONE", "NoHolidaysCalendar", "SAT_SUN", "THU_FRI"]
