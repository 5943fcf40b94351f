"""Bridge holiday calendars into pandas business-day offsets."""

from __future__ import annotations

from datetime import date

import pandas as pd
from pandas.tseries.offsets import CustomBusinessDay

from .base import HolidayCalendar, require_date
from .errors import InvalidArgumentError, OutOfRangeError
from .none import NoHolidaysCalendar
from .standard import StandardHolidayCalendar
from .weekdays import Weekday


def weekmask_for(calendar: HolidayCalendar) -> str:
    weekend = _weekend_days(calendar)
    working = [day.label for day in Weekday if day not in weekend]
    if not working:
        raise InvalidArgumentError(f"{calendar.name} has no working weekdays")
    return " ".join(working)


def to_custom_business_day(calendar: HolidayCalendar) -> CustomBusinessDay:
    """Offset that steps over the calendar's weekend days and holidays."""
    holidays = list(calendar.holidays) if isinstance(calendar, StandardHolidayCalendar) else []
    return CustomBusinessDay(holidays=holidays, weekmask=weekmask_for(calendar))


def business_day_index(calendar: HolidayCalendar, start: date, end: date) -> pd.DatetimeIndex:
    """Business days in ``[start, end]`` as a DatetimeIndex."""
    require_date(start, "start")
    require_date(end, "end")
    for value in (start, end):
        if not calendar.range.contains(value):
            raise OutOfRangeError(
                f"Date is not within the range of known holidays: {value}, {calendar.range}"
            )
    return pd.date_range(start=start, end=end, freq=to_custom_business_day(calendar))


def _weekend_days(calendar: HolidayCalendar) -> frozenset[Weekday]:
    if isinstance(calendar, StandardHolidayCalendar):
        return calendar.weekend_days
    if isinstance(calendar, NoHolidaysCalendar):
        return frozenset()
    raise InvalidArgumentError(
        f"{calendar.name} ({calendar.kind.value}) cannot be expressed as a pandas offset"
    )


__all__ = ["business_day_index", "to_custom_business_day", "weekmask_for"]
