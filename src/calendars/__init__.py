"""Business-day holiday calendars."""

from .base import CalendarKind, CombinedHolidayCalendar, HolidayCalendar
from .config import CalendarConfig, CalendarConfigError
from .conventions import BusinessDayConvention
from .errors import CalendarError, IncompatibleRangeError, InvalidArgumentError, OutOfRangeError
from .none import FRI_SAT, NONE, SAT_SUN, THU_FRI, NoHolidaysCalendar
from .standard import StandardHolidayCalendar
from .weekdays import Weekday

__all__ = [
    "BusinessDayConvention",
    "CalendarConfig",
    "CalendarConfigError",
    "CalendarError",
    "CalendarKind",
    "CombinedHolidayCalendar",
    "FRI_SAT",
    "HolidayCalendar",
    "IncompatibleRangeError",
    "InvalidArgumentError",
    "NONE",
    "NoHolidaysCalendar",
    "OutOfRangeError",
    "SAT_SUN",
    "StandardHolidayCalendar",
    "THU_FRI",
    "Weekday",
]
