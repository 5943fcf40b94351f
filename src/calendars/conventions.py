"""Business day conventions used to roll payment dates onto business days."""

from __future__ import annotations

from datetime import date
from enum import Enum

from .base import HolidayCalendar, require_date
from .errors import InvalidArgumentError


class BusinessDayConvention(str, Enum):
    NO_ADJUST = "NO_ADJUST"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"
    NEAREST = "NEAREST"

    @classmethod
    def parse(cls, label: "BusinessDayConvention | str") -> "BusinessDayConvention":
        if isinstance(label, cls):
            return label
        if not isinstance(label, str):
            raise InvalidArgumentError(f"Unknown business day convention: {label!r}")
        token = label.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[token]
        except KeyError as exc:
            valid = ", ".join(member.name for member in cls)
            raise InvalidArgumentError(
                f"Unknown business day convention {label!r}. Valid options: {valid}"
            ) from exc

    def adjust(self, value: date, calendar: HolidayCalendar) -> date:
        """Roll ``value`` onto a business day of ``calendar``."""
        require_date(value)
        if self is BusinessDayConvention.NO_ADJUST or calendar.is_business_day(value):
            return value

        if self is BusinessDayConvention.FOLLOWING:
            return calendar.next_business_day(value)
        if self is BusinessDayConvention.PRECEDING:
            return calendar.previous_business_day(value)
        if self is BusinessDayConvention.MODIFIED_FOLLOWING:
            following = calendar.next_business_day_in_month(value)
            if following is None:
                return calendar.previous_business_day(value)
            return following
        if self is BusinessDayConvention.MODIFIED_PRECEDING:
            preceding = calendar.previous_business_day_in_month(value)
            if preceding is None:
                return calendar.next_business_day(value)
            return preceding

        # NEAREST: ties roll forward
        following = calendar.next_business_day(value)
        preceding = calendar.previous_business_day(value)
        if (following - value) <= (value - preceding):
            return following
        return preceding


__all__ = ["BusinessDayConvention"]
