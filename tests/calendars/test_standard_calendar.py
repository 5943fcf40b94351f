from __future__ import annotations

import dataclasses
from datetime import date, datetime, timedelta

import pytest

from calendars import (
    CalendarKind,
    InvalidArgumentError,
    OutOfRangeError,
    StandardHolidayCalendar,
    Weekday,
)
from dates import DateRange

NEW_YEAR = date(2024, 1, 1)


def _calendar_a() -> StandardHolidayCalendar:
    return StandardHolidayCalendar.of("A", [NEW_YEAR], Weekday.SAT, Weekday.SUN)


def test_range_spans_year_of_holidays() -> None:
    calendar = _calendar_a()

    assert calendar.range == DateRange(date(2024, 1, 1), date(2024, 12, 31))
    assert calendar.kind is CalendarKind.STANDARD


def test_is_holiday_scenario() -> None:
    calendar = _calendar_a()

    assert calendar.is_holiday(date(2024, 1, 1))
    assert calendar.is_holiday(date(2024, 1, 6))  # Saturday
    assert not calendar.is_holiday(date(2024, 1, 2))  # Tuesday
    assert calendar.is_business_day(date(2024, 1, 2))
    with pytest.raises(OutOfRangeError, match="not within the range of known holidays"):
        calendar.is_holiday(date(2025, 1, 1))
    with pytest.raises(OutOfRangeError):
        calendar.is_holiday(date(2023, 12, 31))


def test_every_day_in_range_answers_by_holidays_and_weekend() -> None:
    holidays = [date(2024, 3, 29), date(2024, 7, 4), date(2024, 12, 25)]
    calendar = StandardHolidayCalendar.of("US", holidays, "SAT", "SUN")
    day = calendar.range.start
    while day <= calendar.range.end:
        expected = day in holidays or day.weekday() >= 5
        assert calendar.is_holiday(day) is expected
        day += timedelta(days=1)


def test_holidays_sorted_and_deduplicated() -> None:
    calendar = StandardHolidayCalendar.of(
        "X",
        [date(2025, 12, 25), date(2023, 5, 1), date(2025, 12, 25)],
        Weekday.SAT,
        Weekday.SUN,
    )

    assert calendar.holidays == (date(2023, 5, 1), date(2025, 12, 25))
    assert calendar.range == DateRange.of_years(2023, 2025)
    assert all(day in calendar.range for day in calendar.holidays)


def test_single_weekend_day_when_both_equal() -> None:
    calendar = StandardHolidayCalendar.of("AE", [NEW_YEAR], Weekday.FRI, Weekday.FRI)

    assert calendar.weekend_days == frozenset({Weekday.FRI})
    assert calendar.is_holiday(date(2024, 1, 5))
    assert not calendar.is_holiday(date(2024, 1, 6))


def test_empty_weekend_requires_explicit_holidays() -> None:
    calendar = StandardHolidayCalendar.of_weekend_days("X", [NEW_YEAR], [])

    assert calendar.weekend_days == frozenset()
    assert not calendar.is_holiday(date(2024, 1, 6))
    assert calendar.is_holiday(NEW_YEAR)


def test_no_holidays_means_unbounded_range() -> None:
    calendar = StandardHolidayCalendar.of_weekend_days("WEEKEND", [], ["saturday", 6])

    assert calendar.range == DateRange.ALL
    assert calendar.is_holiday(date(1900, 1, 6))  # Saturday
    assert not calendar.is_holiday(date(2999, 1, 7))  # Monday


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": None, "holidays": [NEW_YEAR], "weekend_days": []},
        {"name": "", "holidays": [NEW_YEAR], "weekend_days": []},
        {"name": "X", "holidays": None, "weekend_days": []},
        {"name": "X", "holidays": [NEW_YEAR, None], "weekend_days": []},
        {"name": "X", "holidays": [datetime(2024, 1, 1)], "weekend_days": []},
        {"name": "X", "holidays": "2024-01-01", "weekend_days": []},
        {"name": "X", "holidays": [NEW_YEAR], "weekend_days": None},
        {"name": "X", "holidays": [NEW_YEAR], "weekend_days": [Weekday.SAT, None]},
        {"name": "X", "holidays": [NEW_YEAR], "weekend_days": ["Caturday"]},
        {"name": "X", "holidays": [NEW_YEAR], "weekend_days": [7]},
    ],
)
def test_construction_rejects_invalid_arguments(kwargs) -> None:
    with pytest.raises(InvalidArgumentError):
        StandardHolidayCalendar(**kwargs)


def test_of_rejects_missing_weekend_day() -> None:
    with pytest.raises(InvalidArgumentError):
        StandardHolidayCalendar.of("X", [NEW_YEAR], None, Weekday.SUN)  # type: ignore[arg-type]


def test_is_holiday_rejects_non_dates() -> None:
    calendar = _calendar_a()

    with pytest.raises(InvalidArgumentError):
        calendar.is_holiday(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        calendar.is_holiday(datetime(2024, 1, 2, 12, 0))


def test_equality_ignores_derived_range() -> None:
    first = StandardHolidayCalendar.of("A", [NEW_YEAR, NEW_YEAR], Weekday.SUN, Weekday.SAT)
    second = StandardHolidayCalendar.of_weekend_days("A", (NEW_YEAR,), {"SAT", "SUN"})

    assert first == second
    assert hash(first) == hash(second)
    assert first != StandardHolidayCalendar.of("B", [NEW_YEAR], Weekday.SAT, Weekday.SUN)
    assert first != StandardHolidayCalendar.of("A", [NEW_YEAR], Weekday.FRI, Weekday.SAT)
    assert "range" not in repr(first)


def test_string_form_is_name() -> None:
    assert str(_calendar_a()) == "A"


def test_calendar_is_immutable() -> None:
    calendar = _calendar_a()

    with pytest.raises(dataclasses.FrozenInstanceError):
        calendar.name = "B"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        calendar.range = DateRange.ALL  # type: ignore[misc]
    assert isinstance(calendar.holidays, tuple)
    assert isinstance(calendar.weekend_days, frozenset)
