from __future__ import annotations

from datetime import date, datetime

import pytest

from dates import DateRange, DateRangeError, DisjointRangeError


def test_closed_range_contains_both_ends() -> None:
    window = DateRange.of_closed(date(2024, 1, 1), date(2024, 12, 31))

    assert window.contains(date(2024, 1, 1))
    assert window.contains(date(2024, 12, 31))
    assert date(2024, 6, 15) in window
    assert date(2025, 1, 1) not in window
    assert date(2023, 12, 31) not in window
    assert "2024-06-15" not in window


def test_all_range_is_unbounded() -> None:
    assert DateRange.ALL.is_unbounded
    assert DateRange.ALL.contains(date.min)
    assert DateRange.ALL.contains(date.max)
    assert DateRange.ALL.end_exclusive is None
    assert str(DateRange.ALL) == "[-inf,+inf]"


def test_of_years_spans_calendar_years() -> None:
    window = DateRange.of_years(2023, 2025)

    assert window == DateRange(date(2023, 1, 1), date(2025, 12, 31))
    assert DateRange.of_year(2024) == DateRange(date(2024, 1, 1), date(2024, 12, 31))
    assert str(DateRange.of_year(2024)) == "[2024-01-01,2024-12-31]"


def test_end_exclusive_is_day_after_end() -> None:
    assert DateRange.of_year(2024).end_exclusive == date(2025, 1, 1)
    assert DateRange(date(2024, 1, 1), date.max).end_exclusive is None


def test_rejects_inverted_or_non_date_bounds() -> None:
    with pytest.raises(DateRangeError):
        DateRange.of_closed(date(2024, 2, 1), date(2024, 1, 1))
    with pytest.raises(DateRangeError):
        DateRange(datetime(2024, 1, 1), date(2024, 2, 1))
    with pytest.raises(DateRangeError):
        DateRange.of_closed(None, date(2024, 2, 1))  # type: ignore[arg-type]


def test_union_of_overlapping_ranges() -> None:
    first = DateRange(date(2024, 1, 1), date(2024, 6, 30))
    second = DateRange(date(2024, 3, 1), date(2024, 12, 31))

    assert first.union(second) == DateRange.of_year(2024)
    assert second.union(first) == DateRange.of_year(2024)


def test_union_of_adjacent_ranges() -> None:
    union = DateRange.of_year(2024).union(DateRange.of_year(2025))

    assert union == DateRange.of_years(2024, 2025)


def test_union_with_unbounded_range_is_unbounded() -> None:
    assert DateRange.of_year(2024).union(DateRange.ALL) == DateRange.ALL
    half_open = DateRange(date(2021, 1, 1), None)
    assert DateRange.of_year(2020).union(half_open) == DateRange(date(2020, 1, 1), None)


def test_union_of_disjoint_ranges_raises() -> None:
    with pytest.raises(DisjointRangeError):
        DateRange.of_year(2024).union(DateRange.of_year(2026))
    assert not DateRange.of_year(2026).is_connected(DateRange.of_year(2024))


def test_intersection() -> None:
    first = DateRange(date(2024, 1, 1), date(2024, 6, 30))
    second = DateRange(date(2024, 3, 1), None)

    assert first.intersection(second) == DateRange(date(2024, 3, 1), date(2024, 6, 30))
    assert DateRange.ALL.intersection(first) == first
    with pytest.raises(DisjointRangeError):
        DateRange.of_year(2024).intersection(DateRange.of_year(2025))
