"""Weekday labels aligned with ``date.weekday()``."""

from __future__ import annotations

from datetime import date
from enum import IntEnum
from typing import Iterable

from .errors import InvalidArgumentError


class Weekday(IntEnum):
    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    @classmethod
    def of(cls, value: date) -> "Weekday":
        return cls(value.weekday())

    @classmethod
    def parse(cls, value: "Weekday | int | str") -> "Weekday":
        """Accept an enum member, a 0-6 index, or a label such as ``SAT``/``saturday``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidArgumentError(f"Unknown weekday: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as exc:
                raise InvalidArgumentError(f"Unknown weekday: {value!r}") from exc
        if isinstance(value, str):
            token = value.strip().upper()
            if token in cls.__members__:
                return cls[token]
            if token in _FULL_NAMES:
                return cls[_FULL_NAMES[token]]
        raise InvalidArgumentError(f"Unknown weekday: {value!r}")

    @property
    def label(self) -> str:
        return self.name.capitalize()


_FULL_NAMES = {
    "MONDAY": "MON",
    "TUESDAY": "TUE",
    "WEDNESDAY": "WED",
    "THURSDAY": "THU",
    "FRIDAY": "FRI",
    "SATURDAY": "SAT",
    "SUNDAY": "SUN",
}


def parse_weekdays(
    values: Iterable["Weekday | int | str"] | None, argument: str
) -> frozenset[Weekday]:
    if values is None or isinstance(values, (str, bytes)):
        raise InvalidArgumentError(f"{argument} must be an iterable of weekdays, got {values!r}")
    try:
        items = list(values)
    except TypeError as exc:
        raise InvalidArgumentError(f"{argument} must be iterable, got {values!r}") from exc
    if any(item is None for item in items):
        raise InvalidArgumentError(f"{argument} must not contain None")
    return frozenset(Weekday.parse(item) for item in items)


def parse_weekday_list(raw: str) -> frozenset[Weekday]:
    """Parse a comma separated list; blank or ``NONE`` means no weekend."""
    stripped = raw.strip()
    if not stripped or stripped.upper() == "NONE":
        return frozenset()
    return parse_weekdays([token for token in stripped.split(",") if token.strip()], "weekend")


__all__ = ["Weekday", "parse_weekday_list", "parse_weekdays"]
