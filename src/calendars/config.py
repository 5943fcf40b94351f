"""Environment-driven defaults for building calendars."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, MutableMapping

from .conventions import BusinessDayConvention
from .errors import CalendarError
from .weekdays import Weekday, parse_weekday_list

DEFAULT_WEEKEND = frozenset({Weekday.SAT, Weekday.SUN})


class CalendarConfigError(ValueError):
    """Raised when calendar configuration is invalid."""


def _get_env(source: Mapping[str, str] | None) -> Mapping[str, str]:
    if source is None:
        return os.environ
    return source


def _get_weekend(source: Mapping[str, str], key: str) -> frozenset[Weekday]:
    raw = source.get(key)
    if raw is None:
        return DEFAULT_WEEKEND
    try:
        return parse_weekday_list(raw)
    except CalendarError as exc:
        raise CalendarConfigError(f"{key} must list weekdays such as SAT,SUN, got {raw!r}") from exc


def _get_convention(source: Mapping[str, str], key: str) -> BusinessDayConvention:
    raw = source.get(key)
    if raw is None or not raw.strip():
        return BusinessDayConvention.MODIFIED_FOLLOWING
    try:
        return BusinessDayConvention.parse(raw)
    except CalendarError as exc:
        raise CalendarConfigError(f"{key} is not a business day convention, got {raw!r}") from exc


@dataclass(frozen=True)
class CalendarConfig:
    """Defaults applied when a caller does not specify weekend or convention."""

    default_weekend_days: frozenset[Weekday] = field(default_factory=lambda: DEFAULT_WEEKEND)
    default_convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "CalendarConfig":
        env_map = _get_env(env)
        return cls(
            default_weekend_days=_get_weekend(env_map, "CALENDAR_WEEKEND_DAYS"),
            default_convention=_get_convention(env_map, "CALENDAR_CONVENTION"),
            log_level=(env_map.get("LOG_LEVEL") or "INFO").upper(),
        )

    def as_dict(self) -> MutableMapping[str, str | list[str]]:
        return {
            "default_weekend_days": [day.name for day in sorted(self.default_weekend_days)],
            "default_convention": self.default_convention.value,
            "log_level": self.log_level,
        }


__all__ = ["CalendarConfig", "CalendarConfigError"]
