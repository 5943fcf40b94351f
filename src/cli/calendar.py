"""CLI for querying and combining holiday calendars."""

from __future__ import annotations

import logging
import os
from datetime import date, datetime, timezone
from typing import List, NoReturn, Optional

import typer
from dotenv import load_dotenv

from calendars import (
    BusinessDayConvention,
    CalendarConfig,
    CalendarError,
    StandardHolidayCalendar,
)
from calendars.config import CalendarConfigError
from calendars.offsets import business_day_index
from calendars.weekdays import parse_weekday_list
from infra.logging import configure_logging

app = typer.Typer(help="Holiday calendar utilities")
logger = logging.getLogger("holidaycal.cli")


def _configure_environment(command: str) -> CalendarConfig:
    load_dotenv()
    run_id = os.environ.get("RUN_ID")
    if not run_id:
        run_id = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        os.environ["RUN_ID"] = run_id
    try:
        config = CalendarConfig.from_env()
    except CalendarConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc
    configure_logging(run_id=run_id, command=command, level=config.log_level)
    return config


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid date: {value}") from exc


def _build_calendar(
    name: str, holidays: List[str], weekend: Optional[str], config: CalendarConfig
) -> StandardHolidayCalendar:
    try:
        weekend_days = (
            config.default_weekend_days if weekend is None else parse_weekday_list(weekend)
        )
    except CalendarError as exc:
        raise typer.BadParameter(str(exc)) from exc
    dates = [_parse_date(value) for value in holidays]
    try:
        return StandardHolidayCalendar(name, dates, weekend_days)
    except CalendarError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _fail(exc: CalendarError) -> NoReturn:
    logger.warning("Calendar query failed: %s", exc)
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


HOLIDAY_OPTION = typer.Option([], "--holiday", help="Holiday date (YYYY-MM-DD), repeatable")
WEEKEND_OPTION = typer.Option(None, "--weekend", "-w", help="Weekend days, e.g. SAT,SUN or NONE")
NAME_OPTION = typer.Option("CUSTOM", "--name", help="Calendar name")


@app.command()
def check(
    value: str = typer.Argument(..., help="Date to check (YYYY-MM-DD)"),
    holiday: List[str] = HOLIDAY_OPTION,
    weekend: Optional[str] = WEEKEND_OPTION,
    name: str = NAME_OPTION,
) -> None:
    """Report whether a date is a business day."""

    config = _configure_environment("check")
    calendar = _build_calendar(name, holiday, weekend, config)
    target = _parse_date(value)
    try:
        is_holiday = calendar.is_holiday(target)
    except CalendarError as exc:
        _fail(exc)
    typer.echo(f"{target} is a {'holiday' if is_holiday else 'business day'} in {calendar}")


@app.command()
def shift(
    value: str = typer.Argument(..., help="Start date (YYYY-MM-DD)"),
    amount: int = typer.Argument(..., help="Business days to move; negative moves back"),
    holiday: List[str] = HOLIDAY_OPTION,
    weekend: Optional[str] = WEEKEND_OPTION,
    name: str = NAME_OPTION,
) -> None:
    """Move a date by a number of business days."""

    config = _configure_environment("shift")
    calendar = _build_calendar(name, holiday, weekend, config)
    try:
        result = calendar.shift(_parse_date(value), amount)
    except CalendarError as exc:
        _fail(exc)
    typer.echo(result.isoformat())


@app.command()
def adjust(
    value: str = typer.Argument(..., help="Date to adjust (YYYY-MM-DD)"),
    convention: Optional[str] = typer.Option(None, "--convention", "-c", help="Convention name"),
    holiday: List[str] = HOLIDAY_OPTION,
    weekend: Optional[str] = WEEKEND_OPTION,
    name: str = NAME_OPTION,
) -> None:
    """Roll a date onto a business day using a business day convention."""

    config = _configure_environment("adjust")
    calendar = _build_calendar(name, holiday, weekend, config)
    try:
        rule = (
            config.default_convention
            if convention is None
            else BusinessDayConvention.parse(convention)
        )
        result = rule.adjust(_parse_date(value), calendar)
    except CalendarError as exc:
        _fail(exc)
    typer.echo(result.isoformat())


@app.command("business-days")
def business_days(
    start: str = typer.Argument(..., help="First date (YYYY-MM-DD)"),
    end: str = typer.Argument(..., help="Last date, inclusive (YYYY-MM-DD)"),
    holiday: List[str] = HOLIDAY_OPTION,
    weekend: Optional[str] = WEEKEND_OPTION,
    name: str = NAME_OPTION,
) -> None:
    """List the business days between two dates."""

    config = _configure_environment("business-days")
    calendar = _build_calendar(name, holiday, weekend, config)
    try:
        index = business_day_index(calendar, _parse_date(start), _parse_date(end))
    except CalendarError as exc:
        _fail(exc)
    for stamp in index:
        typer.echo(stamp.date().isoformat())


@app.command()
def combine(
    holiday: List[str] = HOLIDAY_OPTION,
    weekend: Optional[str] = WEEKEND_OPTION,
    name: str = typer.Option("A", "--name", help="First calendar name"),
    other_holiday: List[str] = typer.Option([], "--other-holiday", help="Second calendar holiday"),
    other_weekend: Optional[str] = typer.Option(
        None, "--other-weekend", help="Second calendar weekend"
    ),
    other_name: str = typer.Option("B", "--other-name", help="Second calendar name"),
) -> None:
    """Combine two calendars and print the result."""

    config = _configure_environment("combine")
    first = _build_calendar(name, holiday, weekend, config)
    second = _build_calendar(other_name, other_holiday, other_weekend, config)
    try:
        combined = first.combine_with(second)
    except CalendarError as exc:
        _fail(exc)
    typer.echo(f"name: {combined}")
    typer.echo(f"range: {combined.range}")
    typer.echo(f"holidays: {', '.join(day.isoformat() for day in combined.holidays)}")
    typer.echo(f"weekend: {','.join(day.name for day in sorted(combined.weekend_days))}")


if __name__ == "__main__":
    app()
