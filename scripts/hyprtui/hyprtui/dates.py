"""Calendar navigation and month grid helpers for the clock."""

from __future__ import annotations

import calendar
from datetime import date, timedelta

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
GRID_WEEKS = 6

_SUNDAY_FIRST = calendar.Calendar(firstweekday=calendar.SUNDAY)


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_grid(year: int, month: int) -> list[list[int | None]]:
    """Six Sunday-first weeks of day numbers, ``None`` outside the month."""
    weeks = [
        [day or None for day in week]
        for week in _SUNDAY_FIRST.monthdayscalendar(year, month)
    ]
    while len(weeks) < GRID_WEEKS:
        weeks.append([None] * 7)
    return weeks


def next_month(day: date) -> date:
    if day.month == 12:
        if day.year >= date.max.year:
            return day
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def prev_month(day: date) -> date:
    if day.month == 1:
        if day.year <= date.min.year:
            return day
        return date(day.year - 1, 12, 1)
    return date(day.year, day.month - 1, 1)


def shift_days(day: date, days: int) -> date:
    try:
        return day + timedelta(days=days)
    except OverflowError:
        return day


def next_day(day: date) -> date:
    return shift_days(day, 1)


def prev_day(day: date) -> date:
    return shift_days(day, -1)


def next_week(day: date) -> date:
    return shift_days(day, 7)


def prev_week(day: date) -> date:
    return shift_days(day, -7)
