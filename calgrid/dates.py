"""
Date arithmetic used by the view generators.

Instants are naive datetimes in local wall time (see timezone_utils).
Period ends are inclusive: end_of() returns the last microsecond of the unit.
"""

import calendar
from datetime import datetime, date, time as dt_time, timedelta
from typing import Optional, Union

from .debug import debug_print
from .timezone_utils import to_local_naive

SUNDAY = 6

UNITS = ("year", "month", "week", "day", "hour", "minute")

InstantLike = Union[datetime, date, str]


def to_instant(value: Optional[InstantLike]) -> Optional[datetime]:
    """
    Normalize a date-like value to a naive local datetime.

    Accepts datetimes (aware ones are converted to local time), dates
    (midnight) and ISO-8601 strings. None is passed through.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        # All-day value - midnight local time
        return datetime.combine(value, dt_time.min)
    raise TypeError(f"Cannot interpret {value!r} as a date-time")


def _check_unit(unit: str):
    if unit not in UNITS:
        raise ValueError(f"Unknown period unit: {unit!r}")


def start_of(dt: datetime, unit: str, first_day_of_week: int = SUNDAY) -> datetime:
    """Truncate dt to the start of the given unit."""
    _check_unit(unit)
    if unit == "minute":
        return dt.replace(second=0, microsecond=0)
    if unit == "hour":
        return dt.replace(minute=0, second=0, microsecond=0)
    day_start = datetime.combine(dt.date(), dt_time.min)
    if unit == "day":
        return day_start
    if unit == "week":
        return day_start - timedelta(days=(dt.weekday() - first_day_of_week) % 7)
    if unit == "month":
        return day_start.replace(day=1)
    return day_start.replace(month=1, day=1)


def end_of(dt: datetime, unit: str, first_day_of_week: int = SUNDAY) -> datetime:
    """Last microsecond of the unit containing dt."""
    start = start_of(dt, unit, first_day_of_week)
    if unit == "minute":
        nxt = start + timedelta(minutes=1)
    elif unit == "hour":
        nxt = start + timedelta(hours=1)
    elif unit == "day":
        nxt = start + timedelta(days=1)
    elif unit == "week":
        nxt = start + timedelta(days=7)
    elif unit == "month":
        nxt = add_months(start, 1)
    else:
        nxt = start.replace(year=start.year + 1)
    return nxt - timedelta(microseconds=1)


def add_months(dt: datetime, months: int) -> datetime:
    """Shift by whole months, clamping the day to the target month's length."""
    index = dt.year * 12 + (dt.month - 1) + months
    return with_year_month(dt, index // 12, index % 12 + 1)


def with_year(dt: datetime, year: int) -> datetime:
    """Same instant with the year replaced (Feb 29 becomes Feb 28)."""
    return with_year_month(dt, year, dt.month)


def with_year_month(dt: datetime, year: int, month: int) -> datetime:
    """Same instant with year and month replaced, day clamped to the month."""
    last_day = calendar.monthrange(year, month)[1]
    return dt.replace(year=year, month=month, day=min(dt.day, last_day))


def _truncate(seconds: float, unit_seconds: int) -> int:
    # int() truncates toward zero, matching whole-unit differences
    return int(seconds / unit_seconds)


def diff_minutes(a: datetime, b: datetime) -> int:
    """Whole minutes from b to a."""
    return _truncate((a - b).total_seconds(), 60)


def diff_days(a: datetime, b: datetime) -> int:
    """Whole days from b to a."""
    return _truncate((a - b).total_seconds(), 86400)


def is_same_day(a: datetime, b: datetime) -> bool:
    return a.date() == b.date()


def is_weekend(dt: datetime) -> bool:
    return dt.weekday() in (5, 6)


def parse_time_of_day(value: Optional[str], default: str) -> tuple[int, int]:
    """
    Parse an "HH:mm" string into (hour, minute).

    Parsing is lenient: a missing minute part means 0 and an empty value
    means the default. Values that cannot be read fall back to the default.
    """
    text = (value or default).strip()
    hour_part, _, minute_part = text.partition(":")
    try:
        hour = int(hour_part)
        minute = int(minute_part) if minute_part else 0
    except ValueError:
        if text == default.strip():
            raise
        debug_print("DATES", f"Unreadable time of day {value!r}, using {default}")
        return parse_time_of_day(default, default)
    return hour, minute
