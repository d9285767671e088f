"""
View cells returned by the year, month and week generators.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .event import Event, ViewEvent


@dataclass
class YearCell:
    """One month of the year view."""
    label: str
    date: datetime  # first day of the month
    is_today: bool  # month contains today
    events: list[Event] = field(default_factory=list)
    badge_total: int = 0


@dataclass
class MonthCell:
    """
    One day of the month grid.

    Days outside the month (leading/trailing grid days) have in_month False
    and, unless all month events are displayed, no events.
    """
    label: int  # day of month
    date: datetime
    in_month: bool
    is_past: bool
    is_today: bool
    is_future: bool
    is_weekend: bool
    events: list[Event] = field(default_factory=list)
    badge_total: int = 0


@dataclass
class WeekDay:
    week_day_label: str
    day_label: str
    date: datetime
    is_past: bool
    is_today: bool
    is_future: bool
    is_weekend: bool


@dataclass
class WeekView:
    days: list[WeekDay]
    events: list[ViewEvent]
