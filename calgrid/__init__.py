"""
Calgrid - view models for calendar widgets.

This package computes what a calendar widget renders:
- Period matching with yearly/monthly recurrence (periods.py)
- Event ordering and overlap counting (ordering.py)
- Year, month and week cells (views.py, cells.py)
- Time grid layout with column packing (day_layout.py)
- Configuration (config.py) and label formatting (formatting.py)
- Events from iCalendar data (ical.py)
"""

from .config import Config
from .errors import CalgridError, InvalidRecurrenceError
from .event import Event, Recurrence, ViewEvent
from .cells import MonthCell, WeekDay, WeekView, YearCell
from .periods import (
    adjust_end_date_from_start_diff,
    event_is_in_period,
    filter_events_in_period,
    get_badge_total,
    get_events_in_period,
)
from .ordering import events_comparer, get_crossings_count
from .day_layout import DayLayout, get_day_view_height
from .formatting import DateFormatter
from .views import CalendarHelper

__all__ = [
    'Config',
    'CalgridError',
    'InvalidRecurrenceError',
    'Event',
    'Recurrence',
    'ViewEvent',
    'MonthCell',
    'WeekDay',
    'WeekView',
    'YearCell',
    'adjust_end_date_from_start_diff',
    'event_is_in_period',
    'filter_events_in_period',
    'get_badge_total',
    'get_events_in_period',
    'events_comparer',
    'get_crossings_count',
    'DayLayout',
    'get_day_view_height',
    'DateFormatter',
    'CalendarHelper',
]
