"""
Period matching: which events fall inside a period.

Recurring events are re-anchored onto the period before matching: a yearly
event takes the period start's year, a monthly event its year and month.
The end moves by the same delta as the start. All period boundaries are
inclusive.
"""

from datetime import datetime
from typing import Iterable, Optional

from .dates import InstantLike, SUNDAY, end_of, start_of, to_instant, with_year, with_year_month
from .event import Event, Recurrence, parse_recurrence


def adjust_end_date_from_start_diff(
    old_start: InstantLike,
    new_start: InstantLike,
    old_end: Optional[InstantLike],
) -> Optional[datetime]:
    """
    Shift old_end by the distance between old_start and new_start.

    Returns None when there is no end to shift.
    """
    if not old_end:
        return None
    return to_instant(old_end) + (to_instant(new_start) - to_instant(old_start))


def occurrence_bounds(event, period_start: datetime) -> tuple[datetime, Optional[datetime]]:
    """
    Start and end of the event as seen from a period starting at period_start.

    Non-recurring events return their own times. The end is None when the
    event has none.
    """
    start = event.starts_at
    recurrence = parse_recurrence(getattr(event, 'recurs_on', None))
    if recurrence is None:
        return start, event.ends_at

    if recurrence is Recurrence.YEAR:
        shifted = with_year(start, period_start.year)
    else:
        shifted = with_year_month(start, period_start.year, period_start.month)
    return shifted, adjust_end_date_from_start_diff(start, shifted, event.ends_at)


def intersects(start: datetime, end: datetime, period_start: datetime, period_end: datetime) -> bool:
    """True if [start, end] touches the inclusive period [period_start, period_end]."""
    return (
        (period_start < start < period_end)
        or (period_start < end < period_end)
        or (start < period_start and end > period_end)
        or start == period_start
        or end == period_end
    )


def event_is_in_period(event: Event, period_start: InstantLike, period_end: InstantLike) -> bool:
    """Check whether an event, possibly recurring, intersects the period."""
    period_start = to_instant(period_start)
    period_end = to_instant(period_end)
    start, end = occurrence_bounds(event, period_start)
    return intersects(start, end or start, period_start, period_end)


def filter_events_in_period(
    events: Iterable[Event],
    period_start: InstantLike,
    period_end: InstantLike,
) -> list[Event]:
    """Events intersecting the period, in input order."""
    period_start = to_instant(period_start)
    period_end = to_instant(period_end)
    return [event for event in events if event_is_in_period(event, period_start, period_end)]


def get_events_in_period(
    calendar_date: InstantLike,
    period: str,
    events: Iterable[Event],
    first_day_of_week: int = SUNDAY,
) -> list[Event]:
    """Events in the year/month/week/day containing calendar_date."""
    day = to_instant(calendar_date)
    return filter_events_in_period(
        events,
        start_of(day, period, first_day_of_week),
        end_of(day, period, first_day_of_week),
    )


def get_badge_total(events: Iterable[Event]) -> int:
    """Number of events that count towards a cell's badge."""
    return sum(1 for event in events if event.increments_badge_total is not False)
