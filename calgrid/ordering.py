"""
Event ordering and overlap counting for the time grid.
"""

from functools import cmp_to_key
from typing import Iterable


def events_comparer(a, b) -> int:
    """
    Order by start; for equal starts the event ending later comes first.

    Works on anything with starts_at/ends_at (Event or ViewEvent). A missing
    end counts as the start.
    """
    if a.starts_at < b.starts_at:
        return -1
    if a.starts_at > b.starts_at:
        return 1

    a_end = a.ends_at or a.starts_at
    b_end = b.ends_at or b.starts_at
    if a_end == b_end:
        return 0
    if a_end > b_end:
        return -1
    return 1


def sort_events(events: Iterable) -> list:
    """Stable sort with events_comparer."""
    return sorted(events, key=cmp_to_key(events_comparer))


def get_crossings_count(event, day_events: Iterable) -> int:
    """
    Count the other events whose time range overlaps event's.

    An event is never counted against itself (identity check).
    """
    start = event.starts_at
    end = event.ends_at or event.starts_at

    def crosses(other) -> bool:
        other_start = other.starts_at
        other_end = other.ends_at or other.starts_at
        return (
            start < other_start < end
            or other_start == start
            or start < other_end < end
            or other_end == end
            or (other_start < start and other_end > end)
        )

    return sum(1 for other in day_events if other is not event and crosses(other))
