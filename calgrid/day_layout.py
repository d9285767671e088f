"""
Time grid layout for a single day.

Events are positioned vertically by time and packed into columns
("buckets") so that no two events in the same column overlap. The same
engine lays out each day of the week view with times; there the column
width is a percentage of the day column instead of a fixed pixel width.
"""

from datetime import datetime, timedelta
from typing import Iterable, Optional

from .dates import InstantLike, diff_minutes, end_of, parse_time_of_day, start_of, to_instant
from .debug import debug_print
from .event import Event, ViewEvent
from .ordering import get_crossings_count, sort_events
from .periods import event_is_in_period, filter_events_in_period, occurrence_bounds

DEFAULT_DAY_VIEW_START = "00:00"
DEFAULT_DAY_VIEW_END = "23:00"
DEFAULT_DAY_VIEW_SPLIT = 30

SLOT_HEIGHT = 30            # pixels per split slot
DEFAULT_EVENT_HEIGHT = 30   # events without an end get one slot
EVENT_TOP_OFFSET = 2        # grid border, pixels

DAY_BUCKET_WIDTH = 150              # pixels
WEEK_BUCKET_WIDTH = 100 / 7         # percent of the week


def get_hour_height(day_view_split: int) -> float:
    """Pixel height of one hour for the given split (minutes per slot)."""
    return (60 / day_view_split) * SLOT_HEIGHT


def get_day_view_height(
    day_view_start: Optional[str] = None,
    day_view_end: Optional[str] = None,
    day_view_split: int = DEFAULT_DAY_VIEW_SPLIT,
) -> float:
    """Total pixel height of the time grid including its border."""
    start_hour, start_minute = parse_time_of_day(day_view_start, DEFAULT_DAY_VIEW_START)
    end_hour, end_minute = parse_time_of_day(day_view_end, DEFAULT_DAY_VIEW_END)
    minutes = (end_hour * 60 + end_minute) - (start_hour * 60 + start_minute)
    hours = int(minutes / 60)
    return (hours + 1) * get_hour_height(day_view_split) + EVENT_TOP_OFFSET


def _events_overlap(a: ViewEvent, b: ViewEvent) -> bool:
    """Check overlap both ways round with the period matcher."""
    return (
        event_is_in_period(a, b.starts_at, b.end_or_start)
        or event_is_in_period(b, a.starts_at, a.end_or_start)
    )


class DayLayout:
    """
    Lays out the events of one day on a time grid.

    The visible window runs from the start hour to the end of the end hour,
    so the default 00:00-23:00 window covers the whole day.
    """

    def __init__(
        self,
        day: InstantLike,
        day_view_start: Optional[str] = None,
        day_view_end: Optional[str] = None,
        day_view_split: int = DEFAULT_DAY_VIEW_SPLIT,
        week_mode: bool = False,
    ):
        self.day: datetime = start_of(to_instant(day), 'day')
        start_hour, _ = parse_time_of_day(day_view_start, DEFAULT_DAY_VIEW_START)
        end_hour, _ = parse_time_of_day(day_view_end, DEFAULT_DAY_VIEW_END)

        self.week_mode = week_mode
        self.bucket_width = WEEK_BUCKET_WIDTH if week_mode else DAY_BUCKET_WIDTH
        self.hour_height = get_hour_height(day_view_split)
        self.calendar_start = self.day + timedelta(hours=start_hour)
        self.calendar_end = self.day + timedelta(hours=end_hour)
        self.calendar_height = (end_hour - start_hour + 1) * self.hour_height

    def layout(self, events: Iterable[Event]) -> list[ViewEvent]:
        """
        Position the day's events.

        Returns new ViewEvents sorted by start (longer first on ties) with
        top, height and left set; width is set in week mode only. Events
        entirely outside the visible window are left out.
        """
        in_day = filter_events_in_period(events, self.day, end_of(self.day, 'day'))
        day_events = [ViewEvent(event, *occurrence_bounds(event, self.day)) for event in in_day]

        placed = [ve for ve in sort_events(day_events) if self._place_vertically(ve)]
        buckets = self._pack(placed)

        if self.week_mode:
            self._share_width(buckets, day_events)

        debug_print(
            "LAYOUT",
            f"{self.day.date()}: {len(placed)} of {len(day_events)} events in {len(buckets)} columns",
        )
        return placed

    def _place_vertically(self, view_event: ViewEvent) -> bool:
        """Set top/height. Returns False if the event has nothing visible."""
        start = view_event.starts_at
        end = view_event.end_or_start
        minute_height = self.hour_height / 60

        if start < self.calendar_start:
            top = 0
        else:
            minutes = diff_minutes(start_of(start, 'minute'), start_of(self.calendar_start, 'minute'))
            top = minutes * minute_height - EVENT_TOP_OFFSET

        if end > self.calendar_end:
            # Runs past the window: fill to the bottom
            height = self.calendar_height - top
        elif view_event.ends_at is None:
            height = DEFAULT_EVENT_HEIGHT
        else:
            height = diff_minutes(end, max(start, self.calendar_start)) * minute_height

        if top - height > self.calendar_height:
            height = 0

        view_event.top = top
        view_event.height = height
        view_event.left = 0
        return height > 0

    def _pack(self, view_events: list[ViewEvent]) -> list[list[ViewEvent]]:
        """
        Greedy first-fit column assignment in the given order.

        Each event goes into the first column holding nothing it overlaps,
        or into a new column on the right.
        """
        buckets: list[list[ViewEvent]] = []
        for view_event in view_events:
            for index, bucket in enumerate(buckets):
                if not any(_events_overlap(view_event, item) for item in bucket):
                    view_event.left = index * self.bucket_width
                    bucket.append(view_event)
                    break
            else:
                view_event.left = len(buckets) * self.bucket_width
                buckets.append([view_event])
        return buckets

    def _share_width(self, buckets: list[list[ViewEvent]], day_events: list[ViewEvent]):
        """Week mode: split the day column between the buckets."""
        total = len(buckets)
        for index, bucket in enumerate(buckets):
            for view_event in bucket:
                if get_crossings_count(view_event, day_events) > 0:
                    view_event.width = self.bucket_width / total
                else:
                    view_event.width = self.bucket_width
                view_event.left = index * self.bucket_width / total
