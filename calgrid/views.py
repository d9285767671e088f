"""
View model generators for the year, month, week and day views.

CalendarHelper turns a collection of events and a reference date into
the cells and positioned events a calendar widget renders. Every call
recomputes its view from scratch; nothing is cached between calls.
"""

from datetime import datetime, timedelta
from typing import Callable, Iterable, Optional

from .cells import MonthCell, WeekDay, WeekView, YearCell
from .config import Config
from .dates import (
    InstantLike, add_months, diff_days, end_of, is_same_day, is_weekend,
    start_of, to_instant,
)
from .day_layout import DayLayout, get_day_view_height
from .debug import debug_print
from .event import Event, ViewEvent
from .formatting import DateFormatter, FormatFunc
from .periods import filter_events_in_period, get_badge_total, occurrence_bounds
from .timezone_utils import now_local

# Called as cell_modifier(calendar_cell=cell); may modify the cell in place
CellModifier = Callable[..., None]


class CalendarHelper:
    """
    Builds calendar view models.

    Args:
        config: Display settings; defaults to Config().
        formatter: Callable (date, spec) -> str for labels. Defaults to a
            DateFormatter of the configured kind.
        clock: Returns the current local time; used for today/past/future.
            Defaults to now in the system timezone, or in the zone given
            to timezone_utils.set_timezone.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        formatter: Optional[FormatFunc] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config or Config()
        self.formatter = formatter or DateFormatter(
            self.config.date_formatter, self.config.localization
        )
        self.clock = clock or now_local

    # ==================== Helpers ====================

    @property
    def first_day_of_week(self) -> int:
        return self.config.localization.first_day_of_week

    def format_date(self, value: InstantLike, spec: str) -> str:
        return self.formatter(to_instant(value), spec)

    def _start_of(self, value: datetime, unit: str) -> datetime:
        return start_of(value, unit, self.first_day_of_week)

    def _end_of(self, value: datetime, unit: str) -> datetime:
        return end_of(value, unit, self.first_day_of_week)

    def _today(self) -> datetime:
        return self._start_of(self.clock(), 'day')

    @staticmethod
    def _modify(cell_modifier: Optional[CellModifier], cell):
        if cell_modifier is not None:
            cell_modifier(calendar_cell=cell)

    # ==================== Views ====================

    def get_week_day_names(self) -> list[str]:
        """Labels for the seven weekday columns, starting at the first day of week."""
        week_start = self._start_of(self.clock(), 'week')
        week_day_format = self.config.date_formats.week_day
        return [
            self.format_date(week_start + timedelta(days=offset), week_day_format)
            for offset in range(7)
        ]

    def get_year_view(
        self,
        events: Iterable[Event],
        current_day: InstantLike,
        cell_modifier: Optional[CellModifier] = None,
    ) -> list[YearCell]:
        """Twelve month cells for the year containing current_day."""
        day = to_instant(current_day)
        year_start = self._start_of(day, 'year')
        events_in_year = filter_events_in_period(events, year_start, self._end_of(day, 'year'))
        this_month = self._start_of(self.clock(), 'month')

        view = []
        for count in range(12):
            month_start = add_months(year_start, count)
            month_events = filter_events_in_period(
                events_in_year, month_start, self._end_of(month_start, 'month')
            )
            cell = YearCell(
                label=self.format_date(month_start, self.config.date_formats.month),
                date=month_start,
                is_today=month_start == this_month,
                events=month_events,
                badge_total=get_badge_total(month_events),
            )
            self._modify(cell_modifier, cell)
            view.append(cell)

        debug_print("VIEWS", f"Year view {year_start.year}: {len(events_in_year)} events")
        return view

    def get_month_view(
        self,
        events: Iterable[Event],
        current_day: InstantLike,
        cell_modifier: Optional[CellModifier] = None,
    ) -> list[MonthCell]:
        """
        Day cells for the whole weeks covering the month of current_day.

        With display_all_month_events off, the leading and trailing days
        from neighbouring months carry no events.
        """
        reference = to_instant(current_day)
        month_start = self._start_of(reference, 'month')
        month_end = self._end_of(reference, 'month')
        day = self._start_of(month_start, 'week')
        end_of_month_view = self._end_of(month_end, 'week')
        show_all = self.config.display_all_month_events

        if show_all:
            events_in_period = filter_events_in_period(events, day, end_of_month_view)
        else:
            events_in_period = filter_events_in_period(events, month_start, month_end)

        today = self._today()
        view = []
        while day < end_of_month_view:
            in_month = day.month == reference.month
            day_events = []
            if in_month or show_all:
                day_events = filter_events_in_period(events_in_period, day, self._end_of(day, 'day'))

            cell = MonthCell(
                label=day.day,
                date=day,
                in_month=in_month,
                is_past=today > day,
                is_today=today == day,
                is_future=today < day,
                is_weekend=is_weekend(day),
                events=day_events,
                badge_total=get_badge_total(day_events),
            )
            self._modify(cell_modifier, cell)
            view.append(cell)
            day += timedelta(days=1)

        debug_print(
            "VIEWS",
            f"Month view {month_start:%Y-%m}: {len(view)} cells, {len(events_in_period)} events",
        )
        return view

    def get_week_view(
        self,
        events: Iterable[Event],
        current_day: InstantLike,
        filter_one_day_events: bool = False,
    ) -> WeekView:
        """
        Seven day headers plus the week's events with day_offset/day_span.

        Offsets and spans are clipped to the week. With filter_one_day_events
        set, events starting and ending on the same day are left out.
        """
        reference = to_instant(current_day)
        week_start = self._start_of(reference, 'week')
        week_end = self._end_of(reference, 'week')
        today = self._today()
        formats = self.config.date_formats

        days = []
        for offset in range(7):
            day = week_start + timedelta(days=offset)
            days.append(WeekDay(
                week_day_label=self.format_date(day, formats.week_day),
                day_label=self.format_date(day, formats.day),
                date=day,
                is_past=day < today,
                is_today=day == today,
                is_future=day > today,
                is_weekend=is_weekend(day),
            ))

        if filter_one_day_events:
            events = [
                event for event in events
                if not is_same_day(event.starts_at, event.end_or_start)
            ]

        week_view_start = self._start_of(week_start, 'day')
        week_view_end = self._start_of(week_end, 'day')
        view_events = []
        for event in filter_events_in_period(events, week_start, week_end):
            starts_at, ends_at = occurrence_bounds(event, week_start)
            event_start = self._start_of(starts_at, 'day')
            event_end = self._start_of(ends_at or starts_at, 'day')

            offset = max(0, diff_days(event_start, week_view_start))
            event_end = min(event_end, week_view_end)
            event_start = max(event_start, week_view_start)

            view_events.append(ViewEvent(
                event=event,
                starts_at=starts_at,
                ends_at=ends_at,
                day_span=diff_days(event_end, event_start) + 1,
                day_offset=offset,
            ))

        return WeekView(days=days, events=view_events)

    def get_day_view(
        self,
        events: Iterable[Event],
        current_day: InstantLike,
        day_view_start: Optional[str] = None,
        day_view_end: Optional[str] = None,
        day_view_split: Optional[int] = None,
        is_week_view_with_times: bool = False,
    ) -> list[ViewEvent]:
        """Positioned, column-packed events for the time grid of one day."""
        day_view = self.config.day_view
        layout = DayLayout(
            current_day,
            day_view_start or day_view.start,
            day_view_end or day_view.end,
            day_view_split or day_view.split,
            week_mode=is_week_view_with_times,
        )
        return layout.layout(events)

    def get_week_view_with_times(
        self,
        events: Iterable[Event],
        current_day: InstantLike,
        day_view_start: Optional[str] = None,
        day_view_end: Optional[str] = None,
        day_view_split: Optional[int] = None,
    ) -> WeekView:
        """
        Week view whose events are laid out on a time grid per day.

        Only events starting and ending on the same day are kept; each
        one carries its day's column as day_offset with a day_span of 1.
        """
        week_view = self.get_week_view(events, current_day, False)

        positioned = []
        for index, day in enumerate(week_view.days):
            day_events = [
                view_event.event for view_event in week_view.events
                if is_same_day(view_event.starts_at, day.date)
                and is_same_day(view_event.end_or_start, day.date)
            ]
            for view_event in self.get_day_view(
                day_events, day.date, day_view_start, day_view_end, day_view_split, True
            ):
                view_event.day_offset = index
                view_event.day_span = 1
                positioned.append(view_event)

        return WeekView(days=week_view.days, events=positioned)

    def get_day_view_height(
        self,
        day_view_start: Optional[str] = None,
        day_view_end: Optional[str] = None,
        day_view_split: Optional[int] = None,
    ) -> float:
        day_view = self.config.day_view
        return get_day_view_height(
            day_view_start or day_view.start,
            day_view_end or day_view.end,
            day_view_split or day_view.split,
        )
