"""Tests for calgrid/views.py."""
from datetime import date, datetime

import pytest

from calgrid import CalendarHelper, Config, Event, InvalidRecurrenceError
from calgrid.config import LocalizationConfig
from calgrid.day_layout import DAY_BUCKET_WIDTH, WEEK_BUCKET_WIDTH
from calgrid.formatting import DateFormatter

from conftest import NOW


def iso_formatter(value, spec):
    return value.strftime("%Y-%m-%d")


def _ids(events):
    return [event.id for event in events]


@pytest.fixture
def localized_helper():
    config = Config(date_formatter="localized")
    return CalendarHelper(config, clock=lambda: NOW)


class TestWeekDayNames:

    def test_names_start_on_sunday(self, localized_helper):
        assert localized_helper.get_week_day_names() == [
            "Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"
        ]

    def test_names_follow_first_day_of_week(self):
        config = Config(
            date_formatter="localized",
            localization=LocalizationConfig(first_day_of_week=0),
        )
        helper = CalendarHelper(config, clock=lambda: NOW)
        assert helper.get_week_day_names()[0] == "Mon"
        assert helper.get_week_day_names()[-1] == "Sun"


class TestYearView:

    def test_twelve_months(self, localized_helper, sample_events):
        view = localized_helper.get_year_view(sample_events, date(2021, 6, 2))
        assert len(view) == 12
        assert view[0].label == "January"
        assert view[0].date == datetime(2021, 1, 1)
        assert view[11].date == datetime(2021, 12, 1)

    def test_current_month_is_today(self, helper, sample_events):
        view = helper.get_year_view(sample_events, date(2021, 3, 1))
        assert [cell.is_today for cell in view].index(True) == 5
        assert sum(cell.is_today for cell in view) == 1
        other_year = helper.get_year_view(sample_events, date(2020, 3, 1))
        assert not any(cell.is_today for cell in other_year)

    def test_events_per_month(self, helper, sample_events):
        view = helper.get_year_view(sample_events, date(2021, 6, 2))
        assert _ids(view[4].events) == ["offsite", "rent"]
        assert view[4].badge_total == 1
        assert _ids(view[5].events) == ["standup", "offsite", "trip", "birthday", "rent"]
        assert view[5].badge_total == 4
        assert _ids(view[6].events) == ["rent", "july"]
        assert _ids(view[0].events) == ["rent"]

    def test_cell_modifier_called_for_each_cell(self, localized_helper, sample_events):
        seen = []

        def modifier(calendar_cell):
            seen.append(calendar_cell.date.month)
            calendar_cell.label = calendar_cell.label.upper()

        view = localized_helper.get_year_view(sample_events, date(2021, 6, 2), modifier)
        assert seen == list(range(1, 13))
        assert view[0].label == "JANUARY"


class TestMonthView:

    def test_grid_covers_whole_weeks(self, helper, sample_events):
        view = helper.get_month_view(sample_events, date(2021, 6, 2))
        assert len(view) == 35
        assert view[0].date == datetime(2021, 5, 30)
        assert view[-1].date == datetime(2021, 7, 3)
        assert [cell.label for cell in view[:4]] == [30, 31, 1, 2]

    def test_month_grid_is_multiple_of_seven(self, helper):
        for month in range(1, 13):
            view = helper.get_month_view([], date(2021, month, 15))
            assert len(view) % 7 == 0
            assert view[0].date.weekday() == 6

    def test_day_flags(self, helper):
        view = helper.get_month_view([], date(2021, 6, 2))
        today = [cell for cell in view if cell.is_today]
        assert len(today) == 1
        assert today[0].date == datetime(2021, 6, 2)
        assert view[2].is_past and not view[2].is_today and not view[2].is_future
        assert view[4].is_future
        assert view[0].is_weekend and view[6].is_weekend
        assert not any(cell.is_weekend for cell in view[1:6])
        assert not view[1].in_month
        assert view[2].in_month
        assert not view[-1].in_month

    def test_no_today_outside_displayed_range(self, helper):
        view = helper.get_month_view([], date(2021, 9, 1))
        assert not any(cell.is_today for cell in view)

    def test_events_only_in_month_days(self, helper, sample_events):
        view = helper.get_month_view(sample_events, date(2021, 6, 2))
        by_date = {cell.date.date(): cell for cell in view}
        assert by_date[date(2021, 5, 31)].events == []
        assert _ids(by_date[date(2021, 6, 1)].events) == ["offsite"]
        assert _ids(by_date[date(2021, 6, 2)].events) == ["standup", "offsite"]
        assert by_date[date(2021, 6, 2)].badge_total == 2
        assert _ids(by_date[date(2021, 6, 10)].events) == ["birthday"]
        assert _ids(by_date[date(2021, 6, 15)].events) == ["rent"]
        assert by_date[date(2021, 6, 15)].badge_total == 0
        assert by_date[date(2021, 7, 2)].events == []

    def test_display_all_month_events(self, sample_events):
        helper = CalendarHelper(Config(display_all_month_events=True), clock=lambda: NOW)
        view = helper.get_month_view(sample_events, date(2021, 6, 2))
        by_date = {cell.date.date(): cell for cell in view}
        assert _ids(by_date[date(2021, 5, 31)].events) == ["offsite"]
        assert _ids(by_date[date(2021, 7, 2)].events) == ["july"]

    def test_monday_first_grid(self):
        config = Config(localization=LocalizationConfig(first_day_of_week=0))
        helper = CalendarHelper(config, clock=lambda: NOW)
        view = helper.get_month_view([], date(2021, 6, 2))
        assert view[0].date == datetime(2021, 5, 31)
        assert view[-1].date == datetime(2021, 7, 4)

    def test_cell_modifier_changes_are_kept(self, helper, sample_events):
        def modifier(calendar_cell):
            calendar_cell.events = []
            calendar_cell.badge_total = 99

        view = helper.get_month_view(sample_events, date(2021, 6, 2), modifier)
        assert all(cell.badge_total == 99 for cell in view)
        assert sample_events[0].id == "standup"

    def test_repeatable(self, helper, sample_events):
        first = helper.get_month_view(sample_events, date(2021, 6, 2))
        second = helper.get_month_view(sample_events, date(2021, 6, 2))
        assert first == second


class TestWeekView:

    def test_days(self, sample_events):
        helper = CalendarHelper(formatter=iso_formatter, clock=lambda: NOW)
        view = helper.get_week_view(sample_events, date(2021, 6, 2))
        assert [day.day_label for day in view.days] == [
            "2021-05-30", "2021-05-31", "2021-06-01", "2021-06-02",
            "2021-06-03", "2021-06-04", "2021-06-05",
        ]
        assert [day.is_today for day in view.days].index(True) == 3
        assert view.days[0].is_past and view.days[6].is_future
        assert view.days[0].is_weekend and view.days[6].is_weekend

    def test_offsets_and_spans(self, helper, sample_events):
        view = helper.get_week_view(sample_events, date(2021, 6, 2))
        placed = {ve.id: (ve.day_offset, ve.day_span) for ve in view.events}
        assert placed == {
            "standup": (3, 1),
            "offsite": (1, 3),
            "trip": (5, 2),
        }

    def test_event_spanning_whole_week(self, helper):
        event = Event(id=1, starts_at=datetime(2021, 5, 1), ends_at=datetime(2021, 7, 1))
        view = helper.get_week_view([event], date(2021, 6, 2))
        assert (view.events[0].day_offset, view.events[0].day_span) == (0, 7)
        assert view.events[0].event is event

    def test_span_and_offset_stay_in_week(self, helper, sample_events):
        extra = [
            Event(id="a", starts_at=datetime(2021, 5, 20), ends_at=datetime(2021, 5, 30, 1)),
            Event(id="b", starts_at=datetime(2021, 6, 5, 23), ends_at=datetime(2021, 6, 20)),
            Event(id="c", starts_at=datetime(2021, 6, 5, 23, 59)),
        ]
        view = helper.get_week_view(sample_events + extra, date(2021, 6, 2))
        assert {"a", "b", "c"} <= set(_ids(view.events))
        for view_event in view.events:
            assert 1 <= view_event.day_span <= 7
            assert 0 <= view_event.day_offset <= 7 - view_event.day_span

    def test_filter_one_day_events(self, helper, sample_events):
        view = helper.get_week_view(sample_events, date(2021, 6, 2), filter_one_day_events=True)
        assert _ids(view.events) == ["offsite", "trip"]

    def test_recurring_event_placed_at_occurrence(self, helper):
        event = Event(id="anniversary", starts_at=datetime(2010, 6, 3, 18, 0),
                      ends_at=datetime(2010, 6, 3, 20, 0), recurs_on="year")
        view = helper.get_week_view([event], date(2021, 6, 2))
        assert view.events[0].starts_at == datetime(2021, 6, 3, 18, 0)
        assert (view.events[0].day_offset, view.events[0].day_span) == (4, 1)


class TestDayView:

    def test_uses_configured_hours(self, overlapping_events):
        config = Config()
        config.day_view.start = "08:00"
        helper = CalendarHelper(config, clock=lambda: NOW)
        result = helper.get_day_view(overlapping_events, date(2021, 6, 1))
        assert result[0].top == 58
        assert result[1].left == DAY_BUCKET_WIDTH

    def test_arguments_override_config(self, helper, overlapping_events):
        result = helper.get_day_view(overlapping_events, date(2021, 6, 1), "00:00", "23:00", 30)
        assert [ve.left for ve in result] == [0, DAY_BUCKET_WIDTH]

    def test_day_view_height(self, helper):
        assert helper.get_day_view_height() == 1442
        assert helper.get_day_view_height("06:00", "22:00", 30) == 1022


class TestWeekViewWithTimes:

    def test_lays_out_each_day(self, helper, sample_events, overlapping_events):
        view = helper.get_week_view_with_times(overlapping_events + sample_events, date(2021, 6, 2))
        assert len(view.days) == 7
        placed = {ve.id: ve for ve in view.events}
        assert set(placed) == {1, 2, "standup"}
        assert placed[1].day_offset == 2 and placed[1].day_span == 1
        assert placed[1].width == pytest.approx(WEEK_BUCKET_WIDTH / 2)
        assert placed[2].left == pytest.approx(WEEK_BUCKET_WIDTH / 2)
        assert placed["standup"].day_offset == 3
        assert placed["standup"].width == pytest.approx(WEEK_BUCKET_WIDTH)
        assert _ids(view.events) == [1, 2, "standup"]


class TestInvalidRecurrence:

    @pytest.mark.parametrize("view", ["year", "month", "week", "day", "week_times"])
    def test_every_generator_raises(self, helper, view):
        events = [
            Event(id=1, starts_at=datetime(2021, 6, 1, 9, 0)),
            Event(id=2, starts_at=datetime(2021, 6, 1, 10, 0), recurs_on="week"),
        ]
        day = date(2021, 6, 1)
        calls = {
            "year": lambda: helper.get_year_view(events, day),
            "month": lambda: helper.get_month_view(events, day),
            "week": lambda: helper.get_week_view(events, day),
            "day": lambda: helper.get_day_view(events, day),
            "week_times": lambda: helper.get_week_view_with_times(events, day),
        }
        with pytest.raises(InvalidRecurrenceError):
            calls[view]()


class TestFormatting:

    def test_format_date_accepts_strings(self):
        helper = CalendarHelper(Config(date_formatter="localized"), clock=lambda: NOW)
        assert helper.format_date("2021-06-02", "%a %d %B") == "Wed 02 June"

    def test_custom_formatter(self):
        helper = CalendarHelper(formatter=lambda value, spec: f"{spec}:{value.day}")
        assert helper.format_date(date(2021, 6, 2), "x") == "x:2"

    def test_localized_names(self):
        localization = LocalizationConfig(day_names=["Ma", "Di", "Wo", "Do", "Vr", "Za", "Zo"])
        formatter = DateFormatter("localized", localization)
        assert formatter(datetime(2021, 6, 6), "%A %d") == "Zo 06"
        assert formatter(datetime(2021, 6, 6), "100%% %b") == "100% June"

    def test_unknown_formatter_kind(self):
        with pytest.raises(ValueError):
            DateFormatter("angular")
