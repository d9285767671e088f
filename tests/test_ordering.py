"""Tests for calgrid/ordering.py."""
from datetime import datetime

from calgrid import Event, events_comparer, get_crossings_count
from calgrid.ordering import sort_events


def _event(id, start_hour, end_hour=None):
    ends_at = datetime(2021, 6, 1, end_hour) if end_hour is not None else None
    return Event(id=id, starts_at=datetime(2021, 6, 1, start_hour), ends_at=ends_at)


class TestEventsComparer:

    def test_earlier_start_first(self):
        assert events_comparer(_event(1, 9, 10), _event(2, 11, 12)) == -1
        assert events_comparer(_event(2, 11, 12), _event(1, 9, 10)) == 1

    def test_equal_start_longer_first(self):
        assert events_comparer(_event(1, 9, 12), _event(2, 9, 10)) == -1
        assert events_comparer(_event(2, 9, 10), _event(1, 9, 12)) == 1

    def test_identical_times_are_equal(self):
        assert events_comparer(_event(1, 9, 10), _event(2, 9, 10)) == 0

    def test_missing_end_counts_as_start(self):
        assert events_comparer(_event(1, 9), _event(2, 9, 10)) == 1

    def test_sort_events_is_stable(self):
        events = [_event("b", 9, 10), _event("late", 14, 15), _event("a", 9, 10), _event("long", 9, 13)]
        assert [e.id for e in sort_events(events)] == ["long", "b", "a", "late"]


class TestCrossingsCount:

    def test_counts_overlapping_events(self):
        event = _event(1, 9, 12)
        day_events = [
            event,
            _event(2, 10, 11),   # inside
            _event(3, 8, 10),    # ends inside
            _event(4, 11, 13),   # starts inside
            _event(5, 8, 13),    # contains
            _event(6, 13, 14),   # after
        ]
        assert get_crossings_count(event, day_events) == 4

    def test_same_start_or_end_counts(self):
        event = _event(1, 9, 12)
        assert get_crossings_count(event, [_event(2, 9, 10)]) == 1
        assert get_crossings_count(event, [_event(3, 10, 12)]) == 1

    def test_touching_events_do_not_cross(self):
        event = _event(1, 9, 10)
        assert get_crossings_count(event, [event, _event(2, 10, 11), _event(3, 8, 9)]) == 0

    def test_event_is_not_counted_against_itself(self):
        event = _event(1, 9, 10)
        # Equal but distinct object still counts
        twin = _event(1, 9, 10)
        assert get_crossings_count(event, [event]) == 0
        assert get_crossings_count(event, [event, twin]) == 1
