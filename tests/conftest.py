"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from calgrid import CalendarHelper, Config, Event  # noqa: E402

# Wednesday
NOW = datetime(2021, 6, 2, 10, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def helper():
    """Helper with default config and a fixed clock."""
    return CalendarHelper(Config(), clock=lambda: NOW)


@pytest.fixture
def overlapping_events():
    """Two events on 2021-06-01 overlapping between 09:30 and 10:00."""
    return [
        Event(id=1, starts_at=datetime(2021, 6, 1, 9, 0), ends_at=datetime(2021, 6, 1, 10, 0)),
        Event(id=2, starts_at=datetime(2021, 6, 1, 9, 30), ends_at=datetime(2021, 6, 1, 10, 30)),
    ]


@pytest.fixture
def sample_events():
    """A mix of single-day, multi-day and recurring events around June 2021."""
    return [
        Event(id="standup", starts_at=datetime(2021, 6, 2, 9, 0), ends_at=datetime(2021, 6, 2, 9, 15)),
        Event(id="offsite", starts_at=datetime(2021, 5, 31, 8, 0), ends_at=datetime(2021, 6, 2, 17, 0)),
        Event(id="trip", starts_at=datetime(2021, 6, 4, 12, 0), ends_at=datetime(2021, 6, 9, 12, 0)),
        Event(id="birthday", starts_at=datetime(2015, 6, 10, 0, 0), recurs_on="year"),
        Event(id="rent", starts_at=datetime(2020, 1, 15, 0, 0), recurs_on="month",
              increments_badge_total=False),
        Event(id="july", starts_at=datetime(2021, 7, 2, 10, 0), ends_at=datetime(2021, 7, 2, 11, 0)),
    ]
