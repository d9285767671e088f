"""
Event types consumed and produced by the view generators.

Event is the caller's immutable input. ViewEvent is the per-view result:
it keeps a non-owning reference to its source Event next to the occurrence
shown in the view and the layout fields computed for it, so the caller's
events are never modified.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from .dates import InstantLike, to_instant
from .errors import InvalidRecurrenceError


class Recurrence(Enum):
    YEAR = "year"
    MONTH = "month"


def parse_recurrence(value: Union[Recurrence, str, None]) -> Optional[Recurrence]:
    """
    Read an event's recurs_on value.

    Returns None for non-recurring events and raises InvalidRecurrenceError
    for anything other than year or month.
    """
    if value is None:
        return None
    if isinstance(value, Recurrence):
        return value
    try:
        return Recurrence(value)
    except ValueError:
        raise InvalidRecurrenceError(value) from None


@dataclass(frozen=True)
class Event:
    """
    A timed calendar event.

    ends_at defaults to starts_at wherever an end is needed. recurs_on is
    only checked when the event is matched against a period.
    """
    id: Any
    starts_at: InstantLike
    ends_at: Optional[InstantLike] = None
    recurs_on: Union[Recurrence, str, None] = None
    increments_badge_total: bool = True
    # Passed through untouched for the renderer
    title: str = ""
    meta: dict = field(default_factory=dict, compare=False)

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, 'starts_at', to_instant(self.starts_at))
        object.__setattr__(self, 'ends_at', to_instant(self.ends_at))

    @property
    def end_or_start(self) -> datetime:
        return self.ends_at or self.starts_at

    def __repr__(self):
        return f"Event(id={self.id!r}, starts_at={self.starts_at}, ends_at={self.ends_at})"


@dataclass
class ViewEvent:
    """
    An event as placed in a specific view.

    starts_at/ends_at are the occurrence shown in the view; for recurring
    events they differ from the source event's own times. Layout fields stay
    None unless the producing view sets them.
    """
    event: Event
    starts_at: datetime
    ends_at: Optional[datetime] = None

    # Week grid placement (whole days)
    day_span: Optional[int] = None
    day_offset: Optional[int] = None

    # Time grid placement
    top: Optional[float] = None
    height: Optional[float] = None
    left: Optional[float] = None
    width: Optional[float] = None

    @property
    def id(self) -> Any:
        return self.event.id

    @property
    def title(self) -> str:
        return self.event.title

    @property
    def end_or_start(self) -> datetime:
        return self.ends_at or self.starts_at
