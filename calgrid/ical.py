"""
Read events from iCalendar (.ics) data.

Each VEVENT becomes an Event. A plain yearly or monthly RRULE (no UNTIL,
COUNT, BY* parts or INTERVAL above 1) maps onto the year/month recurrence the
views understand; any other rule is shown as its first occurrence only.
"""

from datetime import date, datetime
from typing import Optional, Union

from icalendar import Calendar as ICalCalendar, Event as ICalEvent

from .debug import debug_print
from .event import Event, Recurrence

_FREQUENCIES = {
    'YEARLY': Recurrence.YEAR,
    'MONTHLY': Recurrence.MONTH,
}

# Rule parts that leave a yearly/monthly rule equal to plain re-anchoring
_PLAIN_RULE_PARTS = {'FREQ', 'WKST', 'INTERVAL'}


def parse_icalendar(ical_text: Union[str, bytes]) -> ICalCalendar:
    """
    Parse iCalendar text into an icalendar.Calendar object.

    Args:
        ical_text: Raw iCalendar text (VCALENDAR)

    Returns:
        Parsed Calendar object
    """
    return ICalCalendar.from_ical(ical_text)


def _recurrence_of(component: ICalEvent, uid: str) -> Optional[Recurrence]:
    rrule = component.get('RRULE')
    if rrule is None:
        return None
    freq = rrule.get('FREQ', [None])[0]
    recurrence = _FREQUENCIES.get(str(freq).upper()) if freq else None
    if recurrence is None:
        debug_print("ICAL", f"Unsupported RRULE frequency {freq} for {uid}, showing first occurrence")
        return None
    extra = set(rrule) - _PLAIN_RULE_PARTS
    interval = rrule.get('INTERVAL', [1])[0]
    if extra or int(interval) != 1:
        debug_print("ICAL", f"Unsupported RRULE {rrule.to_ical().decode()} for {uid}, showing first occurrence")
        return None
    return recurrence


def _value_of(component: ICalEvent, name: str) -> Optional[Union[datetime, date]]:
    prop = component.get(name)
    return prop.dt if prop is not None else None


def event_from_component(component: ICalEvent) -> Event:
    """Convert one VEVENT component to an Event."""
    uid = str(component.get('UID', ''))
    summary = component.get('SUMMARY')
    transparent = str(component.get('TRANSP', '')).upper() == 'TRANSPARENT'
    return Event(
        id=uid,
        starts_at=_value_of(component, 'DTSTART'),
        ends_at=_value_of(component, 'DTEND'),
        recurs_on=_recurrence_of(component, uid),
        increments_badge_total=not transparent,
        title=str(summary) if summary else '',
    )


def events_from_ical(ical_text: Union[str, bytes]) -> list[Event]:
    """All VEVENTs of a VCALENDAR document that have a start, in file order."""
    events = []
    for component in parse_icalendar(ical_text).walk('VEVENT'):
        if component.get('DTSTART') is None:
            debug_print("ICAL", f"Skipping event without DTSTART: {component.get('UID')}")
            continue
        events.append(event_from_component(component))
    debug_print("ICAL", f"Read {len(events)} events")
    return events
