"""
Timezone utilities for Calgrid.

All view computations run on naive datetimes in local wall time.
Timezone-aware input is converted to the configured local timezone
and stripped of its tzinfo before any comparison takes place. Until a
timezone is configured, the system timezone is used.
"""

from datetime import datetime
import time as _time
from typing import Optional

import pytz


# None means the system timezone - can be overridden by config
_local_timezone_name: Optional[str] = None


def set_timezone(timezone_name: Optional[str]):
    """Set the local timezone used for aware input and for 'now'."""
    global _local_timezone_name
    _local_timezone_name = timezone_name


def _system_timezone():
    try:
        return pytz.timezone(_time.tzname[0])
    except pytz.UnknownTimeZoneError:
        # Last resort: calculate offset and use fixed offset timezone
        is_dst = _time.localtime().tm_isdst
        if is_dst:
            offset_seconds = -_time.altzone
        else:
            offset_seconds = -_time.timezone
        return pytz.FixedOffset(offset_seconds // 60)


def get_local_timezone():
    """
    Get the local timezone as a pytz timezone object.

    Returns:
        pytz timezone object for the configured local timezone, or the
        system timezone when none is configured or the name is unknown.
    """
    if _local_timezone_name is None:
        return _system_timezone()
    try:
        return pytz.timezone(_local_timezone_name)
    except pytz.UnknownTimeZoneError:
        return _system_timezone()


def to_local_naive(dt: datetime) -> datetime:
    """
    Convert a datetime to a naive local datetime.

    Args:
        dt: A datetime object, naive (already local) or timezone-aware.

    Returns:
        A naive datetime (tzinfo=None) representing local time.
    """
    if dt.tzinfo is not None:
        local_dt = dt.astimezone(get_local_timezone())
        return local_dt.replace(tzinfo=None)
    return dt


def now_local() -> datetime:
    """Current time as a naive local datetime."""
    return to_local_naive(datetime.now(pytz.UTC))
