#!/usr/bin/env python3
"""
Calgrid - print calendar view models for the events of an ICS file.

This is the command line entry point.
"""

import sys
import json
import argparse
from dataclasses import asdict
from enum import Enum
from datetime import date, datetime
from pathlib import Path

from calgrid import CalendarHelper, CalgridError, Config
from calgrid.debug import set_debug, debug_print
from calgrid.ical import events_from_ical
from calgrid.timezone_utils import set_timezone

VIEWS = ("year", "month", "week", "week-times", "day")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Calgrid - compute calendar view models from an ICS file"
    )
    parser.add_argument(
        "ics_file",
        type=Path,
        nargs="?",
        help="iCalendar file to read events from (default: no events)"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "--view",
        choices=VIEWS,
        default="month",
        help="View to compute (default: month)"
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Reference date as YYYY-MM-DD (default: today)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    return parser.parse_args(argv)


def load_config(config_path):
    """Load the given config, or the default one if present, else defaults."""
    if config_path is not None:
        return Config.load(config_path)
    default_path = Config.get_default_config_path()
    if default_path.exists():
        return Config.load(default_path)
    debug_print("CLI", f"No config at {default_path}, using defaults")
    return Config()


def _json_default(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Cannot serialize {type(value).__name__}")


def compute_view(helper: CalendarHelper, view: str, events, day):
    if view == "year":
        return [asdict(cell) for cell in helper.get_year_view(events, day)]
    if view == "month":
        return [asdict(cell) for cell in helper.get_month_view(events, day)]
    if view == "week":
        return asdict(helper.get_week_view(events, day))
    if view == "week-times":
        return asdict(helper.get_week_view_with_times(events, day))
    return [asdict(view_event) for view_event in helper.get_day_view(events, day)]


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    set_debug(args.debug)

    # Load configuration
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"\nDefault location: {Config.get_default_config_path()}", file=sys.stderr)
        print("\nExample configuration:", file=sys.stderr)
        print("""
[General]
date_formatter = "strftime"
display_all_month_events = false
timezone = "Europe/Amsterdam"

[DayView]
start = "06:00"
end = "22:00"
split = 30
""", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    if config.timezone:
        set_timezone(config.timezone)

    events = []
    if args.ics_file is not None:
        try:
            events = events_from_ical(args.ics_file.read_bytes())
        except (OSError, ValueError) as e:
            print(f"Error reading {args.ics_file}: {e}", file=sys.stderr)
            return 1

    helper = CalendarHelper(config)
    day = args.date or helper.clock()
    debug_print("CLI", f"Computing {args.view} view for {day} with {len(events)} events")

    try:
        result = compute_view(helper, args.view, events, day)
    except CalgridError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    json.dump(result, sys.stdout, indent=2, default=_json_default)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
