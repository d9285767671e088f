"""
Debug output for Calgrid.

Messages go to stderr prefixed with a timestamp and the component name.
Output is off by default and switched on by the CLI's --debug flag.
"""

import sys
from datetime import datetime

_enabled: bool = False


def set_debug(enabled: bool):
    """Enable or disable debug output."""
    global _enabled
    _enabled = enabled


def debug_print(component: str, msg: str) -> None:
    if not _enabled:
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {component}: {msg}", file=sys.stderr)
