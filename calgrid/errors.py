"""
Exceptions raised by Calgrid.
"""


class CalgridError(Exception):
    """Base class for all Calgrid errors."""


class InvalidRecurrenceError(CalgridError, ValueError):
    """An event's recurs_on value is set but is neither 'year' nor 'month'."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid value ({value}) given for recurs on. Can only be year or month."
        )
