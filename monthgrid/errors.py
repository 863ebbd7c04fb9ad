"""
Exception hierarchy for the month grid.

All errors are local and synchronous: they are raised at the call site
before any state is mutated.
"""


class MonthGridError(Exception):
    """Base class for all month grid errors"""

    pass


class InvalidIntervalError(MonthGridError):
    """Raised when an interval ends before it starts"""

    def __init__(self, start: object, end: object):
        self.start = start
        self.end = end
        super().__init__(
            f"Interval end {end} precedes interval start {start}"
        )


class DuplicateIdError(MonthGridError):
    """Raised when adding an event whose id is already stored"""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event '{event_id}' already exists")


class NotFoundError(MonthGridError, KeyError):
    """Raised when an event id is not present in the store"""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event '{event_id}' not found")

    def __str__(self) -> str:
        return str(self.args[0])


class ConfigurationError(MonthGridError):
    """Raised when grid configuration cannot be loaded or is invalid"""

    pass
