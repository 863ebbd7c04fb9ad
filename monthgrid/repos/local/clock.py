"""
System clock implementation of the Clock protocol.
"""

from datetime import datetime

import pendulum

from monthgrid.repositories import Clock
from monthgrid import timeutil


class SystemClock(Clock):
    """Reads the wall clock in a fixed timezone."""

    def __init__(self, timezone: str = timeutil.UTC):
        self.timezone = timezone

    def now(self) -> datetime:
        return pendulum.now(self.timezone)
