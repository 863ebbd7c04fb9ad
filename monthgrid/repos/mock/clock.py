"""
Fixed clock for tests and reproducible demos.
"""

from datetime import datetime, timedelta

from monthgrid.repositories import Clock
from monthgrid import timeutil


class FixedClock(Clock):
    """Clock that always reports the same instant until advanced."""

    def __init__(self, now: datetime):
        self._now = timeutil.instant(now)

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        self._now = self._now + delta

    def set(self, now: datetime) -> None:
        self._now = timeutil.instant(now)
