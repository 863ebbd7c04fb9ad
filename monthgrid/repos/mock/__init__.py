"""Mock implementations of month grid repositories."""

from .calendar_config import MockGridConfigurationRepository
from .clock import FixedClock
from .event_store import MockEventStore

__all__ = [
    "MockGridConfigurationRepository",
    "FixedClock",
    "MockEventStore",
]
