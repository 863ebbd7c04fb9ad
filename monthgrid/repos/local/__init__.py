"""Local implementations of month grid repositories."""

from .calendar_config import LocalGridConfigurationRepository
from .clock import SystemClock
from .event_file import load_events_from_yaml, read_events_from_yaml

__all__ = [
    "LocalGridConfigurationRepository",
    "SystemClock",
    "load_events_from_yaml",
    "read_events_from_yaml",
]
