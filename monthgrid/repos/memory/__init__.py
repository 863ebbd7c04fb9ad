"""In-memory implementations of month grid repositories."""

from .event_store import InMemoryEventStore

__all__ = [
    "InMemoryEventStore",
]
