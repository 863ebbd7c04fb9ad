"""Repositories for the month grid."""

from .memory.event_store import InMemoryEventStore

__all__ = [
    "InMemoryEventStore",
]
