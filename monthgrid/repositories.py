"""
Defines the repository protocols the month grid depends on.
"""

from datetime import datetime
from typing import Dict, Iterator, List, Protocol, runtime_checkable

from .domain import CalendarEvent, GridConfiguration


@runtime_checkable
class EventStore(Protocol):
    """
    Protocol for the keyed collection of calendar events.

    The store is authoritative for the events it holds. Iteration order is
    insertion order, which the layout engine uses to break ties.
    """

    def add(self, event_id: str, event: CalendarEvent) -> None:
        """
        Adds an event under ``event_id``.

        Raises DuplicateIdError if the id is already present.
        """
        ...

    def remove(self, event_id: str) -> CalendarEvent:
        """
        Removes and returns the event stored under ``event_id``.

        Raises NotFoundError if the id is absent.
        """
        ...

    def get(self, event_id: str) -> CalendarEvent:
        """Returns the event for ``event_id`` or raises NotFoundError."""
        ...

    def all(self) -> List[CalendarEvent]:
        """Returns every event in insertion order."""
        ...

    def snapshot(self) -> Dict[str, CalendarEvent]:
        """Returns an insertion-ordered copy of the id to event mapping."""
        ...

    def __len__(self) -> int: ...

    def __contains__(self, event_id: object) -> bool: ...

    def __iter__(self) -> Iterator[str]: ...


@runtime_checkable
class Clock(Protocol):
    """Protocol for the source of "now"."""

    def now(self) -> datetime:
        """Returns the current, timezone-aware instant."""
        ...


@runtime_checkable
class GridConfigurationRepository(Protocol):
    """
    Protocol for a repository that supplies grid display configuration.

    Keeps configuration sources (YAML files, fixed values in tests) apart
    from the layout logic.
    """

    def get_configuration(self) -> GridConfiguration:
        """Returns the configuration to render the grid with."""
        ...
