"""
In-memory implementation of the EventStore protocol.
"""

import logging
from typing import Dict, Iterator, List

from monthgrid.domain import CalendarEvent
from monthgrid.errors import DuplicateIdError, NotFoundError
from monthgrid.repositories import EventStore

logger = logging.getLogger(__name__)


class InMemoryEventStore(EventStore):
    """
    Event store backed by an insertion-ordered dict.

    Every mutation validates before it touches the mapping, so a failed
    ``add`` or ``remove`` leaves the store unchanged.
    """

    def __init__(self) -> None:
        self._events: Dict[str, CalendarEvent] = {}

    def add(self, event_id: str, event: CalendarEvent) -> None:
        if event_id in self._events:
            logger.warning(
                "Rejected duplicate event id", extra={"event_id": event_id}
            )
            raise DuplicateIdError(event_id)
        if event.event_id != event_id:
            raise ValueError(
                f"Event id '{event.event_id}' does not match key '{event_id}'"
            )
        self._events[event_id] = event
        logger.debug(
            "Added event",
            extra={"event_id": event_id, "event_count": len(self._events)},
        )

    def remove(self, event_id: str) -> CalendarEvent:
        if event_id not in self._events:
            raise NotFoundError(event_id)
        event = self._events.pop(event_id)
        logger.debug(
            "Removed event",
            extra={"event_id": event_id, "event_count": len(self._events)},
        )
        return event

    def get(self, event_id: str) -> CalendarEvent:
        try:
            return self._events[event_id]
        except KeyError:
            raise NotFoundError(event_id) from None

    def all(self) -> List[CalendarEvent]:
        return list(self._events.values())

    def snapshot(self) -> Dict[str, CalendarEvent]:
        return dict(self._events)

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._events

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._events))
