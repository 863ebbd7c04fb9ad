"""
Loads calendar events from a YAML file into an event store.
"""

import logging
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import ValidationError

from monthgrid.domain import CalendarEvent
from monthgrid.errors import ConfigurationError, InvalidIntervalError
from monthgrid.repositories import EventStore

logger = logging.getLogger(__name__)


def read_events_from_yaml(path: Union[str, Path]) -> List[CalendarEvent]:
    """
    Parse an events file.

    The file holds an ``events`` list whose entries carry ``id``,
    ``title``, ``start`` and ``end`` (ISO 8601)::

        events:
          - id: offsite
            title: Team Offsite
            start: 2024-03-11T09:00:00+01:00
            end: 2024-03-13T17:00:00+01:00

    Raises:
        ConfigurationError: if the file cannot be read or an entry is
            malformed.
        InvalidIntervalError: if an entry ends before it starts.
    """
    events_path = Path(path).expanduser()
    try:
        with open(events_path, "r") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"Cannot read events file {events_path}: {e}"
        ) from e

    if not data:
        return []
    if not isinstance(data, dict) or not isinstance(
        data.get("events", []), list
    ):
        raise ConfigurationError(
            f"Events file must contain an 'events' list: {events_path}"
        )

    events = []
    for index, entry in enumerate(data.get("events", [])):
        if not isinstance(entry, dict):
            raise ConfigurationError(
                f"Event entry {index} in {events_path} is not a mapping"
            )
        try:
            events.append(
                CalendarEvent.model_validate(
                    {
                        "event_id": str(entry.get("id", "")),
                        "title": entry.get("title", ""),
                        "interval": {
                            "start": entry.get("start"),
                            "end": entry.get("end"),
                        },
                    }
                )
            )
        except InvalidIntervalError:
            logger.error(
                f"Event entry {index} in {events_path} ends before it starts"
            )
            raise
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid event entry {index} in {events_path}: {e}"
            ) from e

    logger.info(f"Read {len(events)} events from {events_path}")
    return events


def load_events_from_yaml(
    path: Union[str, Path], store: EventStore
) -> int:
    """
    Add every event from ``path`` to ``store``.

    The whole file is parsed before the store is touched, and duplicate
    ids (within the file or against the store) are rejected up front, so
    a failure leaves the store unchanged.
    """
    events = read_events_from_yaml(path)
    seen = set()
    for event in events:
        if event.event_id in store or event.event_id in seen:
            raise ConfigurationError(
                f"Duplicate event id '{event.event_id}' in {path}"
            )
        seen.add(event.event_id)
    for event in events:
        store.add(event.event_id, event)
    return len(events)
