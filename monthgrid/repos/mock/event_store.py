"""
Mock event store with realistic sample events for demonstration.
"""

import logging
from datetime import datetime
from typing import List, Optional

import pendulum

from monthgrid.domain import CalendarEvent
from monthgrid.repos.memory.event_store import InMemoryEventStore
from monthgrid import timeutil

logger = logging.getLogger(__name__)


class MockEventStore(InMemoryEventStore):
    """
    Event store pre-loaded with a month's worth of sample events placed
    around a reference date.
    """

    def __init__(self, reference: Optional[datetime] = None):
        super().__init__()
        if reference is None:
            reference = pendulum.now(timeutil.UTC)
        for event in self._create_sample_events(reference):
            self.add(event.event_id, event)
        logger.info(
            f"MockEventStore: Seeded {len(self)} sample events",
            extra={"reference": reference.isoformat()},
        )

    def _create_sample_events(
        self, reference: datetime
    ) -> List[CalendarEvent]:
        """Create a realistic set of overlapping sample events."""
        month = timeutil.start_of_month(reference)
        week = timeutil.start_of_week(month.add(days=7))

        return [
            # Week-long conference crossing into the next row
            CalendarEvent.create(
                event_id="conference-001",
                start=week.add(days=3, hours=9),
                end=week.add(days=9, hours=17),
                title="Engineering Conference",
            ),
            # Multi-day offsite sharing days with the conference
            CalendarEvent.create(
                event_id="offsite-001",
                start=week.add(days=4),
                end=week.add(days=6),
                title="Team Offsite",
            ),
            CalendarEvent.create(
                event_id="standup-001",
                start=week.add(days=4, hours=9),
                end=week.add(days=4, hours=9, minutes=15),
                title="Daily Standup",
            ),
            CalendarEvent.create(
                event_id="review-001",
                start=week.add(hours=14),
                end=week.add(hours=15),
                title="Quarterly Review",
            ),
            # Starts before the view and is clipped to it
            CalendarEvent.create(
                event_id="vacation-001",
                start=month.subtract(days=10),
                end=month.add(days=2),
                title="Vacation",
            ),
            CalendarEvent.create(
                event_id="release-001",
                start=month.add(days=20, hours=16),
                end=month.add(days=20, hours=17),
                title="Release Party",
            ),
        ]
