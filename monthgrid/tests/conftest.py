import pytest
from datetime import datetime

from monthgrid.repos.memory.event_store import InMemoryEventStore
from monthgrid.repos.mock.clock import FixedClock
from monthgrid.tests.factories import dt


@pytest.fixture
def march_2024() -> datetime:
    """Cursor for March 2024 (the 1st is a Friday)."""
    return dt(1)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at noon on 15 March 2024 UTC."""
    return FixedClock(dt(15, 12))


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()
