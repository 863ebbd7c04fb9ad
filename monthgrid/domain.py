"""
Month grid domain models.

These models describe titled time spans and the derived records produced
for a month view, following the Pydantic v2 patterns used throughout the
project. Value types are frozen; derived records are rebuilt on every
refresh.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, Iterator, List, Optional, Tuple
import logging

import pendulum
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from . import timeutil
from .errors import InvalidIntervalError

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
SUPPORTED_GRID_ROWS = (5, 6)


# --- Intervals ---


class Interval(BaseModel):
    """
    A half-open span of time ``[start, end)``.

    ``start == end`` is allowed; ``end < start`` raises
    ``InvalidIntervalError`` at construction.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime = Field(..., description="Inclusive start instant")
    end: datetime = Field(..., description="Exclusive end instant")

    @field_validator("start", "end")
    @classmethod
    def ensure_timezone_aware(cls, v: datetime) -> datetime:
        """Ensure datetime fields are timezone-aware."""
        if v.tzinfo is None:
            logger.warning(f"Converting naive datetime {v} to UTC")
            return v.replace(tzinfo=timezone.utc)
        return v

    @model_validator(mode="after")
    def end_not_before_start(self) -> "Interval":
        if self.end < self.start:
            raise InvalidIntervalError(self.start, self.end)
        return self

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, value: datetime) -> bool:
        return self.start <= value < self.end

    def overlaps(self, other: "Interval") -> bool:
        """True iff the intervals share time; touching ends do not."""
        return self.start < other.end and other.start < self.end

    def intersection(self, other: "Interval") -> Optional["Interval"]:
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if start >= end:
            return None
        return Interval(start=start, end=end)

    def expand_to_days(self) -> "Interval":
        """
        Widen the interval to whole days.

        The start moves back to the start of its day. The end moves forward
        to the first midnight at or after it, so an interval ending exactly
        at midnight does not claim the following day. A zero-length
        interval claims the single day it sits on.
        """
        start = timeutil.start_of_day(self.start)
        end_day = timeutil.start_of_day(
            timeutil.instant(self.end, tz=start.timezone)
        )
        if end_day < self.end or self.is_empty:
            end_day = end_day.add(days=1)
        return Interval(start=start, end=end_day)

    def length_in_days(self) -> int:
        """Number of calendar days touched by the interval."""
        expanded = self.expand_to_days()
        return timeutil.days_between(expanded.start, expanded.end)

    def split_by(self, duration: timedelta) -> "IntervalSplit":
        """Split into consecutive sub-intervals of a fixed duration."""
        if duration <= timedelta(0):
            raise ValueError(f"Split duration must be positive: {duration}")
        return IntervalSplit(
            self, lambda start, n: timeutil.instant(start) + duration * n
        )

    def split_by_days(self) -> "IntervalSplit":
        """Split into consecutive calendar days anchored at ``start``."""
        return IntervalSplit(self, timeutil.add_days)

    def split_by_weeks(self) -> "IntervalSplit":
        """Split into consecutive calendar weeks anchored at ``start``."""
        return IntervalSplit(self, timeutil.add_weeks)


class IntervalSplit:
    """
    Lazy, restartable sequence of sub-intervals covering an interval.

    Each boundary is computed from the interval start (``advance(start,
    n)``), so iterating twice yields the same sub-intervals and steps do
    not drift. The final sub-interval is truncated to the interval end.
    """

    def __init__(
        self,
        interval: Interval,
        advance: Callable[[datetime, int], pendulum.DateTime],
    ):
        self.interval = interval
        self._advance = advance

    def __iter__(self) -> Iterator[Interval]:
        current = self.interval.start
        step = 0
        while current < self.interval.end:
            step += 1
            boundary = min(
                self._advance(self.interval.start, step), self.interval.end
            )
            yield Interval(start=current, end=boundary)
            current = boundary


# --- Events ---


class CalendarEvent(BaseModel):
    """
    A titled time span placed on the calendar.

    The id is assigned by the caller and is the key used by the event
    store.
    """

    model_config = ConfigDict(frozen=True)

    event_id: str = Field(..., min_length=1, description="Caller-assigned id")
    interval: Interval = Field(..., description="When the event happens")
    title: str = Field(..., description="Event title")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Strip whitespace from title."""
        return v.strip()

    @classmethod
    def create(
        cls, event_id: str, start: datetime, end: datetime, title: str
    ) -> "CalendarEvent":
        return cls(
            event_id=event_id,
            interval=Interval(start=start, end=end),
            title=title,
        )

    @property
    def start(self) -> datetime:
        return self.interval.start

    @property
    def end(self) -> datetime:
        return self.interval.end


# --- Derived view records ---


class DayClassification(str, Enum):
    """How a day slot relates to today and the month under view."""

    PRESENT = "present"
    NEARBY = "nearby"
    FARAWAY = "faraway"


class DaySlot(BaseModel):
    """One cell of the month grid."""

    model_config = ConfigDict(frozen=True)

    week_index: int = Field(..., ge=0, description="Grid row")
    day_index: int = Field(
        ..., ge=0, lt=DAYS_PER_WEEK, description="Grid column"
    )
    date: datetime = Field(..., description="Start of the day in the slot")
    classification: DayClassification

    @property
    def slot_index(self) -> int:
        return self.week_index * DAYS_PER_WEEK + self.day_index


class EventPlacement(BaseModel):
    """
    One week-row segment of an event.

    ``stack_offset`` is 1-based and shared by every segment of the same
    event.
    """

    model_config = ConfigDict(frozen=True)

    event_id: str
    week_index: int = Field(..., ge=0)
    day_start: int = Field(..., ge=0, lt=DAYS_PER_WEEK)
    day_end: int = Field(..., ge=0, lt=DAYS_PER_WEEK)
    stack_offset: int = Field(..., ge=1)

    @model_validator(mode="after")
    def columns_ordered(self) -> "EventPlacement":
        if self.day_end < self.day_start:
            raise ValueError(
                f"day_end {self.day_end} precedes day_start {self.day_start}"
            )
        return self

    def shares_day_with(self, other: "EventPlacement") -> bool:
        return (
            self.week_index == other.week_index
            and self.day_start <= other.day_end
            and other.day_start <= self.day_end
        )


class CalendarView(BaseModel):
    """
    The full result of a refresh: every day slot and every placement.

    Consumers treat each view as a full replacement of the previous one.
    """

    model_config = ConfigDict(frozen=True)

    cursor: datetime = Field(..., description="Start of the month under view")
    view: Interval = Field(..., description="Week-aligned visible window")
    grid_rows: int
    day_slots: List[DaySlot] = Field(default_factory=list)
    placements: List[EventPlacement] = Field(default_factory=list)

    def as_tuple(self) -> Tuple[List[DaySlot], List[EventPlacement]]:
        return self.day_slots, self.placements

    def slot_for(self, value: datetime) -> Optional[DaySlot]:
        """Return the slot whose day contains ``value``, if visible."""
        if not self.view.contains(value):
            return None
        index = timeutil.days_between(self.view.start, value)
        return self.day_slots[index]

    def placements_for(self, event_id: str) -> List[EventPlacement]:
        return [p for p in self.placements if p.event_id == event_id]


# --- Configuration ---


class GridConfiguration(BaseModel):
    """Display configuration for the month grid."""

    grid_rows: int = Field(
        6, description="Number of week rows shown (5 or 6)"
    )
    first_weekday: int = Field(
        0, ge=0, le=6, description="First grid column, 0=Monday, 6=Sunday"
    )
    timezone: str = Field(
        timeutil.UTC, description="Timezone used for today and the cursor"
    )

    @field_validator("grid_rows")
    @classmethod
    def grid_rows_supported(cls, v: int) -> int:
        if v not in SUPPORTED_GRID_ROWS:
            raise ValueError(
                f"grid_rows must be one of {SUPPORTED_GRID_ROWS}, got {v}"
            )
        return v

    @field_validator("timezone")
    @classmethod
    def timezone_known(cls, v: str) -> str:
        try:
            pendulum.timezone(v)
        except (KeyError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}'") from e
        return v
