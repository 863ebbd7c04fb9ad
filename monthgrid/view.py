"""
View window calculation and day classification for the month grid.

Both are pure functions of their arguments: the window depends only on
the cursor, the row count and the first weekday, and a day's
classification only on the day, "today" and the cursor.
"""

import logging
from datetime import datetime
from typing import List

from . import timeutil
from .domain import (
    DAYS_PER_WEEK,
    SUPPORTED_GRID_ROWS,
    DayClassification,
    DaySlot,
    Interval,
)

logger = logging.getLogger(__name__)


def _check_grid_rows(grid_rows: int) -> None:
    if grid_rows not in SUPPORTED_GRID_ROWS:
        raise ValueError(
            f"grid_rows must be one of {SUPPORTED_GRID_ROWS}, got {grid_rows}"
        )


def compute_view_window(
    cursor: datetime, grid_rows: int, first_weekday: int = 0
) -> Interval:
    """
    Compute the visible window for the month containing ``cursor``.

    The window starts at the start of the week holding the first of the
    month and spans exactly ``grid_rows * 7`` calendar days.
    """
    _check_grid_rows(grid_rows)
    start = timeutil.start_of_week(
        timeutil.start_of_month(cursor), first_weekday
    )
    end = start.add(days=grid_rows * DAYS_PER_WEEK)
    return Interval(start=start, end=end)


def day_slot_dates(view: Interval) -> List[datetime]:
    """The start of every day in the window, in order."""
    return [day.start for day in view.split_by_days()]


def month_fits(
    cursor: datetime, grid_rows: int, first_weekday: int = 0
) -> bool:
    """Whether every day of the cursor's month is inside the window."""
    view = compute_view_window(cursor, grid_rows, first_weekday)
    next_month = timeutil.start_of_month(cursor).add(months=1)
    return next_month <= view.end


def classify_day(
    date: datetime, today: datetime, cursor: datetime
) -> DayClassification:
    """
    Classify a day against today and the month under view.

    The three outcomes are mutually exclusive; "present" wins over
    "nearby" when today falls in the viewed month. Today is read in the
    timezone of ``date`` so a slot keeps its own calendar day.
    """
    if timeutil.same_day(today, date):
        return DayClassification.PRESENT
    if timeutil.same_month(date, cursor):
        return DayClassification.NEARBY
    return DayClassification.FARAWAY


def build_day_slots(
    view: Interval, today: datetime, cursor: datetime
) -> List[DaySlot]:
    """Build one classified slot per day of the window, row by row."""
    slots = []
    for index, date in enumerate(day_slot_dates(view)):
        week_index, day_index = divmod(index, DAYS_PER_WEEK)
        slots.append(
            DaySlot(
                week_index=week_index,
                day_index=day_index,
                date=date,
                classification=classify_day(date, today, cursor),
            )
        )
    return slots
