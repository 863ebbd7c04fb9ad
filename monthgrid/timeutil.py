"""
Calendar arithmetic helpers built on pendulum.

Domain models store plain ``datetime`` values; every calendar-unit
operation goes through these helpers so that day, week and month steps
are calendar steps (a DST day is still one day).
"""

import logging
from datetime import datetime
from typing import Optional, Union

import pendulum

logger = logging.getLogger(__name__)

UTC = "UTC"

TimezoneLike = Union[str, pendulum.Timezone, pendulum.FixedTimezone]


def instant(
    value: datetime, tz: Optional[TimezoneLike] = None
) -> pendulum.DateTime:
    """Convert a datetime to a pendulum instant.

    Naive values are interpreted as UTC. When ``tz`` is given the result
    is converted to that timezone.
    """
    if isinstance(value, pendulum.DateTime):
        result = value
    else:
        result = pendulum.instance(value, tz=UTC)
    if tz is not None:
        result = result.in_timezone(tz)
    return result


def start_of_day(value: datetime) -> pendulum.DateTime:
    return instant(value).start_of("day")


def start_of_month(value: datetime) -> pendulum.DateTime:
    return instant(value).start_of("month")


def start_of_week(value: datetime, first_weekday: int = 0) -> pendulum.DateTime:
    """Start of the week containing ``value``.

    ``first_weekday`` follows ``datetime.weekday()``: 0 is Monday, 6 is
    Sunday.
    """
    day = start_of_day(value)
    return day.subtract(days=(day.weekday() - first_weekday) % 7)


def add_days(value: datetime, days: int) -> pendulum.DateTime:
    return instant(value).add(days=days)


def add_weeks(value: datetime, weeks: int) -> pendulum.DateTime:
    return instant(value).add(weeks=weeks)


def add_months(value: datetime, months: int) -> pendulum.DateTime:
    return instant(value).add(months=months)


def days_between(start: datetime, end: datetime) -> int:
    """Whole calendar days from the day of ``start`` to the day of ``end``."""
    start_local = instant(start)
    end_local = instant(end, tz=start_local.timezone)
    return (end_local.date() - start_local.date()).days


def same_day(a: datetime, b: datetime) -> bool:
    """Whether ``a`` falls on the calendar day of ``b`` (in b's timezone)."""
    b_local = instant(b)
    return instant(a, tz=b_local.timezone).date() == b_local.date()


def same_month(a: datetime, b: datetime) -> bool:
    """Whether ``a`` falls in the calendar month of ``b`` (in b's timezone)."""
    b_local = instant(b)
    a_local = instant(a, tz=b_local.timezone)
    return (a_local.year, a_local.month) == (b_local.year, b_local.month)
