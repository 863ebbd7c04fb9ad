"""
Month navigation for the calendar grid.

The controller owns the cursor and nothing else. Every move is followed
by a refresh, so ``current_view`` always matches the cursor.
"""

import logging
from datetime import datetime
from typing import Optional

import pendulum

from . import timeutil
from .domain import CalendarView
from .usecase import RefreshCalendarUseCase

logger = logging.getLogger(__name__)


class NavigationController:
    """
    Moves the viewed month and refreshes the view after each move.

    Navigation is unbounded in both directions.
    """

    def __init__(
        self,
        use_case: RefreshCalendarUseCase,
        cursor: Optional[datetime] = None,
    ):
        self.use_case = use_case
        if cursor is None:
            cursor = use_case.today()
        self._cursor = self._month_of(cursor)
        self._current_view: Optional[CalendarView] = None

    @property
    def cursor(self) -> pendulum.DateTime:
        return self._cursor

    @property
    def current_view(self) -> CalendarView:
        """The last computed view, computed on first access."""
        if self._current_view is None:
            return self.refresh()
        return self._current_view

    def refresh(self) -> CalendarView:
        """Recompute the view for the current cursor."""
        self._current_view = self.use_case.execute(self._cursor)
        return self._current_view

    def next(self) -> CalendarView:
        return self._move_to(self._cursor.add(months=1))

    def previous(self) -> CalendarView:
        return self._move_to(self._cursor.subtract(months=1))

    def present(self) -> CalendarView:
        """Jump back to the month containing today."""
        return self._move_to(self.use_case.today())

    def go_to(self, value: datetime) -> CalendarView:
        """Jump to the month containing ``value``."""
        return self._move_to(value)

    def _month_of(self, value: datetime) -> pendulum.DateTime:
        timezone = self.use_case.configuration.timezone
        return timeutil.start_of_month(timeutil.instant(value, tz=timezone))

    def _move_to(self, value: datetime) -> CalendarView:
        previous = self._cursor
        self._cursor = self._month_of(value)
        logger.debug(
            "Moved cursor",
            extra={
                "from": previous.format("YYYY-MM"),
                "to": self._cursor.format("YYYY-MM"),
            },
        )
        return self.refresh()
