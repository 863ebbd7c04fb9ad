"""
Defines the refresh use case for the month grid.
"""

import logging
from datetime import datetime
from typing import Optional

import pendulum

from . import timeutil
from .domain import CalendarView, DayClassification, GridConfiguration
from .layout import layout_events, stack_depth
from .repositories import Clock, EventStore, GridConfigurationRepository
from .view import build_day_slots, compute_view_window, month_fits

logger = logging.getLogger(__name__)


def refresh(
    cursor: datetime,
    event_store: EventStore,
    grid_rows: int,
    today: Optional[datetime] = None,
    first_weekday: int = 0,
) -> CalendarView:
    """
    Compute the day slots and event placements for the month of ``cursor``.

    Args:
        cursor: Any instant in the month to show; truncated to the month
        event_store: Source of events; read once, as a snapshot
        grid_rows: Number of week rows (5 or 6)
        today: The instant classified as "present" (defaults to now in the
            cursor's timezone)
        first_weekday: First grid column, 0=Monday

    Returns:
        The complete CalendarView for the current state
    """
    month = timeutil.start_of_month(cursor)
    if today is None:
        today = pendulum.now(month.timezone)

    events = event_store.snapshot()
    view = compute_view_window(month, grid_rows, first_weekday)
    day_slots = build_day_slots(view, today, month)
    placements = layout_events(view, events.values())

    return CalendarView(
        cursor=month,
        view=view,
        grid_rows=grid_rows,
        day_slots=day_slots,
        placements=placements,
    )


class RefreshCalendarUseCase:
    """
    Produces a CalendarView for a cursor using the configured grid.

    Depends only on the repository abstractions: the event store, the
    clock ("today" is read once per refresh) and the configuration
    source.
    """

    def __init__(
        self,
        event_store: EventStore,
        clock: Clock,
        config_repo: GridConfigurationRepository,
    ):
        self.event_store = event_store
        self.clock = clock
        self.config_repo = config_repo

    @property
    def configuration(self) -> GridConfiguration:
        return self.config_repo.get_configuration()

    def today(self) -> datetime:
        """Current instant in the configured timezone."""
        return timeutil.instant(
            self.clock.now(), tz=self.configuration.timezone
        )

    def execute(self, cursor: datetime) -> CalendarView:
        configuration = self.configuration
        today = self.today()
        cursor = timeutil.instant(cursor, tz=configuration.timezone)

        if not month_fits(
            cursor, configuration.grid_rows, configuration.first_weekday
        ):
            logger.warning(
                "Grid does not cover the whole month",
                extra={
                    "month": cursor.format("YYYY-MM"),
                    "grid_rows": configuration.grid_rows,
                },
            )

        calendar_view = refresh(
            cursor,
            self.event_store,
            configuration.grid_rows,
            today=today,
            first_weekday=configuration.first_weekday,
        )

        logger.info(
            "Refreshed calendar view",
            extra={
                "month": cursor.format("YYYY-MM"),
                "grid_rows": configuration.grid_rows,
                "event_count": len(self.event_store),
                "placement_count": len(calendar_view.placements),
                "nearby_days": sum(
                    1
                    for slot in calendar_view.day_slots
                    if slot.classification is DayClassification.NEARBY
                ),
                "stack_depth": stack_depth(calendar_view.placements),
            },
        )
        return calendar_view
