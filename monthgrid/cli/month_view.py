#!/usr/bin/env python3
"""
CLI for printing a month grid with events laid out on it.

1. Loads the grid configuration (YAML, or defaults)
2. Fills an event store from a YAML file and/or demo events
3. Refreshes the view for the requested month
4. Prints the text rendering
"""

import logging
from typing import Optional

import click
import pendulum

from monthgrid.errors import MonthGridError
from monthgrid.logging_config import setup_logging
from monthgrid.navigation import NavigationController
from monthgrid.render import render_month
from monthgrid.repos.local.calendar_config import (
    DEFAULT_CONFIG_PATH,
    LocalGridConfigurationRepository,
)
from monthgrid.repos.local.clock import SystemClock
from monthgrid.repos.local.event_file import load_events_from_yaml
from monthgrid.repos.memory.event_store import InMemoryEventStore
from monthgrid.repos.mock.calendar_config import (
    MockGridConfigurationRepository,
)
from monthgrid.repos.mock.event_store import MockEventStore
from monthgrid.usecase import RefreshCalendarUseCase

logger = logging.getLogger(__name__)


def _parse_month(value: Optional[str], timezone: str) -> Optional[pendulum.DateTime]:
    if value is None:
        return None
    try:
        year, month = (int(part) for part in value.split("-"))
        return pendulum.datetime(year, month, 1, tz=timezone)
    except ValueError as e:
        raise click.BadParameter(
            f"expected YYYY-MM, got '{value}'", param_hint="--month"
        ) from e


@click.command()
@click.option(
    "--month",
    default=None,
    help="Month to show as YYYY-MM (defaults to the current month).",
)
@click.option(
    "--rows",
    type=click.Choice(["5", "6"]),
    default=None,
    help="Number of week rows; overrides the configuration file.",
)
@click.option(
    "--config",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to the YAML grid configuration.",
    type=click.Path(),
)
@click.option(
    "--events",
    "events_path",
    default=None,
    help="YAML file with events to place on the grid.",
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--demo",
    is_flag=True,
    default=False,
    help="Add sample events around the shown month.",
)
@click.option(
    "--navigate",
    type=int,
    default=0,
    help="Months to move forward (or back, if negative) before printing.",
)
def main(
    month: Optional[str],
    rows: Optional[str],
    config_path: str,
    events_path: Optional[str],
    demo: bool,
    navigate: int,
) -> None:
    """Print a month grid with events stacked without overlap."""
    setup_logging()

    try:
        configuration = LocalGridConfigurationRepository(
            config_path
        ).get_configuration()
    except MonthGridError as e:
        raise click.ClickException(str(e)) from e
    if rows is not None:
        configuration = configuration.model_copy(
            update={"grid_rows": int(rows)}
        )
    config_repo = MockGridConfigurationRepository(configuration)

    clock = SystemClock(configuration.timezone)
    cursor = _parse_month(month, configuration.timezone) or clock.now()

    store = MockEventStore(reference=cursor) if demo else InMemoryEventStore()
    if events_path is not None:
        try:
            count = load_events_from_yaml(events_path, store)
        except MonthGridError as e:
            raise click.ClickException(str(e)) from e
        logger.info(f"Loaded {count} events from {events_path}")

    use_case = RefreshCalendarUseCase(
        event_store=store, clock=clock, config_repo=config_repo
    )
    controller = NavigationController(use_case, cursor=cursor)
    calendar_view = controller.current_view
    for _ in range(abs(navigate)):
        calendar_view = (
            controller.next() if navigate > 0 else controller.previous()
        )

    click.echo(render_month(calendar_view, store.snapshot()), nl=False)


if __name__ == "__main__":
    main()
