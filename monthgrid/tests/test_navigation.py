from datetime import timedelta
from unittest.mock import patch

import pendulum
import pytest

from monthgrid.domain import DayClassification
from monthgrid.navigation import NavigationController
from monthgrid.repos.mock.calendar_config import (
    MockGridConfigurationRepository,
)
from monthgrid.tests.factories import dt, minimal_event, minimal_use_case
from monthgrid.usecase import RefreshCalendarUseCase


@pytest.fixture
def use_case():
    return minimal_use_case(
        [
            minimal_event("march", dt(4), dt(6)),
            minimal_event("april", dt(10, month=4), dt(11, month=4)),
        ],
        now=dt(15, 12),
    )


def month_of(calendar_view):
    cursor = pendulum.instance(calendar_view.cursor)
    return cursor.year, cursor.month


class TestNavigationController:
    def test_defaults_to_current_month(self, use_case):
        controller = NavigationController(use_case)
        assert controller.cursor == dt(1)
        assert month_of(controller.current_view) == (2024, 3)

    def test_initial_cursor_is_truncated(self, use_case):
        controller = NavigationController(use_case, cursor=dt(20, 15, month=7))
        assert controller.cursor == dt(1, month=7)

    def test_next_moves_forward_one_month(self, use_case):
        controller = NavigationController(use_case)
        calendar_view = controller.next()
        assert month_of(calendar_view) == (2024, 4)
        assert controller.current_view is calendar_view
        assert [p.event_id for p in calendar_view.placements] == ["april"]

    def test_previous_moves_back_one_month(self, use_case):
        controller = NavigationController(use_case)
        assert month_of(controller.previous()) == (2024, 2)

    def test_navigation_crosses_year_boundaries(self, use_case):
        controller = NavigationController(use_case, cursor=dt(31, month=12, year=2023))
        assert month_of(controller.next()) == (2024, 1)
        assert month_of(controller.previous()) == (2023, 12)
        assert month_of(controller.previous()) == (2023, 11)

    def test_next_from_month_end_does_not_skip_a_month(self, use_case):
        controller = NavigationController(use_case, cursor=dt(31, month=1))
        assert month_of(controller.next()) == (2024, 2)
        assert month_of(controller.next()) == (2024, 3)

    def test_present_returns_to_todays_month(self, use_case):
        controller = NavigationController(use_case)
        controller.next()
        controller.next()
        calendar_view = controller.present()
        assert month_of(calendar_view) == (2024, 3)
        assert controller.cursor == dt(1)

    def test_go_to(self, use_case):
        controller = NavigationController(use_case)
        assert month_of(controller.go_to(dt(9, month=11, year=2031))) == (
            2031,
            11,
        )

    def test_every_move_refreshes(self, use_case):
        controller = NavigationController(use_case)
        with patch.object(
            use_case, "execute", wraps=use_case.execute
        ) as execute:
            controller.next()
            controller.previous()
            controller.present()
            controller.go_to(dt(1, month=6))
        assert execute.call_count == 4

    def test_refresh_reflects_store_changes(self, use_case):
        controller = NavigationController(use_case)
        assert len(controller.current_view.placements) == 1
        use_case.event_store.add(
            "extra", minimal_event("extra", dt(4), dt(5))
        )
        assert len(controller.refresh().placements) == 2

    def test_navigation_is_unbounded(self, use_case):
        controller = NavigationController(use_case)
        for _ in range(24):
            controller.previous()
        assert month_of(controller.current_view) == (2022, 3)


class TestNavigationWithClock:
    @pytest.fixture
    def clock_use_case(self, store, fixed_clock):
        return RefreshCalendarUseCase(
            event_store=store,
            clock=fixed_clock,
            config_repo=MockGridConfigurationRepository(),
        )

    def test_present_follows_the_clock_past_midnight(
        self, clock_use_case, fixed_clock, march_2024
    ):
        controller = NavigationController(clock_use_case)
        assert controller.cursor == march_2024

        fixed_clock.set(dt(31, 23))
        fixed_clock.advance(timedelta(hours=2))
        calendar_view = controller.present()

        assert month_of(calendar_view) == (2024, 4)
        assert controller.cursor == dt(1, month=4)
        assert (
            calendar_view.slot_for(dt(1, 1, month=4)).classification
            is DayClassification.PRESENT
        )
        assert (
            calendar_view.slot_for(dt(1, month=5)).classification
            is DayClassification.FARAWAY
        )
