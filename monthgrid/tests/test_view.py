import unittest

import pendulum

from monthgrid.domain import DayClassification, Interval
from monthgrid.tests.factories import dt
from monthgrid.view import (
    build_day_slots,
    classify_day,
    compute_view_window,
    day_slot_dates,
    month_fits,
)


class TestViewWindow(unittest.TestCase):
    def test_six_rows_for_march_2024(self):
        view = compute_view_window(dt(17, 15), grid_rows=6)
        # 1 March 2024 is a Friday; the grid starts on Monday 26 February.
        self.assertEqual(
            view, Interval(start=dt(26, month=2), end=dt(8, month=4))
        )
        self.assertEqual(len(day_slot_dates(view)), 42)

    def test_five_rows(self):
        view = compute_view_window(dt(1), grid_rows=5)
        self.assertEqual(
            view, Interval(start=dt(26, month=2), end=dt(1, month=4))
        )
        self.assertEqual(len(day_slot_dates(view)), 35)

    def test_sunday_first_weekday(self):
        view = compute_view_window(dt(1), grid_rows=6, first_weekday=6)
        self.assertEqual(view.start, dt(25, month=2))
        self.assertEqual(pendulum.instance(view.start).weekday(), 6)

    def test_month_starting_on_first_weekday(self):
        # 1 April 2024 is a Monday
        view = compute_view_window(dt(20, month=4), grid_rows=6)
        self.assertEqual(view.start, dt(1, month=4))

    def test_rejects_unsupported_row_count(self):
        with self.assertRaises(ValueError):
            compute_view_window(dt(1), grid_rows=4)

    def test_window_follows_cursor_timezone(self):
        cursor = pendulum.datetime(2024, 3, 10, tz="America/New_York")
        view = compute_view_window(cursor, grid_rows=6)
        self.assertEqual(
            view.start, pendulum.datetime(2024, 2, 26, tz="America/New_York")
        )
        # The window spans 42 calendar days even across the DST change.
        self.assertEqual(len(day_slot_dates(view)), 42)

    def test_slot_dates_are_consecutive_days(self):
        view = compute_view_window(dt(1), grid_rows=6)
        dates = day_slot_dates(view)
        self.assertEqual(dates[0], dt(26, month=2))
        self.assertEqual(dates[4], dt(1))
        self.assertEqual(dates[-1], dt(7, month=4))

    def test_month_fits(self):
        # September 2024 starts on a Sunday and needs six Monday-first rows.
        self.assertFalse(month_fits(dt(1, month=9), grid_rows=5))
        self.assertTrue(month_fits(dt(1, month=9), grid_rows=6))
        self.assertTrue(month_fits(dt(1), grid_rows=5))
        self.assertTrue(month_fits(dt(1, month=9), 5, first_weekday=6))


class TestDayClassifier(unittest.TestCase):
    def test_today_is_present(self):
        self.assertEqual(
            classify_day(dt(15), today=dt(15, 18), cursor=dt(1)),
            DayClassification.PRESENT,
        )

    def test_present_outside_viewed_month(self):
        self.assertEqual(
            classify_day(dt(1, month=4), today=dt(1, 8, month=4), cursor=dt(1)),
            DayClassification.PRESENT,
        )

    def test_same_month_is_nearby(self):
        self.assertEqual(
            classify_day(dt(1), today=dt(15), cursor=dt(1)),
            DayClassification.NEARBY,
        )

    def test_other_month_is_faraway(self):
        self.assertEqual(
            classify_day(dt(29, month=2), today=dt(15), cursor=dt(1)),
            DayClassification.FARAWAY,
        )

    def test_same_month_of_another_year_is_faraway(self):
        self.assertEqual(
            classify_day(dt(4, year=2023), today=dt(15), cursor=dt(1)),
            DayClassification.FARAWAY,
        )

    def test_today_read_in_the_slot_timezone(self):
        # 23:30 UTC on the 14th is already the 15th in Tokyo.
        today = dt(14, 23).replace(minute=30)
        cursor = pendulum.datetime(2024, 3, 1, tz="Asia/Tokyo")
        self.assertEqual(
            classify_day(
                pendulum.datetime(2024, 3, 15, tz="Asia/Tokyo"),
                today=today,
                cursor=cursor,
            ),
            DayClassification.PRESENT,
        )
        self.assertEqual(
            classify_day(
                pendulum.datetime(2024, 3, 14, tz="Asia/Tokyo"),
                today=today,
                cursor=cursor,
            ),
            DayClassification.NEARBY,
        )

    def test_slot_midnight_west_of_today_keeps_its_day(self):
        # Berlin midnight on the 14th is still the 13th in UTC.
        today = dt(14, 12)
        cursor = pendulum.datetime(2024, 3, 1, tz="Europe/Berlin")
        self.assertEqual(
            classify_day(
                pendulum.datetime(2024, 3, 14, tz="Europe/Berlin"),
                today=today,
                cursor=cursor,
            ),
            DayClassification.PRESENT,
        )
        self.assertEqual(
            classify_day(
                pendulum.datetime(2024, 3, 15, tz="Europe/Berlin"),
                today=today,
                cursor=cursor,
            ),
            DayClassification.NEARBY,
        )

    def test_build_day_slots(self):
        view = compute_view_window(dt(1), grid_rows=6)
        slots = build_day_slots(view, today=dt(15, 12), cursor=dt(1))

        self.assertEqual(len(slots), 42)
        self.assertEqual((slots[0].week_index, slots[0].day_index), (0, 0))
        self.assertEqual((slots[41].week_index, slots[41].day_index), (5, 6))
        self.assertEqual(slots[4].date, dt(1))
        self.assertEqual(slots[4].classification, DayClassification.NEARBY)
        self.assertEqual(slots[18].date, dt(15))
        self.assertEqual(slots[18].classification, DayClassification.PRESENT)
        self.assertEqual(slots[0].classification, DayClassification.FARAWAY)
        counts = {
            c: sum(1 for s in slots if s.classification is c)
            for c in DayClassification
        }
        self.assertEqual(counts[DayClassification.PRESENT], 1)
        self.assertEqual(counts[DayClassification.NEARBY], 30)
        self.assertEqual(counts[DayClassification.FARAWAY], 11)


if __name__ == "__main__":
    unittest.main()
