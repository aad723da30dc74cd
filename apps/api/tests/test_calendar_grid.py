import unittest
from datetime import date

from blockly.scheduling.calendar_grid import (
    month_grid,
    monday_for,
    resolve_day,
    resolve_days,
    week_grid,
)
from blockly.scheduling.errors import InvalidDateFormat
from blockly.scheduling.records import (
    Catalog,
    ScheduleBlock,
    ScheduleOverride,
    ScheduleType,
    UserPreferences,
)
from blockly.scheduling.timeutils import weekday


def _catalog() -> Catalog:
    types = [
        ScheduleType(id="A", name="Day A"),
        ScheduleType(id="B", name="Day B"),
        ScheduleType(id="H", name="Holiday"),
    ]
    blocks = [
        ScheduleBlock(id="a2", schedule_type_id="A", name="A2", start_time="09:40", end_time="11:10", block_index=2),
        ScheduleBlock(id="a1", schedule_type_id="A", name="A1", start_time="08:00", end_time="09:30", block_index=1),
        ScheduleBlock(id="b1", schedule_type_id="B", name="B1", start_time="08:00", end_time="09:30", block_index=1),
    ]
    overrides = [
        ScheduleOverride(id="o1", override_date="2024-01-03", schedule_type_id="H"),
        ScheduleOverride(id="o2", override_date="2024-01-06", schedule_type_id="A"),
    ]
    return Catalog.from_rows(types, blocks, overrides)


class TestMonthGrid(unittest.TestCase):
    def test_length_and_leading_padding(self) -> None:
        for ym in ["2024-01", "2024-02", "2024-03", "2024-09", "2026-02", "2025-11"]:
            with self.subTest(ym=ym):
                cells = month_grid(ym)
                self.assertEqual(len(cells) % 7, 0)
                year, month = (int(p) for p in ym.split("-"))
                first = date(year, month, 1)
                lead = weekday(first)
                self.assertTrue(all(c is None for c in cells[:lead]))
                self.assertEqual(cells[lead], first)

    def test_known_layouts(self) -> None:
        jan = month_grid("2024-01")  # starts Monday, 31 days
        self.assertEqual(len(jan), 35)
        self.assertIsNone(jan[0])
        self.assertEqual(jan[32:], [None, None, None])

        feb = month_grid((2026, 2))  # starts Sunday, 28 days
        self.assertEqual(len(feb), 28)
        self.assertNotIn(None, feb)

        mar = month_grid(date(2024, 3, 20))  # starts Friday, 31 days
        self.assertEqual(len(mar), 42)
        self.assertEqual(mar[5], date(2024, 3, 1))
        self.assertEqual(mar[35], date(2024, 3, 31))

    def test_days_are_consecutive(self) -> None:
        days = [c for c in month_grid("2024-02") if c is not None]
        self.assertEqual(len(days), 29)
        self.assertEqual(days[0], date(2024, 2, 1))
        self.assertEqual(days[-1], date(2024, 2, 29))

    def test_invalid_month(self) -> None:
        for bad in ["2024-13", "2024", "Jan 2024", "0000-01", "0-01", "10000-01", (2024,), (2024, 1, 1), ("x", 1)]:
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidDateFormat):
                    month_grid(bad)

    def test_calendar_edge_months(self) -> None:
        self.assertEqual(month_grid("0001-01")[1], date(1, 1, 1))
        self.assertEqual([c for c in month_grid((9999, 12)) if c][-1], date(9999, 12, 31))


class TestWeekGrid(unittest.TestCase):
    def test_monday_for(self) -> None:
        self.assertEqual(monday_for("2024-01-03"), date(2024, 1, 1))
        self.assertEqual(monday_for("2024-01-01"), date(2024, 1, 1))
        self.assertEqual(monday_for("2024-01-06"), date(2024, 1, 1))
        # Sunday belongs to the week that started six days earlier
        self.assertEqual(monday_for("2024-01-07"), date(2024, 1, 1))

    def test_weekdays_only(self) -> None:
        days = week_grid("2024-01-03")
        self.assertEqual(days, [date(2024, 1, d) for d in range(1, 6)])

    def test_with_weekends_starts_on_preceding_sunday(self) -> None:
        days = week_grid("2024-01-03", show_weekends=True)
        self.assertEqual(len(days), 7)
        self.assertEqual(days[0], date(2023, 12, 31))
        self.assertEqual(days[-1], date(2024, 1, 6))

    def test_sunday_anchor_with_weekends(self) -> None:
        days = week_grid("2024-01-07", show_weekends=True)
        self.assertEqual(days[0], date(2023, 12, 31))

    def test_weeks_cut_off_by_calendar_limits(self) -> None:
        # 0001-01-01 is a Monday, so its Sunday does not exist
        self.assertEqual(week_grid("0001-01-01")[0], date(1, 1, 1))
        with self.assertRaises(InvalidDateFormat):
            week_grid("0001-01-01", show_weekends=True)
        # 9999-12-31 is a Friday; its Saturday does not exist
        self.assertEqual(week_grid("9999-12-31")[-1], date(9999, 12, 31))
        with self.assertRaises(InvalidDateFormat):
            week_grid("9999-12-31", show_weekends=True)


class TestResolveDay(unittest.TestCase):
    def test_ab_day_with_sorted_blocks(self) -> None:
        rd = resolve_day("2024-01-01", _catalog())
        self.assertEqual(rd.schedule_type.id, "A")
        self.assertEqual([b.id for b in rd.blocks], ["a1", "a2"])
        self.assertFalse(rd.is_weekend)
        self.assertFalse(rd.is_holiday)
        self.assertFalse(rd.has_override)

    def test_holiday_override(self) -> None:
        rd = resolve_day("2024-01-03", _catalog())
        self.assertEqual(rd.schedule_type.id, "H")
        self.assertTrue(rd.is_holiday)
        self.assertTrue(rd.has_override)
        self.assertEqual(rd.blocks, ())

    def test_weekend_override_is_flagged_but_not_applied(self) -> None:
        rd = resolve_day("2024-01-06", _catalog())
        self.assertIsNone(rd.schedule_type)
        self.assertTrue(rd.is_weekend)
        self.assertTrue(rd.has_override)
        self.assertEqual(rd.blocks, ())

    def test_preferences_default(self) -> None:
        rd = resolve_day("2024-01-01", _catalog(), UserPreferences(default_schedule_id="B"))
        self.assertEqual(rd.schedule_type.id, "B")
        self.assertEqual([b.id for b in rd.blocks], ["b1"])

    def test_resolve_days_keeps_padding(self) -> None:
        cells = month_grid("2024-01")
        resolved = resolve_days(cells, _catalog())
        self.assertEqual(len(resolved), len(cells))
        self.assertIsNone(resolved[0])
        self.assertEqual(resolved[1].date, date(2024, 1, 1))
        self.assertEqual(resolved[2].schedule_type.id, "B")


if __name__ == "__main__":
    unittest.main(verbosity=2)
