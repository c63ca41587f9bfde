"""
Tests for calendar expansion and the yearly grid view.
"""

from datetime import date

from holiday_calendar.models.enums import HolidayStatusEnum
from holiday_calendar.models.holiday import HolidaySchema
from holiday_calendar.services.calendar_view import (
    STATUS_LEGEND,
    build_year_view,
    display_holiday,
    expand,
    first_weekday,
    status_style,
)


def holiday(id, name, start, end=None, status=HolidayStatusEnum.APPROVED, **extra):
    return HolidaySchema(id=id, name=name, start_date=start, end_date=end or start, status=status, **extra)


class TestExpand:
    """Test cases for expand."""

    def test_multi_day_range_fills_every_day(self):
        christmas = holiday("1", "Navidad", "2025-12-24", "2025-12-25")
        buckets = expand([christmas])
        assert list(buckets) == ["2025-12-24", "2025-12-25"]
        assert buckets["2025-12-24"] == [christmas]
        assert buckets["2025-12-25"] == [christmas]

    def test_range_across_month_and_year(self):
        buckets = expand([holiday("1", "Vacaciones", "2025-12-30", "2026-01-02")])
        assert list(buckets) == ["2025-12-30", "2025-12-31", "2026-01-01", "2026-01-02"]

    def test_bucket_keeps_first_seen_order(self):
        first = holiday("1", "Carnaval", "2025-03-03", "2025-03-04")
        second = holiday("2", "Día libre", "2025-03-04", status=HolidayStatusEnum.CUSTOM)
        buckets = expand([first, second])
        assert buckets["2025-03-04"] == [first, second]

    def test_empty(self):
        assert expand([]) == {}


class TestDisplayPolicy:
    """When several holidays share a day, the first inserted one is displayed."""

    def test_first_inserted_wins(self):
        working = holiday("1", "Carnaval", "2025-03-04", status=HolidayStatusEnum.WORKING)
        custom = holiday("2", "Día libre", "2025-03-04", status=HolidayStatusEnum.CUSTOM)
        bucket = expand([working, custom])["2025-03-04"]
        assert display_holiday(bucket) is working

        view = build_year_view(2025, [working, custom], today=date(2025, 1, 1))
        cell = view["months"][2]["days"][3]
        assert cell["date"] == "2025-03-04"
        assert cell["status"] == "working"
        assert cell["holiday_count"] == 2

    def test_empty_bucket(self):
        assert display_holiday([]) is None


class TestBuildYearView:
    """Test cases for build_year_view."""

    def test_twelve_months_with_correct_lengths(self):
        view = build_year_view(2024, [], today=date(2024, 6, 1))
        assert [m["name"] for m in view["months"]][:2] == ["January", "February"]
        assert len(view["months"]) == 12
        assert len(view["months"][1]["days"]) == 29

    def test_leading_blanks_sunday_first(self):
        # 2025-01-01 is a Wednesday, 2025-06-01 a Sunday
        assert first_weekday(2025, 1) == 3
        assert first_weekday(2025, 6) == 0

    def test_holiday_cell(self):
        navidad = holiday("7", "Navidad", "2025-12-25", name_en="Christmas", description="Feriado oficial (inamovible)")
        view = build_year_view(2025, [navidad], today=date(2025, 12, 25))
        cell = view["months"][11]["days"][24]
        assert cell == {
            "day": 25,
            "date": "2025-12-25",
            "is_today": True,
            "holiday_count": 1,
            "holiday_id": "7",
            "status": "approved",
            "color": "#DC2626",
            "name": "Christmas",
            "description": "Feriado oficial (inamovible)",
        }

    def test_spanish_names(self):
        navidad = holiday("7", "Navidad", "2025-12-25", name_en="Christmas")
        view = build_year_view(2025, [navidad], language="es", today=date(2025, 1, 1))
        cell = view["months"][11]["days"][24]
        assert cell["name"] == "Navidad"
        assert cell["description"] == "Official holiday"

    def test_plain_day(self):
        view = build_year_view(2025, [], today=date(2020, 1, 1))
        cell = view["months"][0]["days"][1]
        assert cell["status"] is None
        assert cell["holiday_count"] == 0
        assert cell["is_today"] is False

    def test_navigation(self):
        assert build_year_view(2025, [])["previous_year"] is None
        view = build_year_view(2026, [])
        assert view["previous_year"] == 2025
        assert view["next_year"] == 2027

    def test_colors_follow_status(self):
        assert status_style(HolidayStatusEnum.WORKING)["color"] == "#EA580C"
        assert status_style("custom")["color"] == "#9333EA"
        assert status_style("unknown")["status"] == "approved"
        assert [item["status"] for item in STATUS_LEGEND] == ["approved", "working", "custom"]
