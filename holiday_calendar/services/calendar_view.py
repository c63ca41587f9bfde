"""
Calendar expansion and the yearly grid view model.

When several holidays fall on the same day, the first one inserted into that
day's bucket decides the displayed status, color and name. Callers pass
holidays ordered by start date, so the earliest-starting holiday wins.
"""
import calendar
from collections import OrderedDict
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from holiday_calendar.models.enums import HolidayStatusEnum
from holiday_calendar.utils.dates import format_date_key, iter_days
from holiday_calendar.utils.translation import display_description, display_name

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

DAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# Years before this have no data; navigation stops here
FIRST_CALENDAR_YEAR = 2025

STATUS_LEGEND = [
    {
        "status": HolidayStatusEnum.APPROVED.value,
        "label": "Approved Holiday",
        "description": "Official holiday, no work",
        "color": "#DC2626",
        "style": "solid",
    },
    {
        "status": HolidayStatusEnum.WORKING.value,
        "label": "Working Day",
        "description": "Holiday, but we work",
        "color": "#EA580C",
        "style": "blurred",
    },
    {
        "status": HolidayStatusEnum.CUSTOM.value,
        "label": "Custom day off",
        "description": "Organization day off",
        "color": "#9333EA",
        "style": "solid",
    },
]

_LEGEND_BY_STATUS = {item["status"]: item for item in STATUS_LEGEND}


def expand(holidays: Iterable) -> "OrderedDict[str, List[Any]]":
    """Map each YYYY-MM-DD key to the holidays covering that day, in insertion order."""
    buckets: "OrderedDict[str, List[Any]]" = OrderedDict()
    for holiday in holidays:
        for day in iter_days(holiday.start_date, holiday.end_date):
            buckets.setdefault(format_date_key(day), []).append(holiday)
    return buckets


def display_holiday(bucket: List[Any]) -> Optional[Any]:
    """The holiday shown for a day: the first one in its bucket."""
    return bucket[0] if bucket else None


def status_style(status) -> Dict[str, str]:
    """Legend entry for a status; unknown statuses render as approved."""
    value = getattr(status, "value", status)
    return _LEGEND_BY_STATUS.get(value, _LEGEND_BY_STATUS[HolidayStatusEnum.APPROVED.value])


def first_weekday(year: int, month: int) -> int:
    """Column of the 1st of the month in a Sunday-first week (Sunday = 0)."""
    return (date(year, month, 1).weekday() + 1) % 7


def build_year_view(year: int, holidays: Iterable, language: str = "en", today: Optional[date] = None) -> Dict[str, Any]:
    """
    Build the 12-month grid for `year`.

    Each day cell carries the displayed holiday (if any), its status and
    color, and how many holidays share the day.
    """
    today = today or date.today()
    buckets = expand(holidays)

    months = []
    for month in range(1, 13):
        days = []
        for day in range(1, calendar.monthrange(year, month)[1] + 1):
            current = date(year, month, day)
            bucket = buckets.get(format_date_key(current), [])
            shown = display_holiday(bucket)
            cell = {
                "day": day,
                "date": format_date_key(current),
                "is_today": current == today,
                "holiday_count": len(bucket),
                "holiday_id": None,
                "status": None,
                "color": None,
                "name": None,
                "description": None,
            }
            if shown is not None:
                style = status_style(shown.status)
                cell.update(
                    holiday_id=shown.id,
                    status=style["status"],
                    color=style["color"],
                    name=display_name(shown, language),
                    description=display_description(shown, language) or "Official holiday",
                )
            days.append(cell)
        months.append({
            "month": month,
            "name": MONTHS[month - 1],
            "leading_blanks": first_weekday(year, month),
            "days": days,
        })

    return {
        "year": year,
        "previous_year": year - 1 if year > FIRST_CALENDAR_YEAR else None,
        "next_year": year + 1,
        "weekdays": DAYS,
        "legend": STATUS_LEGEND,
        "months": months,
    }
