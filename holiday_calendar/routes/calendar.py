from fastapi import APIRouter, Depends, Path, Response

from holiday_calendar.models.enums import HolidayStatusEnum, LanguageEnum
from holiday_calendar.routes.dependencies import get_store
from holiday_calendar.services.calendar_view import STATUS_LEGEND, build_year_view
from holiday_calendar.services.store import HolidayQuery, HolidayStore

router = APIRouter(prefix="/calendar", tags=["Calendar"])

DISPLAYED_STATUSES = [HolidayStatusEnum.APPROVED, HolidayStatusEnum.WORKING, HolidayStatusEnum.CUSTOM]


@router.get("/legend")
async def get_legend():
    return {"success": True, "legend": STATUS_LEGEND}


@router.get("/{year}")
async def get_year_calendar(
    response: Response,
    year: int = Path(..., ge=1900, le=9999),
    language: LanguageEnum = LanguageEnum.EN,
    store: HolidayStore = Depends(get_store),
):
    """
    Yearly calendar grid, color-coded by holiday status.
    Holidays are those starting in `year`; ranges spilling into the next
    year are not shown there.
    """
    holidays = await store.fetch(HolidayQuery(year=year, statuses=DISPLAYED_STATUSES))
    # Set cache headers with shorter max-age so status changes show up quickly
    response.headers["Cache-Control"] = "public, max-age=60, must-revalidate"
    return {
        "success": True,
        "calendar": build_year_view(year, holidays, language=language.value),
    }
