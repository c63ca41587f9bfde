"""
FastAPI dependencies shared by the routers.
"""
import secrets
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession  # type: ignore

from holiday_calendar.config import Settings
from holiday_calendar.db import get_db
from holiday_calendar.services.holiday_source import HolidaySource
from holiday_calendar.services.store import HolidayStore, SqlAlchemyHolidayStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(db: AsyncSession = Depends(get_db)) -> HolidayStore:
    return SqlAlchemyHolidayStore(db)


def get_holiday_source(settings: Settings = Depends(get_settings)) -> HolidaySource:
    return HolidaySource(settings)


async def verify_operator(
    x_api_key: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Guard write routes with ADMIN_API_KEY when one is configured."""
    if not settings.admin_api_key:
        return None
    if not x_api_key or not secrets.compare_digest(x_api_key, settings.admin_api_key):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Operation not permitted. Invalid or missing API key.")
    return None
