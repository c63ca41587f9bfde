"""
Holiday store: the document-store contract the services depend on, and its
SQLAlchemy implementation.

Every mutating call is committed on its own, so a failure on one item never
rolls back an item saved before it.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import select, delete, and_, func  # type: ignore
from sqlalchemy.exc import SQLAlchemyError  # type: ignore
from sqlalchemy.ext.asyncio import AsyncSession  # type: ignore

from holiday_calendar.exceptions import HolidayNotFound, PersistenceFailure
from holiday_calendar.models.enums import HolidayStatusEnum
from holiday_calendar.models.holiday import Holiday as HolidayModel, HolidaySchema, holiday_to_schema
from holiday_calendar.utils.dates import year_bounds
from holiday_calendar.utils.id_utils import to_int_id

logger = logging.getLogger(__name__)

# Wire/schema field names the store accepts in create() and patch()
WRITABLE_FIELDS = ("name", "name_en", "start_date", "end_date", "description", "description_en", "status")


@dataclass
class HolidayQuery:
    """Filters for HolidayStore.fetch; results are always ordered by start date."""
    year: Optional[int] = None
    status: Optional[HolidayStatusEnum] = None
    statuses: Optional[List[HolidayStatusEnum]] = None
    missing_name_en: bool = False
    name: Optional[str] = None
    start_date: Optional[date] = None


class HolidayStore(ABC):
    """Operations the core needs from the document store."""

    @abstractmethod
    async def create(self, fields: Dict[str, Any]) -> HolidaySchema:
        ...

    @abstractmethod
    async def patch(self, holiday_id: str, fields: Dict[str, Any]) -> HolidaySchema:
        ...

    @abstractmethod
    async def fetch(self, query: Optional[HolidayQuery] = None) -> List[HolidaySchema]:
        ...

    @abstractmethod
    async def get(self, holiday_id: str) -> HolidaySchema:
        ...

    @abstractmethod
    async def delete(self, holiday_id: str) -> None:
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        ...

    async def exists(self, name: str, start_date: date) -> bool:
        return bool(await self.fetch(HolidayQuery(name=name, start_date=start_date)))


def _check_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    unknown = set(fields) - set(WRITABLE_FIELDS)
    if unknown:
        raise PersistenceFailure(f"Unknown holiday fields: {', '.join(sorted(unknown))}")
    return fields


class SqlAlchemyHolidayStore(HolidayStore):
    """HolidayStore backed by the holidays table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _commit(self, action: str) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Store %s failed: %s", action, e)
            raise PersistenceFailure(f"Could not {action} holiday: {e}") from e

    async def _load(self, holiday_id: str) -> HolidayModel:
        holiday_id_int = to_int_id(holiday_id)
        if holiday_id_int is None:
            raise HolidayNotFound(holiday_id)
        try:
            result = await self.db.execute(select(HolidayModel).where(HolidayModel.id == holiday_id_int))
        except SQLAlchemyError as e:
            raise PersistenceFailure(f"Could not load holiday {holiday_id}: {e}") from e
        holiday = result.scalar_one_or_none()
        if not holiday:
            raise HolidayNotFound(holiday_id)
        return holiday

    async def create(self, fields: Dict[str, Any]) -> HolidaySchema:
        new_holiday = HolidayModel(**_check_fields(fields))
        self.db.add(new_holiday)
        await self._commit("create")
        return holiday_to_schema(new_holiday)

    async def patch(self, holiday_id: str, fields: Dict[str, Any]) -> HolidaySchema:
        holiday = await self._load(holiday_id)
        for key, value in _check_fields(fields).items():
            setattr(holiday, key, value)
        await self._commit("update")
        return holiday_to_schema(holiday)

    async def fetch(self, query: Optional[HolidayQuery] = None) -> List[HolidaySchema]:
        query = query or HolidayQuery()
        conditions = []
        if query.year is not None:
            first, last = year_bounds(query.year)
            conditions.append(and_(HolidayModel.start_date >= first, HolidayModel.start_date <= last))
        if query.status is not None:
            conditions.append(HolidayModel.status == query.status)
        if query.statuses:
            conditions.append(HolidayModel.status.in_(query.statuses))
        if query.missing_name_en:
            conditions.append(HolidayModel.name_en.is_(None))
        if query.name is not None:
            conditions.append(HolidayModel.name == query.name)
        if query.start_date is not None:
            conditions.append(HolidayModel.start_date == query.start_date)

        stmt = select(HolidayModel).order_by(HolidayModel.start_date, HolidayModel.id)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceFailure(f"Could not fetch holidays: {e}") from e
        return [holiday_to_schema(h) for h in result.scalars().all()]

    async def get(self, holiday_id: str) -> HolidaySchema:
        return holiday_to_schema(await self._load(holiday_id))

    async def delete(self, holiday_id: str) -> None:
        holiday = await self._load(holiday_id)
        await self.db.delete(holiday)
        await self._commit("delete")

    async def delete_all(self) -> int:
        try:
            count = (await self.db.execute(select(func.count()).select_from(HolidayModel))).scalar_one()
            await self.db.execute(delete(HolidayModel))
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceFailure(f"Could not delete holidays: {e}") from e
        await self._commit("delete")
        return count


def fields_from(holiday, status: Optional[HolidayStatusEnum] = None) -> Dict[str, Any]:
    """Store fields copied from a schema object, with the given status."""
    fields = {name: getattr(holiday, name) for name in WRITABLE_FIELDS if name != "status"}
    if status is not None:
        fields["status"] = status
    return fields
