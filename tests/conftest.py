"""Shared fixtures: settings, an in-memory holiday store, and a SQLite database."""

import itertools
from datetime import date
from typing import Any, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

from holiday_calendar.config import Settings
from holiday_calendar.db import Database
from holiday_calendar.exceptions import HolidayNotFound, PersistenceFailure
from holiday_calendar.models.enums import HolidayStatusEnum
from holiday_calendar.models.holiday import CandidateHoliday, HolidaySchema
from holiday_calendar.services.store import HolidayQuery, HolidayStore


class FakeHolidayStore(HolidayStore):
    """Dict-backed HolidayStore that records calls and can fail on demand."""

    def __init__(self, holidays: Optional[List[Dict[str, Any]]] = None):
        self._ids = itertools.count(1)
        self.records: Dict[str, HolidaySchema] = {}
        self.create_calls: List[Dict[str, Any]] = []
        self.patch_calls: List[tuple] = []
        self.fail_ids: set = set()
        self.fail_names: set = set()
        for fields in holidays or []:
            self._insert(fields)

    def _insert(self, fields: Dict[str, Any]) -> HolidaySchema:
        fields = dict(fields)
        fields.setdefault("end_date", fields["start_date"])
        fields.setdefault("status", HolidayStatusEnum.APPROVED)
        holiday = HolidaySchema(id=str(next(self._ids)), **fields)
        self.records[holiday.id] = holiday
        return holiday

    async def create(self, fields):
        self.create_calls.append(fields)
        if fields.get("name") in self.fail_names:
            raise PersistenceFailure(f"create failed for {fields['name']}")
        return self._insert(fields)

    async def patch(self, holiday_id, fields):
        self.patch_calls.append((holiday_id, fields))
        if holiday_id in self.fail_ids:
            raise PersistenceFailure(f"patch failed for {holiday_id}")
        holiday = await self.get(holiday_id)
        updated = holiday.model_copy(update=fields)
        self.records[holiday_id] = updated
        return updated

    async def fetch(self, query: Optional[HolidayQuery] = None):
        query = query or HolidayQuery()
        results = []
        for holiday in self.records.values():
            if query.year is not None and holiday.start_date.year != query.year:
                continue
            if query.status is not None and holiday.status != query.status:
                continue
            if query.statuses and holiday.status not in query.statuses:
                continue
            if query.missing_name_en and holiday.name_en is not None:
                continue
            if query.name is not None and holiday.name != query.name:
                continue
            if query.start_date is not None and holiday.start_date != query.start_date:
                continue
            results.append(holiday)
        return sorted(results, key=lambda h: (h.start_date, int(h.id)))

    async def get(self, holiday_id):
        if holiday_id not in self.records:
            raise HolidayNotFound(holiday_id)
        return self.records[holiday_id]

    async def delete(self, holiday_id):
        if holiday_id in self.fail_ids:
            raise PersistenceFailure(f"delete failed for {holiday_id}")
        await self.get(holiday_id)
        del self.records[holiday_id]

    async def delete_all(self):
        count = len(self.records)
        self.records.clear()
        return count


def make_candidate(name: str, start: str, end: Optional[str] = None, **extra) -> CandidateHoliday:
    data = {
        "id": f"temp_{name}",
        "name": name,
        "startDate": start,
        "endDate": end or start,
        "description": "Feriado oficial (inamovible)",
    }
    data.update(extra)
    return CandidateHoliday.model_validate(data)


SOURCE_2025 = [
    {"fecha": "2025-05-01", "tipo": "inamovible", "nombre": "Día del Trabajador"},
    {"fecha": "2025-01-01", "tipo": "inamovible", "nombre": "Año Nuevo"},
    {"fecha": "2025-03-03", "tipo": "inamovible", "nombre": "Carnaval"},
    {"fecha": "2025-03-04", "tipo": "inamovible", "nombre": "Carnaval"},
    {"fecha": "2025-12-25", "tipo": "inamovible", "nombre": "Navidad"},
    {"fecha": "2025-08-15", "tipo": "puente", "nombre": "Puente turístico no laborable"},
]


def source_transport(payload=None, status_code: int = 200) -> httpx.MockTransport:
    """MockTransport answering every request with `payload` as JSON."""
    body = SOURCE_2025 if payload is None else payload

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body)

    return httpx.MockTransport(handler)


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'holidays.db'}", log_file=None)


@pytest.fixture
def fake_store():
    return FakeHolidayStore()


@pytest_asyncio.fixture
async def database(settings):
    db = Database(settings)
    await db.init()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def session(database):
    async with database.session_factory() as s:
        yield s


@pytest.fixture
def new_year():
    return {"name": "Año Nuevo", "start_date": date(2025, 1, 1)}
