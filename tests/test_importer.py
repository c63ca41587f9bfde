"""
Tests for the preview and import pipeline.
"""

from datetime import date

import pytest

from conftest import FakeHolidayStore, SOURCE_2025, source_transport
from holiday_calendar.exceptions import SourceUnavailable
from holiday_calendar.models.enums import HolidayStatusEnum
from holiday_calendar.services.holiday_source import HolidaySource
from holiday_calendar.services.importer import import_year, preview_year


@pytest.fixture
def source(settings):
    return HolidaySource(settings, transport=source_transport())


class TestPreviewYear:
    @pytest.mark.asyncio
    async def test_marks_stored_holidays_and_writes_nothing(self, source, new_year):
        store = FakeHolidayStore([new_year])

        result = await preview_year(source, store, 2025)

        assert result.stats.model_dump() == {"total": 6, "new": 5, "existing": 1}
        flagged = [h.name for h in result.holidays if h.exists_in_db]
        assert flagged == ["Año Nuevo"]
        assert store.create_calls == []
        assert store.patch_calls == []

    @pytest.mark.asyncio
    async def test_other_years_do_not_count_as_existing(self, source):
        store = FakeHolidayStore([{"name": "Año Nuevo", "start_date": date(2024, 1, 1)}])
        result = await preview_year(source, store, 2025)
        assert result.stats.existing == 0

    @pytest.mark.asyncio
    async def test_source_failure_propagates(self, settings):
        source = HolidaySource(settings, transport=source_transport(status_code=500))
        with pytest.raises(SourceUnavailable):
            await preview_year(source, FakeHolidayStore(), 2025)


class TestImportYear:
    @pytest.mark.asyncio
    async def test_imports_missing_holidays_as_approved(self, source, new_year):
        store = FakeHolidayStore([new_year])

        result = await import_year(source, store, 2025)

        assert (result.imported, result.skipped, result.errors) == (5, 1, 0)
        stored = await store.fetch()
        assert len(stored) == len(SOURCE_2025)
        assert {h.status for h in stored} == {HolidayStatusEnum.APPROVED}
        bridge = [h for h in stored if h.start_date == date(2025, 8, 15)][0]
        assert bridge.description == "Feriado oficial (puente)"
        assert bridge.end_date == bridge.start_date

    @pytest.mark.asyncio
    async def test_running_twice_imports_nothing_new(self, source, fake_store):
        await import_year(source, fake_store, 2025)
        second = await import_year(source, fake_store, 2025)
        assert second.imported == 0
        assert second.skipped == len(SOURCE_2025)

    @pytest.mark.asyncio
    async def test_failed_create_is_counted(self, source, fake_store):
        fake_store.fail_names.add("Navidad")
        result = await import_year(source, fake_store, 2025)
        assert (result.imported, result.errors) == (5, 1)
