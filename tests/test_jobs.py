"""
Tests for job logging, the audit trail and the scheduler wiring.
"""

from datetime import date, datetime

import pytest
from sqlalchemy import select

from holiday_calendar.exceptions import SourceUnavailable
from holiday_calendar.models.audit import AuditLog
from holiday_calendar.models.enums import HolidayStatusEnum, JobStatusEnum
from holiday_calendar.models.holiday import ImportResult
from holiday_calendar.models.job import JobLog, JobLogSchema
from holiday_calendar.services.audit import log_action
from holiday_calendar.services.jobs import job_name_for, recent_jobs, record_job, run_logged, run_translation_job
from holiday_calendar.services.scheduler import TRANSLATION_JOB_ID, shutdown_scheduler, start_scheduler
from holiday_calendar.services.store import SqlAlchemyHolidayStore


async def job_rows(session):
    return (await session.execute(select(JobLog).order_by(JobLog.id))).scalars().all()


class TestRunLogged:
    @pytest.mark.asyncio
    async def test_success_is_recorded_with_details(self, session):
        async def work():
            return ImportResult(imported=3, skipped=1)

        result = await run_logged(session, "import_holidays_2025", "cli", work)

        assert result.imported == 3
        (row,) = await job_rows(session)
        job = JobLogSchema.model_validate(row)
        assert job.status == JobStatusEnum.SUCCESS
        assert job.job_name.startswith("import_holidays_2025_")
        assert job.details == {"imported": 3, "skipped": 1, "errors": 0}
        assert job.executed_by == "cli"

    @pytest.mark.asyncio
    async def test_failure_is_recorded_and_reraised(self, session):
        async def work():
            raise SourceUnavailable("API returned only 2 holidays")

        with pytest.raises(SourceUnavailable):
            await run_logged(session, "import_holidays_2025", None, work)

        (row,) = await job_rows(session)
        assert row.status == JobStatusEnum.FAILED
        assert row.details == {"error": "API returned only 2 holidays"}

    def test_job_name(self):
        assert job_name_for("translate_holidays", datetime(2025, 10, 18, 3, 0, 5)) == "translate_holidays_20251018_030005"


class TestRecentJobs:
    @pytest.mark.asyncio
    async def test_newest_first_with_limit_and_prefix(self, session):
        await record_job(session, "import_holidays_2025_20251018_010000", JobStatusEnum.SUCCESS, {}, "cli")
        await record_job(session, "translate_holidays_20251018_020000", JobStatusEnum.FAILED, {"error": "x"}, None)
        await record_job(session, "import_holidays_2026_20251018_030000", JobStatusEnum.SUCCESS, {}, "cli")

        jobs = await recent_jobs(session)
        assert [j.job_name[:20] for j in jobs] == [
            "import_holidays_2026", "translate_holidays_2", "import_holidays_2025",
        ]
        assert all(isinstance(j, JobLogSchema) for j in jobs)

        assert len(await recent_jobs(session, limit=1)) == 1
        imports = await recent_jobs(session, prefix="import_holidays")
        assert [j.job_name[:20] for j in imports] == ["import_holidays_2026", "import_holidays_2025"]


class TestTranslationJob:
    @pytest.mark.asyncio
    async def test_translates_and_logs(self, session):
        store = SqlAlchemyHolidayStore(session)
        await store.create({
            "name": "Navidad",
            "start_date": date(2025, 12, 25),
            "end_date": date(2025, 12, 25),
            "status": HolidayStatusEnum.APPROVED,
        })

        result = await run_translation_job(session, executed_by="scheduler")

        assert result.translated == 1
        (row,) = await job_rows(session)
        assert row.details["translated"] == 1
        assert (await store.fetch())[0].name_en == "Christmas"


class TestAuditLog:
    @pytest.mark.asyncio
    async def test_values_are_stored_as_json(self, session):
        await log_action(
            session, "UPDATE_STATUS",
            affected_entity_id="7",
            old_values={"status": HolidayStatusEnum.APPROVED},
            new_values={"status": HolidayStatusEnum.WORKING, "on": date(2025, 3, 4)},
            summary="Carnaval set to working",
            request_method="POST",
            request_path="/api/holidays/status",
            client_ip="10.0.0.1",
        )

        (row,) = (await session.execute(select(AuditLog))).scalars().all()
        assert row.affected_entity_type == "HOLIDAY"
        assert row.old_values == {"status": "approved"}
        assert row.new_values == {"status": "working", "on": "2025-03-04"}


class TestScheduler:
    def test_disabled_by_default(self, settings):
        assert start_scheduler(settings, None) is None
        shutdown_scheduler(None)

    @pytest.mark.asyncio
    async def test_daily_translation_job_registered(self, settings, database):
        settings = settings.model_copy(update={"scheduler_enabled": True, "translation_job_hour": 4})
        scheduler = start_scheduler(settings, database)
        try:
            job = scheduler.get_job(TRANSLATION_JOB_ID)
            assert job is not None
            assert "hour='4'" in str(job.trigger)
        finally:
            shutdown_scheduler(scheduler)
