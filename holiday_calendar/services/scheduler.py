import logging
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from holiday_calendar.config import Settings
from holiday_calendar.db import Database
from holiday_calendar.services.jobs import run_translation_job

logger = logging.getLogger(__name__)

TRANSLATION_JOB_ID = "translate_holidays_daily"


async def nightly_translation(database: Database):
    """
    Fill in missing English names once a day.
    Holidays saved since the last run get nameEn without an operator action.
    """
    logger.info("Running scheduled translation backfill")
    async with database.session_factory() as db:
        try:
            result = await run_translation_job(db, executed_by="scheduler")
        except Exception:
            logger.exception("Scheduled translation backfill failed")
            return None
    logger.info("Scheduled translation complete: %s translated, %s errors", result.translated, result.errors)
    return None


def start_scheduler(settings: Settings, database: Database) -> Optional[AsyncIOScheduler]:
    if not settings.scheduler_enabled:
        logger.info("Scheduler disabled")
        return None

    scheduler = AsyncIOScheduler()
    # Trigger: every day at TRANSLATION_JOB_HOUR:00
    scheduler.add_job(
        nightly_translation,
        "cron",
        hour=settings.translation_job_hour,
        minute=0,
        args=[database],
        id=TRANSLATION_JOB_ID,
        replace_existing=True,
    )
    scheduler.start()
    logger.info("Scheduler started")
    return scheduler


def shutdown_scheduler(scheduler: Optional[AsyncIOScheduler]) -> None:
    if scheduler is None or not scheduler.running:
        return
    scheduler.shutdown()
    logger.info("Scheduler shutdown")
