"""
Fetch pipeline: pull a year from the holiday source, then either preview it
against the store (temporary mode) or import every missing holiday as
approved (persistent mode).
"""
import logging

from holiday_calendar.exceptions import PersistenceFailure
from holiday_calendar.models.enums import HolidayStatusEnum
from holiday_calendar.models.holiday import ImportResult
from holiday_calendar.services.holiday_source import HolidaySource
from holiday_calendar.services.reconciliation import ReconciliationResult, reconcile
from holiday_calendar.services.store import HolidayQuery, HolidayStore

logger = logging.getLogger(__name__)


async def preview_year(source: HolidaySource, store: HolidayStore, year: int) -> ReconciliationResult:
    """Fetch a year and mark which holidays already exist. Writes nothing."""
    fetched = await source.fetch_year(year)
    existing = await store.fetch(HolidayQuery(year=year))
    logger.info("Found %s existing holidays in database for %s", len(existing), year)

    result = reconcile(fetched, existing)
    logger.info(
        "Processed %s holidays: %s new, %s already exist",
        result.stats.total, result.stats.new, result.stats.existing,
    )
    return result


async def import_year(source: HolidaySource, store: HolidayStore, year: int) -> ImportResult:
    """Fetch a year and create every holiday not yet stored, with status approved."""
    fetched = await source.fetch_year(year)

    result = ImportResult()
    for holiday in fetched:
        try:
            if await store.exists(holiday.name, holiday.holiday_date):
                result.skipped += 1
                continue
            await store.create({
                "name": holiday.name,
                "start_date": holiday.holiday_date,
                "end_date": holiday.holiday_date,
                "description": holiday.description,
                "status": HolidayStatusEnum.APPROVED,
            })
            result.imported += 1
        except PersistenceFailure as e:
            logger.error("Error importing %s: %s", holiday.name, e)
            result.errors += 1

    logger.info(
        "API import completed: %s imported, %s skipped, %s errors",
        result.imported, result.skipped, result.errors,
    )
    return result
