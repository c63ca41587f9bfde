"""
Script to import a year of public holidays from the holiday source.
Every holiday not yet stored is created with status approved.
Run from project root: python -m scripts.import_holidays 2026
"""
import asyncio
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from holiday_calendar.config import Settings
from holiday_calendar.db import Database
from holiday_calendar.exceptions import SourceUnavailable
from holiday_calendar.services.holiday_source import HolidaySource
from holiday_calendar.services.importer import import_year
from holiday_calendar.services.jobs import run_logged
from holiday_calendar.services.store import SqlAlchemyHolidayStore


async def import_holidays(year: int) -> int:
    settings = Settings.from_env()
    database = Database(settings)
    source = HolidaySource(settings)
    try:
        await database.init()
        async with database.session_factory() as db:
            store = SqlAlchemyHolidayStore(db)
            result = await run_logged(db, f"import_holidays_{year}", "cli", lambda: import_year(source, store, year))
    except SourceUnavailable as e:
        print(f"❌ {e.message}")
        return 1
    finally:
        await database.close()

    print(f"✅ API import completed: {result.imported} imported, {result.skipped} skipped, {result.errors} errors")
    return 1 if result.errors else 0


if __name__ == "__main__":
    target_year = int(sys.argv[1]) if len(sys.argv) > 1 else Settings.from_env().default_year
    sys.exit(asyncio.run(import_holidays(target_year)))
