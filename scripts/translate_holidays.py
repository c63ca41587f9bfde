"""
Script to translate existing holidays.
Adds nameEn (and descriptionEn) to every holiday that doesn't have it yet.
Run from project root: python -m scripts.translate_holidays
"""
import asyncio
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from holiday_calendar.config import Settings
from holiday_calendar.db import Database
from holiday_calendar.services.jobs import run_translation_job


async def translate_holidays() -> int:
    database = Database(Settings.from_env())
    try:
        await database.init()
        async with database.session_factory() as db:
            result = await run_translation_job(db, executed_by="cli")
    finally:
        await database.close()

    if result.translated == 0 and result.errors == 0:
        print("✅ All holidays already have English translations!")
        return 0

    print("\n✅ Translation complete!")
    print(f"   Translated: {result.translated}")
    print(f"   Errors: {result.errors}")
    for line in result.errors_list:
        print(f"   - {line}")
    return 1 if result.errors else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(translate_holidays()))
