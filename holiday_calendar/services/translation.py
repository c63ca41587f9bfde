"""
Translation backfill: fill in English names (and descriptions) for stored
holidays that do not have one yet.
"""
import logging

from holiday_calendar.exceptions import PersistenceFailure
from holiday_calendar.models.holiday import TranslationResult
from holiday_calendar.services.store import HolidayQuery, HolidayStore
from holiday_calendar.utils.translation import extract_kind, translate_description, translate_name

logger = logging.getLogger(__name__)


async def translate_missing(store: HolidayStore) -> TranslationResult:
    """Patch nameEn (and descriptionEn when missing) on every holiday without nameEn."""
    holidays = await store.fetch(HolidayQuery(missing_name_en=True))
    logger.info("Found %s holidays without English translation", len(holidays))

    result = TranslationResult()
    for holiday in holidays:
        fields = {"name_en": translate_name(holiday.name)}
        if holiday.description and not holiday.description_en:
            fields["description_en"] = translate_description(
                holiday.description, extract_kind(holiday.description)
            )
        try:
            logger.info('Translating: "%s" -> "%s"', holiday.name, fields["name_en"])
            await store.patch(holiday.id, fields)
            result.translated += 1
        except PersistenceFailure as e:
            logger.error("Error translating %s: %s", holiday.name, e)
            result.errors += 1
            result.errors_list.append(f"{holiday.name}: {e.message}")
    return result
