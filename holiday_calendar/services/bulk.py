"""
Status and bulk update coordinator.

Batch operations are best effort: each item is applied on its own, a failure
is logged and counted, and the remaining items still run. Request-level
validation happens before the first item is touched.
"""
import logging
from typing import Iterable, List, Optional

from holiday_calendar.exceptions import PersistenceFailure, ValidationFailure
from holiday_calendar.models.enums import BatchOutcomeEnum, HolidayStatusEnum
from holiday_calendar.models.holiday import (
    BulkDeleteResult,
    BulkSaveResult,
    BulkUpdateResult,
    CandidateHoliday,
    HolidaySchema,
)
from holiday_calendar.services.store import HolidayStore, fields_from

logger = logging.getLogger(__name__)


def batch_outcome(succeeded: int, failed: int) -> BatchOutcomeEnum:
    if failed == 0:
        return BatchOutcomeEnum.SUCCESS
    if succeeded == 0:
        return BatchOutcomeEnum.FAILED
    return BatchOutcomeEnum.PARTIAL


def validate_status(status) -> HolidayStatusEnum:
    """Coerce a status value; only approved, working and custom are valid."""
    if status is None or status == "":
        raise ValidationFailure("Status is required.")
    try:
        return HolidayStatusEnum(getattr(status, "value", status))
    except ValueError:
        raise ValidationFailure("Valid status (approved, working, or custom) is required.")


def validate_ids(ids: Optional[Iterable[str]]) -> List[str]:
    if ids is None or isinstance(ids, str):
        raise ValidationFailure("IDs are required.")
    id_list = [str(i) for i in ids]
    if not id_list or any(not i.strip() for i in id_list):
        raise ValidationFailure("IDs are required.")
    return id_list


async def update_status(store: HolidayStore, holiday_id: str, status) -> HolidaySchema:
    """Patch the status of a single holiday."""
    if not holiday_id:
        raise ValidationFailure("ID and status are required.")
    status = validate_status(status)
    return await store.patch(holiday_id, {"status": status})


async def bulk_update(store: HolidayStore, ids: Iterable[str], status) -> BulkUpdateResult:
    """Apply one status to many holidays; failed ids are reported, not raised."""
    id_list = validate_ids(ids)
    status = validate_status(status)

    result = BulkUpdateResult()
    for holiday_id in id_list:
        try:
            await store.patch(holiday_id, {"status": status})
            result.updated += 1
        except PersistenceFailure as e:
            logger.warning("Status update to %s failed for holiday %s: %s", status.value, holiday_id, e)
            result.errors.append(holiday_id)
    result.outcome = batch_outcome(result.updated, len(result.errors))
    return result


async def bulk_save(store: HolidayStore, candidates: Iterable[CandidateHoliday], status) -> BulkSaveResult:
    """
    Persist candidates with the given status.

    Existence is re-checked against the store right before each insert. The
    existsInDB flag comes from the preview snapshot and is not trusted either
    way: a flagged candidate whose record has since been deleted is saved.
    """
    if candidates is None:
        raise ValidationFailure("Holidays array is required")
    status = validate_status(status)

    result = BulkSaveResult()
    for candidate in candidates:
        try:
            if await store.exists(candidate.name, candidate.start_date):
                result.skipped += 1
                continue
            await store.create(fields_from(candidate, status))
            result.saved += 1
        except PersistenceFailure as e:
            logger.error("Error saving %s (%s): %s", candidate.name, candidate.start_date, e)
            result.errors += 1
    result.outcome = batch_outcome(result.saved + result.skipped, result.errors)
    return result


async def bulk_delete(store: HolidayStore, ids: Iterable[str]) -> BulkDeleteResult:
    id_list = validate_ids(ids)

    result = BulkDeleteResult()
    for holiday_id in id_list:
        try:
            await store.delete(holiday_id)
            result.deleted += 1
        except PersistenceFailure as e:
            logger.warning("Delete failed for holiday %s: %s", holiday_id, e)
            result.errors.append(holiday_id)
    result.outcome = batch_outcome(result.deleted, len(result.errors))
    return result


async def delete_all(store: HolidayStore) -> int:
    deleted = await store.delete_all()
    logger.info("Deleted all %s holidays", deleted)
    return deleted
