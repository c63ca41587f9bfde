"""
Reconciliation of freshly fetched holidays against the persisted ones.

Pure: reads its inputs, never touches the store. Persistence only happens
when the operator saves selected candidates (see services.bulk.bulk_save).
"""
import secrets
import string
import time
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Set

from holiday_calendar.models.enums import CandidateStatusEnum
from holiday_calendar.models.holiday import CandidateHoliday, ReconciliationStats, SourceHoliday
from holiday_calendar.utils.dates import format_date_key

_ID_ALPHABET = string.ascii_lowercase + string.digits


@dataclass
class ReconciliationResult:
    holidays: List[CandidateHoliday] = field(default_factory=list)
    stats: ReconciliationStats = field(default_factory=ReconciliationStats)

    @property
    def message(self) -> str:
        return (
            f"Found {self.stats.total} holidays: {self.stats.new} new, "
            f"{self.stats.existing} already exist in database"
        )


def holiday_key(start_date: date, name: str) -> str:
    """De-duplication key: start date plus name."""
    return f"{format_date_key(start_date)}_{name}"


def temporary_id() -> str:
    """Id for a candidate that has not been persisted: temp_<millis>_<random>."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"temp_{int(time.time() * 1000)}_{suffix}"


def reconcile(candidates: Iterable[SourceHoliday], existing: Iterable) -> ReconciliationResult:
    """
    Mark each candidate as new or already persisted.

    `candidates` must already be sorted ascending by date; output order is
    input order. `existing` is any iterable of records with `start_date`
    and `name`.
    """
    existing_keys: Set[str] = {holiday_key(h.start_date, h.name) for h in existing}

    result = ReconciliationResult()
    for candidate in candidates:
        exists_in_db = holiday_key(candidate.holiday_date, candidate.name) in existing_keys
        result.holidays.append(
            CandidateHoliday(
                id=temporary_id(),
                name=candidate.name,
                start_date=candidate.holiday_date,
                end_date=candidate.holiday_date,
                description=candidate.description,
                status=CandidateStatusEnum.EXISTING if exists_in_db else CandidateStatusEnum.APPROVED,
                exists_in_db=exists_in_db,
            )
        )

    existing_count = sum(1 for h in result.holidays if h.exists_in_db)
    result.stats = ReconciliationStats(
        total=len(result.holidays),
        new=len(result.holidays) - existing_count,
        existing=existing_count,
    )
    return result
