"""
Models package for the holiday calendar.

SQLAlchemy ORM models are split by table; Pydantic wire schemas live in the
same files as their corresponding SQLAlchemy models.
"""

# Enums
from .enums import (
    HolidayStatusEnum,
    CandidateStatusEnum,
    BatchOutcomeEnum,
    JobStatusEnum,
    LanguageEnum,
)

# SQLAlchemy Models
from .holiday import Holiday
from .job import JobLog
from .audit import AuditLog

# Pydantic Models
from .holiday import (
    HolidayFields,
    HolidaySchema,
    CandidateHoliday,
    SourceHoliday,
    HolidayStatusUpdate,
    BulkStatusUpdate,
    BulkDeleteRequest,
    SaveCandidatesRequest,
    FetchHolidaysRequest,
    ReconciliationStats,
    BulkUpdateResult,
    BulkSaveResult,
    BulkDeleteResult,
    ImportResult,
    TranslationResult,
    holiday_to_schema,
)
from .job import JobLogSchema

__all__ = [
    # Enums
    "HolidayStatusEnum",
    "CandidateStatusEnum",
    "BatchOutcomeEnum",
    "JobStatusEnum",
    "LanguageEnum",
    # SQLAlchemy Models
    "Holiday",
    "JobLog",
    "AuditLog",
    # Pydantic Models
    "HolidayFields",
    "HolidaySchema",
    "CandidateHoliday",
    "SourceHoliday",
    "HolidayStatusUpdate",
    "BulkStatusUpdate",
    "BulkDeleteRequest",
    "SaveCandidatesRequest",
    "FetchHolidaysRequest",
    "ReconciliationStats",
    "BulkUpdateResult",
    "BulkSaveResult",
    "BulkDeleteResult",
    "ImportResult",
    "TranslationResult",
    "JobLogSchema",
    "holiday_to_schema",
]
