"""
Enum definitions shared by the ORM models, schemas and services
"""
import enum


class HolidayStatusEnum(str, enum.Enum):
    """Persisted status of a holiday. All states are mutually reachable."""
    APPROVED = "approved"  # official holiday, no work
    WORKING = "working"  # holiday, but staff works
    CUSTOM = "custom"  # organization-specific day off


class CandidateStatusEnum(str, enum.Enum):
    """Provisional status of a fetched candidate; EXISTING is never persisted."""
    APPROVED = "approved"
    EXISTING = "existing"


class BatchOutcomeEnum(str, enum.Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"


class JobStatusEnum(str, enum.Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class LanguageEnum(str, enum.Enum):
    EN = "en"
    ES = "es"
