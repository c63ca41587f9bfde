"""
Holiday SQLAlchemy model and the Pydantic wire schemas built around it
"""
from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from sqlalchemy import Column, Integer, String, Date, DateTime, Text, Enum as SQLEnum, Index, UniqueConstraint, text  # type: ignore

from holiday_calendar.db import Base
from holiday_calendar.models.enums import HolidayStatusEnum, CandidateStatusEnum, BatchOutcomeEnum
from holiday_calendar.utils.dates import parse_date_string
from holiday_calendar.utils.id_utils import to_wire_id


class Holiday(Base):
    """Holidays table"""
    __tablename__ = "holidays"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, comment="Spanish display name")
    name_en = Column(String(255), nullable=True, comment="English display name, set by translation")
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    description = Column(Text, nullable=True)
    description_en = Column(Text, nullable=True)
    status = Column(
        SQLEnum(HolidayStatusEnum, values_callable=lambda e: [m.value for m in e], name="holiday_status"),
        nullable=False,
        default=HolidayStatusEnum.APPROVED,
    )
    created_at = Column(DateTime, default=datetime.utcnow, server_default=text("CURRENT_TIMESTAMP"))
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("name", "start_date", name="uq_holiday_name_start"),
        Index("idx_start_date", "start_date"),
        Index("idx_status", "status"),
        Index("idx_start_status", "start_date", "status"),
    )


# Pydantic Models (for API request/response)

def _coerce_date(value: Any) -> Any:
    # Dates go through parse_date_string, never a timestamp parser
    if isinstance(value, str):
        return parse_date_string(value)
    return value


class HolidayFields(BaseModel):
    """Fields shared by persisted holidays and fetched candidates"""
    name: str = Field(..., min_length=1)
    name_en: Optional[str] = Field(None, alias="nameEn")
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    description: Optional[str] = None
    description_en: Optional[str] = Field(None, alias="descriptionEn")

    class Config:
        populate_by_name = True

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, value: Any) -> Any:
        return _coerce_date(value)

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class HolidaySchema(HolidayFields):
    """Holiday record wire shape: {id, name, nameEn?, startDate, endDate, description?, descriptionEn?, status}"""
    id: str
    status: HolidayStatusEnum = HolidayStatusEnum.APPROVED


class CandidateHoliday(HolidayFields):
    """A holiday fetched from the source, not yet persisted"""
    id: str
    status: CandidateStatusEnum = CandidateStatusEnum.APPROVED
    exists_in_db: bool = Field(False, alias="existsInDB")


class SourceHoliday(BaseModel):
    """One record from the external source: {fecha, tipo, nombre}"""
    holiday_date: date = Field(..., alias="fecha")
    kind: str = Field(..., alias="tipo")
    name: str = Field(..., alias="nombre", min_length=1)

    class Config:
        populate_by_name = True

    @field_validator("holiday_date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> Any:
        return _coerce_date(value)

    @property
    def description(self) -> str:
        return f"Feriado oficial ({self.kind})"


class HolidayStatusUpdate(BaseModel):
    id: str = Field(..., min_length=1)
    status: HolidayStatusEnum


class BulkStatusUpdate(BaseModel):
    ids: List[str] = Field(..., min_length=1)
    status: HolidayStatusEnum


class BulkDeleteRequest(BaseModel):
    ids: List[str] = Field(..., min_length=1)


class SaveCandidatesRequest(BaseModel):
    holidays: List[CandidateHoliday]
    status: HolidayStatusEnum


class FetchHolidaysRequest(BaseModel):
    year: Optional[int] = Field(None, ge=1900, le=9999)
    temporary: bool = False


class ReconciliationStats(BaseModel):
    total: int = 0
    new: int = 0
    existing: int = 0


class BulkUpdateResult(BaseModel):
    updated: int = 0
    errors: List[str] = Field(default_factory=list)
    outcome: BatchOutcomeEnum = BatchOutcomeEnum.SUCCESS


class BulkSaveResult(BaseModel):
    saved: int = 0
    skipped: int = 0
    errors: int = 0
    outcome: BatchOutcomeEnum = BatchOutcomeEnum.SUCCESS


class BulkDeleteResult(BaseModel):
    deleted: int = 0
    errors: List[str] = Field(default_factory=list)
    outcome: BatchOutcomeEnum = BatchOutcomeEnum.SUCCESS


class ImportResult(BaseModel):
    imported: int = 0
    skipped: int = 0
    errors: int = 0


class TranslationResult(BaseModel):
    translated: int = 0
    errors: int = 0
    errors_list: List[str] = Field(default_factory=list, alias="errorsList")

    class Config:
        populate_by_name = True


def holiday_to_schema(holiday: Holiday) -> HolidaySchema:
    """Convert a Holiday row to its wire schema."""
    return HolidaySchema(
        id=to_wire_id(holiday.id),
        name=holiday.name,
        name_en=holiday.name_en,
        start_date=holiday.start_date,
        end_date=holiday.end_date,
        description=holiday.description,
        description_en=holiday.description_en,
        status=holiday.status,
    )
