"""
Job log SQLAlchemy model: one row per import or translation run
"""
from sqlalchemy import Column, Integer, String, DateTime, Enum as SQLEnum, JSON, Index  # type: ignore
from datetime import datetime
from holiday_calendar.db import Base
from holiday_calendar.models.enums import JobStatusEnum
from typing import Optional, Any, Dict
from pydantic import BaseModel, Field


class JobLog(Base):
    """Job logs table"""
    __tablename__ = "job_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_name = Column(String(255), nullable=False, comment="e.g. translate_holidays_20251018_030000")
    executed_at = Column(DateTime, default=datetime.utcnow)
    status = Column(SQLEnum(JobStatusEnum), nullable=False)
    details = Column(JSON, nullable=True, comment="Result summary as JSON")
    executed_by = Column(String(255), nullable=True, comment="Operator IP, 'scheduler' or 'cli'")

    __table_args__ = (
        Index("idx_job_name", "job_name"),
        Index("idx_job_executed_at", "executed_at"),
    )


class JobLogSchema(BaseModel):
    """Model for job_logs table"""
    id: Optional[int] = None
    job_name: str
    executed_at: Optional[datetime] = None
    status: JobStatusEnum
    details: Optional[Dict[str, Any]] = Field(default_factory=dict)
    executed_by: Optional[str] = None

    class Config:
        from_attributes = True
