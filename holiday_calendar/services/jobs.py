"""
Job runs with a job_logs trail.

Import and translation runs record SUCCESS or FAILED with their result
summary, whoever triggered them (route, scheduler or CLI).
"""
import logging
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy import select  # type: ignore
from sqlalchemy.ext.asyncio import AsyncSession  # type: ignore

from holiday_calendar.models.enums import JobStatusEnum
from holiday_calendar.models.holiday import TranslationResult
from holiday_calendar.models.job import JobLog, JobLogSchema
from holiday_calendar.services.store import SqlAlchemyHolidayStore
from holiday_calendar.services.translation import translate_missing

logger = logging.getLogger(__name__)

T = TypeVar("T")


def job_name_for(prefix: str, now: Optional[datetime] = None) -> str:
    now = now or datetime.utcnow()
    return f"{prefix}_{now.strftime('%Y%m%d_%H%M%S')}"


async def record_job(db: AsyncSession, job_name: str, status: JobStatusEnum, details: Dict[str, Any], executed_by: Optional[str]) -> None:
    db.add(JobLog(
        job_name=job_name,
        status=status,
        executed_at=datetime.utcnow(),
        executed_by=executed_by,
        details=details,
    ))
    await db.commit()


async def run_logged(db: AsyncSession, prefix: str, executed_by: Optional[str], work: Callable[[], Awaitable[T]]) -> T:
    """Run `work`, then write a job log row for it whether it succeeded or not."""
    job_name = job_name_for(prefix)
    try:
        result = await work()
    except Exception as e:
        await db.rollback()
        await record_job(db, job_name, JobStatusEnum.FAILED, {"error": str(e)}, executed_by)
        logger.error("Job %s failed: %s", job_name, e)
        raise
    details = result.model_dump(mode="json") if isinstance(result, BaseModel) else {"result": result}
    await record_job(db, job_name, JobStatusEnum.SUCCESS, details, executed_by)
    logger.info("Job %s completed: %s", job_name, details)
    return result


async def run_translation_job(db: AsyncSession, executed_by: Optional[str] = None) -> TranslationResult:
    store = SqlAlchemyHolidayStore(db)
    return await run_logged(db, "translate_holidays", executed_by, lambda: translate_missing(store))


async def recent_jobs(db: AsyncSession, limit: int = 20, prefix: Optional[str] = None) -> List[JobLogSchema]:
    """Latest job runs first, optionally only those whose name starts with `prefix`."""
    stmt = select(JobLog).order_by(JobLog.executed_at.desc(), JobLog.id.desc()).limit(limit)
    if prefix:
        stmt = stmt.where(JobLog.job_name.startswith(prefix, autoescape=True))
    result = await db.execute(stmt)
    return [JobLogSchema.model_validate(job) for job in result.scalars().all()]
