import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession  # type: ignore

from holiday_calendar.config import Settings
from holiday_calendar.db import get_db
from holiday_calendar.models.enums import HolidayStatusEnum
from holiday_calendar.models.holiday import (
    BulkDeleteRequest,
    BulkStatusUpdate,
    FetchHolidaysRequest,
    HolidayStatusUpdate,
    SaveCandidatesRequest,
)
from holiday_calendar.routes.dependencies import get_holiday_source, get_settings, get_store, verify_operator
from holiday_calendar.services import bulk
from holiday_calendar.services.audit import log_action as audit_log_action
from holiday_calendar.services.holiday_source import HolidaySource
from holiday_calendar.services.importer import import_year, preview_year
from holiday_calendar.services.jobs import recent_jobs, run_logged, run_translation_job
from holiday_calendar.services.store import HolidayQuery, HolidayStore
from holiday_calendar.utils.action_log import log_operator_action
from holiday_calendar.utils.request_info import request_context

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/holidays", tags=["Holidays"])

PUBLIC_CACHE_CONTROL = "public, s-maxage=3600, stale-while-revalidate=86400"


def _dump(model) -> dict:
    return model.model_dump(by_alias=True, mode="json")


@router.get("")
async def list_holidays(
    response: Response,
    year: Optional[int] = Query(None, ge=1900, le=9999),
    status: Optional[HolidayStatusEnum] = None,
    store: HolidayStore = Depends(get_store),
):
    """
    Public list of holidays, ordered by startDate.
    Optional filters: year (by startDate) and status.
    """
    holidays = await store.fetch(HolidayQuery(year=year, status=status))
    response.headers["Cache-Control"] = PUBLIC_CACHE_CONTROL
    return {
        "success": True,
        "holidays": [_dump(h) for h in holidays],
        "count": len(holidays),
    }


@router.get("/all", dependencies=[Depends(verify_operator)])
async def list_all_holidays(store: HolidayStore = Depends(get_store)):
    holidays = await store.fetch()
    return {"success": True, "holidays": [_dump(h) for h in holidays]}


@router.get("/jobs", dependencies=[Depends(verify_operator)])
async def list_job_runs(
    limit: int = Query(20, ge=1, le=200),
    job: Optional[str] = Query(None, description="Job name prefix, e.g. import_holidays or translate_holidays"),
    db: AsyncSession = Depends(get_db),
):
    """Latest import and translation runs from job_logs, newest first."""
    jobs = await recent_jobs(db, limit=limit, prefix=job)
    return {
        "success": True,
        "jobs": [j.model_dump(mode="json") for j in jobs],
        "count": len(jobs),
    }


@router.post("/fetch", dependencies=[Depends(verify_operator)])
async def fetch_holidays(
    payload: FetchHolidaysRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
    source: HolidaySource = Depends(get_holiday_source),
    store: HolidayStore = Depends(get_store),
    db: AsyncSession = Depends(get_db),
):
    """
    Fetch a year of holidays from the source.

    temporary=true only previews: each holiday is marked new or existing and
    nothing is written. Otherwise every missing holiday is imported as approved.
    """
    year = payload.year or settings.default_year
    ctx = request_context(request)

    if payload.temporary:
        result = await preview_year(source, store, year)
        log_operator_action("PREVIEW_HOLIDAYS", year=year, **result.stats.model_dump(), **ctx)
        return {
            "success": True,
            "message": result.message,
            "holidays": [_dump(h) for h in result.holidays],
            "stats": result.stats.model_dump(),
        }

    results = await run_logged(db, f"import_holidays_{year}", ctx["client_ip"], lambda: import_year(source, store, year))
    log_operator_action("IMPORT_HOLIDAYS", year=year, **results.model_dump(), **ctx)
    return {
        "success": True,
        "message": (
            f"API import completed: {results.imported} imported, "
            f"{results.skipped} skipped, {results.errors} errors"
        ),
        "results": results.model_dump(),
    }


@router.post("/save", dependencies=[Depends(verify_operator)])
async def save_holidays(
    payload: SaveCandidatesRequest,
    request: Request,
    store: HolidayStore = Depends(get_store),
):
    """Persist the selected candidates with one status; existing ones are skipped."""
    logger.info("Saving %s holidays with status: %s", len(payload.holidays), payload.status.value)
    results = await bulk.bulk_save(store, payload.holidays, payload.status)
    log_operator_action(
        "SAVE_HOLIDAYS", status=payload.status.value,
        saved=results.saved, skipped=results.skipped, errors=results.errors,
        **request_context(request),
    )
    return {
        "success": results.errors == 0,
        "outcome": results.outcome.value,
        "message": (
            f"Saved {results.saved} holidays to database "
            f"({results.skipped} skipped, {results.errors} errors)"
        ),
        "results": results.model_dump(include={"saved", "skipped", "errors"}),
    }


@router.post("/status", dependencies=[Depends(verify_operator)])
async def update_holiday_status(
    payload: HolidayStatusUpdate,
    request: Request,
    store: HolidayStore = Depends(get_store),
    db: AsyncSession = Depends(get_db),
):
    previous = await store.get(payload.id)
    updated = await bulk.update_status(store, payload.id, payload.status)

    ctx = request_context(request)
    await audit_log_action(
        db, "UPDATE_STATUS",
        affected_entity_id=updated.id,
        old_values={"status": previous.status},
        new_values={"status": updated.status},
        summary=f"{updated.name} ({updated.start_date}) set to {updated.status.value}",
        **ctx,
    )
    log_operator_action("UPDATE_STATUS", holiday_id=updated.id, status=updated.status.value, **ctx)
    return {
        "success": True,
        "message": f"Holiday updated to: {updated.status.value}",
        "holiday": _dump(updated),
    }


@router.post("/bulk-status", dependencies=[Depends(verify_operator)])
async def bulk_update_holiday_status(
    payload: BulkStatusUpdate,
    request: Request,
    store: HolidayStore = Depends(get_store),
    db: AsyncSession = Depends(get_db),
):
    results = await bulk.bulk_update(store, payload.ids, payload.status)

    ctx = request_context(request)
    await audit_log_action(
        db, "BULK_UPDATE_STATUS",
        new_values={"status": payload.status, "ids": payload.ids, "failed_ids": results.errors},
        summary=f"{results.updated} of {len(payload.ids)} holidays set to {payload.status.value}",
        **ctx,
    )
    log_operator_action(
        "BULK_UPDATE_STATUS", status=payload.status.value,
        updated=results.updated, failed=len(results.errors), **ctx,
    )
    return {
        "success": not results.errors,
        "outcome": results.outcome.value,
        "message": f"{results.updated} holidays updated to: {payload.status.value}",
        "updated": results.updated,
        "errors": results.errors,
    }


@router.post("/delete", dependencies=[Depends(verify_operator)])
async def delete_holidays(
    payload: BulkDeleteRequest,
    request: Request,
    store: HolidayStore = Depends(get_store),
    db: AsyncSession = Depends(get_db),
):
    results = await bulk.bulk_delete(store, payload.ids)

    ctx = request_context(request)
    await audit_log_action(
        db, "DELETE_HOLIDAYS",
        old_values={"ids": payload.ids},
        new_values={"failed_ids": results.errors},
        summary=f"{results.deleted} of {len(payload.ids)} holidays deleted",
        **ctx,
    )
    log_operator_action("DELETE_HOLIDAYS", deleted=results.deleted, failed=len(results.errors), **ctx)
    return {
        "success": not results.errors,
        "outcome": results.outcome.value,
        "message": f"{results.deleted} holidays deleted successfully",
        "deletedCount": results.deleted,
        "errors": results.errors,
    }


@router.delete("", dependencies=[Depends(verify_operator)])
async def delete_all_holidays(
    request: Request,
    store: HolidayStore = Depends(get_store),
    db: AsyncSession = Depends(get_db),
):
    deleted = await bulk.delete_all(store)

    ctx = request_context(request)
    await audit_log_action(db, "DELETE_ALL_HOLIDAYS", summary=f"{deleted} holidays deleted", **ctx)
    log_operator_action("DELETE_ALL_HOLIDAYS", deleted=deleted, **ctx)
    return {
        "success": True,
        "message": f"{deleted} holidays deleted successfully",
        "deletedCount": deleted,
    }


@router.post("/translate", dependencies=[Depends(verify_operator)])
async def translate_holidays(request: Request, db: AsyncSession = Depends(get_db)):
    """Translate every holiday that has no English name yet."""
    ctx = request_context(request)
    results = await run_translation_job(db, executed_by=ctx["client_ip"])
    log_operator_action("TRANSLATE_HOLIDAYS", translated=results.translated, errors=results.errors, **ctx)

    if results.translated == 0 and results.errors == 0:
        message = "All holidays already have English translations!"
    else:
        message = f"Translated {results.translated} holidays"
    body = {
        "success": results.errors == 0,
        "message": message,
        "translated": results.translated,
        "errors": results.errors,
    }
    if results.errors:
        body["errorsList"] = results.errors_list
    return body
