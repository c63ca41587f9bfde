"""
Audit service: records status changes and deletions to the audit_logs table.
"""
import logging
from datetime import date, datetime
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError  # type: ignore
from sqlalchemy.ext.asyncio import AsyncSession  # type: ignore

from holiday_calendar.models.audit import AuditLog

logger = logging.getLogger(__name__)


def _json_safe(obj: Any) -> Any:
    """Convert values to JSON-serializable form for the JSON columns."""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return {k: _json_safe(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_json_safe(v) for v in obj]
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if hasattr(obj, "value"):  # enum
        return obj.value
    if isinstance(obj, (str, int, float, bool)):
        return obj
    return str(obj)


async def log_action(
    db: AsyncSession,
    action: str,
    affected_entity_type: str = "HOLIDAY",
    *,
    affected_entity_id: Optional[str] = None,
    old_values: Optional[dict] = None,
    new_values: Optional[dict] = None,
    summary: Optional[str] = None,
    request_method: Optional[str] = None,
    request_path: Optional[str] = None,
    client_ip: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> None:
    """
    Write and commit an audit log entry.

    Called after the change it describes has been committed; a failure here is
    logged and does not undo that change.
    """
    db.add(AuditLog(
        action=action,
        affected_entity_type=affected_entity_type,
        affected_entity_id=affected_entity_id,
        old_values=_json_safe(old_values),
        new_values=_json_safe(new_values),
        summary=summary,
        request_method=request_method,
        request_path=request_path,
        client_ip=client_ip,
        user_agent=user_agent,
    ))
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Could not write audit log for %s %s: %s", action, affected_entity_id, e)
