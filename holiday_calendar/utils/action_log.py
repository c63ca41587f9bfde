"""
Operator-action logging: writes who did what to the application log (file + console).
Use this so logs show e.g. "SAVE_CANDIDATES saved=3" or "BULK_STATUS status='working'".
"""
import logging
from typing import Any, Optional

ACTION_LOGGER = logging.getLogger("holiday_calendar.actions")


def _operator_context(
    client_ip: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> str:
    parts = []
    if client_ip:
        parts.append(f"ip={client_ip}")
    if user_agent:
        parts.append(f"agent={user_agent!r}")
    return " | ".join(parts) if parts else "system"


def log_operator_action(
    action: str,
    *,
    client_ip: Optional[str] = None,
    user_agent: Optional[str] = None,
    **details: Any,
) -> None:
    """
    Log an operator action to the application log.

    Example:
        log_operator_action("BULK_STATUS", client_ip="10.0.0.1", status="working", updated=4)
    """
    ctx = _operator_context(client_ip=client_ip, user_agent=user_agent)
    extra_parts = [f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in details.items()]
    extra = " " + " ".join(extra_parts) if extra_parts else ""
    ACTION_LOGGER.info(f"OPERATOR_ACTION | {ctx} | {action}{extra}")
