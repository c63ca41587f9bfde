"""
Request details for operator-action and audit logging.
"""
from typing import Any, Dict, Optional
from fastapi import Request


def get_client_ip(request: Request) -> Optional[str]:
    """Client IP; the first X-Forwarded-For hop wins when behind a proxy."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return None


def request_context(request: Request) -> Dict[str, Any]:
    """Keyword arguments shared by log_operator_action and the audit service."""
    return {
        "client_ip": get_client_ip(request),
        "user_agent": request.headers.get("user-agent"),
        "request_method": request.method,
        "request_path": request.url.path,
    }
