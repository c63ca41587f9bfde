"""
Audit log SQLAlchemy model.
Stores which operator request changed which holiday, and how.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, Index  # type: ignore
from datetime import datetime
from holiday_calendar.db import Base


class AuditLog(Base):
    """
    Audit logs table - trail of status changes and deletions.

    affected_entity_type = kind of record that was affected (HOLIDAY, JOB).
    affected_entity_id   = store id of that record, as sent on the wire.
    """
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    affected_entity_id = Column(String(64), nullable=True, comment="ID of the affected record")
    affected_entity_type = Column(String(50), nullable=False, comment="HOLIDAY or JOB")

    action = Column(String(100), nullable=False, comment="e.g. UPDATE_STATUS, DELETE_HOLIDAY")
    summary = Column(Text, nullable=True, comment="Human-readable one-line description")
    request_method = Column(String(10), nullable=True, comment="e.g. POST, DELETE")
    request_path = Column(String(500), nullable=True, comment="e.g. /api/holidays/status")
    client_ip = Column(String(64), nullable=True)
    user_agent = Column(String(500), nullable=True)

    old_values = Column(JSON, nullable=True, comment="Previous values before change")
    new_values = Column(JSON, nullable=True, comment="New values after change")
    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_audit_action", "action"),
        Index("idx_audit_entity", "affected_entity_type", "affected_entity_id"),
        Index("idx_audit_created_at", "created_at"),
    )
