"""Create holidays, job_logs and audit_logs

Revision ID: 001_holiday_tables
Revises:
Create Date: initial schema for the holiday calendar

"""
from alembic import op  # type: ignore
import sqlalchemy as sa  # type: ignore


# revision identifiers, used by Alembic.
revision = "001_holiday_tables"
down_revision = None
branch_labels = None
depends_on = None

HOLIDAY_STATUS = sa.Enum("approved", "working", "custom", name="holiday_status")
JOB_STATUS = sa.Enum("SUCCESS", "FAILED", name="jobstatusenum")


def upgrade() -> None:
    op.create_table(
        "holidays",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, comment="Spanish display name"),
        sa.Column("name_en", sa.String(255), nullable=True, comment="English display name, set by translation"),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("description_en", sa.Text(), nullable=True),
        sa.Column("status", HOLIDAY_STATUS, nullable=False, server_default="approved"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint("name", "start_date", name="uq_holiday_name_start"),
    )
    op.create_index("idx_start_date", "holidays", ["start_date"])
    op.create_index("idx_status", "holidays", ["status"])
    op.create_index("idx_start_status", "holidays", ["start_date", "status"])

    op.create_table(
        "job_logs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("job_name", sa.String(255), nullable=False),
        sa.Column("executed_at", sa.DateTime(), nullable=True),
        sa.Column("status", JOB_STATUS, nullable=False),
        sa.Column("details", sa.JSON(), nullable=True, comment="Result summary as JSON"),
        sa.Column("executed_by", sa.String(255), nullable=True),
    )
    op.create_index("idx_job_name", "job_logs", ["job_name"])
    op.create_index("idx_job_executed_at", "job_logs", ["executed_at"])

    op.create_table(
        "audit_logs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("affected_entity_id", sa.String(64), nullable=True),
        sa.Column("affected_entity_type", sa.String(50), nullable=False),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("request_method", sa.String(10), nullable=True),
        sa.Column("request_path", sa.String(500), nullable=True),
        sa.Column("client_ip", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.String(500), nullable=True),
        sa.Column("old_values", sa.JSON(), nullable=True),
        sa.Column("new_values", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("idx_audit_action", "audit_logs", ["action"])
    op.create_index("idx_audit_entity", "audit_logs", ["affected_entity_type", "affected_entity_id"])
    op.create_index("idx_audit_created_at", "audit_logs", ["created_at"])


def downgrade() -> None:
    op.drop_table("audit_logs")
    op.drop_table("job_logs")
    op.drop_table("holidays")
