"""initial_schema

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-01-12 09:14:27.418305

"""
from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d10'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(200), nullable=True),
        sa.Column(
            "role",
            sa.Enum("EMPLOYEE", "ADMIN", name="userrole"),
            nullable=False,
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="1"),
        sa.Column(
            "can_work_sunday", sa.Boolean(), nullable=False, server_default="0"
        ),
        sa.Column(
            "has_special_leave", sa.Boolean(), nullable=False, server_default="0"
        ),
        sa.Column(
            "has_parental_leave", sa.Boolean(), nullable=False, server_default="0"
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("token", sa.String(36), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_session_user", "sessions", ["user_id"])

    op.create_table(
        "work_entries",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("regular_hours", sa.Float(), nullable=False, server_default="0"),
        sa.Column("overtime_hours", sa.Float(), nullable=False, server_default="0"),
        sa.Column(
            "permission_hours", sa.Float(), nullable=False, server_default="0"
        ),
        sa.Column("sickness_hours", sa.Float(), nullable=False, server_default="0"),
        sa.Column("vacation_hours", sa.Float(), nullable=False, server_default="0"),
        sa.Column(
            "special_leave_hours", sa.Float(), nullable=False, server_default="0"
        ),
        sa.Column(
            "parental_leave_hours", sa.Float(), nullable=False, server_default="0"
        ),
        sa.Column("morning_start", sa.String(5), nullable=True),
        sa.Column("morning_end", sa.String(5), nullable=True),
        sa.Column("afternoon_start", sa.String(5), nullable=True),
        sa.Column("afternoon_end", sa.String(5), nullable=True),
        sa.Column("medical_certificate", sa.String(100), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "date", name="uq_work_entry_user_date"),
    )
    op.create_index("idx_work_entry_date", "work_entries", ["date"])

    op.create_table(
        "leave_requests",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column(
            "type",
            sa.Enum("VACATION", "SICKNESS", "PERMISSION", name="leaverequesttype"),
            nullable=False,
        ),
        sa.Column(
            "status",
            sa.Enum("PENDING", "APPROVED", "REJECTED", name="leaverequeststatus"),
            nullable=False,
        ),
        sa.Column("start_time", sa.String(5), nullable=True),
        sa.Column("end_time", sa.String(5), nullable=True),
        sa.Column("reason", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "idx_leave_request_user_dates",
        "leave_requests",
        ["user_id", "start_date", "end_date"],
    )


def downgrade() -> None:
    op.drop_index("idx_leave_request_user_dates", table_name="leave_requests")
    op.drop_table("leave_requests")
    op.drop_index("idx_work_entry_date", table_name="work_entries")
    op.drop_table("work_entries")
    op.drop_index("idx_session_user", table_name="sessions")
    op.drop_table("sessions")
    op.drop_table("users")
