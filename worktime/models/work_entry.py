# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work entry model - one canonical record per user and day."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import (
    Date,
    Float,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from worktime.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from worktime.models.user import User

# Stored in a shift column when the whole half-shift is a permission
PERMISSION_MARKER = "PERM"

HOUR_FIELDS = (
    "regular_hours",
    "overtime_hours",
    "permission_hours",
    "sickness_hours",
    "vacation_hours",
    "special_leave_hours",
    "parental_leave_hours",
)


class WorkEntry(Base, TimestampMixin):
    """Classified hours for a single user on a single calendar day.

    Resubmitting the same day replaces every field of the existing row,
    so the (user_id, date) pair is unique.
    """

    __tablename__ = "work_entries"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    user_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    date: Mapped[date] = mapped_column(Date, nullable=False)

    # Classified hours
    regular_hours: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    overtime_hours: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    permission_hours: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False
    )
    sickness_hours: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    vacation_hours: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    special_leave_hours: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False
    )
    parental_leave_hours: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False
    )

    # Shift times as "HH:MM", PERMISSION_MARKER or NULL
    morning_start: Mapped[str | None] = mapped_column(String(5), nullable=True)
    morning_end: Mapped[str | None] = mapped_column(String(5), nullable=True)
    afternoon_start: Mapped[str | None] = mapped_column(String(5), nullable=True)
    afternoon_end: Mapped[str | None] = mapped_column(String(5), nullable=True)

    medical_certificate: Mapped[str | None] = mapped_column(
        String(100), nullable=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="work_entries")

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_work_entry_user_date"),
        Index("idx_work_entry_date", "date"),
    )

    @property
    def worked_hours(self) -> float:
        """Regular plus overtime hours."""
        return self.regular_hours + self.overtime_hours

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<WorkEntry(id={self.id}, date={self.date}, "
            f"regular={self.regular_hours}, overtime={self.overtime_hours})>"
        )
