# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave request model."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, Enum, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from worktime.models.base import Base, TimestampMixin
from worktime.models.enums import LeaveRequestStatus, LeaveRequestType

if TYPE_CHECKING:
    from worktime.models.user import User


class LeaveRequest(Base, TimestampMixin):
    """Administrator-approved leave interval.

    Linked to work entries only by (user, date) co-occurrence. Permission
    requests cover a single day and carry clock bounds.
    """

    __tablename__ = "leave_requests"

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
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    type: Mapped[LeaveRequestType] = mapped_column(
        Enum(LeaveRequestType),
        nullable=False,
    )
    status: Mapped[LeaveRequestStatus] = mapped_column(
        Enum(LeaveRequestStatus),
        default=LeaveRequestStatus.PENDING,
        nullable=False,
    )
    start_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    end_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="leave_requests")

    __table_args__ = (
        Index("idx_leave_request_user_dates", "user_id", "start_date", "end_date"),
    )

    def covers(self, day: date) -> bool:
        """Check if the request interval includes a day."""
        return self.start_date <= day <= self.end_date
