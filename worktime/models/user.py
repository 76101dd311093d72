# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User model."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from worktime.models.base import Base, TimestampMixin
from worktime.models.enums import UserRole

if TYPE_CHECKING:
    from worktime.models.leave_request import LeaveRequest
    from worktime.models.session import Session
    from worktime.models.work_entry import WorkEntry


class User(Base, TimestampMixin):
    """Portal user and the entitlements that drive leave rules."""

    __tablename__ = "users"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole),
        default=UserRole.EMPLOYEE,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Entitlements
    can_work_sunday: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    has_special_leave: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    has_parental_leave: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    # Relationships
    sessions: Mapped[list[Session]] = relationship(
        "Session",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    work_entries: Mapped[list[WorkEntry]] = relationship(
        "WorkEntry",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    leave_requests: Mapped[list[LeaveRequest]] = relationship(
        "LeaveRequest",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    @property
    def is_admin(self) -> bool:
        """Check if the user has the admin role."""
        return self.role == UserRole.ADMIN
