# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from worktime.models.base import Base, TimestampMixin
from worktime.models.enums import (
    DayType,
    LeaveCap,
    LeaveRequestStatus,
    LeaveRequestType,
    NotEditableReason,
    UserRole,
)
from worktime.models.leave_request import LeaveRequest
from worktime.models.session import Session
from worktime.models.user import User
from worktime.models.work_entry import WorkEntry

__all__ = [
    "Base",
    "DayType",
    "LeaveCap",
    "LeaveRequest",
    "LeaveRequestStatus",
    "LeaveRequestType",
    "NotEditableReason",
    "Session",
    "TimestampMixin",
    "User",
    "UserRole",
    "WorkEntry",
]
