# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""

from worktime.schemas.common import ErrorResponse, HealthResponse, MessageResponse
from worktime.schemas.holiday import HolidayCheckResponse, HolidayResponse
from worktime.schemas.leave_request import (
    LeaveRequestCreate,
    LeaveRequestResponse,
    LeaveRequestStatusUpdate,
    LeaveRequestUpdate,
)
from worktime.schemas.user import UserResponse, UserUpdate
from worktime.schemas.work_entry import (
    EntryTotalsResponse,
    PermissionShiftSchema,
    WorkedShiftSchema,
    WorkEntryResponse,
    WorkEntrySubmit,
)

__all__ = [
    "EntryTotalsResponse",
    "ErrorResponse",
    "HealthResponse",
    "HolidayCheckResponse",
    "HolidayResponse",
    "LeaveRequestCreate",
    "LeaveRequestResponse",
    "LeaveRequestStatusUpdate",
    "LeaveRequestUpdate",
    "MessageResponse",
    "PermissionShiftSchema",
    "UserResponse",
    "UserUpdate",
    "WorkedShiftSchema",
    "WorkEntryResponse",
    "WorkEntrySubmit",
]
