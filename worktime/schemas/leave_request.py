# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave request schemas."""

import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field

from worktime.models.enums import LeaveRequestStatus, LeaveRequestType
from worktime.schemas.work_entry import TIME_PATTERN


class LeaveRequestBase(BaseModel):
    """Fields shared by create and update."""

    start_date: datetime.date
    end_date: datetime.date
    type: LeaveRequestType
    start_time: str | None = Field(None, pattern=TIME_PATTERN)
    end_time: str | None = Field(None, pattern=TIME_PATTERN)
    reason: str | None = Field(None, max_length=1000)


class LeaveRequestCreate(LeaveRequestBase):
    """Schema for creating a leave request."""

    # Target user, only admins may file for someone else
    user_id: uuid.UUID | None = None


class LeaveRequestUpdate(LeaveRequestBase):
    """Schema for replacing a leave request (admin use)."""


class LeaveRequestStatusUpdate(BaseModel):
    """Schema for changing the status of a leave request."""

    status: LeaveRequestStatus


class LeaveRequestResponse(BaseModel):
    """Schema for leave request responses."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    start_date: datetime.date
    end_date: datetime.date
    type: LeaveRequestType
    status: LeaveRequestStatus
    start_time: str | None
    end_time: str | None
    reason: str | None
    created_at: datetime.datetime
    updated_at: datetime.datetime
