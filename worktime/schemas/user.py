# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""

import datetime
import uuid
from typing import Optional

from pydantic import BaseModel

from worktime.models.enums import UserRole


class UserUpdate(BaseModel):
    """Schema for updating a user's role and entitlements (admin use)."""

    role: Optional[UserRole] = None
    is_active: Optional[bool] = None
    can_work_sunday: Optional[bool] = None
    has_special_leave: Optional[bool] = None
    has_parental_leave: Optional[bool] = None


class UserResponse(BaseModel):
    """Schema for user response."""

    id: uuid.UUID
    username: str
    email: str
    full_name: Optional[str] = None
    role: UserRole
    is_admin: bool
    is_active: bool
    can_work_sunday: bool
    has_special_leave: bool
    has_parental_leave: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}
