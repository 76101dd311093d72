# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work entry schemas."""

import datetime
import uuid
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from worktime.models import WorkEntry
from worktime.models.enums import DayType
from worktime.services.shift_calculator import (
    HalfShift,
    PermissionShift,
    WorkedShift,
    from_columns,
)

TIME_PATTERN = r"^([01]?\d|2[0-3]):[0-5]\d$"


class WorkedShiftSchema(BaseModel):
    """Half-shift worked between two wall-clock times."""

    kind: Literal["worked"] = "worked"
    start: str = Field(..., pattern=TIME_PATTERN)
    end: str = Field(..., pattern=TIME_PATTERN)

    def to_shift(self) -> WorkedShift:
        """Convert to the calculator type."""
        return WorkedShift(start=self.start, end=self.end)


class PermissionShiftSchema(BaseModel):
    """Half-shift taken entirely as permission."""

    kind: Literal["permission"] = "permission"

    def to_shift(self) -> PermissionShift:
        """Convert to the calculator type."""
        return PermissionShift()


HalfShiftSchema = Annotated[
    WorkedShiftSchema | PermissionShiftSchema,
    Field(discriminator="kind"),
]


def shift_to_schema(
    shift: HalfShift | None,
) -> WorkedShiftSchema | PermissionShiftSchema | None:
    """Convert a calculator half-shift to its schema."""
    if isinstance(shift, WorkedShift):
        return WorkedShiftSchema(start=shift.start, end=shift.end)
    if isinstance(shift, PermissionShift):
        return PermissionShiftSchema()
    return None


class WorkEntrySubmit(BaseModel):
    """Schema for submitting a day."""

    date: datetime.date
    # Target user, only admins may submit for someone else
    user_id: uuid.UUID | None = None
    day_type: DayType = DayType.NORMAL
    morning: HalfShiftSchema | None = None
    afternoon: HalfShiftSchema | None = None
    permission_hours: float = Field(default=0.0, ge=0, le=24)
    sickness_hours: float = Field(default=0.0, ge=0, le=24)
    vacation_hours: float = Field(default=0.0, ge=0, le=24)
    special_leave_hours: float = Field(default=0.0, ge=0, le=24)
    parental_leave_hours: float = Field(default=0.0, ge=0, le=24)
    medical_certificate: str | None = Field(None, max_length=100)
    notes: str | None = Field(None, max_length=500)


class WorkEntryResponse(BaseModel):
    """Schema for work entry responses."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    date: datetime.date
    regular_hours: float
    overtime_hours: float
    permission_hours: float
    sickness_hours: float
    vacation_hours: float
    special_leave_hours: float
    parental_leave_hours: float
    morning: HalfShiftSchema | None = None
    afternoon: HalfShiftSchema | None = None
    medical_certificate: str | None
    notes: str | None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    @classmethod
    def from_entry(cls, entry: WorkEntry) -> "WorkEntryResponse":
        """Build a response, rebuilding half-shifts from the stored columns."""
        response = cls.model_validate(entry)
        response.morning = shift_to_schema(
            from_columns(entry.morning_start, entry.morning_end)
        )
        response.afternoon = shift_to_schema(
            from_columns(entry.afternoon_start, entry.afternoon_end)
        )
        return response


class EntryTotalsResponse(BaseModel):
    """Aggregated hours over a set of entries."""

    entry_count: int
    total_worked_hours: float
    regular_hours: float
    overtime_hours: float
    permission_and_vacation_hours: float
    permission_hours: float
    vacation_hours: float
    sickness_hours: float
    special_leave_hours: float
    parental_leave_hours: float
