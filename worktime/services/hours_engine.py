# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Classification of a submitted day into regular, overtime and leave hours."""

import logging
from dataclasses import dataclass, field
from datetime import date

from worktime.config import settings
from worktime.exceptions import InvalidSubmissionError
from worktime.models.enums import DayType
from worktime.services.holiday_calendar import HolidayCalendar, get_calendar
from worktime.services.shift_calculator import (
    HalfShift,
    WorkedShift,
    overlap_hours,
    permission_hours,
    to_columns,
    worked_hours,
)

logger = logging.getLogger(__name__)

EXPLICIT_LEAVE_FIELDS = (
    "permission_hours",
    "sickness_hours",
    "vacation_hours",
    "special_leave_hours",
    "parental_leave_hours",
)


@dataclass
class DayInput:
    """Everything submitted for one day."""

    date: date
    day_type: DayType = DayType.NORMAL
    morning: HalfShift | None = None
    afternoon: HalfShift | None = None
    # Explicit leave amounts, only meaningful on normal working days
    permission_hours: float = 0.0
    sickness_hours: float = 0.0
    vacation_hours: float = 0.0
    special_leave_hours: float = 0.0
    parental_leave_hours: float = 0.0
    medical_certificate: str | None = None
    # (start, end) bounds of approved permission requests on this day
    approved_permissions: list[tuple[str, str]] = field(default_factory=list)

    @property
    def has_explicit_leave(self) -> bool:
        """Check if any explicit leave amount was supplied."""
        return any(getattr(self, name) > 0 for name in EXPLICIT_LEAVE_FIELDS)

    @property
    def has_shifts(self) -> bool:
        """Check if any half-shift was supplied."""
        return self.morning is not None or self.afternoon is not None


@dataclass
class HoursBreakdown:
    """Canonical hour fields computed for a day."""

    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    permission_hours: float = 0.0
    sickness_hours: float = 0.0
    vacation_hours: float = 0.0
    special_leave_hours: float = 0.0
    parental_leave_hours: float = 0.0
    net_worked_hours: float = 0.0
    morning: HalfShift | None = None
    afternoon: HalfShift | None = None
    medical_certificate: str | None = None

    @property
    def is_empty(self) -> bool:
        """Check if every hour field is zero."""
        return not any(
            (
                self.regular_hours,
                self.overtime_hours,
                self.permission_hours,
                self.sickness_hours,
                self.vacation_hours,
                self.special_leave_hours,
                self.parental_leave_hours,
            )
        )

    def to_columns(self) -> dict:
        """Return the values to persist on a work entry."""
        morning_start, morning_end = to_columns(self.morning)
        afternoon_start, afternoon_end = to_columns(self.afternoon)
        return {
            "regular_hours": self.regular_hours,
            "overtime_hours": self.overtime_hours,
            "permission_hours": self.permission_hours,
            "sickness_hours": self.sickness_hours,
            "vacation_hours": self.vacation_hours,
            "special_leave_hours": self.special_leave_hours,
            "parental_leave_hours": self.parental_leave_hours,
            "morning_start": morning_start,
            "morning_end": morning_end,
            "afternoon_start": afternoon_start,
            "afternoon_end": afternoon_end,
            "medical_certificate": (
                self.medical_certificate if self.sickness_hours > 0 else None
            ),
        }


def _round(value: float) -> float:
    return round(value, 2)


def approved_overlap_hours(
    shifts: list[HalfShift | None],
    approved_permissions: list[tuple[str, str]],
) -> float:
    """Hours of worked half-shifts already excused by approved permissions.

    Args:
        shifts: The half-shifts of the day.
        approved_permissions: (start, end) bounds of approved requests.

    Returns:
        Total overlap in hours.
    """
    overlap = 0.0
    for request_start, request_end in approved_permissions:
        for shift in shifts:
            if isinstance(shift, WorkedShift):
                overlap += overlap_hours(
                    shift.start, shift.end, request_start, request_end
                )
    return overlap


def classify_day(
    day: DayInput,
    calendar: HolidayCalendar | None = None,
) -> HoursBreakdown:
    """Compute the canonical hour fields for a submitted day.

    Rules, in order:
    - Vacation and sickness days are a flat standard day; shifts are ignored.
    - On normal days each worked half-shift counts, a permission half-shift
      adds a fixed amount of permission hours.
    - Overlap with approved permission requests is subtracted from worked time.
    - Weekends and holidays turn all worked time into overtime.
    - Weekdays fill up to the standard day with permission hours, unless an
      explicit leave amount was supplied, which then wins.

    Args:
        day: The submitted day.
        calendar: Holiday calendar, defaults to the configured one.

    Returns:
        The computed hour fields.

    Raises:
        InvalidSubmissionError: If the input is contradictory or records nothing.
    """
    for name in EXPLICIT_LEAVE_FIELDS:
        if getattr(day, name) < 0:
            raise InvalidSubmissionError(f"{name} must not be negative")

    standard = settings.standard_daily_hours

    if day.day_type == DayType.VACATION:
        if day.has_explicit_leave:
            raise InvalidSubmissionError(
                "A vacation day cannot carry additional leave hours"
            )
        if day.has_shifts:
            logger.info(f"Ignoring shift times on vacation day {day.date}")
        return HoursBreakdown(vacation_hours=standard)

    if day.day_type == DayType.SICKNESS:
        if day.has_explicit_leave:
            raise InvalidSubmissionError(
                "A sickness day cannot carry additional leave hours"
            )
        if day.has_shifts:
            logger.info(f"Ignoring shift times on sickness day {day.date}")
        return HoursBreakdown(
            sickness_hours=standard,
            medical_certificate=day.medical_certificate or "",
        )

    if not day.has_shifts and not day.has_explicit_leave:
        raise InvalidSubmissionError("Enter worked hours or leave for this day")

    calendar = calendar or get_calendar()
    shifts = [day.morning, day.afternoon]

    raw_worked = sum(worked_hours(shift) for shift in shifts)
    flagged_permission = sum(permission_hours(shift) for shift in shifts)
    overlap = approved_overlap_hours(shifts, day.approved_permissions)
    net_worked = max(0.0, raw_worked - overlap)

    result = HoursBreakdown(
        net_worked_hours=_round(net_worked),
        morning=day.morning,
        afternoon=day.afternoon,
    )

    if calendar.is_non_working_day(day.date):
        if day.has_explicit_leave:
            raise InvalidSubmissionError(
                "Leave hours cannot be recorded on a weekend or holiday"
            )
        result.overtime_hours = _round(net_worked)
    elif day.has_explicit_leave:
        result.regular_hours = _round(min(net_worked, standard))
        result.overtime_hours = _round(max(0.0, net_worked - standard))
        result.permission_hours = _round(flagged_permission + day.permission_hours)
        result.sickness_hours = _round(day.sickness_hours)
        result.vacation_hours = _round(day.vacation_hours)
        result.special_leave_hours = _round(day.special_leave_hours)
        result.parental_leave_hours = _round(day.parental_leave_hours)
        result.medical_certificate = day.medical_certificate
    elif net_worked < standard:
        result.regular_hours = _round(net_worked)
        result.permission_hours = _round(
            min(standard, flagged_permission + standard - net_worked)
        )
    else:
        result.regular_hours = _round(standard)
        result.overtime_hours = _round(net_worked - standard)
        result.permission_hours = _round(flagged_permission)

    if result.is_empty:
        raise InvalidSubmissionError("Enter worked hours or leave for this day")

    return result
