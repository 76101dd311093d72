# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Half-shift durations and overlaps."""

import re
from dataclasses import dataclass

from worktime.config import settings
from worktime.exceptions import InvalidSubmissionError
from worktime.models.work_entry import PERMISSION_MARKER

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})$")


@dataclass(frozen=True)
class WorkedShift:
    """A half-shift actually worked between two wall-clock times."""

    start: str
    end: str


@dataclass(frozen=True)
class PermissionShift:
    """A half-shift taken entirely as permission."""


HalfShift = WorkedShift | PermissionShift


def parse_time(value: str) -> int:
    """Convert an "HH:MM" string to minutes since midnight.

    Args:
        value: Time in HH:MM format.

    Returns:
        Minutes since midnight.

    Raises:
        InvalidSubmissionError: If the value is not a valid time of day.
    """
    match = _HHMM.match(value.strip()) if value else None
    if match is None:
        raise InvalidSubmissionError(f"Invalid time {value!r}, expected HH:MM")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidSubmissionError(f"Invalid time {value!r}, expected HH:MM")

    return hours * 60 + minutes


def calculate_hours(start: str, end: str) -> float:
    """Calculate decimal hours between two times.

    An end earlier than the start yields 0, never a negative duration.

    Args:
        start: Start time in HH:MM format.
        end: End time in HH:MM format.

    Returns:
        Hours between start and end.
    """
    return max(0, parse_time(end) - parse_time(start)) / 60


def overlap_hours(start1: str, end1: str, start2: str, end2: str) -> float:
    """Calculate how many hours two time ranges share.

    Args:
        start1: Start time of first range.
        end1: End time of first range.
        start2: Start time of second range.
        end2: End time of second range.

    Returns:
        The length of the intersection in hours (0 if disjoint).
    """
    latest_start = max(parse_time(start1), parse_time(start2))
    earliest_end = min(parse_time(end1), parse_time(end2))
    return max(0, earliest_end - latest_start) / 60


def worked_hours(shift: HalfShift | None) -> float:
    """Hours worked in a half-shift; permission halves count as 0."""
    if isinstance(shift, WorkedShift):
        return calculate_hours(shift.start, shift.end)
    return 0.0


def permission_hours(shift: HalfShift | None) -> float:
    """Permission hours contributed by a half-shift."""
    if isinstance(shift, PermissionShift):
        return settings.half_shift_permission_hours
    return 0.0


def to_columns(shift: HalfShift | None) -> tuple[str | None, str | None]:
    """Convert a half-shift to its (start, end) column values."""
    if isinstance(shift, PermissionShift):
        return PERMISSION_MARKER, PERMISSION_MARKER
    if isinstance(shift, WorkedShift):
        return shift.start, shift.end
    return None, None


def from_columns(start: str | None, end: str | None) -> HalfShift | None:
    """Rebuild a half-shift from stored (start, end) column values."""
    if start == PERMISSION_MARKER or end == PERMISSION_MARKER:
        return PermissionShift()
    if start and end:
        return WorkedShift(start=start, end=end)
    return None
