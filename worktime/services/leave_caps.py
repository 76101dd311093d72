# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Monthly and lifetime leave caps checked against stored entries.

Caps are read-then-write checks without row locks. Two concurrent
submissions by the same user can both pass against the same snapshot, so
the caps are advisory under concurrency.
"""

import calendar
import logging
import uuid
from datetime import date

from worktime.config import settings
from worktime.exceptions import CapExceededError
from worktime.models.enums import LeaveCap
from worktime.services.work_entry_repository import WorkEntryRepository

logger = logging.getLogger(__name__)


def month_bounds(day: date) -> tuple[date, date]:
    """Get the first and last day of the month containing a date."""
    _, last_day = calendar.monthrange(day.year, day.month)
    return day.replace(day=1), day.replace(day=last_day)


def validate_special_leave_cap(
    repository: WorkEntryRepository,
    user_id: uuid.UUID,
    entry_date: date,
    requested_hours: float,
    exclude_entry_id: uuid.UUID | None = None,
) -> None:
    """Ensure special leave stays within the monthly limit.

    Args:
        repository: Work entry repository.
        user_id: The user ID.
        entry_date: Date of the submitted entry.
        requested_hours: Special leave hours being submitted.
        exclude_entry_id: Entry being replaced, left out of the sum.

    Raises:
        CapExceededError: If used plus requested hours exceed the limit.
    """
    if requested_hours <= 0:
        return

    limit = settings.special_leave_monthly_cap_hours
    month_start, month_end = month_bounds(entry_date)
    used = repository.sum_special_leave_hours(
        user_id, month_start, month_end, exclude_entry_id=exclude_entry_id
    )

    if round(used + requested_hours, 2) > limit:
        logger.info(
            f"Special leave cap hit for user {user_id}: "
            f"{used}h used, {requested_hours}h requested"
        )
        raise CapExceededError(
            LeaveCap.SPECIAL_LEAVE_MONTHLY,
            used=round(used, 2),
            requested=requested_hours,
            limit=limit,
        )


def validate_parental_leave_cap(
    repository: WorkEntryRepository,
    user_id: uuid.UUID,
    requested_hours: float,
    exclude_entry_id: uuid.UUID | None = None,
) -> None:
    """Ensure parental leave stays within the lifetime number of days.

    A day counts once no matter how many parental hours it carries.

    Args:
        repository: Work entry repository.
        user_id: The user ID.
        requested_hours: Parental leave hours being submitted.
        exclude_entry_id: Entry being replaced, left out of the count.

    Raises:
        CapExceededError: If the user already used every allowed day.
    """
    if requested_hours <= 0:
        return

    limit = settings.parental_leave_lifetime_cap_days
    used_days = repository.count_parental_leave_days(
        user_id, exclude_entry_id=exclude_entry_id
    )

    if used_days >= limit:
        logger.info(
            f"Parental leave cap hit for user {user_id}: {used_days} days used"
        )
        raise CapExceededError(
            LeaveCap.PARENTAL_LEAVE_LIFETIME,
            used=used_days,
            requested=1,
            limit=limit,
        )


def validate_leave_caps(
    repository: WorkEntryRepository,
    user_id: uuid.UUID,
    entry_date: date,
    special_leave_hours: float,
    parental_leave_hours: float,
    exclude_entry_id: uuid.UUID | None = None,
) -> None:
    """Run every leave cap check for a submission."""
    validate_special_leave_cap(
        repository,
        user_id,
        entry_date,
        special_leave_hours,
        exclude_entry_id=exclude_entry_id,
    )
    validate_parental_leave_cap(
        repository,
        user_id,
        parental_leave_hours,
        exclude_entry_id=exclude_entry_id,
    )
