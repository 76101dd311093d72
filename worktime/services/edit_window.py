# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Which dates an actor may still create or modify."""

from datetime import date

from worktime.config import settings
from worktime.exceptions import NotEditableError
from worktime.models import User
from worktime.models.enums import NotEditableReason
from worktime.services.holiday_calendar import HolidayCalendar, get_calendar


def earliest_editable_date(today: date, grace_days: int | None = None) -> date:
    """Get the first date an employee may still edit.

    Up to and including the grace day of the month, the whole previous
    month stays open so it can be completed.

    Args:
        today: The current date.
        grace_days: Day of month up to which the previous month is open.

    Returns:
        First day of the current or of the previous month.
    """
    if grace_days is None:
        grace_days = settings.edit_grace_days

    if today.day > grace_days:
        return today.replace(day=1)
    if today.month == 1:
        return date(today.year - 1, 12, 1)
    return date(today.year, today.month - 1, 1)


def check_editable(
    check_date: date,
    actor: User,
    today: date,
    calendar: HolidayCalendar | None = None,
) -> None:
    """Ensure an actor may create or modify an entry on a date.

    Args:
        check_date: The date of the entry.
        actor: The user performing the change.
        today: The current date.
        calendar: Holiday calendar, defaults to the configured one.

    Raises:
        NotEditableError: With the reason the date is blocked.
    """
    if actor.is_admin:
        return

    calendar = calendar or get_calendar()

    if check_date.weekday() == 6 and not actor.can_work_sunday:
        raise NotEditableError(check_date, NotEditableReason.SUNDAY)
    if calendar.is_holiday(check_date):
        raise NotEditableError(check_date, NotEditableReason.HOLIDAY)
    if not earliest_editable_date(today) <= check_date <= today:
        raise NotEditableError(check_date, NotEditableReason.OUT_OF_WINDOW)


def is_editable(
    check_date: date,
    actor: User,
    today: date,
    calendar: HolidayCalendar | None = None,
) -> bool:
    """Check if an actor may create or modify an entry on a date."""
    try:
        check_editable(check_date, actor, today, calendar)
    except NotEditableError:
        return False
    return True
