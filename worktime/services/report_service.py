# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Aggregated totals over work entries for report views."""

from collections.abc import Iterable
from dataclasses import asdict, dataclass

from worktime.models import WorkEntry


@dataclass
class EntryTotals:
    """Summed hour fields of a set of entries."""

    entry_count: int = 0
    total_worked_hours: float = 0.0
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    permission_and_vacation_hours: float = 0.0
    permission_hours: float = 0.0
    vacation_hours: float = 0.0
    sickness_hours: float = 0.0
    special_leave_hours: float = 0.0
    parental_leave_hours: float = 0.0

    def to_dict(self) -> dict:
        """Return the totals as a plain dictionary."""
        return asdict(self)


def calculate_totals(entries: Iterable[WorkEntry]) -> EntryTotals:
    """Sum the hours of the given entries.

    Total worked time is regular plus overtime. Permission and vacation are
    also reported together since both reduce the hours owed.

    Args:
        entries: Entries to aggregate.

    Returns:
        The totals, rounded to two decimals.
    """
    totals = EntryTotals()
    for entry in entries:
        totals.entry_count += 1
        totals.regular_hours += entry.regular_hours
        totals.overtime_hours += entry.overtime_hours
        totals.permission_hours += entry.permission_hours
        totals.vacation_hours += entry.vacation_hours
        totals.sickness_hours += entry.sickness_hours
        totals.special_leave_hours += entry.special_leave_hours
        totals.parental_leave_hours += entry.parental_leave_hours

    totals.total_worked_hours = totals.regular_hours + totals.overtime_hours
    totals.permission_and_vacation_hours = (
        totals.permission_hours + totals.vacation_hours
    )

    for name, value in totals.to_dict().items():
        if isinstance(value, float):
            setattr(totals, name, round(value, 2))

    return totals
