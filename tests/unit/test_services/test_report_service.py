# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for report totals."""

from datetime import date

from worktime.models import WorkEntry
from worktime.services.report_service import calculate_totals


def test_empty_totals():
    totals = calculate_totals([])

    assert totals.entry_count == 0
    assert totals.total_worked_hours == 0.0


def test_totals_combine_entries():
    entries = [
        WorkEntry(
            date=date(2025, 3, 3),
            regular_hours=8.0,
            overtime_hours=1.25,
            permission_hours=0.0,
            sickness_hours=0.0,
            vacation_hours=0.0,
            special_leave_hours=0.0,
            parental_leave_hours=0.0,
        ),
        WorkEntry(
            date=date(2025, 3, 4),
            regular_hours=4.0,
            overtime_hours=0.0,
            permission_hours=4.0,
            sickness_hours=0.0,
            vacation_hours=0.0,
            special_leave_hours=0.0,
            parental_leave_hours=0.0,
        ),
        WorkEntry(
            date=date(2025, 3, 5),
            regular_hours=0.0,
            overtime_hours=0.0,
            permission_hours=0.0,
            sickness_hours=0.0,
            vacation_hours=8.0,
            special_leave_hours=0.0,
            parental_leave_hours=0.0,
        ),
        WorkEntry(
            date=date(2025, 3, 6),
            regular_hours=2.0,
            overtime_hours=0.0,
            permission_hours=0.0,
            sickness_hours=0.0,
            vacation_hours=0.0,
            special_leave_hours=3.0,
            parental_leave_hours=3.0,
        ),
    ]

    totals = calculate_totals(entries)

    assert totals.entry_count == 4
    assert totals.regular_hours == 14.0
    assert totals.overtime_hours == 1.25
    assert totals.total_worked_hours == 15.25
    assert totals.permission_and_vacation_hours == 12.0
    assert totals.special_leave_hours == 3.0
    assert totals.parental_leave_hours == 3.0
    assert totals.to_dict()["vacation_hours"] == 8.0
