# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the work entry service."""

import uuid
from datetime import date

import pytest

from worktime.exceptions import (
    CapExceededError,
    InvalidSubmissionError,
    NotEditableError,
    NotFoundError,
    UnauthorizedError,
)
from worktime.models import LeaveRequest, WorkEntry
from worktime.models.enums import (
    DayType,
    LeaveRequestStatus,
    LeaveRequestType,
    NotEditableReason,
)
from worktime.schemas.work_entry import (
    PermissionShiftSchema,
    WorkedShiftSchema,
    WorkEntrySubmit,
)
from worktime.services.holiday_calendar import HolidayCalendar
from worktime.services.work_entry_service import WorkEntryService

TODAY = date(2025, 3, 14)
MONDAY = date(2025, 3, 10)


@pytest.fixture
def service(db_session) -> WorkEntryService:
    return WorkEntryService(db_session, calendar=HolidayCalendar(country_code="IT"))


def full_day(entry_date: date = MONDAY, **kwargs) -> WorkEntrySubmit:
    """Helper to build an eight-hour submission."""
    return WorkEntrySubmit(
        date=entry_date,
        morning=WorkedShiftSchema(start="08:00", end="12:00"),
        afternoon=WorkedShiftSchema(start="14:00", end="18:00"),
        **kwargs,
    )


class TestSubmit:
    """Tests for WorkEntryService.submit."""

    def test_creates_entry(self, service, employee):
        entry = service.submit(employee, full_day(notes="office"), TODAY)

        assert entry.user_id == employee.id
        assert entry.date == MONDAY
        assert entry.regular_hours == 8.0
        assert entry.overtime_hours == 0.0
        assert entry.morning_start == "08:00"
        assert entry.afternoon_end == "18:00"
        assert entry.notes == "office"

    def test_resubmission_replaces_entry(self, db_session, service, employee):
        first = service.submit(employee, full_day(), TODAY)
        second = service.submit(
            employee,
            WorkEntrySubmit(date=MONDAY, day_type=DayType.VACATION),
            TODAY,
        )

        entries = db_session.query(WorkEntry).filter_by(user_id=employee.id).all()
        assert len(entries) == 1
        assert second.id == first.id
        assert entries[0].vacation_hours == 8.0
        assert entries[0].regular_hours == 0.0
        assert entries[0].morning_start is None
        assert entries[0].notes is None

    def test_permission_half_shift_stored_with_marker(self, service, employee):
        payload = WorkEntrySubmit(
            date=MONDAY,
            morning=PermissionShiftSchema(),
            afternoon=WorkedShiftSchema(start="14:00", end="18:00"),
        )

        entry = service.submit(employee, payload, TODAY)

        assert entry.morning_start == "PERM"
        assert entry.permission_hours == 8.0
        assert entry.regular_hours == 4.0

    def test_sunday_not_editable_for_employee(self, service, employee):
        with pytest.raises(NotEditableError) as exc_info:
            service.submit(employee, full_day(date(2025, 3, 9)), TODAY)
        assert exc_info.value.reason == NotEditableReason.SUNDAY

    def test_sunday_worker_gets_overtime(self, db_session, service, employee):
        employee.can_work_sunday = True
        db_session.commit()

        entry = service.submit(employee, full_day(date(2025, 3, 9)), TODAY)

        assert entry.regular_hours == 0.0
        assert entry.overtime_hours == 8.0

    def test_admin_may_record_holiday_for_employee(
        self, service, admin_user, employee
    ):
        payload = full_day(date(2025, 12, 25), user_id=employee.id)

        entry = service.submit(admin_user, payload, TODAY)

        assert entry.user_id == employee.id
        assert entry.overtime_hours == 8.0
        assert entry.regular_hours == 0.0

    def test_employee_cannot_submit_for_others(
        self, service, employee, other_employee
    ):
        with pytest.raises(UnauthorizedError):
            service.submit(employee, full_day(user_id=other_employee.id), TODAY)

    def test_admin_submitting_for_unknown_user(self, service, admin_user):
        with pytest.raises(NotFoundError):
            service.submit(admin_user, full_day(user_id=uuid.uuid4()), TODAY)

    def test_out_of_window_for_employee(self, service, employee):
        with pytest.raises(NotEditableError) as exc_info:
            service.submit(employee, full_day(date(2025, 2, 3)), TODAY)
        assert exc_info.value.reason == NotEditableReason.OUT_OF_WINDOW

    def test_empty_day_rejected(self, service, employee):
        with pytest.raises(InvalidSubmissionError):
            service.submit(employee, WorkEntrySubmit(date=MONDAY), TODAY)

    def test_special_leave_requires_entitlement(self, service, other_employee):
        payload = WorkEntrySubmit(date=MONDAY, special_leave_hours=4)

        with pytest.raises(InvalidSubmissionError):
            service.submit(other_employee, payload, TODAY)

    def test_parental_leave_requires_entitlement(self, service, other_employee):
        payload = WorkEntrySubmit(date=MONDAY, parental_leave_hours=4)

        with pytest.raises(InvalidSubmissionError):
            service.submit(other_employee, payload, TODAY)

    def test_special_leave_cap_applies_to_admins(
        self, service, admin_user, employee
    ):
        for day in (3, 4, 5):
            service.submit(
                admin_user,
                WorkEntrySubmit(
                    date=date(2025, 3, day),
                    user_id=employee.id,
                    special_leave_hours=8,
                ),
                TODAY,
            )

        with pytest.raises(CapExceededError):
            service.submit(
                admin_user,
                WorkEntrySubmit(
                    date=MONDAY, user_id=employee.id, special_leave_hours=1
                ),
                TODAY,
            )

    def test_resubmitting_same_special_leave_day(self, service, employee):
        for day in (3, 4, 5):
            service.submit(
                employee,
                WorkEntrySubmit(date=date(2025, 3, day), special_leave_hours=8),
                TODAY,
            )

        entry = service.submit(
            employee,
            WorkEntrySubmit(date=date(2025, 3, 5), special_leave_hours=6),
            TODAY,
        )

        assert entry.special_leave_hours == 6.0

    def test_rejected_submission_keeps_existing_entry(
        self, db_session, service, employee
    ):
        service.submit(employee, full_day(), TODAY)

        with pytest.raises(InvalidSubmissionError):
            service.submit(employee, WorkEntrySubmit(date=MONDAY), TODAY)

        entry = db_session.query(WorkEntry).filter_by(user_id=employee.id).one()
        assert entry.regular_hours == 8.0

    def test_approved_permission_reduces_worked_time(
        self, db_session, service, employee
    ):
        db_session.add(
            LeaveRequest(
                user_id=employee.id,
                start_date=MONDAY,
                end_date=MONDAY,
                type=LeaveRequestType.PERMISSION,
                status=LeaveRequestStatus.APPROVED,
                start_time="16:00",
                end_time="18:00",
            )
        )
        db_session.commit()

        entry = service.submit(employee, full_day(), TODAY)

        assert entry.regular_hours == 6.0
        assert entry.permission_hours == 2.0

    def test_pending_permission_is_ignored(self, db_session, service, employee):
        db_session.add(
            LeaveRequest(
                user_id=employee.id,
                start_date=MONDAY,
                end_date=MONDAY,
                type=LeaveRequestType.PERMISSION,
                status=LeaveRequestStatus.PENDING,
                start_time="16:00",
                end_time="18:00",
            )
        )
        db_session.commit()

        entry = service.submit(employee, full_day(), TODAY)

        assert entry.regular_hours == 8.0


class TestListAndGet:
    """Tests for listing and fetching entries."""

    def test_employee_lists_own_entries(
        self, service, admin_user, employee, other_employee
    ):
        service.submit(employee, full_day(), TODAY)
        service.submit(admin_user, full_day(user_id=other_employee.id), TODAY)

        entries = service.list_entries(employee)

        assert [e.user_id for e in entries] == [employee.id]

    def test_employee_cannot_list_others(self, service, employee, other_employee):
        with pytest.raises(UnauthorizedError):
            service.list_entries(employee, user_id=other_employee.id)

    def test_admin_lists_everyone(self, service, admin_user, employee, other_employee):
        service.submit(employee, full_day(), TODAY)
        service.submit(other_employee, full_day(), TODAY)

        assert len(service.list_entries(admin_user, all_users=True)) == 2
        assert len(service.list_entries(admin_user, user_id=employee.id)) == 1

    def test_date_range_filter(self, service, employee):
        service.submit(employee, full_day(date(2025, 3, 3)), TODAY)
        service.submit(employee, full_day(date(2025, 3, 10)), TODAY)

        entries = service.list_entries(
            employee, from_date=date(2025, 3, 5), to_date=date(2025, 3, 12)
        )

        assert [e.date for e in entries] == [date(2025, 3, 10)]

    def test_get_other_users_entry_unauthorized(
        self, service, employee, other_employee
    ):
        entry = service.submit(other_employee, full_day(), TODAY)

        with pytest.raises(UnauthorizedError):
            service.get_entry(employee, entry.id)

    def test_get_missing_entry(self, service, employee):
        with pytest.raises(NotFoundError):
            service.get_entry(employee, uuid.uuid4())


class TestDelete:
    """Tests for WorkEntryService.delete."""

    def test_owner_deletes_entry(self, db_session, service, employee):
        entry = service.submit(employee, full_day(), TODAY)

        service.delete(employee, entry.id, TODAY)

        assert db_session.query(WorkEntry).count() == 0

    def test_other_employee_cannot_delete(self, service, employee, other_employee):
        entry = service.submit(employee, full_day(), TODAY)

        with pytest.raises(UnauthorizedError):
            service.delete(other_employee, entry.id, TODAY)

    def test_employee_cannot_delete_closed_month(self, service, admin_user, employee):
        entry = service.submit(
            admin_user, full_day(date(2025, 2, 3), user_id=employee.id), TODAY
        )

        with pytest.raises(NotEditableError):
            service.delete(employee, entry.id, TODAY)

    def test_admin_deletes_closed_month(
        self, db_session, service, admin_user, employee
    ):
        entry = service.submit(
            admin_user, full_day(date(2025, 2, 3), user_id=employee.id), TODAY
        )

        service.delete(admin_user, entry.id, TODAY)

        assert db_session.query(WorkEntry).count() == 0

    def test_delete_missing_entry(self, service, admin_user):
        with pytest.raises(NotFoundError):
            service.delete(admin_user, uuid.uuid4(), TODAY)
