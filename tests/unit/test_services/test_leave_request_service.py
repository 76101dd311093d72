# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the leave request service."""

import uuid
from datetime import date

import pytest

from worktime.exceptions import (
    InvalidSubmissionError,
    LeaveRequestConflictError,
    NotFoundError,
    UnauthorizedError,
)
from worktime.models import WorkEntry
from worktime.models.enums import LeaveRequestStatus, LeaveRequestType
from worktime.schemas.leave_request import LeaveRequestCreate, LeaveRequestUpdate
from worktime.services.leave_request_service import LeaveRequestService


@pytest.fixture
def service(db_session) -> LeaveRequestService:
    return LeaveRequestService(db_session)


def vacation(start: date, end: date, **kwargs) -> LeaveRequestCreate:
    return LeaveRequestCreate(
        start_date=start, end_date=end, type=LeaveRequestType.VACATION, **kwargs
    )


def permission(day: date, start: str = "09:00", end: str = "11:00", **kwargs):
    return LeaveRequestCreate(
        start_date=day,
        end_date=day,
        type=LeaveRequestType.PERMISSION,
        start_time=start,
        end_time=end,
        **kwargs,
    )


class TestCreate:
    """Tests for LeaveRequestService.create."""

    def test_creates_pending_request(self, service, employee):
        request = service.create(
            employee, vacation(date(2025, 8, 4), date(2025, 8, 8), reason="Sea")
        )

        assert request.user_id == employee.id
        assert request.status == LeaveRequestStatus.PENDING
        assert request.reason == "Sea"

    def test_end_before_start_rejected(self, service, employee):
        with pytest.raises(InvalidSubmissionError):
            service.create(employee, vacation(date(2025, 8, 8), date(2025, 8, 4)))

    def test_permission_requires_times(self, service, employee):
        data = LeaveRequestCreate(
            start_date=date(2025, 8, 4),
            end_date=date(2025, 8, 4),
            type=LeaveRequestType.PERMISSION,
        )

        with pytest.raises(InvalidSubmissionError):
            service.create(employee, data)

    def test_permission_must_be_single_day(self, service, employee):
        data = permission(date(2025, 8, 4)).model_copy(
            update={"end_date": date(2025, 8, 5)}
        )

        with pytest.raises(InvalidSubmissionError):
            service.create(employee, data)

    def test_permission_end_after_start(self, service, employee):
        with pytest.raises(InvalidSubmissionError):
            service.create(employee, permission(date(2025, 8, 4), "11:00", "09:00"))

    def test_overlapping_active_request_conflicts(self, service, employee):
        service.create(employee, vacation(date(2025, 8, 4), date(2025, 8, 8)))

        with pytest.raises(LeaveRequestConflictError):
            service.create(employee, permission(date(2025, 8, 6)))

    def test_rejected_request_does_not_conflict(self, service, admin_user, employee):
        first = service.create(
            employee, vacation(date(2025, 8, 4), date(2025, 8, 8))
        )
        service.update_status(admin_user, first.id, LeaveRequestStatus.REJECTED)

        second = service.create(
            employee, vacation(date(2025, 8, 4), date(2025, 8, 8))
        )

        assert second.id != first.id

    def test_recorded_hours_conflict(self, db_session, service, employee):
        db_session.add(
            WorkEntry(user_id=employee.id, date=date(2025, 8, 5), regular_hours=8)
        )
        db_session.commit()

        with pytest.raises(LeaveRequestConflictError):
            service.create(employee, vacation(date(2025, 8, 4), date(2025, 8, 8)))

    def test_other_users_requests_do_not_conflict(
        self, service, employee, other_employee
    ):
        service.create(employee, vacation(date(2025, 8, 4), date(2025, 8, 8)))

        request = service.create(
            other_employee, vacation(date(2025, 8, 4), date(2025, 8, 8))
        )

        assert request.user_id == other_employee.id

    def test_employee_cannot_file_for_others(
        self, service, employee, other_employee
    ):
        data = vacation(date(2025, 8, 4), date(2025, 8, 8), user_id=other_employee.id)

        with pytest.raises(UnauthorizedError):
            service.create(employee, data)

    def test_admin_files_for_employee(self, service, admin_user, employee):
        data = vacation(date(2025, 8, 4), date(2025, 8, 8), user_id=employee.id)

        request = service.create(admin_user, data)

        assert request.user_id == employee.id


class TestReview:
    """Tests for status changes, edits and deletes."""

    def test_approval_creates_no_entries(
        self, db_session, service, admin_user, employee
    ):
        request = service.create(
            employee, vacation(date(2025, 8, 4), date(2025, 8, 8))
        )

        approved = service.update_status(
            admin_user, request.id, LeaveRequestStatus.APPROVED
        )

        assert approved.status == LeaveRequestStatus.APPROVED
        assert db_session.query(WorkEntry).count() == 0

    def test_admin_can_reopen_decision(self, service, admin_user, employee):
        request = service.create(employee, permission(date(2025, 8, 4)))
        service.update_status(admin_user, request.id, LeaveRequestStatus.REJECTED)

        reopened = service.update_status(
            admin_user, request.id, LeaveRequestStatus.PENDING
        )

        assert reopened.status == LeaveRequestStatus.PENDING

    def test_employee_cannot_change_status(self, service, employee):
        request = service.create(employee, permission(date(2025, 8, 4)))

        with pytest.raises(UnauthorizedError):
            service.update_status(employee, request.id, LeaveRequestStatus.APPROVED)

    def test_status_of_missing_request(self, service, admin_user):
        with pytest.raises(NotFoundError):
            service.update_status(
                admin_user, uuid.uuid4(), LeaveRequestStatus.APPROVED
            )

    def test_update_to_vacation_clears_times(self, service, admin_user, employee):
        request = service.create(employee, permission(date(2025, 8, 4)))

        updated = service.update(
            admin_user,
            request.id,
            LeaveRequestUpdate(
                start_date=date(2025, 8, 4),
                end_date=date(2025, 8, 5),
                type=LeaveRequestType.VACATION,
                start_time="09:00",
                end_time="11:00",
            ),
        )

        assert updated.type == LeaveRequestType.VACATION
        assert updated.end_date == date(2025, 8, 5)
        assert updated.start_time is None

    def test_update_keeps_permission_constraints(
        self, service, admin_user, employee
    ):
        request = service.create(employee, permission(date(2025, 8, 4)))

        with pytest.raises(InvalidSubmissionError):
            service.update(
                admin_user,
                request.id,
                LeaveRequestUpdate(
                    start_date=date(2025, 8, 4),
                    end_date=date(2025, 8, 5),
                    type=LeaveRequestType.PERMISSION,
                    start_time="09:00",
                    end_time="11:00",
                ),
            )

    def test_delete_requires_admin(self, service, admin_user, employee):
        request = service.create(employee, permission(date(2025, 8, 4)))

        with pytest.raises(UnauthorizedError):
            service.delete(employee, request.id)

        service.delete(admin_user, request.id)
        with pytest.raises(NotFoundError):
            service.get_request(request.id)


class TestList:
    """Tests for LeaveRequestService.list_requests."""

    @pytest.fixture
    def requests(self, service, employee, other_employee):
        service.create(employee, vacation(date(2025, 8, 4), date(2025, 8, 8)))
        service.create(other_employee, permission(date(2025, 8, 4)))

    def test_employee_sees_own(self, service, employee, requests):
        result = service.list_requests(employee)
        assert [r.user_id for r in result] == [employee.id]

    def test_employee_cannot_filter_other_user(
        self, service, employee, other_employee, requests
    ):
        with pytest.raises(UnauthorizedError):
            service.list_requests(employee, user_id=other_employee.id)

    def test_admin_sees_everyone(self, service, admin_user, requests):
        assert len(service.list_requests(admin_user)) == 2

    def test_admin_filters_by_user_and_status(
        self, service, admin_user, other_employee, requests
    ):
        result = service.list_requests(admin_user, user_id=other_employee.id)
        assert len(result) == 1
        assert result[0].type == LeaveRequestType.PERMISSION

        pending = service.list_requests(
            admin_user, status=LeaveRequestStatus.APPROVED
        )
        assert pending == []
