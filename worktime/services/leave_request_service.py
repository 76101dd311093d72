# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave request workflow.

Requests are reviewed by an administrator. Approving a request does not
create work entries: approved permission bounds are read back when the
employee submits the hours of that day.
"""

import logging
import uuid

from sqlalchemy.orm import Session

from worktime.exceptions import (
    InvalidSubmissionError,
    LeaveRequestConflictError,
    NotFoundError,
    UnauthorizedError,
)
from worktime.models import LeaveRequest, User, WorkEntry
from worktime.models.enums import LeaveRequestStatus, LeaveRequestType
from worktime.schemas.leave_request import (
    LeaveRequestBase,
    LeaveRequestCreate,
    LeaveRequestUpdate,
)
from worktime.services.shift_calculator import parse_time

logger = logging.getLogger(__name__)

ACTIVE_STATUSES = (LeaveRequestStatus.PENDING, LeaveRequestStatus.APPROVED)


def validate_request_fields(data: LeaveRequestBase) -> None:
    """Check date ordering and permission constraints.

    Raises:
        InvalidSubmissionError: If the interval or the permission bounds are
            inconsistent.
    """
    if data.end_date < data.start_date:
        raise InvalidSubmissionError("End date must not be before start date")

    if data.type != LeaveRequestType.PERMISSION:
        return

    if not data.start_time or not data.end_time:
        raise InvalidSubmissionError(
            "Start time and end time are required for a permission"
        )
    if data.start_date != data.end_date:
        raise InvalidSubmissionError("A permission must cover a single day")
    if parse_time(data.end_time) <= parse_time(data.start_time):
        raise InvalidSubmissionError("Permission end time must be after start time")


class LeaveRequestService:
    """Service for filing and reviewing leave requests."""

    def __init__(self, db: Session) -> None:
        """Initialize the service.

        Args:
            db: Database session.
        """
        self.db = db

    def get_request(self, request_id: uuid.UUID) -> LeaveRequest:
        """Get a request by ID.

        Raises:
            NotFoundError: If the request does not exist.
        """
        request = (
            self.db.query(LeaveRequest).filter(LeaveRequest.id == request_id).first()
        )
        if request is None:
            raise NotFoundError("Request not found")
        return request

    def create(self, actor: User, data: LeaveRequestCreate) -> LeaveRequest:
        """File a new pending request.

        Args:
            actor: The user filing the request.
            data: Request data.

        Returns:
            The created request.

        Raises:
            UnauthorizedError: If an employee files for another user.
            NotFoundError: If the target user does not exist.
            InvalidSubmissionError: If the request fields are inconsistent.
            LeaveRequestConflictError: If the interval overlaps an active
                request or recorded hours of the user.
        """
        user_id = self._resolve_user_id(actor, data.user_id)
        validate_request_fields(data)
        self._check_conflicts(user_id, data)

        request = LeaveRequest(
            user_id=user_id,
            start_date=data.start_date,
            end_date=data.end_date,
            type=data.type,
            status=LeaveRequestStatus.PENDING,
            start_time=data.start_time,
            end_time=data.end_time,
            reason=data.reason,
        )
        self.db.add(request)
        self.db.commit()
        self.db.refresh(request)

        logger.info(
            f"Created {data.type.value} request {request.id} for user {user_id} "
            f"({data.start_date} to {data.end_date})"
        )
        return request

    def list_requests(
        self,
        actor: User,
        user_id: uuid.UUID | None = None,
        status: LeaveRequestStatus | None = None,
    ) -> list[LeaveRequest]:
        """List requests visible to the actor, newest first.

        Employees see their own requests. Admins see everyone unless a user
        filter is given.

        Raises:
            UnauthorizedError: If an employee asks for another user.
        """
        if user_id is not None and user_id != actor.id and not actor.is_admin:
            raise UnauthorizedError("You can only view your own requests")

        query = self.db.query(LeaveRequest)
        if user_id is not None:
            query = query.filter(LeaveRequest.user_id == user_id)
        elif not actor.is_admin:
            query = query.filter(LeaveRequest.user_id == actor.id)

        if status is not None:
            query = query.filter(LeaveRequest.status == status)

        return query.order_by(LeaveRequest.created_at.desc()).all()

    def update_status(
        self,
        actor: User,
        request_id: uuid.UUID,
        status: LeaveRequestStatus,
    ) -> LeaveRequest:
        """Set the status of a request.

        Any transition is allowed, so an admin can revert an earlier
        decision.
        """
        self._require_admin(actor)
        request = self.get_request(request_id)

        previous = request.status
        request.status = status
        self.db.commit()
        self.db.refresh(request)

        logger.info(
            f"Request {request_id} changed from {previous.value} to "
            f"{status.value} by {actor.id}"
        )
        return request

    def update(
        self,
        actor: User,
        request_id: uuid.UUID,
        data: LeaveRequestUpdate,
    ) -> LeaveRequest:
        """Replace the interval, type and bounds of a request."""
        self._require_admin(actor)
        request = self.get_request(request_id)
        validate_request_fields(data)

        for key, value in data.model_dump().items():
            setattr(request, key, value)

        if request.type != LeaveRequestType.PERMISSION:
            request.start_time = None
            request.end_time = None

        self.db.commit()
        self.db.refresh(request)

        logger.info(f"Request {request_id} updated by {actor.id}")
        return request

    def delete(self, actor: User, request_id: uuid.UUID) -> None:
        """Delete a request."""
        self._require_admin(actor)
        request = self.get_request(request_id)

        self.db.delete(request)
        self.db.commit()
        logger.info(f"Request {request_id} deleted by {actor.id}")

    def _resolve_user_id(
        self,
        actor: User,
        user_id: uuid.UUID | None,
    ) -> uuid.UUID:
        if user_id is None or user_id == actor.id:
            return actor.id
        if not actor.is_admin:
            raise UnauthorizedError("You can only file requests for yourself")
        if self.db.query(User).filter(User.id == user_id).first() is None:
            raise NotFoundError("User not found")
        return user_id

    def _check_conflicts(self, user_id: uuid.UUID, data: LeaveRequestBase) -> None:
        overlapping_request = (
            self.db.query(LeaveRequest)
            .filter(
                LeaveRequest.user_id == user_id,
                LeaveRequest.status.in_(ACTIVE_STATUSES),
                LeaveRequest.start_date <= data.end_date,
                LeaveRequest.end_date >= data.start_date,
            )
            .first()
        )
        if overlapping_request is not None:
            raise LeaveRequestConflictError(
                "Request overlaps with an existing request"
            )

        overlapping_entry = (
            self.db.query(WorkEntry)
            .filter(
                WorkEntry.user_id == user_id,
                WorkEntry.date >= data.start_date,
                WorkEntry.date <= data.end_date,
            )
            .first()
        )
        if overlapping_entry is not None:
            raise LeaveRequestConflictError(
                "Request overlaps with recorded hours"
            )

    @staticmethod
    def _require_admin(actor: User) -> None:
        if not actor.is_admin:
            raise UnauthorizedError("Admin access required")
