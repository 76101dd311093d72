# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Submission, listing and deletion of daily work entries."""

import logging
import uuid
from datetime import date

from sqlalchemy.orm import Session

from worktime.exceptions import (
    InvalidSubmissionError,
    NotFoundError,
    UnauthorizedError,
)
from worktime.models import User, WorkEntry
from worktime.schemas.work_entry import WorkEntrySubmit
from worktime.services.edit_window import check_editable
from worktime.services.holiday_calendar import HolidayCalendar, get_calendar
from worktime.services.hours_engine import DayInput, classify_day
from worktime.services.leave_caps import validate_leave_caps
from worktime.services.work_entry_repository import WorkEntryRepository

logger = logging.getLogger(__name__)


class WorkEntryService:
    """Service for submitting and managing work entries."""

    def __init__(
        self,
        db: Session,
        calendar: HolidayCalendar | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            db: Database session.
            calendar: Holiday calendar, defaults to the configured one.
        """
        self.db = db
        self.repository = WorkEntryRepository(db)
        self.calendar = calendar or get_calendar()

    def resolve_target_user(
        self,
        actor: User,
        user_id: uuid.UUID | None,
    ) -> User:
        """Get the user an actor is acting on.

        Args:
            actor: The user performing the request.
            user_id: Requested target user, None means the actor.

        Returns:
            The target user.

        Raises:
            UnauthorizedError: If an employee targets another user.
            NotFoundError: If the target user does not exist.
        """
        if user_id is None or user_id == actor.id:
            return actor

        if not actor.is_admin:
            raise UnauthorizedError("You can only manage your own hours")

        target = self.db.query(User).filter(User.id == user_id).first()
        if target is None:
            raise NotFoundError("User not found")
        return target

    def submit(
        self,
        actor: User,
        payload: WorkEntrySubmit,
        today: date,
    ) -> WorkEntry:
        """Create or replace the entry for a user and day.

        Args:
            actor: The user performing the submission.
            payload: The submitted day.
            today: The current date.

        Returns:
            The persisted entry.

        Raises:
            UnauthorizedError: If the actor may not submit for the target user.
            NotFoundError: If the target user does not exist.
            NotEditableError: If an employee submits outside the edit window.
            InvalidSubmissionError: If the day is empty or contradictory.
            CapExceededError: If a leave cap would be exceeded.
        """
        user = self.resolve_target_user(actor, payload.user_id)
        check_editable(payload.date, actor, today, self.calendar)
        self._check_entitlements(user, payload)

        approved = self.repository.list_approved_permission_requests(
            user.id, payload.date
        )
        day = DayInput(
            date=payload.date,
            day_type=payload.day_type,
            morning=payload.morning.to_shift() if payload.morning else None,
            afternoon=payload.afternoon.to_shift() if payload.afternoon else None,
            permission_hours=payload.permission_hours,
            sickness_hours=payload.sickness_hours,
            vacation_hours=payload.vacation_hours,
            special_leave_hours=payload.special_leave_hours,
            parental_leave_hours=payload.parental_leave_hours,
            medical_certificate=payload.medical_certificate,
            approved_permissions=[
                (request.start_time, request.end_time)
                for request in approved
                if request.start_time and request.end_time
            ],
        )
        breakdown = classify_day(day, self.calendar)

        existing = self.repository.find_entry(user.id, payload.date)
        validate_leave_caps(
            self.repository,
            user.id,
            payload.date,
            special_leave_hours=breakdown.special_leave_hours,
            parental_leave_hours=breakdown.parental_leave_hours,
            exclude_entry_id=existing.id if existing else None,
        )

        fields = breakdown.to_columns()
        fields["notes"] = payload.notes
        entry = self.repository.upsert_entry(user.id, payload.date, fields)

        logger.info(
            f"{'Replaced' if existing else 'Created'} entry {entry.id} "
            f"for user {user.id} on {payload.date} by {actor.id}"
        )
        return entry

    def get_entry(self, actor: User, entry_id: uuid.UUID) -> WorkEntry:
        """Get an entry the actor may see.

        Raises:
            NotFoundError: If the entry does not exist.
            UnauthorizedError: If the entry belongs to someone else.
        """
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            raise NotFoundError("Entry not found")
        if entry.user_id != actor.id and not actor.is_admin:
            raise UnauthorizedError("You can only access your own hours")
        return entry

    def list_entries(
        self,
        actor: User,
        user_id: uuid.UUID | None = None,
        from_date: date | None = None,
        to_date: date | None = None,
        all_users: bool = False,
    ) -> list[WorkEntry]:
        """List entries visible to the actor.

        Employees always get their own entries. Admins get the entries of
        ``user_id`` (themselves by default) or of everyone with ``all_users``.
        """
        if actor.is_admin and all_users:
            target_id = None
        else:
            target_id = self.resolve_target_user(actor, user_id).id

        return self.repository.list_entries(target_id, from_date, to_date)

    def delete(self, actor: User, entry_id: uuid.UUID, today: date) -> None:
        """Delete an entry.

        Stored caps are always computed from remaining rows, so deleting
        needs no further bookkeeping.

        Raises:
            NotFoundError: If the entry does not exist.
            UnauthorizedError: If the actor is neither owner nor admin.
            NotEditableError: If an employee deletes outside the edit window.
        """
        entry = self.get_entry(actor, entry_id)
        check_editable(entry.date, actor, today, self.calendar)

        self.repository.delete_entry(entry)
        logger.info(f"Deleted entry {entry_id} by {actor.id}")

    @staticmethod
    def _check_entitlements(user: User, payload: WorkEntrySubmit) -> None:
        if payload.special_leave_hours > 0 and not user.has_special_leave:
            raise InvalidSubmissionError(
                "Special leave is not enabled for this user"
            )
        if payload.parental_leave_hours > 0 and not user.has_parental_leave:
            raise InvalidSubmissionError(
                "Parental leave is not enabled for this user"
            )
