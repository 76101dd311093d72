# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Persistence access for work entries and approved permissions."""

import logging
import uuid
from datetime import date
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from worktime.models import LeaveRequest, WorkEntry
from worktime.models.enums import LeaveRequestStatus, LeaveRequestType

logger = logging.getLogger(__name__)


class WorkEntryRepository:
    """Repository for work entries."""

    def __init__(self, db: Session) -> None:
        """Initialize the repository.

        Args:
            db: Database session.
        """
        self.db = db

    def find_entry(self, user_id: uuid.UUID, entry_date: date) -> WorkEntry | None:
        """Get the entry of a user on a date."""
        return (
            self.db.query(WorkEntry)
            .filter(WorkEntry.user_id == user_id, WorkEntry.date == entry_date)
            .first()
        )

    def get_entry(self, entry_id: uuid.UUID) -> WorkEntry | None:
        """Get an entry by ID."""
        return self.db.query(WorkEntry).filter(WorkEntry.id == entry_id).first()

    def list_entries(
        self,
        user_id: uuid.UUID | None = None,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[WorkEntry]:
        """List entries with optional filters.

        Args:
            user_id: Optional user filter, None lists every user.
            from_date: Optional first date (inclusive).
            to_date: Optional last date (inclusive).

        Returns:
            Matching entries, newest first.
        """
        query = self.db.query(WorkEntry)

        if user_id:
            query = query.filter(WorkEntry.user_id == user_id)
        if from_date:
            query = query.filter(WorkEntry.date >= from_date)
        if to_date:
            query = query.filter(WorkEntry.date <= to_date)

        return query.order_by(WorkEntry.date.desc()).all()

    def sum_special_leave_hours(
        self,
        user_id: uuid.UUID,
        from_date: date,
        to_date: date,
        exclude_entry_id: uuid.UUID | None = None,
    ) -> float:
        """Sum special leave hours of a user within a date range."""
        query = self.db.query(
            func.coalesce(func.sum(WorkEntry.special_leave_hours), 0.0)
        ).filter(
            WorkEntry.user_id == user_id,
            WorkEntry.date >= from_date,
            WorkEntry.date <= to_date,
        )
        if exclude_entry_id:
            query = query.filter(WorkEntry.id != exclude_entry_id)

        return float(query.scalar() or 0.0)

    def count_parental_leave_days(
        self,
        user_id: uuid.UUID,
        exclude_entry_id: uuid.UUID | None = None,
    ) -> int:
        """Count the days on which a user recorded parental leave."""
        query = self.db.query(func.count(WorkEntry.id)).filter(
            WorkEntry.user_id == user_id,
            WorkEntry.parental_leave_hours > 0,
        )
        if exclude_entry_id:
            query = query.filter(WorkEntry.id != exclude_entry_id)

        return int(query.scalar() or 0)

    def upsert_entry(
        self,
        user_id: uuid.UUID,
        entry_date: date,
        fields: dict[str, Any],
    ) -> WorkEntry:
        """Insert the entry for (user, date) or replace the existing one.

        Every field in ``fields`` is overwritten, so a resubmission fully
        supersedes the previous record. If a concurrent request inserted the
        same day first, the insert is retried as an update.

        Args:
            user_id: The user ID.
            entry_date: The date.
            fields: Column values to store.

        Returns:
            The persisted entry.
        """
        entry = self.find_entry(user_id, entry_date)
        if entry is None:
            entry = WorkEntry(user_id=user_id, date=entry_date, **fields)
            self.db.add(entry)
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                logger.warning(
                    f"Concurrent insert for user {user_id} on {entry_date}, "
                    "updating instead"
                )
                entry = self.find_entry(user_id, entry_date)
                if entry is None:
                    raise
                self._apply(entry, fields)
                self.db.commit()
        else:
            self._apply(entry, fields)
            self.db.commit()

        self.db.refresh(entry)
        return entry

    def delete_entry(self, entry: WorkEntry) -> None:
        """Delete an entry."""
        self.db.delete(entry)
        self.db.commit()

    def list_approved_permission_requests(
        self,
        user_id: uuid.UUID,
        entry_date: date,
    ) -> list[LeaveRequest]:
        """Get approved permission requests of a user covering a date."""
        return (
            self.db.query(LeaveRequest)
            .filter(
                LeaveRequest.user_id == user_id,
                LeaveRequest.type == LeaveRequestType.PERMISSION,
                LeaveRequest.status == LeaveRequestStatus.APPROVED,
                LeaveRequest.start_date <= entry_date,
                LeaveRequest.end_date >= entry_date,
            )
            .all()
        )

    @staticmethod
    def _apply(entry: WorkEntry, fields: dict[str, Any]) -> None:
        for key, value in fields.items():
            setattr(entry, key, value)
