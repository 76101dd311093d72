# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work hours API endpoints."""

import uuid
from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from worktime.api.deps import get_current_user, get_db, get_today
from worktime.models import User
from worktime.schemas.common import MessageResponse
from worktime.schemas.work_entry import (
    EntryTotalsResponse,
    WorkEntryResponse,
    WorkEntrySubmit,
)
from worktime.services.report_service import calculate_totals
from worktime.services.work_entry_service import WorkEntryService

router = APIRouter()


@router.get("", response_model=list[WorkEntryResponse])
def list_entries(
    user_id: uuid.UUID | None = Query(None),
    from_date: date | None = Query(None),
    to_date: date | None = Query(None),
    all_users: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[WorkEntryResponse]:
    """List work entries, newest first.

    Employees only see their own entries. Admins may pass ``user_id`` or
    ``all_users``.
    """
    entries = WorkEntryService(db).list_entries(
        current_user, user_id, from_date, to_date, all_users=all_users
    )
    return [WorkEntryResponse.from_entry(entry) for entry in entries]


@router.post(
    "",
    response_model=WorkEntryResponse,
    status_code=status.HTTP_200_OK,
)
def submit_entry(
    data: WorkEntrySubmit,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    today: date = Depends(get_today),
) -> WorkEntryResponse:
    """Create or replace the entry of a day.

    Submitting a day that already has an entry replaces it completely.
    """
    entry = WorkEntryService(db).submit(current_user, data, today)
    return WorkEntryResponse.from_entry(entry)


# NOTE: /summary route must come BEFORE /{entry_id} to avoid "summary"
# being parsed as a UUID
@router.get("/summary", response_model=EntryTotalsResponse)
def get_summary(
    user_id: uuid.UUID | None = Query(None),
    from_date: date | None = Query(None),
    to_date: date | None = Query(None),
    all_users: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> EntryTotalsResponse:
    """Get aggregated hours over the selected entries."""
    entries = WorkEntryService(db).list_entries(
        current_user, user_id, from_date, to_date, all_users=all_users
    )
    return EntryTotalsResponse(**calculate_totals(entries).to_dict())


@router.get("/{entry_id}", response_model=WorkEntryResponse)
def get_entry(
    entry_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> WorkEntryResponse:
    """Get a single work entry."""
    entry = WorkEntryService(db).get_entry(current_user, entry_id)
    return WorkEntryResponse.from_entry(entry)


@router.delete("/{entry_id}", response_model=MessageResponse)
def delete_entry(
    entry_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    today: date = Depends(get_today),
) -> MessageResponse:
    """Delete a work entry."""
    WorkEntryService(db).delete(current_user, entry_id, today)
    return MessageResponse(message="Entry deleted")
