# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave request API endpoints."""

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from worktime.api.deps import get_current_admin, get_current_user, get_db
from worktime.models import User
from worktime.models.enums import LeaveRequestStatus
from worktime.schemas.common import MessageResponse
from worktime.schemas.leave_request import (
    LeaveRequestCreate,
    LeaveRequestResponse,
    LeaveRequestStatusUpdate,
    LeaveRequestUpdate,
)
from worktime.services.leave_request_service import LeaveRequestService

router = APIRouter()


@router.post(
    "",
    response_model=LeaveRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_request(
    data: LeaveRequestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> LeaveRequestResponse:
    """File a new leave request."""
    request = LeaveRequestService(db).create(current_user, data)
    return LeaveRequestResponse.model_validate(request)


@router.get("", response_model=list[LeaveRequestResponse])
def list_requests(
    user_id: uuid.UUID | None = Query(None),
    request_status: LeaveRequestStatus | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[LeaveRequestResponse]:
    """List leave requests, newest first."""
    requests = LeaveRequestService(db).list_requests(
        current_user, user_id, request_status
    )
    return [LeaveRequestResponse.model_validate(r) for r in requests]


@router.patch("/{request_id}/status", response_model=LeaveRequestResponse)
def update_request_status(
    request_id: uuid.UUID,
    data: LeaveRequestStatusUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
) -> LeaveRequestResponse:
    """Approve, reject or reopen a leave request."""
    request = LeaveRequestService(db).update_status(
        current_admin, request_id, data.status
    )
    return LeaveRequestResponse.model_validate(request)


@router.put("/{request_id}", response_model=LeaveRequestResponse)
def update_request(
    request_id: uuid.UUID,
    data: LeaveRequestUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
) -> LeaveRequestResponse:
    """Edit a leave request."""
    request = LeaveRequestService(db).update(current_admin, request_id, data)
    return LeaveRequestResponse.model_validate(request)


@router.delete("/{request_id}", response_model=MessageResponse)
def delete_request(
    request_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
) -> MessageResponse:
    """Delete a leave request."""
    LeaveRequestService(db).delete(current_admin, request_id)
    return MessageResponse(message="Request deleted")
