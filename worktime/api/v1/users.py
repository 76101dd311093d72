# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management API endpoints."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from worktime.api.deps import get_current_admin, get_current_user, get_db
from worktime.models import User
from worktime.schemas.user import UserResponse, UserUpdate
from worktime.services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)) -> UserResponse:
    """Get the authenticated user."""
    return UserResponse.model_validate(current_user)


@router.get("", response_model=list[UserResponse], summary="List all users")
def list_users(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
) -> list[UserResponse]:
    """Retrieve a list of all users in the system.

    Requires admin role.
    """
    users = db.query(User).order_by(User.username).all()
    return [UserResponse.model_validate(user) for user in users]


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: uuid.UUID,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
) -> UserResponse:
    """Update the role, active flag and entitlements of a user."""
    user = auth_service.get_user_by_id(db, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    update_data = user_in.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(user, key, value)

    db.commit()
    db.refresh(user)

    logger.info(f"User {user_id} updated by {current_admin.id}: {update_data}")
    return UserResponse.model_validate(user)
