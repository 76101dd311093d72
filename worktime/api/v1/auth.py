# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Session API endpoints."""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from worktime.api.deps import get_current_user, get_db
from worktime.config import settings
from worktime.models import User
from worktime.services import auth_service

router = APIRouter()


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    """Invalidate the current session and clear its cookie."""
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        auth_service.delete_session(db, token)
    response.delete_cookie(key=settings.session_cookie_name)
