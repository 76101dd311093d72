# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Session tokens mapping requests to users.

Credentials are verified by the identity provider in front of the portal,
this module only issues and resolves session tokens.
"""

import logging
import uuid
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from worktime.models import User
from worktime.models.session import Session as SessionModel

logger = logging.getLogger(__name__)

SESSION_EXPIRY_DAYS = 7


def create_session(db: Session, user_id: uuid.UUID) -> str:
    """Create a new session for a user."""
    token = str(uuid.uuid4())
    expires_at = datetime.utcnow() + timedelta(days=SESSION_EXPIRY_DAYS)

    session = SessionModel(
        user_id=user_id,
        token=token,
        expires_at=expires_at,
    )
    db.add(session)
    db.commit()

    logger.info(f"Created session for user {user_id}")
    return token


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a valid session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.is_expired():
        db.delete(session)
        db.commit()
        return None
    return session


def delete_session(db: Session, token: str) -> bool:
    """Delete a session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if session:
        user_id = session.user_id
        db.delete(session)
        db.commit()
        logger.info(f"Deleted session of user {user_id}")
        return True
    return False


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()
