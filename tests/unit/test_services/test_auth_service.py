# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for auth_service."""

from datetime import datetime, timedelta

from worktime.models.session import Session as SessionModel
from worktime.services import auth_service


def test_create_and_get_session(db_session, employee):
    token = auth_service.create_session(db_session, employee.id)

    session = auth_service.get_session(db_session, token)

    assert session is not None
    assert session.user_id == employee.id


def test_unknown_token(db_session):
    assert auth_service.get_session(db_session, "missing") is None


def test_expired_session_removed(db_session, employee):
    token = auth_service.create_session(db_session, employee.id)
    session = db_session.query(SessionModel).filter_by(token=token).one()
    session.expires_at = datetime.utcnow() - timedelta(minutes=1)
    db_session.commit()

    assert auth_service.get_session(db_session, token) is None
    assert db_session.query(SessionModel).count() == 0


def test_delete_session(db_session, employee):
    token = auth_service.create_session(db_session, employee.id)

    assert auth_service.delete_session(db_session, token) is True
    assert auth_service.delete_session(db_session, token) is False


def test_user_lookup(db_session, employee):
    assert auth_service.get_user_by_id(db_session, employee.id).username == "employee"


def test_session_expiry(db_session, employee):
    token = auth_service.create_session(db_session, employee.id)
    session = auth_service.get_session(db_session, token)

    assert session.is_expired() is False
    assert session.is_expired(session.expires_at + timedelta(seconds=1)) is True
