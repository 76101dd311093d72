# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["HOLIDAY_COUNTRY"] = "IT"
os.environ["EDIT_GRACE_DAYS"] = "5"

from worktime.api.deps import get_today
from worktime.database import get_db
from worktime.main import app
from worktime.models import User, UserRole
from worktime.models.base import Base
from worktime.services import auth_service

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Friday, no public holiday in March 2025 in Italy
TODAY = date(2025, 3, 14)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database and clock overrides."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_user(
    db_session,
    username: str,
    role: UserRole = UserRole.EMPLOYEE,
    **flags,
) -> User:
    """Helper to create a persisted user."""
    user = User(
        username=username,
        email=f"{username}@worktime.org",
        full_name=username.title(),
        role=role,
        is_active=True,
        **flags,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def employee(db_session) -> User:
    """Create an employee with every leave entitlement."""
    return create_user(
        db_session,
        "employee",
        has_special_leave=True,
        has_parental_leave=True,
    )


@pytest.fixture
def other_employee(db_session) -> User:
    """Create a second employee without entitlements."""
    return create_user(db_session, "colleague")


@pytest.fixture
def admin_user(db_session) -> User:
    """Create an admin test user."""
    return create_user(db_session, "admin", role=UserRole.ADMIN)


def _client_for(db_session, user: User) -> TestClient:
    token = auth_service.create_session(db_session, user.id)
    session_client = TestClient(app)
    session_client.cookies.set("session", token)
    return session_client


@pytest.fixture
def authenticated_client(client, db_session, employee):
    """Create a test client authenticated as the employee."""
    return _client_for(db_session, employee)


@pytest.fixture
def other_client(client, db_session, other_employee):
    """Create a test client authenticated as the second employee."""
    return _client_for(db_session, other_employee)


@pytest.fixture
def admin_client(client, db_session, admin_user):
    """Create an authenticated admin test client."""
    return _client_for(db_session, admin_user)
