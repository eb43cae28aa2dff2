"""Shared test fixtures for the Lab Portal API tests"""

import os
from datetime import date, timedelta

import pytest

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402

from app.core.database import Base, SessionLocal, engine  # noqa: E402
from app.core.security import create_access_token  # noqa: E402
from app.models.user_db.user_db_crud import create_user  # noqa: E402
from app.services.choices import UserRole, UserStatus  # noqa: E402
from main import app  # noqa: E402


# =============================================================================
# Database
# =============================================================================

@pytest.fixture(autouse=True)
def _schema():
    """Fresh tables for every test"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# HTTP client
# =============================================================================

@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def admin_user(db):
    return create_user(
        db,
        username="admin",
        email="admin@lab.example.com",
        password="admin123",
        full_name="Lab Admin",
        role=UserRole.ADMIN,
        status=UserStatus.ACTIVE,
    )


@pytest.fixture
def plain_user(db):
    return create_user(
        db,
        username="visitor",
        email="visitor@lab.example.com",
        password="visitor123",
        role=UserRole.USER,
    )


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token({"sub": admin_user.username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(plain_user):
    token = create_access_token({"sub": plain_user.username})
    return {"Authorization": f"Bearer {token}"}


# =============================================================================
# Payload helpers
# =============================================================================

@pytest.fixture
def future_date():
    return (date.today() + timedelta(days=30)).isoformat()
