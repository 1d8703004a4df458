"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Employer / Job Seeker accounts and their session tokens
"""

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.core.database import Database, get_db
from app.core.security import create_access_token, get_password_hash
from app.models.user import User, UserRole
from main import create_app


@pytest.fixture
def database():
    """
    Fresh in-memory SQLite database for each test.
    """
    db = Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db.create_all()
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(database):
    return create_app(database=database)


@pytest.fixture
def client(app, db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def make_user(db_session, role: UserRole, email: str = None) -> User:
    user = User(
        id=uuid.uuid4(),
        name="Test User",
        email=email or f"user_{uuid.uuid4().hex[:8]}@example.com",
        phone="5551234567",
        hashed_password=get_password_hash("SecurePass123!"),
        role=role,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    token = create_access_token(data={"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def employer(db_session):
    return make_user(db_session, UserRole.EMPLOYER)


@pytest.fixture
def other_employer(db_session):
    return make_user(db_session, UserRole.EMPLOYER)


@pytest.fixture
def job_seeker(db_session):
    return make_user(db_session, UserRole.JOB_SEEKER)


@pytest.fixture
def employer_headers(employer):
    return auth_headers(employer)


@pytest.fixture
def other_employer_headers(other_employer):
    return auth_headers(other_employer)


@pytest.fixture
def job_seeker_headers(job_seeker):
    return auth_headers(job_seeker)


@pytest.fixture
def sample_job_data():
    """Sample job payload with a fixed salary"""
    return {
        "title": "Dev",
        "description": "Build X",
        "category": "Eng",
        "country": "US",
        "city": "NY",
        "location": "Office",
        "fixedSalary": 5000,
    }


@pytest.fixture
def ranged_job_data(sample_job_data):
    """Same payload with a salary range instead of a fixed salary"""
    data = {key: value for key, value in sample_job_data.items() if key != "fixedSalary"}
    data.update({"salaryFrom": 1000, "salaryTo": 2000})
    return data
