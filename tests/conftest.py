"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- Seed companies and jobs
- FastAPI test client
- Admin / regular user bearer tokens
"""

import os

# Point the application engine at SQLite before any jobly module reads settings
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobly.core.database import Base, execute, get_db
from jobly.core.security import create_access_token
import jobly.models  # noqa: F401  Register tables on Base.metadata
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    """SQLite only enforces ON DELETE CASCADE with this pragma."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
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


@pytest.fixture
def seed_data(db_session):
    """
    Insert three companies and three jobs.

    Returns:
        List of the inserted job ids, in insertion order
    """
    for n in (1, 2, 3):
        execute(
            db_session,
            """INSERT INTO companies (handle, name, num_employees, description, logo_url)
               VALUES ($1, $2, $3, $4, $5)""",
            [f"c{n}", f"C{n}", n, f"Desc{n}", f"http://c{n}.img"],
        )

    job_ids = []
    for title, salary, equity, handle in [
        ("Job1", 1000, 0, "c1"),
        ("Job2", 2000, 0.2, "c1"),
        ("Job3", 3000, 0, "c3"),
    ]:
        rows = execute(
            db_session,
            """INSERT INTO jobs (title, salary, equity, company_handle)
               VALUES ($1, $2, $3, $4)
               RETURNING id""",
            [title, salary, equity, handle],
        )
        job_ids.append(rows[0]["id"])

    db_session.commit()
    return job_ids


@pytest.fixture
def admin_headers():
    """Authorization header for an admin caller"""
    token = create_access_token({"sub": "admin", "isAdmin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    """Authorization header for a regular (non-admin) caller"""
    token = create_access_token({"sub": "u1", "isAdmin": False})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_company_data():
    """Sample company data for testing"""
    return {
        "handle": "new",
        "name": "New",
        "description": "New Description",
        "numEmployees": 1,
        "logoUrl": "http://new.img",
    }


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "New Job",
        "salary": 65000,
        "equity": 0.2,
        "companyHandle": "c1",
    }
