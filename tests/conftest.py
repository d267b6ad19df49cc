"""
Pytest configuration and shared fixtures.

Every test runs against a fresh in-memory SQLite store. The environment
is set before ``app`` is imported because the engine and settings are
built at import time.
"""

import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "Testing"
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="ems-logs-"))

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine, get_db
from app.main import app as _app


@pytest.fixture(autouse=True)
def reset_database():
    """Drop and recreate all tables so ids start at 1 in every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    _app.dependency_overrides.clear()


@pytest.fixture
def app():
    return _app


@pytest.fixture
def client(app):  # pylint: disable=redefined-outer-name
    """
    Provide a FastAPI test client.

    Usage in tests::

        def test_list(client):
            response = client.get("/api/Department/Department-List")
            assert response.status_code == 200
    """
    with TestClient(app) as test_client:
        yield test_client


class BrokenSession:
    """Stands in for a session whose store is unreachable."""

    def __init__(self, message="database is unreachable"):
        self.message = message
        self.rolled_back = False

    def _fail(self, *args, **kwargs):
        raise RuntimeError(self.message)

    query = get = add = delete = commit = refresh = _fail

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


@pytest.fixture
def broken_store(app):  # pylint: disable=redefined-outer-name
    """Route every request to a session that fails on first use."""
    session = BrokenSession()

    def _override():
        yield session

    app.dependency_overrides[get_db] = _override
    return session


@pytest.fixture
def count_rows():
    """Count rows of a model through a fresh session."""

    def _count(model) -> int:
        with SessionLocal() as session:
            return session.query(model).count()

    return _count


@pytest.fixture
def fetch():
    """Load a row by primary key through a fresh session."""

    def _fetch(model, pk):
        with SessionLocal() as session:
            return session.get(model, pk)

    return _fetch


@pytest.fixture
def department_id(client):  # pylint: disable=redefined-outer-name
    """Create an 'Engineering' department and return its id."""
    resp = client.post("/api/Department/Add-Department", json={"departmentName": "Engineering"})
    assert resp.status_code == 200
    return resp.json()["data"]["id"]


@pytest.fixture
def employee_id(client, department_id):  # pylint: disable=redefined-outer-name
    """Create one employee in the 'Engineering' department and return its id."""
    resp = client.post(
        "/api/Employee/Add-Employee",
        json={"name": "Jane Doe", "age": 30, "departmentId": department_id, "salary": 55000.5},
    )
    assert resp.status_code == 200
    return resp.json()["data"]["id"]
