"""
Pytest configuration and shared fixtures.
"""
import os

# Must be set before jobboard.config is imported
os.environ["ENV"] = "test"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"

from typing import Any, Dict  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from jobboard.database import Database  # noqa: E402
from jobboard.main import create_app  # noqa: E402


@pytest.fixture
def database():
    """Fresh in-memory database with tables."""
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def client():
    app = create_app("sqlite://", create_tables=True)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user_payload() -> Dict[str, str]:
    return {
        "name": "Asha",
        "email": "asha@mail.com",
        "mobile": "9876543210",
        "password": "s3cret-pass",
    }


@pytest.fixture
def auth_headers(client, user_payload) -> Dict[str, str]:
    resp = client.post("/register", json=user_payload)
    assert resp.status_code == 201
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def listing_payload() -> Dict[str, Any]:
    """Valid job listing body, camelCase as the frontend sends it."""
    return {
        "companyName": "Acme Corp",
        "addLogoURL": "https://cdn.acme.io/logo.png",
        "jobPosition": "Backend Engineer",
        "monthlySalary": "50000",
        "jobType": "Full-time",
        "remoteOnsite": "Remote",
        "jobLocation": "Bengaluru",
        "jobDescription": "Build and run our APIs.",
        "aboutCompany": "We make anvils.",
        "skillsRequired": ["python", "sql"],
    }
