import pytest
import os
import sys

CURRENT_DIR = os.path.dirname(__file__)
SERVICE_ROOT = os.path.dirname(CURRENT_DIR)
if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)

from fastapi.testclient import TestClient
from enrollment_service.infrastructure.security import create_access_token
from enrollment_service.infrastructure.store import InMemoryStore
from enrollment_service.main import create_app


@pytest.fixture
def store():
    """Fresh seeded store per test"""
    return InMemoryStore()


@pytest.fixture
def client(store):
    """Test client bound to its own app instance"""
    yield TestClient(create_app(store=store))


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    return bearer(create_access_token("admin1", "ADMIN"))


@pytest.fixture
def student_headers():
    """Headers for student1 (S001)"""
    return bearer(create_access_token("student1", "STUDENT", "S001"))


@pytest.fixture
def other_student_headers():
    """Headers for student2 (S002)"""
    return bearer(create_access_token("student2", "STUDENT", "S002"))
