import time
import pytest
from jose import jwt

from enrollment_service.config import settings
from enrollment_service.domain.entities import Role
from enrollment_service.infrastructure.security import create_access_token, decode_token

LOGIN_URL = "/api/v2/enrollments/login"


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def test_login_success(client):
    """Admin login returns a token"""
    response = client.post(LOGIN_URL, json={"username": "admin1", "password": "adminpass"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Login successful"
    assert "token" in data


def test_login_token_claims(client):
    """Token carries username, studentId and role"""
    response = client.post(LOGIN_URL, json={"username": "student1", "password": "studentpass1"})
    token = response.json()["token"]
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    assert payload["username"] == "student1"
    assert payload["studentId"] == "S001"
    assert payload["role"] == "STUDENT"
    assert "exp" in payload


def test_login_token_expires_in_ten_minutes(client):
    response = client.post(LOGIN_URL, json={"username": "admin1", "password": "adminpass"})
    claims = jwt.get_unverified_claims(response.json()["token"])
    remaining = claims["exp"] - time.time()
    assert 9 * 60 < remaining <= 10 * 60


@pytest.mark.parametrize("payload", [
    {"username": "admin1", "password": "wrong"},
    {"username": "nobody", "password": "adminpass"},
    {"username": "ADMIN1", "password": "adminpass"},
])
def test_login_invalid_credentials(client, payload):
    """Exact, case-sensitive match is required"""
    response = client.post(LOGIN_URL, json=payload)
    assert response.status_code == 401
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Invalid username or password!"
    assert "token" not in body


def test_login_missing_fields(client):
    response = client.post(LOGIN_URL, json={"username": "admin1"})
    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_login_with_valid_token_passes_through(client, student_headers):
    response = client.post(
        LOGIN_URL,
        json={"username": "admin1", "password": "adminpass"},
        headers=student_headers,
    )
    assert response.status_code == 200


def test_login_with_invalid_token_rejected(client):
    response = client.post(
        LOGIN_URL,
        json={"username": "admin1", "password": "adminpass"},
        headers=bearer("garbage"),
    )
    assert response.status_code == 401


def test_missing_token(client):
    """No Authorization header is 401, not 403"""
    response = client.get("/api/v2/enrollments")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Access denied: missing token"}


def test_invalid_token(client):
    response = client.get("/api/v2/enrollments", headers=bearer("invalid_token"))
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_expired_token(client):
    token = create_access_token("admin1", "ADMIN", minutes=-1)
    response = client.get("/api/v2/enrollments", headers=bearer(token))
    assert response.status_code == 401


def test_token_signed_with_other_secret(client):
    token = jwt.encode({"username": "admin1", "role": "ADMIN"}, "other-secret", algorithm="HS256")
    response = client.get("/api/v2/enrollments", headers=bearer(token))
    assert response.status_code == 401


def test_token_with_unknown_role(client):
    token = create_access_token("admin1", "SUPERUSER")
    response = client.get("/api/v2/enrollments/S001", headers=bearer(token))
    assert response.status_code == 401


def test_decode_token_roundtrip():
    identity = decode_token(create_access_token("student2", "STUDENT", "S002"))
    assert identity.username == "student2"
    assert identity.role is Role.STUDENT
    assert identity.student_id == "S002"


def test_decode_admin_token_has_no_student_id():
    identity = decode_token(create_access_token("admin1", "ADMIN"))
    assert identity.is_admin
    assert identity.student_id is None
