from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from ..config import settings
from ..domain.entities import Identity, Role, User


def create_access_token(username: str, role: str, student_id: str | None = None,
                        minutes: int | None = None) -> str:
    if minutes is None:
        minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    exp = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    payload = {"username": username, "studentId": student_id, "role": role, "exp": exp}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Identity:
    """Returns the identity embedded in the token or raises JWTError (expiry included)."""
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    username = payload.get("username")
    if not username:
        raise JWTError("No username")
    try:
        role = Role(payload.get("role"))
    except ValueError:
        raise JWTError("Unknown role")
    return Identity(username=username, role=role, student_id=payload.get("studentId"))


class TokenIssuer:
    def issue(self, user: User) -> str:
        return create_access_token(user.username, user.role.value, user.student_id)
