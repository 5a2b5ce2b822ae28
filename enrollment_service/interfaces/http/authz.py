from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from ...application.errors import Unauthenticated
from ...application.policies import ensure_admin
from ...domain.entities import Identity
from ...infrastructure.security import decode_token

bearer = HTTPBearer(auto_error=False)


def _decode(creds: HTTPAuthorizationCredentials) -> Identity:
    try:
        return decode_token(creds.credentials)
    except JWTError:
        raise Unauthenticated("Invalid or expired token")


def get_identity(creds: HTTPAuthorizationCredentials | None = Depends(bearer)) -> Identity:
    if creds is None:
        raise Unauthenticated("Access denied: missing token")
    return _decode(creds)


def get_optional_identity(creds: HTTPAuthorizationCredentials | None = Depends(bearer)) -> Identity | None:
    # Endpoints that work without a token still reject a bad one.
    return _decode(creds) if creds is not None else None


def require_admin(identity: Identity = Depends(get_identity)) -> Identity:
    ensure_admin(identity)
    return identity
