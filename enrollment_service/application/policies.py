"""Role rules deciding whether an identity may act on a student's records.

ADMIN has read-only oversight: it can list everything and read any student,
but adding and removing enrollments is reserved to the student themselves.
"""
from ..domain.entities import Identity
from .errors import Forbidden


def ensure_admin(identity: Identity) -> None:
    if not identity.is_admin:
        raise Forbidden("Admin required")


def ensure_can_read(identity: Identity, student_id: str) -> None:
    if identity.is_admin or identity.owns(student_id):
        return
    raise Forbidden()


def ensure_can_modify(identity: Identity, student_id: str) -> None:
    if not identity.owns(student_id):
        raise Forbidden("You are not allowed to modify another student's data")
