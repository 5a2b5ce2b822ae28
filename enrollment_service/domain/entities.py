from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    STUDENT = "STUDENT"


@dataclass(frozen=True)
class User:
    username: str
    password: str
    role: Role
    student_id: str | None = None


@dataclass(frozen=True)
class Student:
    student_id: str
    first_name: str
    last_name: str
    program: str


@dataclass(frozen=True)
class Enrollment:
    student_id: str
    course_id: str


@dataclass(frozen=True)
class Identity:
    """Caller decoded from a verified token, lives for one request."""
    username: str
    role: Role
    student_id: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def owns(self, student_id: str) -> bool:
        return self.role == Role.STUDENT and self.student_id == student_id
