from dataclasses import dataclass, field

from ..domain.entities import Student


@dataclass
class StudentCourses:
    student_id: str | None
    course_ids: list[str] = field(default_factory=list)


@dataclass
class StudentEnrollments:
    student: Student
    course_ids: list[str] = field(default_factory=list)


@dataclass
class LoginResult:
    username: str
    token: str
