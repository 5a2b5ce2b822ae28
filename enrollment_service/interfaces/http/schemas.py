from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

T = TypeVar("T")

CourseId = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=16)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class Envelope(CamelModel, Generic[T]):
    success: bool = True
    message: str
    data: T | None = None
    error: Any = None


class LoginReq(BaseModel):
    username: str
    password: str


class LoginResp(Envelope[None]):
    token: str


class EnrollmentReq(CamelModel):
    course_id: CourseId


class EnrollmentOut(CamelModel):
    student_id: str
    course_id: str


class CourseRef(CamelModel):
    course_id: str


class StudentCoursesOut(CamelModel):
    student_id: str | None
    courses: list[CourseRef]


class StudentEnrollmentsOut(CamelModel):
    student_id: str
    first_name: str
    last_name: str
    program: str
    courses: list[str]
