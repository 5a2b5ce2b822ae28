import structlog

from ...domain.entities import Enrollment, Identity, Role, Student, User
from ..dto import StudentCourses, StudentEnrollments
from ..errors import Conflict, NotFound
from ..policies import ensure_admin, ensure_can_modify, ensure_can_read
from ..validators import validate_student_id

logger = structlog.get_logger()


class IEnrollmentStore:
    def list_users(self, role: Role | None = None) -> list[User]: ...
    def find_student(self, student_id: str) -> Student | None: ...
    def list_enrollments(self) -> list[Enrollment]: ...
    def list_enrollments_by_student(self, student_id: str) -> list[Enrollment]: ...
    def enrollment_exists(self, student_id: str, course_id: str) -> bool: ...
    def add_enrollment(self, enrollment: Enrollment) -> None: ...
    def remove_enrollment(self, student_id: str, course_id: str) -> bool: ...
    def reset_all(self) -> None: ...


class ManageEnrollments:
    """Enrollment operations; each one stops at the first failing check."""

    def __init__(self, store: IEnrollmentStore):
        self.store = store

    def list_all(self, identity: Identity) -> list[StudentCourses]:
        ensure_admin(identity)
        # Students without a user record are not listed here.
        return [
            StudentCourses(
                student_id=u.student_id,
                course_ids=[e.course_id for e in self.store.list_enrollments_by_student(u.student_id)],
            )
            for u in self.store.list_users(role=Role.STUDENT)
        ]

    def get_for_student(self, identity: Identity, student_id: str) -> StudentEnrollments:
        validate_student_id(student_id)
        ensure_can_read(identity, student_id)
        student = self._require_student(student_id)
        courses = [e.course_id for e in self.store.list_enrollments_by_student(student_id)]
        return StudentEnrollments(student=student, course_ids=courses)

    def enroll(self, identity: Identity, student_id: str, course_id: str) -> Enrollment:
        validate_student_id(student_id)
        ensure_can_modify(identity, student_id)
        self._require_student(student_id)
        if self.store.enrollment_exists(student_id, course_id):
            raise Conflict(f"Student {student_id} is already enrolled in {course_id}")
        enrollment = Enrollment(student_id=student_id, course_id=course_id)
        self.store.add_enrollment(enrollment)
        logger.info("enrollment_created", student_id=student_id, course_id=course_id,
                    username=identity.username)
        return enrollment

    def drop(self, identity: Identity, student_id: str, course_id: str) -> list[Enrollment]:
        validate_student_id(student_id)
        ensure_can_modify(identity, student_id)
        self._require_student(student_id)
        if not self.store.remove_enrollment(student_id, course_id):
            raise NotFound("Enrollment does not exist")
        logger.info("enrollment_deleted", student_id=student_id, course_id=course_id,
                    username=identity.username)
        return self.store.list_enrollments()

    def reset(self, identity: Identity) -> None:
        # Any authenticated caller may reset.
        self.store.reset_all()
        logger.info("enrollments_reset", username=identity.username)

    def _require_student(self, student_id: str) -> Student:
        student = self.store.find_student(student_id)
        if student is None:
            raise NotFound("Student does not exist")
        return student
