from ..application.use_cases.enrollments import IEnrollmentStore
from ..application.use_cases.login import IUserStore
from ..domain.entities import Enrollment, Role, Student, User
from .seed import SEED_ENROLLMENTS, SEED_STUDENTS, SEED_USERS


class InMemoryStore(IEnrollmentStore, IUserStore):
    """Users, students and enrollments held in plain lists.

    Each application instance owns one store. Lookups are linear scans and
    nothing is locked; writes land in call order.
    """

    def __init__(self, users=SEED_USERS, students=SEED_STUDENTS, enrollments=SEED_ENROLLMENTS):
        self._seed = (tuple(users), tuple(students), tuple(enrollments))
        self.reset_all()

    def reset_all(self) -> None:
        users, students, enrollments = self._seed
        self.users: list[User] = list(users)
        self.students: list[Student] = list(students)
        self.enrollments: list[Enrollment] = list(enrollments)

    # --- identity

    def find_user_by_credentials(self, username: str, password: str) -> User | None:
        return next((u for u in self.users if u.username == username and u.password == password), None)

    def list_users(self, role: Role | None = None) -> list[User]:
        if role is None:
            return list(self.users)
        return [u for u in self.users if u.role == role]

    # --- students & enrollments

    def find_student(self, student_id: str) -> Student | None:
        return next((s for s in self.students if s.student_id == student_id), None)

    def list_enrollments(self) -> list[Enrollment]:
        return list(self.enrollments)

    def list_enrollments_by_student(self, student_id: str) -> list[Enrollment]:
        return [e for e in self.enrollments if e.student_id == student_id]

    def enrollment_exists(self, student_id: str, course_id: str) -> bool:
        return any(e.student_id == student_id and e.course_id == course_id for e in self.enrollments)

    def add_enrollment(self, enrollment: Enrollment) -> None:
        self.enrollments.append(enrollment)

    def remove_enrollment(self, student_id: str, course_id: str) -> bool:
        for i, e in enumerate(self.enrollments):
            if e.student_id == student_id and e.course_id == course_id:
                del self.enrollments[i]
                return True
        return False
