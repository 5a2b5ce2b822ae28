from ..domain.entities import Enrollment, Role, Student, User

SEED_USERS = (
    User(username="admin1", password="adminpass", role=Role.ADMIN),
    User(username="admin2", password="adminpass2", role=Role.ADMIN),
    User(username="student1", password="studentpass1", role=Role.STUDENT, student_id="S001"),
    User(username="student2", password="studentpass2", role=Role.STUDENT, student_id="S002"),
    User(username="student3", password="studentpass3", role=Role.STUDENT, student_id="S003"),
)

# S004 has a profile but no login
SEED_STUDENTS = (
    Student(student_id="S001", first_name="Somchai", last_name="Jaidee", program="Computer Science"),
    Student(student_id="S002", first_name="Malee", last_name="Suksawat", program="Computer Science"),
    Student(student_id="S003", first_name="Anan", last_name="Thongdee", program="Mathematics"),
    Student(student_id="S004", first_name="Pim", last_name="Rattana", program="Physics"),
)

SEED_ENROLLMENTS = (
    Enrollment(student_id="S001", course_id="CS201"),
    Enrollment(student_id="S001", course_id="MA101"),
    Enrollment(student_id="S002", course_id="CS101"),
    Enrollment(student_id="S002", course_id="CS201"),
    Enrollment(student_id="S004", course_id="PH101"),
)
