from fastapi import APIRouter, Depends, Request, status

from ....application.use_cases.enrollments import ManageEnrollments
from ....application.use_cases.login import LoginUser
from ....application.errors import Unauthenticated
from ....domain.entities import Identity
from ....infrastructure.metrics import (
    enrollments_created_total,
    enrollments_deleted_total,
    login_attempts_total,
)
from ....infrastructure.security import TokenIssuer
from ....infrastructure.store import InMemoryStore
from ..authz import get_identity, get_optional_identity, require_admin
from ..schemas import (
    CourseRef,
    EnrollmentOut,
    EnrollmentReq,
    Envelope,
    LoginReq,
    LoginResp,
    StudentCoursesOut,
    StudentEnrollmentsOut,
)

router = APIRouter(prefix="/api/v2/enrollments", tags=["enrollments"])


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_manager(store: InMemoryStore = Depends(get_store)) -> ManageEnrollments:
    return ManageEnrollments(store)


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("", response_model=Envelope[list[StudentCoursesOut]], response_model_exclude_none=True)
def list_enrollments(
    identity: Identity = Depends(require_admin),
    uc: ManageEnrollments = Depends(get_manager),
):
    rows = uc.list_all(identity)
    data = [
        StudentCoursesOut(student_id=r.student_id, courses=[CourseRef(course_id=c) for c in r.course_ids])
        for r in rows
    ]
    return Envelope[list[StudentCoursesOut]](message="Enrollments Information", data=data)


# --- Static paths before /{student_id}:

@router.post("/login", response_model=LoginResp, response_model_exclude_none=True)
def login(
    payload: LoginReq,
    _: Identity | None = Depends(get_optional_identity),
    store: InMemoryStore = Depends(get_store),
):
    uc = LoginUser(store=store, tokens=TokenIssuer())
    try:
        result = uc.execute(payload.username, payload.password)
    except Unauthenticated:
        login_attempts_total.labels(result="failure").inc()
        raise
    login_attempts_total.labels(result="success").inc()
    return LoginResp(message="Login successful", token=result.token)


@router.post("/reset", response_model=Envelope[None], response_model_exclude_none=True)
def reset(
    identity: Identity = Depends(get_identity),
    uc: ManageEnrollments = Depends(get_manager),
):
    uc.reset(identity)
    return Envelope[None](message="enrollments database has been reset")


# --- Per-student:

@router.get("/{student_id}", response_model=Envelope[StudentEnrollmentsOut], response_model_exclude_none=True)
def student_enrollments(
    student_id: str,
    identity: Identity = Depends(get_identity),
    uc: ManageEnrollments = Depends(get_manager),
):
    found = uc.get_for_student(identity, student_id)
    s = found.student
    data = StudentEnrollmentsOut(
        student_id=s.student_id,
        first_name=s.first_name,
        last_name=s.last_name,
        program=s.program,
        courses=found.course_ids,
    )
    return Envelope[StudentEnrollmentsOut](message="Student Information", data=data)


@router.post(
    "/{student_id}",
    response_model=Envelope[EnrollmentOut],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_enrollment(
    student_id: str,
    payload: EnrollmentReq,
    identity: Identity = Depends(get_identity),
    uc: ManageEnrollments = Depends(get_manager),
):
    row = uc.enroll(identity, student_id, payload.course_id)
    enrollments_created_total.inc()
    return Envelope[EnrollmentOut](
        message=f"Student {row.student_id} && Course {row.course_id} has been added successfully",
        data=EnrollmentOut.model_validate(row),
    )


@router.delete("/{student_id}", response_model=Envelope[list[EnrollmentOut]], response_model_exclude_none=True)
def delete_enrollment(
    student_id: str,
    payload: EnrollmentReq,
    identity: Identity = Depends(get_identity),
    uc: ManageEnrollments = Depends(get_manager),
):
    remaining = uc.drop(identity, student_id, payload.course_id)
    enrollments_deleted_total.inc()
    return Envelope[list[EnrollmentOut]](
        message=f"Student {student_id} && Course {payload.course_id} has been deleted successfully",
        data=[EnrollmentOut.model_validate(e) for e in remaining],
    )
