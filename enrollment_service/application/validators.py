import re

from .errors import ValidationFailed

STUDENT_ID_RE = re.compile(r"S\d{3}")


def validate_student_id(student_id: str) -> str:
    if not STUDENT_ID_RE.fullmatch(student_id):
        raise ValidationFailed(error="Student Id must be 'S' followed by 3 digits")
    return student_id
