# queries/normalize.py
"""Conversion between raw student records and stored Student documents.

Raw records carry identifiers and dates as strings. ``normalize_student``
turns them into ObjectIds and datetimes and fails on the first malformed
value, so a caller never gets a half-converted record back.
"""
from models.student import Enrollment, RawEnrollment, RawStudent, Student
from utils.dates import parse_datetime
from utils.object_id import convert_to_object_id


def normalize_enrollment(raw: RawEnrollment) -> Enrollment:
    return Enrollment(
        **(raw.model_extra or {}),
        classId=convert_to_object_id(raw.classId, "classId"),
        enrolledTime=parse_datetime(raw.enrolledTime, "enrolledTime"),
    )


def normalize_student(raw: RawStudent) -> Student:
    """Build a Student from a raw record.

    Raises:
        InvalidIdentifier: if the student id or any enrollment classId is malformed.
        InvalidDate: if dob is present but unparsable, or any enrolledTime is.
    """
    # a raw record may carry an extra "id" next to "_id"; the converted fields win
    fields = {
        **(raw.model_extra or {}),
        "id": convert_to_object_id(raw.id, "_id"),
        "firstName": raw.firstName,
        "lastName": raw.lastName,
        "dob": parse_datetime(raw.dob, "dob") if raw.dob else None,
        "classEnrolled": [normalize_enrollment(e) for e in raw.classEnrolled],
    }
    return Student(**fields)


def student_to_raw(student: Student) -> RawStudent:
    """Serialize a Student back into its raw form (hex ids, ISO-8601 dates)."""
    return RawStudent.model_validate(student.model_dump(mode="json", by_alias=True))
