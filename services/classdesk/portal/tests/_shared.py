from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.db import DatabaseError, IntegrityError, transaction
from django.test import RequestFactory, SimpleTestCase, TestCase, override_settings

from ..models import Class, ClassEnrollment, Course, Major, Section, Student, YearLevel
from ..services.nav_types import ClassRecord


def _record(**overrides) -> ClassRecord:
    """Build a class row with the CC104 / IST 1 A defaults."""
    values = {
        "id": "1",
        "subject_code": "CC104",
        "subject_name": "Data Structures",
        "course_id": "c1",
        "major_id": "m1",
        "section_id": "s1",
        "course_code": "BSIT",
        "major_code": "IST",
        "year_level_code": "1",
        "section_code": "A",
    }
    values.update(overrides)
    return ClassRecord(**values)


def _create_staff(username: str = "teacher", **extra):
    defaults = {"password": "pw12345", "is_staff": True}
    defaults.update(extra)
    return get_user_model().objects.create_user(username=username, **defaults)


def _create_class(teacher, subject_code: str, *, major: str = "IST", year: str = "1", section: str = "A") -> Class:
    course, _ = Course.objects.get_or_create(code="BSIT", defaults={"name": "BS Information Technology"})
    major_row, _ = Major.objects.get_or_create(course=course, code=major, defaults={"name": major})
    year_row, _ = YearLevel.objects.get_or_create(code=year, defaults={"name": f"Year {year}"})
    section_row, _ = Section.objects.get_or_create(code=section)
    return Class.objects.create(
        teacher=teacher,
        subject_code=subject_code,
        subject_name=f"{subject_code} lecture",
        course=course,
        major=major_row,
        year_level=year_row,
        section=section_row,
    )


def _enroll(klass: Class, student_id: str, first_name: str, last_name: str, middle_name: str = "") -> ClassEnrollment:
    student, _ = Student.objects.get_or_create(
        student_id=student_id,
        defaults={"first_name": first_name, "middle_name": middle_name, "last_name": last_name},
    )
    return ClassEnrollment.objects.create(classroom=klass, student=student)


__all__ = [name for name in globals() if not name.startswith("__")]
