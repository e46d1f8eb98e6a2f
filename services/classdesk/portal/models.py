"""Data model for the staff portal.

Staff manage these lookup tables and classes in Django admin.

Note: one `Class` row is one (subject, section) combination taught by one
staff member. The sidebar groups those rows by `subject_code`.
"""

from django.conf import settings
from django.db import models


class Course(models.Model):
    code = models.CharField(max_length=32, unique=True)
    name = models.CharField(max_length=200)

    class Meta:
        ordering = ["code", "id"]

    def __str__(self) -> str:
        return self.code


class Major(models.Model):
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="majors")
    code = models.CharField(max_length=32)
    name = models.CharField(max_length=200)

    class Meta:
        ordering = ["course_id", "code", "id"]
        constraints = [
            models.UniqueConstraint(fields=["course", "code"], name="uniq_major_code_per_course"),
        ]

    def __str__(self) -> str:
        return self.code


class YearLevel(models.Model):
    code = models.CharField(max_length=16, unique=True)
    name = models.CharField(max_length=100)

    class Meta:
        ordering = ["code", "id"]

    def __str__(self) -> str:
        return self.code


class Section(models.Model):
    code = models.CharField(max_length=16, unique=True)
    name = models.CharField(max_length=100, blank=True, default="")

    class Meta:
        ordering = ["code", "id"]

    def __str__(self) -> str:
        return self.code


class Class(models.Model):
    """A subject taught to one section.

    Several rows may share a `subject_code`; each is one section variant.
    """

    teacher = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="classdesk_classes",
    )
    subject_code = models.CharField(max_length=32)
    subject_name = models.CharField(max_length=200, blank=True, default="")
    course = models.ForeignKey(Course, on_delete=models.PROTECT, related_name="classes")
    major = models.ForeignKey(Major, on_delete=models.PROTECT, related_name="classes")
    year_level = models.ForeignKey(
        YearLevel,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="classes",
    )
    section = models.ForeignKey(Section, on_delete=models.PROTECT, related_name="classes")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["teacher", "subject_code"], name="portal_cls_tch_subj_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.subject_code} ({self.major.code} {self.section.code})"


class Student(models.Model):
    """A learner record; staff enroll students into classes."""

    student_id = models.CharField(max_length=32, unique=True)
    first_name = models.CharField(max_length=100)
    middle_name = models.CharField(max_length=100, blank=True, default="")
    last_name = models.CharField(max_length=100)

    class Meta:
        ordering = ["last_name", "first_name", "id"]

    def __str__(self) -> str:
        return f"{self.last_name}, {self.first_name} ({self.student_id})"

    @property
    def full_name(self) -> str:
        given = " ".join(part for part in (self.first_name, self.middle_name) if part)
        return f"{self.last_name}, {given}" if given else self.last_name


class ClassEnrollment(models.Model):
    classroom = models.ForeignKey(Class, on_delete=models.CASCADE, related_name="enrollments")
    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name="enrollments")
    enrolled_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["classroom_id", "id"]
        constraints = [
            models.UniqueConstraint(fields=["classroom", "student"], name="uniq_enrollment_per_class"),
        ]

    def __str__(self) -> str:
        return f"{self.student.student_id} in {self.classroom.subject_code}"
