"""Section roster lookup for the class section page."""

from __future__ import annotations

from typing import Iterable

from ..models import ClassEnrollment
from .nav_types import ClassRecord


def section_roster(records: Iterable[ClassRecord]) -> list[ClassEnrollment]:
    """Return enrollments for the given class rows, ordered by student name."""
    class_ids = [int(record.id) for record in records if str(record.id).isdigit()]
    if not class_ids:
        return []
    return list(
        ClassEnrollment.objects.filter(classroom_id__in=class_ids)
        .select_related("student", "classroom")
        .order_by("student__last_name", "student__first_name", "classroom__subject_code", "id")
    )


__all__ = ["section_roster"]
