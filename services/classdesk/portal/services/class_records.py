"""Class row lookup feeding the sidebar builder.

Lookup failures fail open: the sidebar renders with an empty Classes group
instead of breaking every staff page.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.db import DatabaseError

from ..models import Class
from .nav_types import ClassRecord

logger = logging.getLogger(__name__)

LOOKUP_BY_USER = "user"
LOOKUP_BY_EMAIL = "email"
_LOOKUP_MODES = {LOOKUP_BY_USER, LOOKUP_BY_EMAIL}


def class_lookup_mode() -> str:
    mode = (getattr(settings, "CLASSDESK_CLASS_LOOKUP", LOOKUP_BY_USER) or LOOKUP_BY_USER).strip().lower()
    if mode not in _LOOKUP_MODES:
        logger.warning("class_lookup_mode_unknown mode=%s fallback=%s", mode, LOOKUP_BY_USER)
        return LOOKUP_BY_USER
    return mode


def user_display_name(user) -> str:
    first = (getattr(user, "first_name", "") or "").strip()
    last = (getattr(user, "last_name", "") or "").strip()
    return f"{first} {last}".strip()


def _code(related) -> str:
    return str(getattr(related, "code", "") or "")


def to_class_record(row: Class) -> ClassRecord:
    return ClassRecord(
        id=str(row.id),
        subject_code=row.subject_code or "",
        subject_name=row.subject_name or "",
        course_id=str(row.course_id or ""),
        major_id=str(row.major_id or ""),
        section_id=str(row.section_id or ""),
        course_code=_code(row.course),
        major_code=_code(row.major),
        year_level_code=_code(row.year_level),
        section_code=_code(row.section),
    )


def _class_queryset(user):
    queryset = Class.objects.select_related("course", "major", "year_level", "section")
    if class_lookup_mode() == LOOKUP_BY_EMAIL:
        email = (getattr(user, "email", "") or "").strip()
        if not email:
            return queryset.none()
        queryset = queryset.filter(teacher__email__iexact=email)
    else:
        queryset = queryset.filter(teacher=user)
    return queryset.order_by("created_at", "id")


def fetch_class_records(user) -> list[ClassRecord]:
    if user is None or not getattr(user, "is_authenticated", False):
        return []
    try:
        return [to_class_record(row) for row in _class_queryset(user)]
    except DatabaseError as exc:
        logger.warning(
            "class_records_lookup_failed user_id=%s error=%s",
            getattr(user, "id", None),
            exc.__class__.__name__,
        )
        return []


__all__ = [
    "LOOKUP_BY_EMAIL",
    "LOOKUP_BY_USER",
    "class_lookup_mode",
    "fetch_class_records",
    "to_class_record",
    "user_display_name",
]
