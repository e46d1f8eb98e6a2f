"""Sidebar navigation builder.

Turns the flat class rows for one staff member into the sidebar tree:
- Classes group: one subject node per distinct subject code, each holding one
  section node per class row (depth is always exactly 2).
- Home, Grades, Attendance, Schedule groups: static links from `ROUTES`.

Group order and item order are part of the contract. Templates and the
breadcrumb resolver both iterate them as-is.
"""

from __future__ import annotations

import logging
from typing import Iterable

from django.conf import settings

from ..constants import (
    DEFAULT_AVATAR_URL,
    DEFAULT_EMAIL,
    DEFAULT_USER_NAME,
    ICON_BOOK_OPEN,
    ICON_CALENDAR_DAYS,
    ICON_FINGERPRINT,
    ICON_LAYOUT_DASHBOARD,
    ICON_USERS,
    ROUTES,
)
from .nav_types import ClassRecord, NavigationGroup, NavigationNode, SidebarData, SidebarUser

logger = logging.getLogger(__name__)

HOME_ITEMS = (
    NavigationNode(title="Dashboard", url=ROUTES["dashboard"]),
    NavigationNode(title="My Classes", url=ROUTES["classes"]),
    NavigationNode(title="Schedule", url=ROUTES["schedule"]),
)
GRADES_ITEMS = (
    NavigationNode(title="Raw Grade", url=ROUTES["grades_raw"]),
    NavigationNode(title="Transmuted Grade", url=ROUTES["grades_transmuted"]),
    NavigationNode(title="Reports", url=ROUTES["grades_reports"]),
)
ATTENDANCE_ITEMS = (
    NavigationNode(title="Daily Attendance", url=ROUTES["attendance_daily"]),
    NavigationNode(title="Attendance Reports", url=ROUTES["attendance_reports"]),
)
SCHEDULE_ITEMS = (
    NavigationNode(title="Class Schedule", url=ROUTES["schedule_classes"]),
    NavigationNode(title="Exam Schedule", url=ROUTES["schedule_exams"]),
)


def section_label(record: ClassRecord) -> str:
    parts = (record.major_code, record.year_level_code, record.section_code)
    return " ".join(str(part).strip() for part in parts if str(part or "").strip())


def section_url(record: ClassRecord) -> str:
    return f"/classes/{record.course_id}/{record.major_id}/{record.section_id}"


def subject_url(record: ClassRecord) -> str:
    return f"/classes/{record.id}"


def group_classes_by_subject(records: Iterable[ClassRecord]) -> tuple[NavigationNode, ...]:
    """Group class rows into subject nodes, keeping first-seen subject order.

    The subject url points at the first row seen for that subject code.
    """
    # subject_code -> (title, url, children); dict keeps insertion order.
    subjects: dict[str, tuple[str, str, list[NavigationNode]]] = {}
    for record in records or ():
        entry = subjects.get(record.subject_code)
        if entry is None:
            entry = (record.subject_code, subject_url(record), [])
            subjects[record.subject_code] = entry
        entry[2].append(NavigationNode(title=section_label(record), url=section_url(record)))

    return tuple(
        NavigationNode(title=title, url=url, children=tuple(children))
        for title, url, children in subjects.values()
    )


def build_navigation(
    user_display_name: str,
    email: str,
    class_nodes: Iterable[NavigationNode],
) -> tuple[NavigationGroup, ...]:
    """Assemble the five sidebar groups in their fixed order."""
    class_items = tuple(class_nodes or ())
    logger.debug(
        "navigation_built user=%s email=%s subjects=%d",
        user_display_name or "-",
        email or "-",
        len(class_items),
    )
    return (
        NavigationGroup(name="Home", icon=ICON_LAYOUT_DASHBOARD, items=HOME_ITEMS),
        NavigationGroup(name="Classes", icon=ICON_USERS, items=class_items),
        NavigationGroup(name="Grades", icon=ICON_BOOK_OPEN, items=GRADES_ITEMS),
        NavigationGroup(name="Attendance", icon=ICON_FINGERPRINT, items=ATTENDANCE_ITEMS),
        NavigationGroup(name="Schedule", icon=ICON_CALENDAR_DAYS, items=SCHEDULE_ITEMS),
    )


def _default_avatar_url() -> str:
    configured = (getattr(settings, "CLASSDESK_DEFAULT_AVATAR_URL", "") or "").strip()
    return configured or DEFAULT_AVATAR_URL


def build_sidebar_data(
    *,
    name: str,
    email: str,
    records: Iterable[ClassRecord],
    avatar: str | None = None,
) -> SidebarData:
    """Build the user block and navigation groups for one staff member."""
    display_name = (name or "").strip()
    display_email = (email or "").strip()
    class_nodes = group_classes_by_subject(records)
    return SidebarData(
        user=SidebarUser(
            name=display_name or DEFAULT_USER_NAME,
            email=display_email or DEFAULT_EMAIL,
            avatar=(avatar or "").strip() or _default_avatar_url(),
        ),
        nav_main=build_navigation(display_name, display_email, class_nodes),
    )


__all__ = [
    "build_navigation",
    "build_sidebar_data",
    "group_classes_by_subject",
    "section_label",
]
