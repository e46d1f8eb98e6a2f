"""Typed contracts shared by the sidebar builder and breadcrumb resolver."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClassRecord:
    """One (subject, section) row for the signed-in staff member."""

    id: str
    subject_code: str
    subject_name: str = ""
    course_id: str = ""
    major_id: str = ""
    section_id: str = ""
    course_code: str = ""
    major_code: str = ""
    year_level_code: str = ""
    section_code: str = ""


@dataclass(frozen=True)
class NavigationNode:
    title: str
    url: str
    children: tuple[NavigationNode, ...] = ()

    @property
    def is_subject(self) -> bool:
        return bool(self.children)


@dataclass(frozen=True)
class NavigationGroup:
    name: str
    icon: str
    items: tuple[NavigationNode, ...] = ()


@dataclass(frozen=True)
class FlattenedEntry:
    node: NavigationNode
    group: str
    parent_url: str | None = None


@dataclass(frozen=True)
class BreadcrumbEntry:
    title: str
    url: str
    is_current: bool = False


@dataclass(frozen=True)
class SidebarUser:
    name: str
    email: str
    avatar: str


@dataclass(frozen=True)
class SidebarData:
    user: SidebarUser
    nav_main: tuple[NavigationGroup, ...] = field(default_factory=tuple)
