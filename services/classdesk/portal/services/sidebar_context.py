"""Per-request sidebar assembly shared by views and the template context."""

from __future__ import annotations

from .breadcrumbs import resolve_trail
from .class_records import fetch_class_records, user_display_name
from .nav_builder import build_sidebar_data
from .nav_types import SidebarData

_REQUEST_ATTR = "_classdesk_sidebar"


def sidebar_for_request(request) -> SidebarData | None:
    """Build the sidebar once per request; anonymous users get None."""
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return None
    cached = getattr(request, _REQUEST_ATTR, None)
    if cached is not None:
        return cached
    sidebar = build_sidebar_data(
        name=user_display_name(user),
        email=getattr(user, "email", "") or "",
        records=fetch_class_records(user),
    )
    setattr(request, _REQUEST_ATTR, sidebar)
    return sidebar


def navigation_context(request) -> dict:
    sidebar = sidebar_for_request(request)
    if sidebar is None:
        return {}
    return {
        "sidebar": sidebar,
        "breadcrumb_trail": resolve_trail(sidebar.nav_main, request.path),
    }
