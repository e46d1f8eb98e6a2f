"""Dashboard, static section pages, and ops endpoints."""

from django.contrib.admin.views.decorators import staff_member_required
from django.http import HttpResponse
from django.shortcuts import redirect, render

from ..constants import ROUTES
from ..services.breadcrumbs import find_entry
from ..services.sidebar_context import sidebar_for_request

__all__ = ["dashboard", "healthz", "index", "section_page"]


def healthz(request):
    # Used by ops checks to confirm the app process is alive.
    return HttpResponse("ok", content_type="text/plain")


def index(request):
    return redirect(ROUTES["dashboard"])


@staff_member_required
def dashboard(request):
    sidebar = sidebar_for_request(request)
    subject_nodes = ()
    for group in sidebar.nav_main:
        if group.name == "Classes":
            subject_nodes = group.items
            break
    return render(
        request,
        "portal/dashboard.html",
        {
            "subject_count": len(subject_nodes),
            "section_count": sum(len(node.children) for node in subject_nodes),
            "subject_nodes": subject_nodes,
        },
    )


@staff_member_required
def section_page(request):
    """Render a static sidebar destination titled from the navigation tree."""
    sidebar = sidebar_for_request(request)
    entry = find_entry(sidebar.nav_main, request.path)
    if entry is None:
        return HttpResponse("Not found", status=404)
    return render(
        request,
        "portal/section_page.html",
        {"page_title": entry.node.title, "page_group": entry.group},
    )
