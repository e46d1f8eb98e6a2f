"""Top-level URL map for the Class Desk Django service.

Plain-language map:
- `/dashboard` + `/classes/...` are the staff workspace.
- `/grades/...`, `/attendance/...`, `/schedule...` are static sidebar pages.
- `/admin/...` is the Django admin surface (and the staff login page).
"""

from django.contrib import admin
from django.urls import path
from portal import views

urlpatterns = [
    path("admin/", admin.site.urls),

    # Health endpoint for reverse proxy and uptime checks.
    path("healthz", views.healthz),

    path("", views.index),
    path("dashboard", views.dashboard),

    # Classes tree: subject pages key on the first class id, sections on lookup ids.
    path("classes", views.class_list),
    path("classes/<int:class_id>", views.class_subject),
    path("classes/<int:course_id>/<int:major_id>/<int:section_id>", views.class_section),

    # Static sidebar destinations; titles come from the navigation tree.
    path("schedule", views.section_page),
    path("schedule/classes", views.section_page),
    path("schedule/exams", views.section_page),
    path("grades/raw", views.section_page),
    path("grades/transmuted", views.section_page),
    path("grades/reports", views.section_page),
    path("attendance/daily", views.section_page),
    path("attendance/reports", views.section_page),
]
