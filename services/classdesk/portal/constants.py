"""Route table, icon registry, and UI defaults for the staff portal.

Plain-language map:
- `ROUTES` holds every static page URL the sidebar links to.
- `ICONS` lists the symbolic icon ids templates know how to draw.
- `DEFAULT_*` values fill the sidebar user block when profile data is missing.
"""

ROUTES = {
    "dashboard": "/dashboard",
    "classes": "/classes",
    "schedule": "/schedule",
    "grades_raw": "/grades/raw",
    "grades_transmuted": "/grades/transmuted",
    "grades_reports": "/grades/reports",
    "attendance_daily": "/attendance/daily",
    "attendance_reports": "/attendance/reports",
    "schedule_classes": "/schedule/classes",
    "schedule_exams": "/schedule/exams",
}

ICON_LAYOUT_DASHBOARD = "LayoutDashboard"
ICON_BOOK_OPEN = "BookOpen"
ICON_FINGERPRINT = "Fingerprint"
ICON_CALENDAR_DAYS = "CalendarDays"
ICON_USERS = "Users"

ICONS = frozenset(
    {
        ICON_LAYOUT_DASHBOARD,
        ICON_BOOK_OPEN,
        ICON_FINGERPRINT,
        ICON_CALENDAR_DAYS,
        ICON_USERS,
    }
)

DEFAULT_USER_NAME = "User"
DEFAULT_EMAIL = "No email"
DEFAULT_AVATAR_URL = "/avatars/default.jpg"


def is_valid_icon_name(name: str) -> bool:
    return str(name or "") in ICONS
