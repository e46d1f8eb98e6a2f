"""Template context processors for Class Desk."""

from django.conf import settings

from portal.services.sidebar_context import navigation_context


def product(_request):
    name = (getattr(settings, "CLASSDESK_PRODUCT_NAME", "Class Desk") or "").strip()
    return {"product_name": name or "Class Desk"}


def sidebar_navigation(request):
    return navigation_context(request)
