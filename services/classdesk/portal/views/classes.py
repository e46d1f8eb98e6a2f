"""Staff class list, subject, and section pages."""

from django.contrib.admin.views.decorators import staff_member_required
from django.http import HttpResponse
from django.shortcuts import render

from ..services.class_records import fetch_class_records
from ..services.rosters import section_roster

__all__ = ["class_list", "class_section", "class_subject"]


def _parse_id(raw) -> str:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return ""
    return str(value) if value > 0 else ""


@staff_member_required
def class_list(request):
    records = fetch_class_records(request.user)
    return render(request, "portal/classes.html", {"records": records})


@staff_member_required
def class_subject(request, class_id: int):
    records = fetch_class_records(request.user)
    wanted = _parse_id(class_id)
    anchor = next((record for record in records if record.id == wanted), None)
    if anchor is None:
        return HttpResponse("Not found", status=404)
    sections = [record for record in records if record.subject_code == anchor.subject_code]
    return render(
        request,
        "portal/class_subject.html",
        {"subject": anchor, "records": sections},
    )


@staff_member_required
def class_section(request, course_id: int, major_id: int, section_id: int):
    key = (_parse_id(course_id), _parse_id(major_id), _parse_id(section_id))
    records = [
        record
        for record in fetch_class_records(request.user)
        if (record.course_id, record.major_id, record.section_id) == key
    ]
    if not records:
        return HttpResponse("Not found", status=404)
    return render(
        request,
        "portal/class_section.html",
        {"records": records, "first": records[0], "enrollments": section_roster(records)},
    )
