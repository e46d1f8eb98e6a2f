from ._shared import *  # noqa: F401,F403

from ..services.class_records import (
    LOOKUP_BY_USER,
    class_lookup_mode,
    fetch_class_records,
    user_display_name,
)
from ..services.sidebar_context import navigation_context, sidebar_for_request


class FetchClassRecordsTests(TestCase):
    def setUp(self):
        self.teacher = _create_staff("teacher", email="Ada@Example.org", first_name="Ada", last_name="Lovelace")
        self.other = _create_staff("other", email="other@example.org")
        self.first = _create_class(self.teacher, "CC104")
        self.second = _create_class(self.teacher, "ELIE", major="AFT")
        self.third = _create_class(self.teacher, "CC104", section="B")
        _create_class(self.other, "ACIT")

    def test_returns_only_own_classes_in_creation_order(self):
        records = fetch_class_records(self.teacher)
        self.assertEqual([record.id for record in records], [str(self.first.id), str(self.second.id), str(self.third.id)])
        self.assertEqual(records[0].subject_code, "CC104")
        self.assertEqual(records[0].major_code, "IST")
        self.assertEqual(records[0].year_level_code, "1")
        self.assertEqual(records[0].section_code, "A")
        self.assertEqual(records[0].course_id, str(self.first.course_id))
        self.assertEqual(records[1].major_code, "AFT")

    def test_missing_year_level_maps_to_empty_code(self):
        self.first.year_level = None
        self.first.save(update_fields=["year_level"])
        record = fetch_class_records(self.teacher)[0]
        self.assertEqual(record.year_level_code, "")

    def test_anonymous_and_missing_users_get_empty_list(self):
        self.assertEqual(fetch_class_records(AnonymousUser()), [])
        self.assertEqual(fetch_class_records(None), [])

    @override_settings(CLASSDESK_CLASS_LOOKUP="email")
    def test_email_lookup_matches_teacher_email_case_insensitively(self):
        alias = _create_staff("ada-alias", email="ada@example.org")
        records = fetch_class_records(alias)
        self.assertEqual(len(records), 3)
        self.assertEqual({record.subject_code for record in records}, {"CC104", "ELIE"})

    @override_settings(CLASSDESK_CLASS_LOOKUP="email")
    def test_email_lookup_without_email_returns_nothing(self):
        blank = _create_staff("blank", email="")
        self.assertEqual(fetch_class_records(blank), [])

    @override_settings(CLASSDESK_CLASS_LOOKUP="roster")
    def test_unknown_lookup_mode_falls_back_to_user(self):
        with self.assertLogs("portal.services.class_records", level="WARNING") as logs:
            self.assertEqual(class_lookup_mode(), LOOKUP_BY_USER)
        self.assertIn("class_lookup_mode_unknown mode=roster", logs.output[0])

    def test_database_error_fails_open_with_warning(self):
        with patch("portal.services.class_records._class_queryset", side_effect=DatabaseError("db down")):
            with self.assertLogs("portal.services.class_records", level="WARNING") as logs:
                records = fetch_class_records(self.teacher)
        self.assertEqual(records, [])
        self.assertIn("class_records_lookup_failed", logs.output[0])
        self.assertIn("error=DatabaseError", logs.output[0])

    def test_user_display_name_joins_first_and_last(self):
        self.assertEqual(user_display_name(self.teacher), "Ada Lovelace")
        self.assertEqual(user_display_name(self.other), "")


class SidebarContextTests(TestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.teacher = _create_staff("teacher", email="ada@example.org")
        self.klass = _create_class(self.teacher, "CC104")

    def test_anonymous_request_has_no_navigation(self):
        request = self.factory.get("/dashboard")
        request.user = AnonymousUser()
        self.assertIsNone(sidebar_for_request(request))
        self.assertEqual(navigation_context(request), {})

    def test_sidebar_is_built_once_per_request(self):
        request = self.factory.get("/dashboard")
        request.user = self.teacher
        with patch(
            "portal.services.sidebar_context.fetch_class_records",
            wraps=fetch_class_records,
        ) as fetch:
            first = sidebar_for_request(request)
            second = sidebar_for_request(request)
        self.assertIs(first, second)
        self.assertEqual(fetch.call_count, 1)

    def test_context_carries_trail_for_request_path(self):
        section_path = f"/classes/{self.klass.course_id}/{self.klass.major_id}/{self.klass.section_id}"
        request = self.factory.get(section_path)
        request.user = self.teacher
        context = navigation_context(request)
        self.assertEqual(context["sidebar"].user.name, "User")
        self.assertEqual(context["breadcrumb_trail"][-1].url, section_path)
        self.assertTrue(context["breadcrumb_trail"][-1].is_current)
