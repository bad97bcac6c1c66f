"""
Tests for the Line field

Covers display resolution (including the name fallback), the style flags
and the no-op fill.
"""
from django.test import SimpleTestCase

from core.fields import Line
from core.fields.tests.fixtures import (
    Record,
    make_api_request,
    make_django_request,
    make_json_request,
    make_user,
)


class LineResolveTests(SimpleTestCase):
    """Test Line value resolution"""

    def test_resolves_attribute(self):
        field = Line.make('Email')
        field.resolve_for_display(make_user())

        self.assertEqual(field.value, 'john@example.com')

    def test_resolve_callback_builds_summary(self):
        field = Line.make('Full Info', None, lambda user: f"{user.name} ({user.email})")
        field.resolve_for_display(make_user())

        self.assertEqual(field.value, 'John Doe (john@example.com)')

    def test_falls_back_to_name(self):
        field = Line.make('No Data')
        field.resolve_for_display(make_user())

        self.assertEqual(field.value, 'No Data')

    def test_plain_resolve_has_no_fallback(self):
        field = Line.make('No Data')
        field.resolve(make_user())

        self.assertIsNone(field.value)


class LineOptionsTests(SimpleTestCase):
    """Test Line defaults and style flags"""

    def test_defaults(self):
        field = Line.make('Status')
        data = field.json_serialize()

        self.assertEqual(data['component'], 'LineField')
        self.assertTrue(data['readonly'])
        self.assertTrue(data['isLine'])
        self.assertFalse(data['asSmall'])
        self.assertFalse(data['asHeading'])
        self.assertFalse(data['asSubText'])
        self.assertFalse(data['asHtml'])

    def test_style_flags(self):
        data = Line.make('Status').as_small().as_html().json_serialize()

        self.assertTrue(data['asSmall'])
        self.assertTrue(data['asHtml'])
        self.assertFalse(data['asHeading'])

        data = Line.make('Title').as_heading().json_serialize()
        self.assertTrue(data['asHeading'])

        data = Line.make('Subtitle').as_sub_text().json_serialize()
        self.assertTrue(data['asSubText'])

    def test_fill_never_writes(self):
        user = make_user()
        Line.make('Email').fill({'email': 'changed@example.com'}, user)
        self.assertEqual(user.email, 'john@example.com')

        model = Record()
        Line.make('Status').fill({'status': 'active'}, model)
        self.assertFalse(hasattr(model, 'status'))

    def test_fill_ignores_every_request_shape(self):
        payload = {'email': 'changed@example.com'}

        for request in (make_django_request(payload), make_json_request(payload), make_api_request(payload)):
            with self.subTest(request=type(request).__name__):
                user = make_user()
                Line.make('Email').fill(request, user)

                self.assertEqual(user.email, 'john@example.com')

    def test_can_see_uses_resource(self):
        field = Line.make('Status').can_see(lambda request, resource: resource.is_active)

        self.assertTrue(field.authorized_to_see({}, make_user()))
        self.assertFalse(field.authorized_to_see({}, make_user(is_active=False)))
