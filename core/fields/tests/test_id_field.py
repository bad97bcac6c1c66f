"""
Tests for the ID field
"""
from django.test import SimpleTestCase

from core.fields import ID
from core.fields.tests.fixtures import make_user


class IDFieldTests(SimpleTestCase):
    """Test ID defaults and options"""

    def test_default_name_and_attribute(self):
        field = ID.make()

        self.assertEqual(field.name, 'ID')
        self.assertEqual(field.attribute, 'id')
        self.assertEqual(field.component, 'IDField')

    def test_custom_name_derives_attribute(self):
        self.assertEqual(ID.make('User ID').attribute, 'user_id')
        self.assertEqual(ID.make('User ID', 'uuid').attribute, 'uuid')

    def test_defaults(self):
        field = ID.make()

        self.assertTrue(field.is_sortable)
        self.assertFalse(field.is_shown_on_creation())
        self.assertTrue(field.is_shown_on_index())
        self.assertTrue(field.is_shown_on_detail())
        self.assertTrue(field.is_shown_on_update())
        self.assertFalse(field.is_big_int)
        self.assertFalse(field.is_copyable)

    def test_resolves_primary_key(self):
        field = ID.make()
        field.resolve(make_user(id=42))

        self.assertEqual(field.value, 42)
        self.assertEqual(field.json_serialize()['value'], 42)

    def test_big_int_serializes_value_as_string(self):
        field = ID.make().as_big_int()
        field.resolve(make_user(id=9007199254740993))
        data = field.json_serialize()

        self.assertTrue(data['asBigInt'])
        self.assertEqual(data['value'], '9007199254740993')

    def test_big_int_string_key_from_mapping(self):
        field = ID.make('User ID', 'user_id').as_big_int().copyable()
        field.resolve({'user_id': '9223372036854775807'})
        data = field.json_serialize()

        self.assertEqual(data['value'], '9223372036854775807')
        self.assertTrue(data['asBigInt'])
        self.assertTrue(data['copyable'])

    def test_big_int_leaves_missing_value(self):
        field = ID.make().as_big_int()
        field.resolve({})

        self.assertIsNone(field.json_serialize()['value'])

    def test_copyable(self):
        data = ID.make().copyable().json_serialize()

        self.assertTrue(data['copyable'])
        self.assertFalse(data['asBigInt'])

    def test_fill_writes_key_from_request(self):
        user = make_user(id=1)
        ID.make().fill({'id': 7}, user)

        self.assertEqual(user.id, 7)

    def test_fill_without_key_keeps_model(self):
        user = make_user(id=1)
        ID.make().fill({'name': 'Jane'}, user)

        self.assertEqual(user.id, 1)
