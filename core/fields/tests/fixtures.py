"""
Shared test data for field tests.

Fields only need something attribute-shaped to resolve against and fill,
so records are plain objects and dicts. Contract is a real model used
unsaved, for FileField values; no database is involved.
"""
import json

from django.db import models
from django.test import RequestFactory
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory


class Contract(models.Model):
    """Unsaved model instance with a real FileField."""

    document = models.FileField(upload_to='files', blank=True)

    class Meta:
        app_label = 'fields'


class Record:
    """Minimal stand-in for a model instance."""

    def __init__(self, **attributes):
        for name, value in attributes.items():
            setattr(self, name, value)


def make_user(**overrides):
    attributes = {
        'id': 1,
        'name': 'John Doe',
        'email': 'john@example.com',
        'is_active': True,
    }
    attributes.update(overrides)
    return Record(**attributes)


def make_django_request(data=None):
    """Form-encoded Django HttpRequest (uploads land in request.FILES)."""
    return RequestFactory().post('/admin-panel/resources/users/1', data or {})


def make_json_request(data=None):
    """Django HttpRequest with a JSON body, as sent by XHR form submits."""
    return RequestFactory().post(
        '/admin-panel/resources/users/1', json.dumps(data or {}), content_type='application/json'
    )


def make_api_request(data=None):
    """DRF Request with a parsed JSON body."""
    django_request = APIRequestFactory().post('/admin-panel/resources/users/1', data or {}, format='json')
    return Request(django_request, parsers=[JSONParser(), FormParser(), MultiPartParser()])


IN_MEMORY_STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.InMemoryStorage',
    },
    'public': {
        'BACKEND': 'django.core.files.storage.InMemoryStorage',
        'OPTIONS': {'base_url': '/media/public/'},
    },
    'private': {
        'BACKEND': 'django.core.files.storage.InMemoryStorage',
        'OPTIONS': {'base_url': '/media/private/'},
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}
