"""
Helpers shared by the field descriptors.

Resources, models and requests reach the fields in several shapes (model
instances, plain dicts, DRF requests, Django requests). These helpers hide
the difference so the field classes only deal with attribute names.
"""
import inspect
import json
from collections.abc import Mapping, MutableMapping

from django.core.exceptions import ObjectDoesNotExist
from rest_framework.fields import get_attribute


def attribute_from_name(name):
    """
    Derive the resource attribute from a field's display name.

    Example:
        >>> attribute_from_name('Theme Song')
        'theme_song'
    """
    return name.lower().replace(' ', '_')


def data_get(resource, attribute, default=None):
    """
    Read `attribute` from a mapping or an object.

    Dotted attributes traverse nested values ('author.email'). Missing
    keys or attributes resolve to `default` instead of raising.
    """
    if resource is None or not attribute:
        return default
    try:
        value = get_attribute(resource, attribute.split('.'))
    except (KeyError, AttributeError, IndexError, ObjectDoesNotExist):
        return default
    return default if value is None else value


def data_set(target, attribute, value):
    """Write `value` onto a mapping item or an object attribute."""
    if isinstance(target, MutableMapping):
        target[attribute] = value
    else:
        setattr(target, attribute, value)


def request_input(request):
    """
    Return the input payload carried by a request.

    Accepts a plain mapping, a DRF Request (its parsed `data`, which includes
    uploaded files) or a Django HttpRequest (query string, form or JSON body
    and uploaded files merged in that order).
    """
    if request is None:
        return {}
    if isinstance(request, Mapping):
        return request
    data = getattr(request, 'data', None)
    if isinstance(data, Mapping):
        return data

    payload = {}
    payload.update(request.GET.dict())
    payload.update(request.POST.dict())
    if getattr(request, 'content_type', None) == 'application/json' and request.body:
        body = json.loads(request.body)
        if isinstance(body, Mapping):
            payload.update(body)
    payload.update(request.FILES.dict())
    return payload


def call_with_supported_args(callback, *args):
    """
    Invoke `callback` with as many leading positional args as it accepts.

    Lets callers pass `lambda resource: ...` where the full signature would
    be `(resource, attribute)`.
    """
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return callback(*args)

    params = list(signature.parameters.values())
    if any(p.kind == inspect.Parameter.VAR_POSITIONAL for p in params):
        return callback(*args)

    positional = [
        p for p in params
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    return callback(*args[:len(positional)])
